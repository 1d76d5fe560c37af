## simple funhouse framework for dxf-rendered scene drawings using
## ezdxf package.
## Copyright (c) 2024 funhouse contributors
## All rights reserved

# Permission is hereby granted, free of charge, to any person
# obtaining a copy of this software and associated documentation files
# (the "Software"), to deal in the Software without restriction,
# including without limitation the rights to use, copy, modify, merge,
# publish, distribute, sublicense, and/or sell copies of the Software,
# and to permit persons to whom the Software is furnished to do so,
# subject to the following conditions:
#
# The above copyright notice and this permission notice shall be
# included in all copies or substantial portions of the Software.
#
# THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND,
# EXPRESS OR IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF
# MERCHANTABILITY, FITNESS FOR A PARTICULAR PURPOSE AND
# NONINFRINGEMENT. IN NO EVENT SHALL THE AUTHORS OR COPYRIGHT HOLDERS
# BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER LIABILITY, WHETHER IN AN
# ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM, OUT OF OR IN
# CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS IN THE
# SOFTWARE.

import logging

from funhouse.geom import *
import funhouse.drawable as drawable
import ezdxf

logger = logging.getLogger(__name__)

## primitive name -> dxf layer
primitive_layers = { 'sphere': 'SPHERES',
                     'sphere-wireframe': 'HIGHLIGHT',
                     'square': 'CONTROLS',
                     'path': 'PATHS' }

## class to provide dxf drawing functionality.  The scene is projected
## onto the XY plane (a top view): spheres become circles, paths
## become lines, and control markers become closed squares.  Lighting
## modes are tracked but have no effect on the drawing.
class ezdxfDraw(drawable.Drawable):

    def __init__(self):
        super().__init__()

        # setup=False avoids creating default blocks (like _CLOSEDFILLED) that
        # contain SOLID entities unsupported by some CAD programs (e.g., FreeCAD)
        self.__doc = ezdxf.new(dxfversion='R2010', setup=False)
        self.__doc.layers.new('SPHERES', dxfattribs={'color': 7}) #white
        self.__doc.layers.new('HIGHLIGHT', dxfattribs={'color': 2}) #yellow
        self.__doc.layers.new('PATHS', dxfattribs={'color': 5}) #blue
        self.__doc.layers.new('CONTROLS', dxfattribs={'color': 4}) #aqua
        self.__msp = self.__doc.modelspace()
        self.__filename = "funhouse-out"

    def __repr__(self):
        return 'an instance of ezdxfDraw'

    ## properties

    @property
    def filename(self):
        return self.__filename

    @filename.setter
    def filename(self,name):
        if not isinstance(name,str):
            raise ValueError('bad (non-string) filename: '+str(name))
        self.__filename = name

    @property
    def modelspace(self):
        return self.__msp

    ## utility functions

    def __attribs(self,name):
        return {'layer': primitive_layers[name]}

    def __rgb(self):
        return tuple(int(round(max(0.0,min(1.0,c))*255.0))
                     for c in self.current_color)

    def __xy(self,p):
        w = self.to_world(p)
        return (w[0],w[1])

    ## Overload virtual funhouse.drawable base class emission method

    def _emit(self,name):
        attribs = self.__attribs(name)
        if name in ('sphere','sphere-wireframe'):
            center = self.to_world(point(0,0,0))
            r = dist(center,self.to_world(point(1,0,0)))
            entity = self.__msp.add_circle((center[0],center[1]),r,
                                           dxfattribs=attribs)
        elif name == 'square':
            corners = [self.__xy(point(-1,-1)),self.__xy(point(1,-1)),
                       self.__xy(point(1,1)),self.__xy(point(-1,1))]
            entity = self.__msp.add_lwpolyline(corners,close=True,
                                               dxfattribs=attribs)
        else: # path
            entity = self.__msp.add_line(self.__xy(point(0,0,0)),
                                         self.__xy(point(0,0,1)),
                                         dxfattribs=attribs)
        entity.rgb = self.__rgb()

    def display(self):
        path = "{}.dxf".format(self.filename)
        self.__doc.saveas(path)
        logger.info("Wrote %d entities to %s", len(self.__msp), path)
