## base class of drawable for funhouse
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

from contextlib import contextmanager

from funhouse.geom import *
import funhouse.xform as xform

## lighting modes understood by enable() and disable()
LIGHTING = 'lighting'
LIGHT0 = 'light0'

## named primitives, each drawn in unit size about the local origin
## using the current transform and color:
##   sphere            -- filled unit sphere
##   sphere-wireframe  -- wireframe unit sphere
##   square            -- square in the XY plane, corners at (+-1,+-1)
##   path              -- unit-length segment along +z, from z=0 to z=1
PRIMITIVES = ('sphere', 'sphere-wireframe', 'square', 'path')

## Immediate-mode drawing interface.  The model transform is tracked
## here for every rendering system, so subclasses can map local
## primitive coordinates to world space with to_world(), and callers
## can check that push/pop calls balance.

class Drawable:
    """Base class for funhouse drawables"""

    def __init__(self):
        self.__matrix = xform.Matrix()
        self.__stack = []
        self.__color = (1.0, 1.0, 1.0)
        self.__enabled = set()

    ## pure virtual functions -- override for specific rendering
    ## system
    def _emit(self,name):
        print("pure virtual _emit called: {}".format(name))
        return

    def display(self):
        print('pure virtual display function called')
        return True

    ## transform stack
    ## ---------------

    @property
    def matrix(self):
        return self.__matrix

    @property
    def depth(self):
        return len(self.__stack)

    def push_matrix(self):
        self.__stack.append(xform.Matrix(self.__matrix))

    def pop_matrix(self):
        if not self.__stack:
            raise RuntimeError('pop_matrix called on empty transform stack')
        self.__matrix = self.__stack.pop()

    @contextmanager
    def pushed(self):
        """scoped push/pop; the pop happens even if drawing raises"""
        self.push_matrix()
        try:
            yield self
        finally:
            self.pop_matrix()

    def translate(self,x,y,z):
        self.__matrix = self.__matrix.mul(xform.Translation([x,y,z,1.0]))

    ## angle in degrees about axis (x,y,z), as glRotatef
    def rotate(self,angle,x,y,z):
        self.__matrix = self.__matrix.mul(xform.Rotation([x,y,z,1.0],angle))

    def scale(self,x,y,z):
        self.__matrix = self.__matrix.mul(xform.Scale(x,y,z))

    def to_world(self,p):
        """map a point in primitive-local coordinates to world space"""
        return homo(self.__matrix.mul(point(p)))

    ## drawing state
    ## -------------

    @property
    def current_color(self):
        return self.__color

    def color(self,r,g,b):
        self.__color = (r,g,b)

    @property
    def enabled(self):
        return frozenset(self.__enabled)

    def enable(self,mode):
        if mode not in (LIGHTING,LIGHT0):
            raise ValueError('bad mode passed to enable: {}'.format(mode))
        self.__enabled.add(mode)

    def disable(self,mode):
        if mode not in (LIGHTING,LIGHT0):
            raise ValueError('bad mode passed to disable: {}'.format(mode))
        self.__enabled.discard(mode)

    def draw_primitive(self,name):
        if name not in PRIMITIVES:
            raise ValueError('unknown primitive: {}'.format(name))
        self._emit(name)

    ## non-property methods

    def __repr__(self):
        return 'an abstract Drawable instance'
