## simple funhouse framework for openGL drawing using pyglet
## package
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

import numpy as np
import pyglet
import pyglet.gl as gl

from funhouse.geom import *
import funhouse.drawable as drawable

## openGL utility functions
def vec(*args):
    return (gl.GLfloat * len(args))(*args)

## drawable lighting modes -> openGL capabilities
glmodes = { drawable.LIGHTING: gl.GL_LIGHTING,
            drawable.LIGHT0: gl.GL_LIGHT0 }

## unit-size primitive geometry, built once with numpy

def sphere_mesh(slices=24,stacks=12):
    """vertices of a unit sphere on a (stacks+1) x (slices+1) lat/long
    grid.  For a unit sphere the vertices double as normals"""
    theta = np.linspace(0.0,pi,stacks+1)
    phi = np.linspace(0.0,pi2,slices+1)
    t, p = np.meshgrid(theta,phi,indexing='ij')
    return np.stack((np.sin(t)*np.cos(p),
                     np.sin(t)*np.sin(p),
                     np.cos(t)),axis=-1)

def cylinder_mesh(slices=12):
    """rings of a unit-radius cylinder from z=0 to z=1, as a pair of
    (slices+1) x 3 arrays, plus the per-vertex normals"""
    phi = np.linspace(0.0,pi2,slices+1)
    ring = np.stack((np.cos(phi),np.sin(phi),np.zeros_like(phi)),axis=-1)
    top = ring.copy()
    top[:,2] = 1.0
    return ring, top, ring.copy()

SQUARE = np.array([[-1.0,-1.0,0.0],
                   [1.0,-1.0,0.0],
                   [1.0,1.0,0.0],
                   [-1.0,1.0,0.0]])

## HTML document, instructions for user interaction
funhouse_legend="""
<font face="Verdana, Geneva, sans-serif" size="3" color="white"><b>funhouse scene</b></font><br>
<font face="Verdana, Geneva, sans-serif" size="1" color="white">
<br>
<b>up-arrow</b>: zoom in<br>
<b>down-arrow</b>: zoom out<br>
<b>left-mouse drag</b>: rotate view<br>
<b>return</b>: reset view<br>
<b>m</b>: toggle display of this message<br>
<b>ESC</b>: exit viewer<br>
</font>
"""

## camera limits and starting distance
CAMERA_START = 5.0
CAMERA_MIN = 1.0
CAMERA_MAX = 100.0
ZOOM_STEP = 1.1

## class to provide openGL drawing functionality
class pygletDraw(drawable.Drawable):
    """
    funhouse ``drawable`` subclass for immediate-mode OpenGL rendering
    with pyglet.  Every transform stack operation is applied both to the
    tracked matrix and to the openGL modelview matrix.

    Scene objects are drawn by functions registered with
    ``register_immediate()``; each is called with this drawable on every
    frame, after the camera transform is in place.
    """

    def window(self):
        try:
            # multisampled window where the hardware supports it
            config = gl.Config(sample_buffers=1, samples=4,
                               depth_size=16, double_buffer=True)
            return pyglet.window.Window(resizable=True, config=config)
        except pyglet.window.NoSuchConfigException:
            return pyglet.window.Window(resizable=True)

    def glSetup(self):
        gl.glClearColor(0.2, 0.2, 0.3, 1)
        gl.glColor3f(1, 1, 1)
        gl.glEnable(gl.GL_DEPTH_TEST)
        # scaled primitives need their normals renormalized
        gl.glEnable(gl.GL_NORMALIZE)
        # let glColor drive the material when lighting is on
        gl.glEnable(gl.GL_COLOR_MATERIAL)
        gl.glColorMaterial(gl.GL_FRONT_AND_BACK, gl.GL_AMBIENT_AND_DIFFUSE)

        gl.glLightfv(gl.GL_LIGHT0, gl.GL_POSITION, vec(2, 3, 10, 0))
        gl.glLightfv(gl.GL_LIGHT0, gl.GL_SPECULAR, vec(1, 1, 1, 1))
        gl.glLightfv(gl.GL_LIGHT0, gl.GL_DIFFUSE, vec(1, 1, 1, 1))

    def register_immediate(self,name,func):
        """ register a function ``func(drawing)`` for immediate-mode
        drawing on every frame"""
        self.__immediate[name] = func

    def unregister_immediate(self,name):
        self.__immediate.pop(name,None)

    def __init__(self):
        super().__init__()
        self.__immediate = {}
        self.__cameradist = CAMERA_START
        self.__rx = 0
        self.__ry = 0
        self.__legend = True
        self.__sphere = sphere_mesh()
        self.__cylinder = cylinder_mesh()

        key = pyglet.window.key
        self.__keys = { key.UP: lambda: self.zoom(1.0/ZOOM_STEP),
                        key.DOWN: lambda: self.zoom(ZOOM_STEP),
                        key.RETURN: self.reset_view,
                        key.M: self.toggle_legend }

        self.__window = self.window()
        self.__window.projection = pyglet.window.Projection3D(zfar=1000.0)
        self.glSetup()
        self.__window.push_handlers(on_key_press=self.__on_key_press,
                                    on_mouse_drag=self.__on_mouse_drag,
                                    on_draw=self.__on_draw)

    def __repr__(self):
        return 'an instance of pygletDraw'

    ## properties

    @property
    def cameradist(self):
        return self.__cameradist

    @cameradist.setter
    def cameradist(self,dist):
        if not isgoodnum(dist):
            raise ValueError('invalid camera distance ' + str(dist))
        self.__cameradist = min(max(dist,CAMERA_MIN),CAMERA_MAX)

    ## view controls

    def zoom(self,factor):
        self.cameradist = self.__cameradist*factor

    def reset_view(self):
        self.__cameradist = CAMERA_START
        self.__rx = 0
        self.__ry = 0

    def toggle_legend(self):
        self.__legend = not self.__legend

    ## window event handlers

    def __on_key_press(self,symbol,modifiers):
        action = self.__keys.get(symbol)
        if action is None:
            return
        action()
        return pyglet.event.EVENT_HANDLED

    def __on_mouse_drag(self,x,y,dx,dy,buttons,modifiers):
        self.__rx += dx
        self.__ry -= dy
        return pyglet.event.EVENT_HANDLED

    def __on_draw(self):
        self.__window.clear()
        gl.glClear(gl.GL_COLOR_BUFFER_BIT | gl.GL_DEPTH_BUFFER_BIT)
        self.__window.projection = pyglet.window.Projection3D(zfar=1000.0)

        gl.glMatrixMode(gl.GL_MODELVIEW)
        gl.glLoadIdentity()
        gl.glTranslatef(0,0,-self.__cameradist)
        gl.glRotatef(self.__ry%360.0, 1, 0, 0)
        gl.glRotatef(self.__rx%360.0, 0, 1, 0)

        for f in self.__immediate.values():
            f(self)
            if self.depth != 0:
                raise RuntimeError('unbalanced transform stack after drawing')

        if self.__legend:
            self.__draw_legend()
        return pyglet.event.EVENT_HANDLED

    def __draw_legend(self):
        gl.glPushMatrix()
        gl.glLoadIdentity()
        gl.glMatrixMode(gl.GL_PROJECTION)
        gl.glPushMatrix()
        gl.glLoadIdentity()
        self.__window.projection = pyglet.window.Projection2D()
        pyglet.text.HTMLLabel(funhouse_legend,
                              x=10, y=30,
                              anchor_x='left', anchor_y='bottom',
                              width=400, multiline=True).draw()
        gl.glMatrixMode(gl.GL_PROJECTION)
        gl.glPopMatrix()
        gl.glMatrixMode(gl.GL_MODELVIEW)
        gl.glPopMatrix()

    ## Overload drawable transform and state methods, mirroring them
    ## into openGL

    def push_matrix(self):
        super().push_matrix()
        gl.glPushMatrix()

    def pop_matrix(self):
        super().pop_matrix()
        gl.glPopMatrix()

    def translate(self,x,y,z):
        super().translate(x,y,z)
        gl.glTranslatef(x,y,z)

    def rotate(self,angle,x,y,z):
        super().rotate(angle,x,y,z)
        gl.glRotatef(angle,x,y,z)

    def scale(self,x,y,z):
        super().scale(x,y,z)
        gl.glScalef(x,y,z)

    def color(self,r,g,b):
        super().color(r,g,b)
        gl.glColor3f(r,g,b)

    def enable(self,mode):
        super().enable(mode)
        gl.glEnable(glmodes[mode])

    def disable(self,mode):
        super().disable(mode)
        gl.glDisable(glmodes[mode])

    ## primitive emission

    def _emit(self,name):
        if name == 'sphere':
            self.__filled_sphere()
        elif name == 'sphere-wireframe':
            self.__wire_sphere()
        elif name == 'square':
            gl.glBegin(gl.GL_QUADS)
            gl.glNormal3f(0.0,0.0,1.0)
            for v in SQUARE:
                gl.glVertex3f(*v)
            gl.glEnd()
        elif name == 'path':
            ring, top, normals = self.__cylinder
            gl.glBegin(gl.GL_QUAD_STRIP)
            for i in range(len(ring)):
                gl.glNormal3f(*normals[i])
                gl.glVertex3f(*ring[i])
                gl.glVertex3f(*top[i])
            gl.glEnd()

    def __filled_sphere(self):
        grid = self.__sphere
        for i in range(grid.shape[0]-1):
            gl.glBegin(gl.GL_QUAD_STRIP)
            for j in range(grid.shape[1]):
                for v in (grid[i,j], grid[i+1,j]):
                    gl.glNormal3f(*v)
                    gl.glVertex3f(*v)
            gl.glEnd()

    def __wire_sphere(self):
        grid = self.__sphere
        # parallels
        for i in range(1,grid.shape[0]-1):
            gl.glBegin(gl.GL_LINE_STRIP)
            for v in grid[i]:
                gl.glVertex3f(*v)
            gl.glEnd()
        # meridians
        for j in range(grid.shape[1]-1):
            gl.glBegin(gl.GL_LINE_STRIP)
            for v in grid[:,j]:
                gl.glVertex3f(*v)
            gl.glEnd()

    ## override base-class virtual display method
    def display(self):
        pyglet.app.run()
