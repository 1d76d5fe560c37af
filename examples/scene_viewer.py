## Interactive openGL view of a funhouse scene.  The middle control
## point of the path slowly circles, so the curve is recompiled on
## every frame.

from math import *

import pyglet

from funhouse.config import RenderStyle
from funhouse.geom import *
from funhouse.pyglet_drawable import pygletDraw
from funhouse.scene import Curve, Sphere

bounds = (-1.0, 1.0, -1.0, 1.0)

drawing = pygletDraw()

spheres = [Sphere((0.9, 0.2, 0.2), point(-0.4, 0.3)),
           Sphere((0.2, 0.8, 0.3), point(0.5, -0.4))]
spheres[0].resize(0.3, bounds)
spheres[1].resize(0.45, bounds)

ctrl = [point(-0.8, -0.6), point(0.0, 0.9), point(0.8, -0.6)]
path = Curve(ctrl)
style = RenderStyle(path_width=0.015)

state = {'t': 0.0}

def tick(dt):
    state['t'] += dt
    ctrl[1][0] = 0.4*sin(state['t'])
    ctrl[1][1] = 0.5 + 0.4*cos(state['t'])
    path.invalidate()

def draw_scene(d):
    spheres[0].render(d, shaded=True)
    spheres[1].render(d, highlight=(1.0, 1.0, 0.4), shaded=True)
    path.render(d, style)

drawing.register_immediate('scene', draw_scene)
pyglet.clock.schedule_interval(tick, 1/30.0)

drawing.display()
