## Top-view DXF drawing of a small funhouse scene

import logging

from funhouse.ezdxf_drawable import ezdxfDraw
from funhouse.geom import *
from funhouse.logging_config import setup_logging
from funhouse.scene import Curve, Sphere

setup_logging(logging.DEBUG)

## the scene occupies the unit square about the origin
bounds = (-1.0, 1.0, -1.0, 1.0)

#set up DXF rendering
drawing = ezdxfDraw()
drawing.filename = "scene-out"

## a red sphere, grown until the right edge of the scene stops it
red = Sphere((0.9, 0.1, 0.1), point(0.6, 0.2))
red.resize(0.8, bounds)

## a green sphere dragged past the lower-left corner
green = Sphere((0.1, 0.8, 0.2), point(0, 0))
green.resize(0.25, bounds)
green.move_to(point(-3, -3), bounds)

## a path arching over both of them
ctrl = [point(-0.9, 0.4), point(0.0, 1.4), point(0.9, 0.4)]
path = Curve(ctrl)

red.render(drawing)
green.render(drawing, highlight=(1.0, 1.0, 1.0))
path.render(drawing)

## drag the middle control point down, then redraw the path
which = path.pick_control_point(point(0.05, 1.35))
if which is not None:
    ctrl[which][1] = -0.6
    path.invalidate()
path.render(drawing)

drawing.display()
