## point and vector operations for funhouse scene objects
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


"""point and vector helpers for **funhouse** scene objects

A point is a plain list ``[x, y, z, w]`` in homogeneous coordinates.
Scene geometry sits in the w=1 hyperplane; the three-component
operations below ignore ``w`` on input and produce ``w=1``.

Lists are mutable, and that is relied upon: a
:class:`funhouse.scene.Curve` holds its caller's control points, so
``ctrl[1][0] = 2.0`` moves the handle.  Nothing in this module writes
to its arguments.

::

   a = point(0,0)             # [0, 0, 0, 1]
   b = point(2.0,-2.0,5.0)    # [2.0, -2.0, 5.0, 1]
   c = point((1,2))           # from a tuple
   d = point(b)               # an independent copy of b
"""

from math import *

## constants
epsilon=0.000005
pi2 = 2.0*pi

## scalars
## -------

def isgoodnum(n):
    """true for int or float, false for bool and everything else"""
    return isinstance(n,(int,float)) and not isinstance(n,bool)

def close(a,b):
    return abs(a-b) < epsilon

## construction and tests
## ----------------------

## fill a homogeneous 4-list from leading scalar arguments or from a
## single sequence.  Missing trailing coordinates keep their defaults
def _coords(args):
    r = [0,0,0,1]
    if len(args) == 1 and isinstance(args[0],(tuple,list)):
        args = tuple(args[0])[:4]
    for i,x in enumerate(args):
        if not isgoodnum(x):
            break
        r[i] = x
    return r

def vect(*args):
    """homogeneous 4-vector from up to four scalars or a sequence"""
    return _coords(args[:4])

def isvect(x):
    return isinstance(x,list) and len(x) == 4 and all(isgoodnum(c) for c in x)

def ispoint(x):
    """a vector in the positive-w half space"""
    return isvect(x) and x[3] > 0

def point(*args):
    """Make a point from 1-4 scalars, a 2-4 element sequence, or an
    existing point.  The result is always a fresh list"""
    if len(args) == 1 and ispoint(args[0]):
        return list(args[0])
    if not args:
        return [0,0,0,1]
    if len(args) == 1:
        seq = args[0]
        if not (isinstance(seq,(tuple,list)) and 2 <= len(seq) <= 4
                and all(isgoodnum(c) for c in seq)):
            raise ValueError('bad argument to point(): {}'.format(seq))
    elif len(args) > 4 or not all(isgoodnum(c) for c in args):
        raise ValueError('bad arguments to point(): {}'.format(args))
    r = _coords(args)
    if r[3] <= 0:
        raise ValueError('point() needs w > 0, got {}'.format(r[3]))
    return r

def vclose(a,b):
    return close(mag(sub(a,b)),0)

## three-component arithmetic, w ignored
## -------------------------------------

def add(a,b):
    return [a[0]+b[0],a[1]+b[1],a[2]+b[2],1.0]

def sub(a,b):
    return [a[0]-b[0],a[1]-b[1],a[2]-b[2],1.0]

def scale3(a,c):
    return [a[0]*c,a[1]*c,a[2]*c,1.0]

def combo(a,t,b):
    """``a + t*(b-a)``: ``a`` at t=0, ``b`` at t=1"""
    return [a[i]+t*(b[i]-a[i]) for i in range(3)] + [1.0]

def midpoint(a,b):
    return combo(a,0.5,b)

def dot(a,b):
    return a[0]*b[0]+a[1]*b[1]+a[2]*b[2]

def mag2(a):
    return dot(a,a)

def mag(a):
    return sqrt(mag2(a))

def unit(a):
    """``a`` scaled to length one.  Raises ValueError for a vector
    shorter than epsilon"""
    m = mag(a)
    if m < epsilon:
        raise ValueError('cannot normalize zero-length vector: {}'.format(vstr(a)))
    return scale3(a,1.0/m)

def dist2(a,b):
    """squared distance; use it for comparisons and skip the sqrt"""
    return mag2(sub(a,b))

def dist(a,b):
    return sqrt(dist2(a,b))

## four-component helpers, used by funhouse.xform
## ----------------------------------------------

def dot4(a,b):
    return sum(a[i]*b[i] for i in range(4))

def scale4(a,c):
    return [x*c for x in a]

def homo(a):
    """project back onto the w=1 hyperplane"""
    w = a[3]
    return [a[0]/w, a[1]/w, a[2]/w, 1]

## printing
## --------

def vstr(a):
    """Compact string for a point or a list of points: ``w`` is shown
    only when it is not 1, and ``z`` only when ``w`` or ``z`` is
    significant.  Anything else goes through str()"""
    if isvect(a):
        if not close(a[3],1.0):
            shown = a
        elif not close(a[2],0.0):
            shown = a[:3]
        else:
            shown = a[:2]
        return '[' + ', '.join(str(c) for c in shown) + ']'
    if isinstance(a,list) and a and all(isvect(x) for x in a):
        return '[' + ', '.join(vstr(x) for x in a) + ']'
    return str(a)
