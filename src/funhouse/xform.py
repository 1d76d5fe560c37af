## matrix transformation operations for 3D homogeneous coordinates
## in funhouse

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

from math import *
import funhouse.geom as geom

## A Matrix holds four rows of four numbers in ``m``.  Points are
## column vectors, so ``M.mul(p)`` computes Mp and ``A.mul(B)``
## applies B first.  The builders at the bottom reproduce the
## glTranslatef/glRotatef/glScalef matrices, which lets a Drawable
## follow the OpenGL model transform without a GL context.

IDENTITY = ((1,0,0,0),
            (0,1,0,0),
            (0,0,1,0),
            (0,0,0,1))

def _checkindex(i,what):
    if not (isinstance(i,int) and 0 <= i <= 3):
        raise ValueError('bad {} index: {}'.format(what,i))


class Matrix:
    """4x4 matrix acting on homogeneous coordinates.  Construct from
    nothing (identity), another Matrix (copy), four rows of four, or
    sixteen values in row order."""

    def __init__(self,a=None):
        if a is None:
            rows = IDENTITY
        elif isinstance(a,Matrix):
            rows = a.m
        elif isinstance(a,(tuple,list)) and len(a) == 16:
            rows = [a[4*i:4*i+4] for i in range(4)]
        elif (isinstance(a,(tuple,list)) and len(a) == 4 and
              all(isinstance(r,(tuple,list)) and len(r) == 4 for r in a)):
            rows = a
        else:
            raise ValueError('cannot make a matrix from: {}'.format(a))

        self.m = [[0,0,0,0] for i in range(4)]
        for i in range(4):
            for j in range(4):
                self.set(i,j,rows[i][j])

    def __repr__(self):
        return 'Matrix({})'.format(self.m)

    def __eq__(self,other):
        return isinstance(other,Matrix) and self.m == other.m

    def get(self,i,j):
        _checkindex(i,'row')
        _checkindex(j,'column')
        return self.m[i][j]

    def set(self,i,j,x):
        _checkindex(i,'row')
        _checkindex(j,'column')
        if not geom.isgoodnum(x):
            raise ValueError('bad matrix entry: {}'.format(x))
        self.m[i][j] = x

    def getrow(self,i):
        _checkindex(i,'row')
        return self.m[i]

    def getcol(self,j):
        _checkindex(j,'column')
        return [row[j] for row in self.m]

    def setrow(self,i,x):
        _checkindex(i,'row')
        if not geom.isvect(x):
            raise ValueError('bad matrix row: {}'.format(x))
        self.m[i] = list(x)

    def mul(self,x):
        """Matrix product MX for a Matrix, Mx for a 4-vector, and an
        element-wise scaling for a number.  Always returns a new
        object."""
        if isinstance(x,Matrix):
            return Matrix([[geom.dot4(row,x.getcol(j)) for j in range(4)]
                           for row in self.m])
        if geom.isvect(x):
            return [geom.dot4(row,x) for row in self.m]
        if geom.isgoodnum(x):
            return Matrix([geom.scale4(row,x) for row in self.m])
        raise ValueError('cannot multiply a matrix by: {}'.format(x))


## transform builders
## ------------------

def Rotation(axis,angle,inverse=False):
    """right-handed rotation of ``angle`` degrees about ``axis``, which
    need not be unit length"""
    m = geom.mag(axis)
    if m < geom.epsilon:
        raise ValueError('zero-length rotation axis not allowed')
    x, y, z = axis[0]/m, axis[1]/m, axis[2]/m
    if inverse:
        angle = -angle
    rad = radians(angle % 360.0)
    c = cos(rad)
    s = sin(rad)
    t = 1.0 - c

    # Rodrigues' formula: cI + s[u]x + t uu^T
    return Matrix([[t*x*x + c,   t*x*y - s*z, t*x*z + s*y, 0],
                   [t*x*y + s*z, t*y*y + c,   t*y*z - s*x, 0],
                   [t*x*z - s*y, t*y*z + s*x, t*z*z + c,   0],
                   [0, 0, 0, 1]])

def Translation(delta,inverse=False):
    """translation by the first three components of ``delta``"""
    if inverse:
        delta = geom.scale3(delta,-1.0)
    T = Matrix()
    for i in range(3):
        T.set(i,3,delta[i])
    return T

def Scale(x,y=None,z=None,inverse=False):
    """Axis scaling.  ``Scale(s)`` is uniform, ``Scale(sx,sy,sz)`` is
    per axis, and ``Scale(v)`` takes the factors from a 4-vector."""
    if geom.isvect(x):
        factors = x[:3]
    elif geom.isgoodnum(x) and geom.isgoodnum(y) and geom.isgoodnum(z):
        factors = [x,y,z]
    elif geom.isgoodnum(x) and y is None and z is None:
        factors = [x,x,x]
    else:
        raise ValueError('bad scaling values passed to Scale: {}'.format((x,y,z)))

    if inverse:
        factors = [1.0/f for f in factors]
    S = Matrix()
    for i in range(3):
        S.set(i,i,factors[i])
    return S
