## generalized matrix operations for 3D homogeneous coordinates in
## geokernel

## Copyright (c) 2026 geokernel contributors
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
from math import cos, sin, sqrt

import numpy as np

from geokernel.errors import InvalidArgumentError, SingularMatrixError
from geokernel.scalar import close, epsilon, isgoodnum, pi2

logger = logging.getLogger(__name__)

## a matrix is represented as a list of four four vectors. In a
## matrix, vectors represent rows unless the transpose property is
## true.  Homogeneous vectors are plain four element sequences
## [x,y,z,w]; w=1 for points and w=0 for free vectors, and Mx implies a
## column vector.

## Matrix is the opaque backing store for geokernel.transform.  The
## transform layer only relies on mul(), clone(), inverse() and
## is_identity.


def _isvect4(x):
    return isinstance(x, (list, tuple)) and len(x) == 4 and \
        all(isgoodnum(c) for c in x)


def dot4(a, b):
    """ 4 vect dot product"""
    return a[0]*b[0]+a[1]*b[1]+a[2]*b[2]+a[3]*b[3]


class Matrix:
    """4x4 transformation matrix class for transforming homogeneous 3D coordinates"""

    def __init__(self, a=None, trans=False):
        self.m = [[1.0, 0.0, 0.0, 0.0],
                  [0.0, 1.0, 0.0, 0.0],
                  [0.0, 0.0, 1.0, 0.0],
                  [0.0, 0.0, 0.0, 1.0]]
        self.trans = False

        if isinstance(a, Matrix):
            for i in range(4):
                self.setrow(i, list(a.getrow(i)))

        elif isinstance(a, (tuple, list)):
            if len(a) == 4 and all(isinstance(r, (tuple, list)) and len(r) == 4 for r in a):
                for i in range(4):
                    for j in range(4):
                        self._init_element(i, j, a[i][j])
            elif len(a) == 16:
                for i in range(4):
                    for j in range(4):
                        self._init_element(i, j, a[i*4+j])
            else:
                raise InvalidArgumentError('bad thing used in attempt to initialize matrix: {}'.format(a))
        elif a is not None:
            raise InvalidArgumentError('bad thing used in attempt to initialize matrix: {}'.format(a))
        self.trans = trans

    def _init_element(self, i, j, x):
        if isgoodnum(x):
            self.m[i][j] = x
        else:
            raise InvalidArgumentError('bad element in matrix initialization: {}'.format(x))

    def __repr__(self):
        return "Matrix({},{},{},{},{})".format(self.m[0], self.m[1],
                                               self.m[2], self.m[3], self.trans)

    def __eq__(self, other):
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.astuple() == other.astuple()

    __hash__ = None

    #return value indexed by i,j
    def get(self, i, j):
        if i < 0 or i > 3 or j < 0 or j > 3:
            raise InvalidArgumentError('bad index passed to get: {},{}'.format(i, j))
        if self.trans:
            return self.m[j][i]
        else:
            return self.m[i][j]

    #set value indexed by i,j
    def set(self, i, j, x):
        if i < 0 or i > 3 or j < 0 or j > 3:
            raise InvalidArgumentError('bad index passed to set: {},{}'.format(i, j))
        if isgoodnum(x):
            if self.trans:
                self.m[j][i] = x
            else:
                self.m[i][j] = x
        else:
            raise InvalidArgumentError('bad value passed to set: {}'.format(x))

    def getrow(self, i):
        if i < 0 or i > 3:
            raise InvalidArgumentError('bad row passed to getrow: {}'.format(i))
        if self.trans:
            return [self.m[0][i],
                    self.m[1][i],
                    self.m[2][i],
                    self.m[3][i]]
        else:
            return list(self.m[i])

    def getcol(self, j):
        if j < 0 or j > 3:
            raise InvalidArgumentError('bad column passed to getcol: {}'.format(j))
        if not self.trans:
            return [self.m[0][j],
                    self.m[1][j],
                    self.m[2][j],
                    self.m[3][j]]
        else:
            return list(self.m[j])

    def setrow(self, i, x):
        if not _isvect4(x):
            raise InvalidArgumentError('bad non-vector passed to setrow: {}'.format(x))
        if i < 0 or i > 3:
            raise InvalidArgumentError('bad row index passed to setrow: {}'.format(i))
        if self.trans:
            for k in range(4):
                self.m[k][i] = x[k]
        else:
            self.m[i] = list(x)

    def setcol(self, j, x):
        if not _isvect4(x):
            raise InvalidArgumentError('bad non-vector passed to setcol: {}'.format(x))
        if j < 0 or j > 3:
            raise InvalidArgumentError('bad column index passed to setcol: {}'.format(j))
        if not self.trans:
            for k in range(4):
                self.m[k][j] = x[k]
        else:
            self.m[j] = list(x)

    def astuple(self):
        """rows of the matrix as a tuple of tuples, respecting transpose"""
        return tuple(tuple(self.getrow(i)) for i in range(4))

    # matrix multiply.  If x is a matrix, compute MX.  If X is a
    # vector, compute Mx. If x is a scalar, compute xM.  Respects
    # transpose flag.

    def mul(self, x):
        if isinstance(x, Matrix):
            result = Matrix()
            for i in range(4):
                row = self.getrow(i)
                for j in range(4):
                    result.set(i, j, dot4(row, x.getcol(j)))
            return result
        elif _isvect4(x):
            return [dot4(self.getrow(i), x) for i in range(4)]
        elif isgoodnum(x):
            result = Matrix()
            for i in range(4):
                result.setrow(i, [c*x for c in self.getrow(i)])
            return result

        raise InvalidArgumentError('bad thing passed to mul(): {}'.format(x))

    def clone(self):
        """independent copy with the transpose folded into the rows"""
        return Matrix([self.getrow(i) for i in range(4)])

    @property
    def is_identity(self):
        """exact comparison against the identity, no tolerance"""
        for i in range(4):
            for j in range(4):
                if self.get(i, j) != (1 if i == j else 0):
                    return False
        return True

    def inverse(self):
        """return a new matrix that is the numeric inverse of this one

        Raises ``SingularMatrixError`` when the matrix cannot be
        inverted.  This matrix is left unchanged.
        """
        a = np.array(self.astuple(), dtype=float)
        try:
            inv = np.linalg.inv(a)
        except np.linalg.LinAlgError as err:
            raise SingularMatrixError('matrix is singular: {}'.format(self)) from err
        if not np.all(np.isfinite(inv)):
            raise SingularMatrixError('matrix is singular: {}'.format(self))
        logger.debug("inverted matrix %r", self)
        return Matrix([[float(c) for c in row] for row in inv])


# return the generalized 4x4 arbitrary axis rotation matrix, angle in
# degrees
def Rotation(axis, angle, inverse=False):
    axis = list(axis)
    ux, uy, uz = float(axis[0]), float(axis[1]), float(axis[2])
    m = sqrt(ux*ux + uy*uy + uz*uz)
    if m < epsilon:
        raise InvalidArgumentError('zero-length rotation axis not allowed')
    if not close(m, 1.0):
        ux, uy, uz = ux/m, uy/m, uz/m

    if inverse:
        angle *= -1.0
    rad = (angle % 360.0)*pi2/360.0

    cang = cos(rad)
    cmin = 1.0-cang
    sang = sin(rad)

    # see http://www.opengl-tutorial.org/assets/faq_quaternions/index.html#Q38
    R = [[cang + ux*ux*cmin, ux*uy*cmin-uz*sang, ux*uz*cmin+uy*sang, 0],
         [uy*ux*cmin+uz*sang, cang + uy*uy*cmin, uy*uz*cmin - ux*sang, 0],
         [uz*ux*cmin-uy*sang, uz*uy*cmin+ux*sang, cang+uz*uz*cmin, 0],
         [0, 0, 0, 1]]

    return Matrix(R)


def Translation(delta, inverse=False):
    delta = list(delta)
    dx = float(delta[0])
    dy = float(delta[1])
    dz = float(delta[2]) if len(delta) > 2 else 0.0
    if inverse:
        dx, dy, dz = -dx, -dy, -dz
    T = [[1, 0, 0, dx],
         [0, 1, 0, dy],
         [0, 0, 1, dz],
         [0, 0, 0, 1]]
    return Matrix(T)


def Scale(x, y=None, z=None, inverse=False):
    if isgoodnum(x):
        sx = x
        if isgoodnum(y) and isgoodnum(z):
            sy = y
            sz = z
        else:
            sy = sz = x
    elif hasattr(x, "__iter__") and len(list(x)) >= 3:
        x = list(x)
        sx = x[0]
        sy = x[1]
        sz = x[2]
    else:
        raise InvalidArgumentError('bad scaling values passed to Scale')

    if inverse:
        sx = 1.0/sx
        sy = 1.0/sy
        sz = 1.0/sz

    S = [[sx, 0, 0, 0],
         [0, sy, 0, 0],
         [0, 0, sz, 0],
         [0, 0, 0, 1.0]]
    return Matrix(S)
