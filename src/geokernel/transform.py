## affine transform algebra for geokernel

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

"""affine transforms for **geokernel**

=========
OVERVIEW
=========

A transform maps points and free vectors.  Two representations are
provided:

* ``Transform3DIdentity`` -- the identity, shared as ``IDENTITY``
* ``Transform3DMatrix`` -- backed by a ``geokernel.xform.Matrix``

Points transform with w=1 and pick up translation, free vectors
transform with w=0 and do not.  ``Vec2`` operands are treated as lying
in the z=0 plane and come back as ``Vec2``.

composition
===========

``a.concat(b)`` (also ``a @ b``) is the transform that applies ``b``
first and then ``a``.  Concatenating with the identity returns the
other operand itself.  There is no composition rule between unrelated
representations; those raise ``UnsupportedOperationError``.

inverses
========

``Transform3DMatrix.inverse`` is computed once, on first access, and
cached.  The inverse is linked back to the transform it came from, so
``t.inverse.inverse is t`` holds without a second inversion.  A
singular matrix raises ``SingularMatrixError``.

Transforms are otherwise immutable.  The first access to ``inverse``
is the only state change, and is not guarded by a lock: concurrent
first accesses may both invert the matrix, which wastes work but is
harmless.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod

from geokernel.errors import InvalidArgumentError, UnsupportedOperationError
from geokernel.vec import Vec2, Vec3
from geokernel.xform import Matrix, Rotation, Scale, Translation

logger = logging.getLogger(__name__)


def _homogeneous(v, w):
    if isinstance(v, Vec2):
        return [v.x, v.y, 0.0, w]
    if isinstance(v, Vec3):
        return [v.x, v.y, v.z, w]
    raise InvalidArgumentError('cannot transform {!r}'.format(v))


def _from_homogeneous(like, h, project):
    if project and h[3] != 1:
        h = [h[0]/h[3], h[1]/h[3], h[2]/h[3], 1.0]
    if isinstance(like, Vec2):
        return Vec2(h[0], h[1])
    return Vec3(h[0], h[1], h[2])


class Transform3D(ABC):
    """abstract affine transform"""

    @abstractmethod
    def transform(self, h):
        """transform a homogeneous ``[x,y,z,w]`` sequence, returning a list"""

    def transform_point(self, p):
        """transform a ``Vec2``/``Vec3`` point, translation included"""
        return _from_homogeneous(p, self.transform(_homogeneous(p, 1.0)), True)

    def transform_vector(self, v):
        """transform a ``Vec2``/``Vec3`` free vector, translation ignored"""
        return _from_homogeneous(v, self.transform(_homogeneous(v, 0.0)), False)

    @abstractmethod
    def concat(self, other: Transform3D) -> Transform3D:
        """the transform equivalent to applying ``other``, then ``self``"""

    @property
    @abstractmethod
    def inverse(self) -> Transform3D:
        ...

    @property
    @abstractmethod
    def is_identity(self) -> bool:
        ...

    def __matmul__(self, other):
        if not isinstance(other, Transform3D):
            return NotImplemented
        return self.concat(other)


def _check_transform(other):
    if not isinstance(other, Transform3D):
        raise InvalidArgumentError('bad thing passed to concat(): {!r}'.format(other))


class Transform3DIdentity(Transform3D):
    """the identity transform; use the shared ``IDENTITY`` instance"""

    def transform(self, h):
        return list(h)

    def transform_point(self, p):
        _homogeneous(p, 1.0)
        return p

    def transform_vector(self, v):
        _homogeneous(v, 0.0)
        return v

    def concat(self, other):
        _check_transform(other)
        return other

    @property
    def inverse(self):
        return self

    @property
    def is_identity(self):
        return True

    def __repr__(self):
        return "Transform3DIdentity()"


IDENTITY = Transform3DIdentity()


class Transform3DMatrix(Transform3D):
    """transform backed by a 4x4 homogeneous matrix

    With ``share=True`` the transform aliases ``matrix``; the caller
    must not modify it afterwards.  With ``share=False`` a private copy
    is taken.
    """

    def __init__(self, matrix: Matrix, share: bool = True):
        if not isinstance(matrix, Matrix):
            raise InvalidArgumentError('bad matrix passed to Transform3DMatrix: {!r}'.format(matrix))
        self._matrix = matrix if share else matrix.clone()
        self._inverse = None

    @classmethod
    def from_elements(cls, *elements):
        """build from 16 row-major matrix entries"""
        if len(elements) != 16:
            raise InvalidArgumentError('expected 16 matrix elements, got {}'.format(len(elements)))
        return cls(Matrix(list(elements)))

    @classmethod
    def translation(cls, delta):
        return cls(Translation(delta))

    @classmethod
    def rotation(cls, axis, angle):
        """rotation of ``angle`` degrees about ``axis``"""
        return cls(Rotation(axis, angle))

    @classmethod
    def scaling(cls, x, y=None, z=None):
        return cls(Scale(x, y, z))

    @property
    def matrix(self) -> Matrix:
        return self._matrix

    def transform(self, h):
        return self._matrix.mul(list(h))

    def concat(self, other):
        _check_transform(other)
        if isinstance(other, Transform3DIdentity):
            return self
        if not isinstance(other, Transform3DMatrix):
            raise UnsupportedOperationError(
                'cannot concatenate {} with {}'.format(type(self).__name__,
                                                      type(other).__name__))
        return Transform3DMatrix(self._matrix.mul(other._matrix), True)

    @property
    def inverse(self):
        if self._inverse is None:
            inv = Transform3DMatrix(self._matrix.inverse(), True)
            inv._inverse = self
            self._inverse = inv
            logger.debug("cached inverse of %r", self)
        return self._inverse

    @property
    def is_identity(self):
        return self._matrix.is_identity

    def __repr__(self):
        return "Transform3DMatrix({!r})".format(self._matrix)


__all__ = [
    "Transform3D",
    "Transform3DIdentity",
    "Transform3DMatrix",
    "IDENTITY",
]
