## immutable 2D and 3D vector values for geokernel

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

"""vector value types for **geokernel**

``Vec2`` and ``Vec3`` are immutable values.  Every operation returns a
new vector and no operand is ever mutated.  Components may be plain
floats or ``mpmath.mpf`` values; division and square roots are routed
through the matching ``geokernel.scalar`` type class, so normalizing a
zero-length vector yields NaN components instead of raising.

``Vec2Like`` and ``Vec3Like`` describe the contract an operand must
satisfy to be used by ``geokernel.vecmath`` and the curve classes.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Protocol, Tuple, TypeVar, runtime_checkable

import mpmath as mpm

from geokernel.scalar import FLOAT_MATH, MP_MATH, epsilon

TVec = TypeVar("TVec")


def _math(*values):
    for v in values:
        if isinstance(v, mpm.mpf):
            return MP_MATH
    return FLOAT_MATH


@runtime_checkable
class Vec2Like(Protocol[TVec]):
    """operand contract for 2D vector algebra"""

    @property
    def x(self) -> Any: ...

    @property
    def y(self) -> Any: ...

    @property
    def dim(self) -> int: ...

    @property
    def length(self) -> Any: ...

    def add(self, v: TVec) -> TVec: ...

    def sub(self, v: TVec) -> TVec: ...

    def mul(self, c: Any) -> TVec: ...

    def div(self, c: Any) -> TVec: ...

    def norm(self) -> TVec: ...

    def dot(self, v: TVec) -> Any: ...

    def cross(self, v: TVec) -> Any: ...

    def epsilon_equals(self, v: TVec, error: float = epsilon) -> bool: ...


@runtime_checkable
class Vec3Like(Vec2Like[TVec], Protocol[TVec]):
    """operand contract for 3D vector algebra; ``cross`` is vector valued"""

    @property
    def z(self) -> Any: ...


@dataclass(frozen=True)
class Vec2:
    """immutable 2D vector"""

    x: Any = 0.0
    y: Any = 0.0

    @property
    def dim(self) -> int:
        return 2

    def astuple(self) -> Tuple[Any, Any]:
        return (self.x, self.y)

    def __iter__(self):
        return iter((self.x, self.y))

    def add(self, v: Vec2) -> Vec2:
        return Vec2(self.x + v.x, self.y + v.y)

    def sub(self, v: Vec2) -> Vec2:
        return Vec2(self.x - v.x, self.y - v.y)

    def mul(self, c) -> Vec2:
        return Vec2(self.x * c, self.y * c)

    def div(self, c) -> Vec2:
        m = _math(self.x, self.y, c)
        return Vec2(m.div(self.x, c), m.div(self.y, c))

    def neg(self) -> Vec2:
        return Vec2(-self.x, -self.y)

    @property
    def length2(self):
        return self.x * self.x + self.y * self.y

    @property
    def length(self):
        return _math(self.x, self.y).sqrt(self.length2)

    def norm(self) -> Vec2:
        return self.div(self.length)

    def dot(self, v: Vec2):
        """signed scalar product, ``|a| |b| cos(angle(a, b))``"""
        return self.x * v.x + self.y * v.y

    def cross(self, v: Vec2):
        """signed z component of the 3D cross product,
        ``|a| |b| sin(angle(a, b))``; positive when ``v`` lies
        counter-clockwise of ``self``"""
        return self.x * v.y - self.y * v.x

    def epsilon_equals(self, v: Vec2, error: float = epsilon) -> bool:
        return abs(self.x - v.x) <= error and abs(self.y - v.y) <= error

    __add__ = add
    __sub__ = sub
    __mul__ = mul
    __rmul__ = mul
    __truediv__ = div
    __neg__ = neg


@dataclass(frozen=True)
class Vec3:
    """immutable 3D vector"""

    x: Any = 0.0
    y: Any = 0.0
    z: Any = 0.0

    @property
    def dim(self) -> int:
        return 3

    def astuple(self) -> Tuple[Any, Any, Any]:
        return (self.x, self.y, self.z)

    def __iter__(self):
        return iter((self.x, self.y, self.z))

    def add(self, v: Vec3) -> Vec3:
        return Vec3(self.x + v.x, self.y + v.y, self.z + v.z)

    def sub(self, v: Vec3) -> Vec3:
        return Vec3(self.x - v.x, self.y - v.y, self.z - v.z)

    def mul(self, c) -> Vec3:
        return Vec3(self.x * c, self.y * c, self.z * c)

    def div(self, c) -> Vec3:
        m = _math(self.x, self.y, self.z, c)
        return Vec3(m.div(self.x, c), m.div(self.y, c), m.div(self.z, c))

    def neg(self) -> Vec3:
        return Vec3(-self.x, -self.y, -self.z)

    @property
    def length2(self):
        return self.x * self.x + self.y * self.y + self.z * self.z

    @property
    def length(self):
        return _math(self.x, self.y, self.z).sqrt(self.length2)

    def norm(self) -> Vec3:
        return self.div(self.length)

    def dot(self, v: Vec3):
        return self.x * v.x + self.y * v.y + self.z * v.z

    def cross(self, v: Vec3) -> Vec3:
        """right handed cross product ``self x v``"""
        return Vec3(self.y * v.z - self.z * v.y,
                    self.z * v.x - self.x * v.z,
                    self.x * v.y - self.y * v.x)

    def epsilon_equals(self, v: Vec3, error: float = epsilon) -> bool:
        return (abs(self.x - v.x) <= error and
                abs(self.y - v.y) <= error and
                abs(self.z - v.z) <= error)

    __add__ = add
    __sub__ = sub
    __mul__ = mul
    __rmul__ = mul
    __truediv__ = div
    __neg__ = neg


__all__ = ["Vec2Like", "Vec3Like", "Vec2", "Vec3"]
