## generic 2D vector operations for geokernel

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

"""generic 2D vector algebra for **geokernel**

``VecMath`` bundles the 2D operations that are not methods of the
vector values themselves (perpendiculars, projection, rotation,
angles).  It is parametrized by a numeric type class from
``geokernel.scalar`` and a vector factory, which is any callable
``factory(x, y)`` returning a ``Vec2Like`` value.  The same formulas
then work for any numeric representation: ::

   VEC_MATH.rotate(Vec2(1.0, 0.0), pi/2)
   VecMath(MP_MATH, Vec2).perp_left(Vec2(mpf(1), mpf(2)))

Angles are in radians.  ``rotate`` and ``angle`` are evaluated in
double precision and the results converted back through
``math.to_value``.
"""

from math import atan2, cos, sin
from typing import Callable, Generic, TypeVar

from geokernel.scalar import FLOAT_MATH, Math
from geokernel.vec import Vec2

TVec = TypeVar("TVec")


class VecMath(Generic[TVec]):
    """2D vector operations over a numeric type class and a vector factory"""

    def __init__(self, math: Math = FLOAT_MATH,
                 factory: Callable[..., TVec] = Vec2):
        self.math = math
        self.factory = factory

    def __repr__(self):
        return "VecMath({!r},{})".format(self.math,
                                         getattr(self.factory, "__name__", self.factory))

    def new(self, x, y) -> TVec:
        return self.factory(x, y)

    def length(self, a: TVec, b: TVec):
        """length of the vector from ``a`` to ``b``"""
        return b.sub(a).length

    def project(self, a: TVec, b: TVec):
        """scalar projection of ``b`` onto the direction of ``a``"""
        return a.norm().dot(b)

    def perp_left(self, a: TVec) -> TVec:
        """``a`` rotated +90 degrees"""
        return self.factory(self.math.neg(a.y), a.x)

    def perp_right(self, a: TVec) -> TVec:
        """``a`` rotated -90 degrees"""
        return self.factory(a.y, self.math.neg(a.x))

    def distance2(self, p0: TVec, p1: TVec):
        """squared distance between points ``p0`` and ``p1``"""
        d = p1.sub(p0)
        return self.math.add(self.math.mul(d.x, d.x), self.math.mul(d.y, d.y))

    def distance(self, p0: TVec, p1: TVec):
        return self.math.sqrt(self.distance2(p0, p1))

    def angle(self, a: TVec, b: TVec = None) -> float:
        """With one argument, the angle of ``a`` measured from the X
        axis, in ``(-pi, pi]``.  With two, the signed difference
        ``angle(b) - angle(a)``.

        The difference is *not* reduced modulo 2*pi, so it can fall
        anywhere in ``(-2*pi, 2*pi)``; callers that need a canonical
        range must reduce it themselves.
        """
        if b is None:
            return atan2(float(a.y), float(a.x))
        return self.angle(b) - self.angle(a)

    def rotate(self, a: TVec, angle: float) -> TVec:
        """``a`` rotated counter-clockwise by ``angle`` radians"""
        s = sin(angle)
        c = cos(angle)
        ax = float(a.x)
        ay = float(a.y)
        return self.factory(self.math.to_value(ax * c - ay * s),
                            self.math.to_value(ax * s + ay * c))

    def new_rotate(self, angle: float, length: float = 1.0) -> TVec:
        """vector of the given length pointing at ``angle`` radians"""
        return self.factory(self.math.to_value(length * cos(angle)),
                            self.math.to_value(length * sin(angle)))


VEC_MATH = VecMath(FLOAT_MATH, Vec2)


__all__ = ["VecMath", "VEC_MATH"]
