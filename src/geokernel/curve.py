## parametric curve abstractions for geokernel

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

"""parametric 2D curves for **geokernel**

=========
OVERVIEW
=========

A ``Curve2`` is a planar path parametrized over ``[tmin, tmax]``.
Concrete curves supply the position and its first three derivatives;
the differential geometric quantities are derived from those:

* ``tangent(t)`` -- the normalized first derivative
* ``left_normal(t)`` -- the tangent rotated +90 degrees
* ``curvature(t)`` -- ``(x'y'' - y'x'') / (x'^2 + y'^2)^(3/2)``, positive
  when the curve turns counter-clockwise
* ``speed(t)`` -- the magnitude of the first derivative
* ``length(t0, t1)`` -- arc length, by Gauss-Legendre quadrature of the
  speed unless a subclass has a closed form
* ``frame(t)`` -- position, tangent and normal from a single first
  derivative evaluation

Degenerate points (zero speed) produce NaN or infinite results, not
exceptions.

multi-curves
============

``MultiCurve2`` is a curve made of segments.  Each public query reduces
``t`` into the domain (wrapping when the curve is closed, rejecting it
with ``InvalidArgumentError`` when open), resolves the owning segment
with ``find_index()`` and forwards to a per-segment hook.  Segments keep
their own parametrization; the multi-curve does no rescaling.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from functools import lru_cache
from typing import NamedTuple, Tuple

import numpy as np

from geokernel.errors import InvalidArgumentError
from geokernel.scalar import math_for
from geokernel.vec import Vec2
from geokernel.vecmath import VEC_MATH

## number of Gauss-Legendre points used for numeric arc length
LENGTH_QUADRATURE_ORDER = 32


@lru_cache(maxsize=8)
def _gauss_legendre(order):
    nodes, weights = np.polynomial.legendre.leggauss(order)
    return tuple(float(x) for x in nodes), tuple(float(w) for w in weights)


class Frame(NamedTuple):
    """position, unit tangent and left normal at one parameter value"""

    position: Vec2
    tangent: Vec2
    normal: Vec2


class Curve2(ABC):
    """abstract parametric planar curve"""

    @property
    @abstractmethod
    def tmin(self) -> float:
        ...

    @property
    @abstractmethod
    def tmax(self) -> float:
        ...

    @property
    def is_closed(self) -> bool:
        return False

    @abstractmethod
    def set_t_interval(self, tmin: float, tmax: float) -> None:
        """rewrite the parameter interval, keeping the same geometry"""

    @abstractmethod
    def position(self, t: float) -> Vec2:
        ...

    @abstractmethod
    def first_derivative(self, t: float) -> Vec2:
        ...

    @abstractmethod
    def second_derivative(self, t: float) -> Vec2:
        ...

    @abstractmethod
    def third_derivative(self, t: float) -> Vec2:
        ...

    def speed(self, t: float) -> float:
        return self.first_derivative(t).length

    def tangent(self, t: float) -> Vec2:
        return self.first_derivative(t).norm()

    def left_normal(self, t: float) -> Vec2:
        return VEC_MATH.perp_left(self.tangent(t))

    def curvature(self, t: float) -> float:
        d1 = self.first_derivative(t)
        d2 = self.second_derivative(t)
        m = math_for(d1.x)
        l2 = d1.length2
        return m.div(d1.cross(d2), l2 * m.sqrt(l2))

    def length(self, t0: float, t1: float) -> float:
        """arc length from ``t0`` to ``t1``; negative when ``t1 < t0``"""
        nodes, weights = _gauss_legendre(LENGTH_QUADRATURE_ORDER)
        half = 0.5 * (t1 - t0)
        mid = 0.5 * (t1 + t0)
        total = 0.0
        for x, w in zip(nodes, weights):
            total += w * self.speed(mid + half * x)
        return total * half

    @property
    def total_length(self) -> float:
        return self.length(self.tmin, self.tmax)

    def frame(self, t: float) -> Frame:
        tangent = self.first_derivative(t).norm()
        return Frame(self.position(t), tangent, VEC_MATH.perp_left(tangent))


class MultiCurve2(Curve2):
    """a curve assembled from indexed segments

    Segment ``i`` covers the global interval ``[segment_tmin(i),
    segment_tmax(i)]``, and segments are ordered along the parameter
    axis.  ``find_index(t)`` returns the owning segment and the
    parameter to hand to that segment's hooks.
    """

    @property
    @abstractmethod
    def segment_count(self) -> int:
        ...

    @abstractmethod
    def segment_tmin(self, index: int) -> float:
        ...

    @abstractmethod
    def segment_tmax(self, index: int) -> float:
        ...

    @abstractmethod
    def find_index(self, t: float) -> Tuple[int, float]:
        ...

    ## per-segment hooks

    @abstractmethod
    def _position(self, index, t):
        ...

    @abstractmethod
    def _first_derivative(self, index, t):
        ...

    @abstractmethod
    def _second_derivative(self, index, t):
        ...

    @abstractmethod
    def _third_derivative(self, index, t):
        ...

    @abstractmethod
    def _speed(self, index, t):
        ...

    @abstractmethod
    def _length(self, index, t0, t1):
        ...

    @abstractmethod
    def _tangent(self, index, t):
        ...

    @abstractmethod
    def _left_normal(self, index, t):
        ...

    @abstractmethod
    def _frame(self, index, t):
        ...

    @abstractmethod
    def _curvature(self, index, t):
        ...

    ## domain handling

    def _require_segments(self):
        if self.segment_count == 0:
            raise InvalidArgumentError('curve has no segments')

    @property
    def tmin(self):
        self._require_segments()
        return self.segment_tmin(0)

    @property
    def tmax(self):
        self._require_segments()
        return self.segment_tmax(self.segment_count - 1)

    def _wrap(self, t):
        """reduce ``t`` into ``[tmin, tmax)``"""
        tmin = self.tmin
        tmax = self.tmax
        if tmin <= t < tmax:
            return t
        t = tmin + (t - tmin) % (tmax - tmin)
        # float modulo can land exactly on the upper bound
        if t >= tmax:
            t = tmin
        return t

    def _check(self, t):
        tmin = self.tmin
        tmax = self.tmax
        if t < tmin or t > tmax:
            raise InvalidArgumentError(
                'parameter {} outside [{}, {}] of open curve'.format(t, tmin, tmax))
        return t

    def _reduce(self, t):
        """bring ``t`` into ``[tmin, tmax]``, wrapping only values outside
        it on a closed curve"""
        if self.is_closed and not self.tmin <= t <= self.tmax:
            return self._wrap(t)
        return self._check(t)

    def _index(self, t):
        # tmax ends the last segment; find_index would wrap it on a
        # closed curve
        if t == self.tmax:
            return self.segment_count - 1, t
        return self.find_index(t)

    def _locate(self, t):
        return self._index(self._reduce(t))

    ## position and derivatives

    def position(self, t):
        return self._position(*self._locate(t))

    def first_derivative(self, t):
        return self._first_derivative(*self._locate(t))

    def second_derivative(self, t):
        return self._second_derivative(*self._locate(t))

    def third_derivative(self, t):
        return self._third_derivative(*self._locate(t))

    ## differential geometric quantities

    def speed(self, t):
        return self._speed(*self._locate(t))

    def tangent(self, t):
        return self._tangent(*self._locate(t))

    def left_normal(self, t):
        return self._left_normal(*self._locate(t))

    def curvature(self, t):
        return self._curvature(*self._locate(t))

    def frame(self, t):
        return self._frame(*self._locate(t))

    def length(self, t0, t1):
        """arc length from ``t0`` to ``t1``, summed across segment
        boundaries.  Both parameters must lie in ``[tmin, tmax]``; no
        wrapping is applied, even on closed curves."""
        if t1 < t0:
            return -self.length(t1, t0)
        self._check(t0)
        self._check(t1)
        if t0 == t1:
            return 0.0
        i0, _ = self._index(t0)
        i1, _ = self._index(t1)
        if i0 == i1:
            return self._length(i0, t0, t1)
        total = self._length(i0, t0, self.segment_tmax(i0))
        for i in range(i0 + 1, i1):
            total += self._length(i, self.segment_tmin(i), self.segment_tmax(i))
        total += self._length(i1, self.segment_tmin(i1), t1)
        return total

    @property
    def total_length(self):
        total = 0.0
        for i in range(self.segment_count):
            total += self._length(i, self.segment_tmin(i), self.segment_tmax(i))
        return total


__all__ = ["LENGTH_QUADRATURE_ORDER", "Frame", "Curve2", "MultiCurve2"]
