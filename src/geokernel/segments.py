## concrete curve segments for geokernel

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

"""concrete planar curve segments for **geokernel**

Each segment is defined over a local parameter ``u`` in ``[0, 1]`` and
exposes it through its own interval ``[tmin, tmax]`` with
``u = (t - tmin) / (tmax - tmin)``.  ``set_t_interval()`` rewrites the
interval without changing the geometry, which is how
``ComposedCurve2`` lines segments up end to end.  Derivatives are taken
with respect to ``t``, so they scale with the interval length.

* ``Line2`` -- straight segment between two points
* ``CircleArc2`` -- circular arc, counter-clockwise when
  ``end_angle > start_angle``
* ``CubicBezier2`` -- cubic Bezier curve from four control points

Segments accept ``t`` outside their interval and extrapolate; range
checking is the business of the curve that owns them.
"""

from __future__ import annotations

from math import cos, sin

from geokernel.curve import Curve2
from geokernel.errors import InvalidArgumentError
from geokernel.scalar import close, isgoodnum, pi2
from geokernel.vec import Vec2


def _vec2(p):
    if isinstance(p, Vec2):
        return p
    try:
        x, y = p
    except (TypeError, ValueError) as err:
        raise InvalidArgumentError('bad point: {!r}'.format(p)) from err
    if not (isgoodnum(x) and isgoodnum(y)):
        raise InvalidArgumentError('bad point: {!r}'.format(p))
    return Vec2(float(x), float(y))


class ParametricSegment2(Curve2):
    """base for segments with a linear map from ``[tmin, tmax]`` to
    ``u`` in ``[0, 1]``"""

    def __init__(self, tmin=0.0, tmax=1.0):
        self._tmin = 0.0
        self._tmax = 1.0
        self.set_t_interval(tmin, tmax)

    @property
    def tmin(self):
        return self._tmin

    @property
    def tmax(self):
        return self._tmax

    def set_t_interval(self, tmin, tmax):
        if not (isgoodnum(tmin) and isgoodnum(tmax)):
            raise InvalidArgumentError('bad parameter interval [{}, {}]'.format(tmin, tmax))
        if not tmax > tmin:
            raise InvalidArgumentError('empty parameter interval [{}, {}]'.format(tmin, tmax))
        self._tmin = tmin
        self._tmax = tmax

    @property
    def span(self):
        return self._tmax - self._tmin

    def _u(self, t):
        return (t - self._tmin) / self.span


class Line2(ParametricSegment2):
    """straight segment from ``p0`` to ``p1``"""

    def __init__(self, p0, p1, tmin=0.0, tmax=1.0):
        super().__init__(tmin, tmax)
        self.p0 = _vec2(p0)
        self.p1 = _vec2(p1)

    def __repr__(self):
        return "Line2({!r},{!r},{},{})".format(self.p0, self.p1, self.tmin, self.tmax)

    def position(self, t):
        return self.p0 + (self.p1 - self.p0) * self._u(t)

    def first_derivative(self, t):
        return (self.p1 - self.p0) / self.span

    def second_derivative(self, t):
        return Vec2(0.0, 0.0)

    def third_derivative(self, t):
        return Vec2(0.0, 0.0)

    def curvature(self, t):
        return 0.0

    def length(self, t0, t1):
        return (self.p1 - self.p0).length * (t1 - t0) / self.span


class CircleArc2(ParametricSegment2):
    """circular arc about ``center``; angles in radians

    The arc runs from ``start_angle`` to ``end_angle``, so it is
    traversed counter-clockwise and has curvature ``+1/radius`` when
    ``end_angle > start_angle``, and clockwise with ``-1/radius``
    otherwise.  An arc sweeping a full turn is closed.
    """

    def __init__(self, center, radius, start_angle, end_angle, tmin=0.0, tmax=1.0):
        super().__init__(tmin, tmax)
        if not isgoodnum(radius) or radius <= 0:
            raise InvalidArgumentError('arc radius must be positive: {}'.format(radius))
        if start_angle == end_angle:
            raise InvalidArgumentError('arc has zero sweep')
        self.center = _vec2(center)
        self.radius = float(radius)
        self.start_angle = float(start_angle)
        self.end_angle = float(end_angle)

    def __repr__(self):
        return "CircleArc2({!r},{},{},{},{},{})".format(self.center, self.radius,
                                                         self.start_angle, self.end_angle,
                                                         self.tmin, self.tmax)

    @property
    def is_closed(self):
        return close(abs(self.end_angle - self.start_angle), pi2)

    @property
    def _omega(self):
        # angular rate with respect to t
        return (self.end_angle - self.start_angle) / self.span

    def _theta(self, t):
        return self.start_angle + (self.end_angle - self.start_angle) * self._u(t)

    def position(self, t):
        th = self._theta(t)
        return Vec2(self.center.x + self.radius * cos(th),
                    self.center.y + self.radius * sin(th))

    def first_derivative(self, t):
        th = self._theta(t)
        k = self.radius * self._omega
        return Vec2(-k * sin(th), k * cos(th))

    def second_derivative(self, t):
        th = self._theta(t)
        w = self._omega
        k = -self.radius * w * w
        return Vec2(k * cos(th), k * sin(th))

    def third_derivative(self, t):
        th = self._theta(t)
        w = self._omega
        k = self.radius * w * w * w
        return Vec2(k * sin(th), -k * cos(th))

    def speed(self, t):
        return self.radius * abs(self._omega)

    def curvature(self, t):
        return 1.0 / self.radius if self._omega > 0 else -1.0 / self.radius

    def length(self, t0, t1):
        return self.radius * abs(self._omega) * (t1 - t0)


class CubicBezier2(ParametricSegment2):
    """cubic Bezier curve with control points ``p0`` .. ``p3``"""

    def __init__(self, p0, p1, p2, p3, tmin=0.0, tmax=1.0):
        super().__init__(tmin, tmax)
        self.p0 = _vec2(p0)
        self.p1 = _vec2(p1)
        self.p2 = _vec2(p2)
        self.p3 = _vec2(p3)

    def __repr__(self):
        return "CubicBezier2({!r},{!r},{!r},{!r},{},{})".format(
            self.p0, self.p1, self.p2, self.p3, self.tmin, self.tmax)

    def position(self, t):
        u = self._u(t)
        v = 1.0 - u
        return (self.p0 * (v * v * v) + self.p1 * (3.0 * v * v * u) +
                self.p2 * (3.0 * v * u * u) + self.p3 * (u * u * u))

    def first_derivative(self, t):
        u = self._u(t)
        v = 1.0 - u
        d = ((self.p1 - self.p0) * (v * v) + (self.p2 - self.p1) * (2.0 * v * u) +
             (self.p3 - self.p2) * (u * u))
        return d * (3.0 / self.span)

    def second_derivative(self, t):
        u = self._u(t)
        a = self.p2 - self.p1 * 2.0 + self.p0
        b = self.p3 - self.p2 * 2.0 + self.p1
        s = self.span
        return (a * (1.0 - u) + b * u) * (6.0 / (s * s))

    def third_derivative(self, t):
        s = self.span
        d = self.p3 - self.p2 * 3.0 + self.p1 * 3.0 - self.p0
        return d * (6.0 / (s * s * s))


__all__ = ["ParametricSegment2", "Line2", "CircleArc2", "CubicBezier2"]
