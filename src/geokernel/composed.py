## composed curves for geokernel

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

"""composed curves for **geokernel**

A ``ComposedCurve2`` stitches independently parametrized segments into
a single curve with one global parameter.  Segments are appended with
``add()``; every segment after the first has its interval rewritten so
that it starts where the previous one ends, keeping its own span: ::

   c = ComposedCurve2()
   c.add(Line2((0, 0), (1, 0)))          # [0, 1]
   c.add(Line2((1, 0), (1, 1)))          # remapped from [0, 1] to [1, 2]
   c.position(1.5)                       # Vec2(1.0, 0.5)

so the segment intervals always partition ``[tmin, tmax]`` contiguously
and in increasing order.  Segments are never removed.

``add()`` rewrites the interval of the segment object it is given, so
a segment belongs to at most one live composed curve and appears in it
once; adding it again, here or elsewhere, is rejected.  Neither
``add()`` nor ``set_t_interval()`` is atomic; concurrent mutation of
one composed curve must be serialized by the caller.
"""

from __future__ import annotations

import logging
import weakref
from bisect import bisect_right
from operator import attrgetter

from geokernel.curve import Curve2, MultiCurve2
from geokernel.errors import InvalidArgumentError

logger = logging.getLogger(__name__)

_tmin_key = attrgetter("tmin")

## segment -> weak reference to the composed curve holding it
_owners = weakref.WeakKeyDictionary()


class ComposedCurve2(MultiCurve2):
    """a curve made of contiguous segments sharing one parameter axis"""

    def __init__(self, segments=(), closed=False):
        self._segments = []
        self._closed = bool(closed)
        for segment in segments:
            self.add(segment)

    def __repr__(self):
        return "ComposedCurve2({!r},closed={})".format(self._segments, self._closed)

    def add(self, segment: Curve2) -> None:
        """append ``segment``, moving its interval to follow the last one

        The segment object itself is remapped, not a copy.  A segment
        already held by this or another live composed curve is rejected
        with ``InvalidArgumentError``.
        """
        if segment is None:
            raise InvalidArgumentError('segment must be non-null')
        if not isinstance(segment, Curve2):
            raise InvalidArgumentError('segment must be a Curve2: {!r}'.format(segment))
        if segment is self:
            raise InvalidArgumentError('a composed curve cannot contain itself')
        ref = _owners.get(segment)
        owner = ref() if ref is not None else None
        if owner is self:
            raise InvalidArgumentError('segment already added: {!r}'.format(segment))
        if owner is not None:
            raise InvalidArgumentError('segment belongs to another composed curve: {!r}'.format(segment))
        if self._segments:
            tmin = self._segments[-1].tmax
            tlen = segment.tmax - segment.tmin
            segment.set_t_interval(tmin, tmin + tlen)
        self._segments.append(segment)
        _owners[segment] = weakref.ref(self)
        logger.debug("segment %d added over [%g, %g]",
                     len(self._segments) - 1, segment.tmin, segment.tmax)

    def set_closed(self, closed: bool) -> None:
        self._closed = bool(closed)
        logger.debug("composed curve marked %s", "closed" if self._closed else "open")

    @property
    def is_closed(self):
        return self._closed

    def set_t_interval(self, tmin, tmax):
        """map the whole curve onto ``[tmin, tmax]``, scaling every
        segment interval by the same factor and keeping them contiguous"""
        self._require_segments()
        if not tmax > tmin:
            raise InvalidArgumentError('empty parameter interval [{}, {}]'.format(tmin, tmax))
        old_tmin = self.tmin
        scale = (tmax - tmin) / (self.tmax - old_tmin)
        start = tmin
        last = len(self._segments) - 1
        for i, segment in enumerate(self._segments):
            if i == last:
                end = tmax
            else:
                end = tmin + (segment.tmax - old_tmin) * scale
            segment.set_t_interval(start, end)
            start = end

    @property
    def segments(self):
        return tuple(self._segments)

    @property
    def segment_count(self):
        return len(self._segments)

    def __len__(self):
        return len(self._segments)

    def __iter__(self):
        return iter(self._segments)

    def __getitem__(self, index):
        return self._segments[index]

    def segment_tmin(self, index):
        return self._segments[index].tmin

    def segment_tmax(self, index):
        return self._segments[index].tmax

    def find_index(self, t):
        """return ``(index, t)`` for the segment owning global parameter ``t``

        The owner is the last segment whose ``tmin <= t``, so a value on
        a boundary belongs to the segment that starts there.  Values past
        either end are wrapped into ``[tmin, tmax)`` on a closed curve
        and clamped to the first or last segment on an open one.  The
        parameter is returned unchanged, since segments already live on
        the global axis.
        """
        self._require_segments()
        if self._closed:
            t = self._wrap(t)
        index = bisect_right(self._segments, t, key=_tmin_key) - 1
        index = min(max(index, 0), len(self._segments) - 1)
        return index, t

    ## position and derivatives

    def _position(self, index, t):
        return self._segments[index].position(t)

    def _first_derivative(self, index, t):
        return self._segments[index].first_derivative(t)

    def _second_derivative(self, index, t):
        return self._segments[index].second_derivative(t)

    def _third_derivative(self, index, t):
        return self._segments[index].third_derivative(t)

    ## differential geometric quantities

    def _speed(self, index, t):
        return self._segments[index].speed(t)

    def _length(self, index, t0, t1):
        return self._segments[index].length(t0, t1)

    def _tangent(self, index, t):
        return self._segments[index].tangent(t)

    def _left_normal(self, index, t):
        return self._segments[index].left_normal(t)

    def _frame(self, index, t):
        return self._segments[index].frame(t)

    def _curvature(self, index, t):
        return self._segments[index].curvature(t)


__all__ = ["ComposedCurve2"]
