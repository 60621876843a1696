## scalar type classes for geokernel

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

"""scalar arithmetic type classes for **geokernel**

=========
OVERVIEW
=========

Geometric formulas in **geokernel** are written once against an
abstract numeric type class, ``Math``, and instantiated over a
concrete representation:

* ``FloatMath`` -- ordinary double precision Python ``float`` values,
  with IEEE semantics provided by numpy
* ``MPMath`` -- arbitrary precision ``mpmath.mpf`` values

Every operation is a pure function of its operands and is total: a
division by zero or the square root of a negative number produces the
representation's infinity or NaN rather than raising.

constants
=========

``epsilon`` is the default tolerance used by ``close()`` and by vector
``epsilon_equals()``.  ``pi2`` is 2*pi.  Redefine these at your peril.
"""

from abc import ABC, abstractmethod
from math import atan2, pi

import mpmath as mpm
import numpy as np

## constants
epsilon = 0.000005
pi2 = 2.0 * pi


def isgoodnum(n):
    """ determine if an argument is actually a scalar number, and not boolean
    """
    return (not isinstance(n, bool)) and isinstance(n, (int, float, np.floating, mpm.mpf))


def close(a, b, tol=epsilon):
    """ are two scalars the same within ``tol``
    """
    return abs(a - b) < tol


class Math(ABC):
    """numeric type class: the scalar operations the vector algebra needs"""

    @abstractmethod
    def add(self, a, b):
        ...

    @abstractmethod
    def sub(self, a, b):
        ...

    @abstractmethod
    def mul(self, a, b):
        ...

    @abstractmethod
    def div(self, a, b):
        """``a / b``; a zero divisor yields infinity or NaN"""

    @abstractmethod
    def neg(self, a):
        ...

    @abstractmethod
    def sqrt(self, a):
        """square root; a negative argument yields NaN"""

    @abstractmethod
    def atan2(self, y, x):
        ...

    @abstractmethod
    def to_value(self, c):
        """convert any convertible numeric value to this representation"""


class FloatMath(Math):
    """double precision type class"""

    def add(self, a, b):
        return float(a) + float(b)

    def sub(self, a, b):
        return float(a) - float(b)

    def mul(self, a, b):
        return float(a) * float(b)

    def div(self, a, b):
        with np.errstate(divide='ignore', invalid='ignore'):
            return float(np.float64(a) / np.float64(b))

    def neg(self, a):
        return -float(a)

    def sqrt(self, a):
        with np.errstate(invalid='ignore'):
            return float(np.sqrt(np.float64(a)))

    def atan2(self, y, x):
        return atan2(float(y), float(x))

    def to_value(self, c):
        return float(c)

    def __repr__(self):
        return "FloatMath()"


class MPMath(Math):
    """arbitrary precision type class backed by ``mpmath.mpf``

    mpmath raises on division by zero and returns complex roots of
    negative numbers, so both cases are mapped onto ``mpmath.inf`` and
    ``mpmath.nan`` here to keep the operations total.
    """

    def add(self, a, b):
        return mpm.mpf(a) + mpm.mpf(b)

    def sub(self, a, b):
        return mpm.mpf(a) - mpm.mpf(b)

    def mul(self, a, b):
        return mpm.mpf(a) * mpm.mpf(b)

    def div(self, a, b):
        a = mpm.mpf(a)
        b = mpm.mpf(b)
        if b == 0:
            if a == 0 or mpm.isnan(a):
                return mpm.nan
            return mpm.inf if a > 0 else -mpm.inf
        return a / b

    def neg(self, a):
        return -mpm.mpf(a)

    def sqrt(self, a):
        a = mpm.mpf(a)
        if a < 0:
            return mpm.nan
        return mpm.sqrt(a)

    def atan2(self, y, x):
        return mpm.atan2(mpm.mpf(y), mpm.mpf(x))

    def to_value(self, c):
        return mpm.mpf(c)

    def __repr__(self):
        return "MPMath()"


FLOAT_MATH = FloatMath()
MP_MATH = MPMath()


def math_for(value):
    """return the type class instance that handles scalar ``value``"""
    if isinstance(value, mpm.mpf):
        return MP_MATH
    return FLOAT_MATH


__all__ = [
    "epsilon",
    "pi2",
    "isgoodnum",
    "close",
    "Math",
    "FloatMath",
    "MPMath",
    "FLOAT_MATH",
    "MP_MATH",
    "math_for",
]
