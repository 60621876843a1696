"""Tests for the scalar type classes."""

import math

import mpmath as mpm
import pytest

from geokernel.scalar import (
    FLOAT_MATH, MP_MATH, FloatMath, MPMath, close, epsilon, isgoodnum, math_for
)


class TestFloatMath:
    """Test double precision arithmetic."""

    def test_basic_operations(self):
        m = FloatMath()
        assert m.add(1, 2) == 3.0
        assert m.sub(1, 2) == -1.0
        assert m.mul(3, 4) == 12.0
        assert m.div(1, 4) == 0.25
        assert m.neg(2.5) == -2.5
        assert m.sqrt(9) == 3.0
        assert abs(m.atan2(1.0, 1.0) - math.pi / 4) < 1e-15
        assert isinstance(m.to_value(3), float)

    def test_division_by_zero_is_not_an_error(self):
        assert FLOAT_MATH.div(1.0, 0.0) == math.inf
        assert FLOAT_MATH.div(-1.0, 0.0) == -math.inf
        assert math.isnan(FLOAT_MATH.div(0.0, 0.0))

    def test_sqrt_of_negative_is_nan(self):
        assert math.isnan(FLOAT_MATH.sqrt(-1.0))


class TestMPMath:
    """Test arbitrary precision arithmetic."""

    def test_basic_operations(self):
        m = MPMath()
        assert m.add(1, 2) == 3
        assert isinstance(m.add(1, 2), mpm.mpf)
        assert m.div(1, 4) == mpm.mpf('0.25')
        assert m.sqrt(16) == 4
        assert m.neg(mpm.mpf(2)) == -2
        assert abs(float(m.atan2(1, 0)) - math.pi / 2) < 1e-15
        assert isinstance(m.to_value(0.5), mpm.mpf)

    def test_division_by_zero_is_not_an_error(self):
        assert MP_MATH.div(1, 0) == mpm.inf
        assert MP_MATH.div(-1, 0) == -mpm.inf
        assert mpm.isnan(MP_MATH.div(0, 0))

    def test_sqrt_of_negative_is_nan(self):
        assert mpm.isnan(MP_MATH.sqrt(-4))


class TestHelpers:
    """Test scalar helper functions."""

    def test_math_for(self):
        assert math_for(1.0) is FLOAT_MATH
        assert math_for(1) is FLOAT_MATH
        assert math_for(mpm.mpf(1)) is MP_MATH

    def test_isgoodnum(self):
        assert isgoodnum(1)
        assert isgoodnum(1.5)
        assert isgoodnum(mpm.mpf(2))
        assert not isgoodnum(True)
        assert not isgoodnum("1")
        assert not isgoodnum(None)

    def test_close(self):
        assert close(1.0, 1.0 + epsilon / 2)
        assert not close(1.0, 1.0 + 2 * epsilon)
        assert close(1.0, 1.1, tol=0.2)
