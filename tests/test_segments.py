"""Tests for the concrete curve segments and the Curve2 defaults."""

import math
from math import pi

import pytest

from geokernel.curve import Curve2, Frame
from geokernel.errors import InvalidArgumentError
from geokernel.segments import CircleArc2, CubicBezier2, Line2
from geokernel.vec import Vec2


def _vclose(a, b, tol=1e-9):
    return abs(a.x - b.x) < tol and abs(a.y - b.y) < tol


class TestLine2:
    """Test straight segments."""

    def test_position_and_derivatives(self):
        l = Line2((0, 0), (2, 4))
        assert l.tmin == 0.0 and l.tmax == 1.0
        assert l.position(0.5) == Vec2(1.0, 2.0)
        assert l.first_derivative(0.3) == Vec2(2.0, 4.0)
        assert l.second_derivative(0.3) == Vec2(0.0, 0.0)
        assert l.third_derivative(0.3) == Vec2(0.0, 0.0)
        assert l.curvature(0.3) == 0.0
        assert not l.is_closed

    def test_interval_rewrite_keeps_geometry(self):
        l = Line2((0, 0), (2, 0))
        l.set_t_interval(10.0, 12.0)
        assert l.position(10.0) == Vec2(0.0, 0.0)
        assert l.position(11.0) == Vec2(1.0, 0.0)
        assert l.position(12.0) == Vec2(2.0, 0.0)
        assert l.first_derivative(11.0) == Vec2(1.0, 0.0)
        assert l.speed(11.0) == 1.0

    def test_length(self):
        l = Line2((0, 0), (3, 4), tmin=0.0, tmax=2.0)
        assert l.total_length == 5.0
        assert l.length(0.0, 1.0) == 2.5
        assert l.length(1.0, 0.0) == -2.5

    def test_tangent_and_normal(self):
        l = Line2((0, 0), (0, 5))
        assert _vclose(l.tangent(0.5), Vec2(0.0, 1.0))
        assert _vclose(l.left_normal(0.5), Vec2(-1.0, 0.0))

    def test_bad_arguments(self):
        with pytest.raises(InvalidArgumentError):
            Line2((0, 0), (1, 1), tmin=1.0, tmax=1.0)
        with pytest.raises(InvalidArgumentError):
            Line2((0, 0), "xy")
        with pytest.raises(InvalidArgumentError):
            Line2((0, 0), (1, 1)).set_t_interval(2.0, 1.0)


class TestCircleArc2:
    """Test circular arcs."""

    @pytest.mark.parametrize("t", [0.0, 0.1, 0.37, 0.5, 0.9, 1.0])
    def test_ccw_curvature_is_positive(self, t):
        arc = CircleArc2((1, -2), 2.5, 0.0, 1.5 * pi)
        assert abs(arc.curvature(t) - 1 / 2.5) < 1e-12
        # the generic formula agrees with the closed form
        assert abs(Curve2.curvature(arc, t) - 1 / 2.5) < 1e-9

    @pytest.mark.parametrize("t", [0.0, 0.25, 0.8])
    def test_cw_curvature_is_negative(self, t):
        arc = CircleArc2((0, 0), 4.0, pi, 0.0)
        assert abs(arc.curvature(t) + 0.25) < 1e-12
        assert abs(Curve2.curvature(arc, t) + 0.25) < 1e-9

    def test_position(self):
        arc = CircleArc2((0, 0), 2.0, 0.0, pi / 2)
        assert _vclose(arc.position(0.0), Vec2(2.0, 0.0))
        assert _vclose(arc.position(1.0), Vec2(0.0, 2.0))
        assert abs(arc.position(0.5).length - 2.0) < 1e-12

    def test_tangent_and_left_normal(self):
        arc = CircleArc2((0, 0), 1.0, 0.0, pi)
        assert _vclose(arc.tangent(0.0), Vec2(0.0, 1.0))
        # left normal of a ccw arc points at the center
        assert _vclose(arc.left_normal(0.0), Vec2(-1.0, 0.0))

    def test_derivatives_scale_with_interval(self):
        arc = CircleArc2((0, 0), 1.0, 0.0, pi)
        d1 = arc.first_derivative(0.5)
        arc.set_t_interval(0.0, 2.0)
        d1b = arc.first_derivative(1.0)
        assert _vclose(d1b, d1 * 0.5)
        assert _vclose(arc.third_derivative(1.0),
                       CircleArc2((0, 0), 1.0, 0.0, pi).third_derivative(0.5) * 0.125)

    def test_length(self):
        arc = CircleArc2((0, 0), 2.0, 0.0, pi)
        assert abs(arc.total_length - 2 * pi) < 1e-12
        assert abs(Curve2.length(arc, 0.0, 1.0) - 2 * pi) < 1e-9

    def test_closed(self):
        assert CircleArc2((0, 0), 1.0, 0.0, 2 * pi).is_closed
        assert not CircleArc2((0, 0), 1.0, 0.0, pi).is_closed

    def test_bad_arguments(self):
        with pytest.raises(InvalidArgumentError):
            CircleArc2((0, 0), 0.0, 0.0, pi)
        with pytest.raises(InvalidArgumentError):
            CircleArc2((0, 0), 1.0, 1.0, 1.0)


class TestCubicBezier2:
    """Test cubic Bezier segments."""

    def _curve(self):
        return CubicBezier2((0, 0), (1, 2), (3, 2), (4, 0))

    def test_end_points(self):
        b = self._curve()
        assert _vclose(b.position(0.0), Vec2(0.0, 0.0))
        assert _vclose(b.position(1.0), Vec2(4.0, 0.0))
        assert _vclose(b.first_derivative(0.0), Vec2(3.0, 6.0))
        assert _vclose(b.first_derivative(1.0), Vec2(3.0, -6.0))

    def test_derivatives_match_finite_differences(self):
        b = CubicBezier2((0, 0), (1, 2), (3, 2), (4, 0), tmin=2.0, tmax=5.0)
        h = 1e-5
        t = 3.1
        fd1 = (b.position(t + h) - b.position(t - h)) / (2 * h)
        fd2 = (b.first_derivative(t + h) - b.first_derivative(t - h)) / (2 * h)
        fd3 = (b.second_derivative(t + h) - b.second_derivative(t - h)) / (2 * h)
        assert _vclose(fd1, b.first_derivative(t), 1e-6)
        assert _vclose(fd2, b.second_derivative(t), 1e-6)
        assert _vclose(fd3, b.third_derivative(t), 1e-6)

    def test_symmetric_arch_turns_clockwise(self):
        b = self._curve()
        assert b.curvature(0.5) < 0

    def test_straight_bezier_length(self):
        b = CubicBezier2((0, 0), (1, 0), (2, 0), (3, 0))
        assert abs(b.total_length - 3.0) < 1e-9
        assert abs(b.curvature(0.4)) < 1e-12

    def test_quadrature_length_against_polyline(self):
        b = self._curve()
        n = 2000
        pts = [b.position(i / n) for i in range(n + 1)]
        poly = sum((pts[i + 1] - pts[i]).length for i in range(n))
        assert abs(b.total_length - poly) < 1e-5


class TestFrame:
    """Test joint position/tangent/normal evaluation."""

    def test_frame_matches_separate_queries(self):
        b = CubicBezier2((0, 0), (1, 2), (3, 2), (4, 0))
        f = b.frame(0.3)
        assert isinstance(f, Frame)
        assert _vclose(f.position, b.position(0.3))
        assert _vclose(f.tangent, b.tangent(0.3))
        assert _vclose(f.normal, b.left_normal(0.3))
        position, tangent, normal = f
        assert abs(tangent.dot(normal)) < 1e-12

    def test_degenerate_point_gives_nan(self):
        l = Line2((1, 1), (1, 1))
        assert math.isnan(l.tangent(0.5).x)
        assert math.isnan(Curve2.curvature(l, 0.5))
