"""Test module for the Bezier kernel in avmorph.bezier

The tests are run using pytest.
svgpathtools is used as independent reference for lengths.
"""

import math

import numpy as np
import pytest
import svgpathtools

from avmorph.bezier import BezierCurve, Projection

LINE_AS_CUBIC = [(0.0, 0.0), (0.0, 0.0), (10.0, 0.0), (10.0, 0.0)]
ARCH_CUBIC = [(0.0, 0.0), (0.0, 10.0), (10.0, 10.0), (10.0, 0.0)]
S_CUBIC = [(0.0, 0.0), (30.0, 40.0), (-10.0, 60.0), (50.0, 20.0)]
ARCH_QUADRATIC = [(0.0, 0.0), (50.0, 100.0), (100.0, 0.0)]


def _as_complex(points):
    return [complex(x, y) for x, y in points]


###############################################################################
# Construction
###############################################################################


class TestBezierCurveConstruction:
    """Test creation and accessors of BezierCurve."""

    def test_orders(self):
        """Test the order derived from the number of control points."""
        assert BezierCurve([(0, 0), (1, 1)]).order == 1
        assert BezierCurve(ARCH_QUADRATIC).order == 2
        assert BezierCurve(ARCH_CUBIC).order == 3

    @pytest.mark.parametrize("points", [[(0, 0)], [(0, 0)] * 5, [(0, 0, 0), (1, 1, 1)]])
    def test_invalid_points_raise(self, points):
        """Test that unsupported control point lists are rejected."""
        with pytest.raises(ValueError):
            BezierCurve(points)

    def test_accessors(self):
        """Test start, end and inner control points."""
        cubic = BezierCurve(ARCH_CUBIC)

        assert cubic.start == (0.0, 0.0)
        assert cubic.cp1 == (0.0, 10.0)
        assert cubic.cp2 == (10.0, 10.0)
        assert cubic.end == (10.0, 0.0)
        assert cubic.to_point_list() == ARCH_CUBIC

    def test_cp2_of_quadratic_raises(self):
        """Test that a quadratic curve has no second control point."""
        with pytest.raises(ValueError):
            _ = BezierCurve(ARCH_QUADRATIC).cp2

    def test_points_are_read_only(self):
        """Test that the control point view can not be modified."""
        cubic = BezierCurve(ARCH_CUBIC)
        with pytest.raises(ValueError):
            cubic.points[0, 0] = 5.0


###############################################################################
# Evaluation and measuring
###############################################################################


class TestBezierCurveMeasuring:
    """Test point evaluation, bounding boxes and lengths."""

    def test_point_at(self):
        """Test evaluation at start, middle and end."""
        cubic = BezierCurve(ARCH_CUBIC)

        assert cubic.point_at(0.0) == (0.0, 0.0)
        assert cubic.point_at(1.0) == (10.0, 0.0)
        assert cubic.point_at(0.5) == pytest.approx((5.0, 7.5))

    def test_line_as_cubic_length(self):
        """Test that a line with collapsed control points has the length of the line."""
        assert BezierCurve(LINE_AS_CUBIC).length() == pytest.approx(10.0, rel=1e-12)

    @pytest.mark.parametrize("points", [ARCH_CUBIC, S_CUBIC, ARCH_QUADRATIC])
    def test_length_matches_svgpathtools(self, points):
        """Test the quadrature length against svgpathtools."""
        if len(points) == 4:
            reference = svgpathtools.CubicBezier(*_as_complex(points)).length()
        else:
            reference = svgpathtools.QuadraticBezier(*_as_complex(points)).length()

        assert BezierCurve(points).length() == pytest.approx(reference, rel=1e-6)

    def test_bbox_quadratic_is_tighter_than_control_polygon(self):
        """Test that the box uses the curve extrema and not the control point."""
        box = BezierCurve(ARCH_QUADRATIC).bbox()

        assert box.xmin == pytest.approx(0.0)
        assert box.xmax == pytest.approx(100.0)
        assert box.ymin == pytest.approx(0.0)
        assert box.ymax == pytest.approx(50.0)

    def test_bbox_cubic(self):
        """Test the box of an arch shaped cubic."""
        box = BezierCurve(ARCH_CUBIC).bbox()

        assert box.extent == pytest.approx((0.0, 0.0, 10.0, 7.5))

    def test_bbox_contains_sampled_points(self):
        """Test that every sampled point lies inside the box."""
        cubic = BezierCurve(S_CUBIC)
        box = cubic.bbox()

        for t in np.linspace(0.0, 1.0, 101):
            assert box.contains(cubic.point_at(float(t)), tolerance=1e-9)

    def test_bbox_matches_svgpathtools(self):
        """Test the box against svgpathtools (xmin, xmax, ymin, ymax)."""
        xmin, xmax, ymin, ymax = svgpathtools.CubicBezier(*_as_complex(S_CUBIC)).bbox()
        box = BezierCurve(S_CUBIC).bbox()

        assert box.extent == pytest.approx((xmin, ymin, xmax, ymax), rel=1e-7, abs=1e-9)


###############################################################################
# Projection
###############################################################################


class TestBezierCurveProjection:
    """Test closest point computation."""

    def test_project_onto_line_middle(self):
        """Test the projection of a point above the middle of a line."""
        projection = BezierCurve(LINE_AS_CUBIC).project((5.0, 5.0))

        assert isinstance(projection, Projection)
        assert projection.point == pytest.approx((5.0, 0.0))
        assert projection.t == pytest.approx(0.5)
        assert projection.d == pytest.approx(5.0)

    def test_project_beyond_end(self):
        """Test that points beyond the end project onto the end point."""
        projection = BezierCurve(LINE_AS_CUBIC).project((20.0, 0.0))

        assert projection.t == 1.0
        assert projection.point == (10.0, 0.0)
        assert projection.d == pytest.approx(10.0)

    def test_project_point_on_curve(self):
        """Test that a point on the curve has distance zero."""
        cubic = BezierCurve(S_CUBIC)
        on_curve = cubic.point_at(0.3)
        projection = cubic.project(on_curve)

        assert projection.d == pytest.approx(0.0, abs=1e-6)
        assert projection.t == pytest.approx(0.3, abs=1e-6)

    def test_project_arch_apex(self):
        """Test projecting onto the apex of an arch."""
        projection = BezierCurve(ARCH_CUBIC).project((5.0, 20.0))

        assert projection.point == pytest.approx((5.0, 7.5))
        assert projection.t == pytest.approx(0.5)
        assert projection.d == pytest.approx(12.5)

    def test_project_is_minimum_of_samples(self):
        """Test that no sampled curve point is closer than the projection."""
        cubic = BezierCurve(S_CUBIC)
        target = (20.0, 10.0)
        projection = cubic.project(target)

        for t in np.linspace(0.0, 1.0, 501):
            x, y = cubic.point_at(float(t))
            assert math.hypot(x - target[0], y - target[1]) >= projection.d - 1e-9

    def test_project_degenerate_point_curve(self):
        """Test a curve collapsed into a single point."""
        projection = BezierCurve([(2.0, 2.0)] * 4).project((5.0, 6.0))

        assert projection.t == 0.0
        assert projection.point == (2.0, 2.0)
        assert projection.d == pytest.approx(5.0)


###############################################################################
# Splitting
###############################################################################


class TestBezierCurveSplit:
    """Test sub-curve extraction."""

    def test_split_keeps_order(self):
        """Test that the sub-curve has the order of the curve."""
        assert BezierCurve(ARCH_QUADRATIC).split(0.2, 0.6).order == 2
        assert BezierCurve(ARCH_CUBIC).split(0.2, 0.6).order == 3

    def test_split_end_points(self):
        """Test that the sub-curve starts and ends on the curve."""
        cubic = BezierCurve(S_CUBIC)
        part = cubic.split(0.25, 0.75)

        assert part.start == pytest.approx(cubic.point_at(0.25))
        assert part.end == pytest.approx(cubic.point_at(0.75))

    def test_split_full_range_is_identity(self):
        """Test that [0, 1] returns the same control points."""
        part = BezierCurve(S_CUBIC).split(0.0, 1.0)

        assert part.to_point_list() == pytest.approx(S_CUBIC)

    def test_split_follows_curve(self):
        """Test that the sub-curve runs along the curve."""
        cubic = BezierCurve(S_CUBIC)
        part = cubic.split(0.2, 0.6)

        for u in np.linspace(0.0, 1.0, 11):
            assert part.point_at(float(u)) == pytest.approx(cubic.point_at(0.2 + 0.4 * float(u)))

    @pytest.mark.parametrize("t", [0.1, 0.5, 0.77])
    def test_split_lengths_sum_up(self, t):
        """Test that both parts together have the length of the curve."""
        cubic = BezierCurve(S_CUBIC)

        total = cubic.split(0.0, t).length() + cubic.split(t, 1.0).length()

        assert total == pytest.approx(cubic.length(), rel=1e-6)

    def test_split_empty_range(self):
        """Test that t0 == t1 gives a curve collapsed into one point."""
        cubic = BezierCurve(ARCH_CUBIC)
        part = cubic.split(0.5, 0.5)

        for point in part.to_point_list():
            assert point == pytest.approx((5.0, 7.5))

    def test_split_invalid_range_raises(self):
        """Test that t0 > t1 is rejected."""
        with pytest.raises(ValueError):
            BezierCurve(ARCH_CUBIC).split(0.6, 0.2)
