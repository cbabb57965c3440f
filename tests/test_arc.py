"""Test module for avmorph.arc

The tests are run using pytest.
"""

import math

import pytest

from avmorph.arc import arc_to_beziers
from avmorph.bezier import BezierCurve


def _curves(coords_list):
    return [BezierCurve([c[0:2], c[2:4], c[4:6], c[6:8]]) for c in coords_list]


class TestArcToBeziers:
    """Test the approximation of elliptical arcs by cubic curves."""

    def test_quarter_circle_single_segment(self):
        """Test a quarter circle around the origin."""
        coords = arc_to_beziers(10.0, 0.0, 10.0, 10.0, 0.0, 0, 1, 0.0, 10.0)

        assert len(coords) == 1
        handle = 4.0 / 3.0 * math.tan(math.pi / 8.0) * 10.0
        assert coords[0] == pytest.approx((10.0, 0.0, 10.0, handle, handle, 10.0, 0.0, 10.0))

    def test_quarter_circle_stays_on_circle(self):
        """Test that the approximation deviates only slightly from the circle."""
        (curve,) = _curves(arc_to_beziers(10.0, 0.0, 10.0, 10.0, 0.0, 0, 1, 0.0, 10.0))

        for i in range(11):
            x, y = curve.point_at(i / 10.0)
            assert math.hypot(x, y) == pytest.approx(10.0, abs=0.01)

    def test_half_circle_uses_two_segments(self):
        """Test that 180 degrees are split into two segments of 90 degrees."""
        coords = arc_to_beziers(0.0, 0.0, 10.0, 10.0, 0.0, 0, 1, 20.0, 0.0)

        assert len(coords) == 2
        assert coords[0][6:8] == pytest.approx((10.0, -10.0))
        assert coords[-1][6:8] == (20.0, 0.0)

    def test_sweep_flag_selects_direction(self):
        """Test that the sweep flag mirrors the half circle."""
        coords = arc_to_beziers(0.0, 0.0, 10.0, 10.0, 0.0, 0, 0, 20.0, 0.0)

        assert coords[0][6:8] == pytest.approx((10.0, 10.0))

    def test_large_arc_flag(self):
        """Test that the large arc covers 270 degrees in three segments."""
        coords = arc_to_beziers(10.0, 0.0, 10.0, 10.0, 0.0, 1, 1, 0.0, 10.0)

        assert len(coords) == 3
        assert coords[-1][6:8] == (0.0, 10.0)
        # large arc around the center (10, 10)
        for curve in _curves(coords):
            x, y = curve.point_at(0.5)
            assert math.hypot(x - 10.0, y - 10.0) == pytest.approx(10.0, abs=0.01)

    def test_segments_are_connected(self):
        """Test that each segment starts where the previous one ends."""
        coords = arc_to_beziers(0.0, 0.0, 12.0, 5.0, 30.0, 1, 0, 7.0, 3.0)

        assert coords[0][0:2] == (0.0, 0.0)
        for previous, current in zip(coords, coords[1:]):
            assert current[0:2] == previous[6:8]
        assert coords[-1][6:8] == (7.0, 3.0)

    def test_too_small_radii_are_scaled(self):
        """Test that radii too small to reach the end point are scaled up."""
        coords = arc_to_beziers(0.0, 0.0, 1.0, 1.0, 0.0, 0, 1, 20.0, 0.0)

        assert len(coords) == 2
        assert coords[0][6:8] == pytest.approx((10.0, -10.0))

    def test_negative_radii_use_absolute_values(self):
        """Test that negative radii behave like positive ones."""
        assert arc_to_beziers(0.0, 0.0, -10.0, -10.0, 0.0, 0, 1, 20.0, 0.0) == arc_to_beziers(
            0.0, 0.0, 10.0, 10.0, 0.0, 0, 1, 20.0, 0.0
        )

    def test_rotated_ellipse_tangent_continuity(self):
        """Test that adjacent segments of a rotated ellipse join smoothly."""
        coords = arc_to_beziers(0.0, 0.0, 20.0, 8.0, 35.0, 1, 1, 10.0, 5.0)

        for previous, current in zip(coords, coords[1:]):
            in_x, in_y = previous[6] - previous[4], previous[7] - previous[5]
            out_x, out_y = current[2] - current[0], current[3] - current[1]
            cross = in_x * out_y - in_y * out_x
            assert cross == pytest.approx(0.0, abs=1e-9)
            assert in_x * out_x + in_y * out_y > 0.0

    def test_deterministic(self):
        """Test that identical input gives identical output."""
        args = (1.5, 2.5, 7.0, 3.0, 15.0, 0, 1, 9.0, -4.0)

        assert arc_to_beziers(*args) == arc_to_beziers(*args)

    @pytest.mark.parametrize(
        "args",
        [
            (5.0, 5.0, 10.0, 10.0, 0.0, 0, 1, 5.0, 5.0),
            (0.0, 0.0, 0.0, 10.0, 0.0, 0, 1, 5.0, 5.0),
            (0.0, 0.0, 10.0, 0.0, 0.0, 0, 1, 5.0, 5.0),
        ],
    )
    def test_degenerate_arcs_give_no_curves(self, args):
        """Test equal end points and zero radii."""
        assert arc_to_beziers(*args) == []
