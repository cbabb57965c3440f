"""Conversion of SVG elliptical arcs into cubic Bezier curves."""

from __future__ import annotations

import math
from typing import List, Tuple

from avmorph.consts import ARC_MAX_SEGMENT_SWEEP

ArcBezierCoords = Tuple[float, float, float, float, float, float, float, float]


def _vector_angle(ux: float, uy: float, vx: float, vy: float) -> float:
    """Signed angle from vector u to vector v."""
    return math.atan2(ux * vy - uy * vx, ux * vx + uy * vy)


def arc_to_beziers(
    # pylint: disable=too-many-arguments,too-many-positional-arguments,too-many-locals
    x0: float,
    y0: float,
    rx: float,
    ry: float,
    x_axis_rotation: float,
    large_arc_flag: float,
    sweep_flag: float,
    x1: float,
    y1: float,
) -> List[ArcBezierCoords]:
    """Approximate an SVG elliptical arc by a sequence of cubic Bezier curves.

    The endpoint parametrization is converted into the center parametrization
    (SVG 1.1 implementation notes F.6.5), too small radii are scaled up (F.6.6).
    The sweep is divided into equal parts of at most 90 degrees, each approximated
    by one cubic curve.

    Args:
        x0, y0: start point of the arc
        rx, ry: radii of the ellipse
        x_axis_rotation: rotation of the ellipse in degrees
        large_arc_flag: 0 or 1
        sweep_flag: 0 or 1
        x1, y1: end point of the arc

    Returns:
        List[ArcBezierCoords]: (sx, sy, c1x, c1y, c2x, c2y, ex, ey) per cubic curve.
            Empty for degenerate arcs (equal end points or a zero radius).
    """
    if (x0 == x1 and y0 == y1) or rx == 0 or ry == 0:
        return []

    rx = abs(rx)
    ry = abs(ry)
    phi = math.radians(x_axis_rotation % 360.0)
    cos_phi = math.cos(phi)
    sin_phi = math.sin(phi)

    # Step 1: compute (x1', y1')
    dx2 = (x0 - x1) / 2.0
    dy2 = (y0 - y1) / 2.0
    x1p = cos_phi * dx2 + sin_phi * dy2
    y1p = -sin_phi * dx2 + cos_phi * dy2

    # Correction of out-of-range radii
    lam = (x1p * x1p) / (rx * rx) + (y1p * y1p) / (ry * ry)
    if lam > 1.0:
        scale = math.sqrt(lam)
        rx *= scale
        ry *= scale

    # Step 2: compute (cx', cy')
    rx2, ry2 = rx * rx, ry * ry
    numerator = rx2 * ry2 - rx2 * y1p * y1p - ry2 * x1p * x1p
    denominator = rx2 * y1p * y1p + ry2 * x1p * x1p
    coef = math.sqrt(max(0.0, numerator / denominator))
    if bool(large_arc_flag) == bool(sweep_flag):
        coef = -coef
    cxp = coef * (rx * y1p) / ry
    cyp = coef * -(ry * x1p) / rx

    # Step 3: compute (cx, cy) from (cx', cy')
    cx = cos_phi * cxp - sin_phi * cyp + (x0 + x1) / 2.0
    cy = sin_phi * cxp + cos_phi * cyp + (y0 + y1) / 2.0

    # Step 4: compute start angle and sweep
    ux, uy = (x1p - cxp) / rx, (y1p - cyp) / ry
    vx, vy = (-x1p - cxp) / rx, (-y1p - cyp) / ry
    theta = _vector_angle(1.0, 0.0, ux, uy)
    delta = _vector_angle(ux, uy, vx, vy)
    if not sweep_flag and delta > 0:
        delta -= 2.0 * math.pi
    elif sweep_flag and delta < 0:
        delta += 2.0 * math.pi

    segment_count = max(1, int(math.ceil(abs(delta) / ARC_MAX_SEGMENT_SWEEP - 1.0e-9)))
    segment_sweep = delta / segment_count
    handle = 4.0 / 3.0 * math.tan(segment_sweep / 4.0)

    def ellipse_point(angle: float) -> Tuple[float, float]:
        ex = rx * math.cos(angle)
        ey = ry * math.sin(angle)
        return (cx + cos_phi * ex - sin_phi * ey, cy + sin_phi * ex + cos_phi * ey)

    def ellipse_tangent(angle: float) -> Tuple[float, float]:
        ex = -rx * math.sin(angle)
        ey = ry * math.cos(angle)
        return (cos_phi * ex - sin_phi * ey, sin_phi * ex + cos_phi * ey)

    result: List[ArcBezierCoords] = []
    start_x, start_y = x0, y0
    for i in range(segment_count):
        angle_start = theta + i * segment_sweep
        angle_end = angle_start + segment_sweep
        tangent_start = ellipse_tangent(angle_start)
        tangent_end = ellipse_tangent(angle_end)
        if i == segment_count - 1:
            end_x, end_y = x1, y1
        else:
            end_x, end_y = ellipse_point(angle_end)
        result.append(
            (
                start_x,
                start_y,
                start_x + handle * tangent_start[0],
                start_y + handle * tangent_start[1],
                end_x - handle * tangent_end[0],
                end_y - handle * tangent_end[1],
                end_x,
                end_y,
            )
        )
        start_x, start_y = end_x, end_y
    return result
