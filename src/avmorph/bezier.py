"""Bezier curve kernel for path measuring, projection and splitting."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Sequence, Tuple, Union

import numpy as np
from numpy.polynomial import legendre as npleg
from numpy.polynomial import polynomial as nppoly
from numpy.typing import NDArray

from avmorph.common import AvPoint
from avmorph.consts import (
    GAUSS_LEGENDRE_ORDER,
    POLY_COEFF_TOLERANCE,
    ROOT_IMAG_TOLERANCE,
    ROOT_RANGE_TOLERANCE,
)
from avmorph.geom import AvBox

# Pre-computed Gauss-Legendre nodes and weights mapped from [-1, 1] onto [0, 1]
_GAUSS_NODES_RAW, _GAUSS_WEIGHTS_RAW = npleg.leggauss(GAUSS_LEGENDRE_ORDER)
_GAUSS_NODES: NDArray[np.float64] = 0.5 * (_GAUSS_NODES_RAW + 1.0)
_GAUSS_WEIGHTS: NDArray[np.float64] = 0.5 * _GAUSS_WEIGHTS_RAW

# Bernstein to power basis conversion matrices by number of control points
_POWER_BASIS: Dict[int, NDArray[np.float64]] = {
    2: np.array([[1.0, 0.0], [-1.0, 1.0]], dtype=np.float64),
    3: np.array([[1.0, 0.0, 0.0], [-2.0, 2.0, 0.0], [1.0, -2.0, 1.0]], dtype=np.float64),
    4: np.array(
        [[1.0, 0.0, 0.0, 0.0], [-3.0, 3.0, 0.0, 0.0], [3.0, -6.0, 3.0, 0.0], [-1.0, 3.0, -3.0, 1.0]],
        dtype=np.float64,
    ),
}


###############################################################################
# Projection
###############################################################################
@dataclass(frozen=True)
class Projection:
    """Closest point on a curve.

    Attributes:
        point (AvPoint): the point on the curve
        t (float): curve parameter of _point_ in [0, 1]
        d (float): distance between _point_ and the queried point
    """

    point: AvPoint
    t: float
    d: float


###############################################################################
# BezierCurve
###############################################################################
class BezierCurve:
    """A linear, quadratic or cubic Bezier curve given by 2 to 4 control points.

    The control points are kept as a (n, 2) float64 array. Most of the geometry
    is computed on the power basis representation B(t) = sum(c_i * t^i).
    """

    _points: NDArray[np.float64]

    def __init__(self, points: Union[Sequence[Sequence[float]], NDArray[np.float64]]):
        points_array = np.array(points, dtype=np.float64)
        if points_array.ndim != 2 or points_array.shape[1] != 2:
            raise ValueError("Bezier control points require (x, y) formatted points.")
        if points_array.shape[0] not in _POWER_BASIS:
            raise ValueError(f"A Bezier curve needs 2 to 4 control points, got {points_array.shape[0]}")
        self._points = points_array

    @property
    def points(self) -> NDArray[np.float64]:
        """NDArray: read-only view on the control points."""
        view = self._points.view()
        view.flags.writeable = False
        return view

    @property
    def order(self) -> int:
        """int: Degree of the curve (1 linear, 2 quadratic, 3 cubic)."""
        return self._points.shape[0] - 1

    @property
    def start(self) -> AvPoint:
        """AvPoint: first control point."""
        return self._as_point(self._points[0])

    @property
    def end(self) -> AvPoint:
        """AvPoint: last control point."""
        return self._as_point(self._points[-1])

    @property
    def cp1(self) -> AvPoint:
        """AvPoint: first inner control point (quadratic and cubic curves)."""
        if self.order < 2:
            raise ValueError("A linear Bezier curve has no inner control point")
        return self._as_point(self._points[1])

    @property
    def cp2(self) -> AvPoint:
        """AvPoint: second inner control point (cubic curves only)."""
        if self.order < 3:
            raise ValueError("Only a cubic Bezier curve has a second inner control point")
        return self._as_point(self._points[2])

    def to_point_list(self) -> List[AvPoint]:
        """All control points as list of (x, y) tuples."""
        return [self._as_point(p) for p in self._points]

    @staticmethod
    def _as_point(row: NDArray[np.float64]) -> AvPoint:
        return (float(row[0]), float(row[1]))

    ###########################################################################
    # Evaluation
    ###########################################################################

    def _power_coefficients(self) -> NDArray[np.float64]:
        """Power basis coefficients, shape (n, 2), lowest degree first."""
        return _POWER_BASIS[self._points.shape[0]] @ self._points

    @staticmethod
    def _de_casteljau(
        points: NDArray[np.float64], t: float
    ) -> Tuple[NDArray[np.float64], NDArray[np.float64]]:
        """Subdivide the control polygon at _t_.

        Returns:
            Tuple of the control points of the left part [0, t] and the right part [t, 1].
        """
        n = points.shape[0]
        left = np.empty_like(points)
        right = np.empty_like(points)
        level = points.copy()
        for i in range(n):
            left[i] = level[0]
            right[n - 1 - i] = level[-1]
            level = level[:-1] * (1.0 - t) + level[1:] * t
        return left, right

    def point_at(self, t: float) -> AvPoint:
        """Evaluate the curve at parameter _t_."""
        left, _ = self._de_casteljau(self._points, t)
        return self._as_point(left[-1])

    ###########################################################################
    # Measuring
    ###########################################################################

    @staticmethod
    def _trim(coefficients: NDArray[np.float64]) -> NDArray[np.float64]:
        """Remove negligible highest-degree coefficients relative to the largest one."""
        scale = float(np.max(np.abs(coefficients))) if coefficients.size else 0.0
        if scale == 0.0:
            return np.zeros(1, dtype=np.float64)
        return nppoly.polytrim(coefficients, tol=scale * POLY_COEFF_TOLERANCE)

    @classmethod
    def _roots_in_unit_interval(cls, coefficients: NDArray[np.float64]) -> List[float]:
        """Real roots of the polynomial within [0, 1], ascending."""
        trimmed = cls._trim(coefficients)
        if trimmed.shape[0] < 2:
            return []
        roots = nppoly.polyroots(trimmed)
        result = []
        for root in roots:
            if abs(root.imag) > ROOT_IMAG_TOLERANCE:
                continue
            value = float(root.real)
            if -ROOT_RANGE_TOLERANCE <= value <= 1.0 + ROOT_RANGE_TOLERANCE:
                result.append(min(1.0, max(0.0, value)))
        return sorted(result)

    def bbox(self) -> AvBox:
        """Axis-aligned bounding box of the curve itself.

        The extrema are searched at the roots of the derivative in (0, 1)
        and at both end points, so the box is usually tighter than the one
        of the control polygon.
        """
        coefficients = self._power_coefficients()
        box = AvBox.empty()
        t_values = [0.0, 1.0]
        for axis in range(2):
            derivative = nppoly.polyder(coefficients[:, axis])
            t_values.extend(t for t in self._roots_in_unit_interval(derivative) if 0.0 < t < 1.0)
        for t in t_values:
            x = float(nppoly.polyval(t, coefficients[:, 0]))
            y = float(nppoly.polyval(t, coefficients[:, 1]))
            box.expand(x, y)
        # end points exactly, independent of the polynomial evaluation
        box.expand(*self.start)
        box.expand(*self.end)
        return box

    def length(self) -> float:
        """Arc length of the curve using Gauss-Legendre quadrature."""
        coefficients = self._power_coefficients()
        dx = nppoly.polyval(_GAUSS_NODES, nppoly.polyder(coefficients[:, 0]))
        dy = nppoly.polyval(_GAUSS_NODES, nppoly.polyder(coefficients[:, 1]))
        return float(np.sum(_GAUSS_WEIGHTS * np.hypot(dx, dy)))

    ###########################################################################
    # Projection and splitting
    ###########################################################################

    def project(self, point: Sequence[float]) -> Projection:
        """Closest point of the curve to _point_.

        Candidates are t=0, the real roots in [0, 1] of (B(t) - p) . B'(t) in
        ascending order and t=1. The first candidate with the smallest
        distance wins.
        """
        px, py = float(point[0]), float(point[1])
        coefficients = self._power_coefficients().copy()
        coefficients[0, 0] -= px
        coefficients[0, 1] -= py
        derivative_x = nppoly.polyder(coefficients[:, 0])
        derivative_y = nppoly.polyder(coefficients[:, 1])
        dot_product = nppoly.polyadd(
            nppoly.polymul(coefficients[:, 0], derivative_x),
            nppoly.polymul(coefficients[:, 1], derivative_y),
        )

        candidates = [0.0] + self._roots_in_unit_interval(dot_product) + [1.0]
        best: Union[Projection, None] = None
        for t in candidates:
            on_curve = self.point_at(t)
            d = float(np.hypot(on_curve[0] - px, on_curve[1] - py))
            if best is None or d < best.d:
                best = Projection(point=on_curve, t=t, d=d)
        return best

    def split(self, t0: float, t1: float) -> BezierCurve:
        """Sub-curve of the same order covering the parameter range [t0, t1]."""
        if t0 > t1:
            raise ValueError(f"Invalid split range [{t0}, {t1}]")
        left, _ = self._de_casteljau(self._points, t1)
        if t1 == 0.0:
            return BezierCurve(left)
        _, right = self._de_casteljau(left, t0 / t1)
        return BezierCurve(right)

    def __repr__(self):
        return f"BezierCurve({self.to_point_list()})"
