"""Scalar geometry helpers and the axis-aligned box used for path bounds"""

from __future__ import annotations

import copy
import math
from dataclasses import dataclass
from typing import Optional, Sequence, Tuple, Union

Number = Union[int, float]


###############################################################################
# GeomMath
###############################################################################
class GeomMath:
    """Static helpers for interpolation and distances of 2D points."""

    @staticmethod
    def lerp(a: float, b: float, fraction: float) -> float:
        """Linear interpolation between _a_ (fraction 0) and _b_ (fraction 1).

        The fraction is not clamped, values outside [0, 1] extrapolate.
        Fractions 0 and 1 return _a_ and _b_ exactly.
        """
        return (1.0 - fraction) * a + fraction * b

    @staticmethod
    def lerp_point(p0: Sequence[Number], p1: Sequence[Number], fraction: float) -> Tuple[float, float]:
        """Componentwise linear interpolation of two 2D points."""
        return (
            float(GeomMath.lerp(p0[0], p1[0], fraction)),
            float(GeomMath.lerp(p0[1], p1[1], fraction)),
        )

    @staticmethod
    def distance(p0: Sequence[Number], p1: Sequence[Number]) -> float:
        """Euclidean distance between the 2D points _p0_ and _p1_."""
        return math.hypot(p1[0] - p0[0], p1[1] - p0[1])


###############################################################################
# AvBox
###############################################################################
@dataclass
class AvBox:
    """Axis-aligned box spanned by (xmin, ymin) and (xmax, ymax).

    The corners may be given in any order, they are sorted on creation.
    `AvBox.empty()` creates the sentinel box [+inf, +inf]..[-inf, -inf]
    which contains nothing and only grows by `expand()`.
    """

    xmin: float
    ymin: float
    xmax: float
    ymax: float

    def __post_init__(self):
        self.xmin, self.xmax = sorted((self.xmin, self.xmax))
        self.ymin, self.ymax = sorted((self.ymin, self.ymax))

    @classmethod
    def empty(cls) -> AvBox:
        """Create the sentinel box that contains nothing."""
        box = cls(0.0, 0.0, 0.0, 0.0)
        box.xmin = box.ymin = math.inf
        box.xmax = box.ymax = -math.inf
        return box

    @property
    def is_empty(self) -> bool:
        """bool: True if no point was ever added to a sentinel box."""
        return self.xmin > self.xmax or self.ymin > self.ymax

    @property
    def extent(self) -> Tuple[float, float, float, float]:
        """Tuple (xmin, ymin, xmax, ymax)."""
        return self.xmin, self.ymin, self.xmax, self.ymax

    @property
    def width(self) -> float:
        return self.xmax - self.xmin

    @property
    def height(self) -> float:
        return self.ymax - self.ymin

    def expand(self, x: float, y: float) -> None:
        """Grow the box so that it contains the point (x, y). The box never shrinks."""
        self.xmin = min(self.xmin, x)
        self.ymin = min(self.ymin, y)
        self.xmax = max(self.xmax, x)
        self.ymax = max(self.ymax, y)

    def expand_to_box(self, other: AvBox) -> None:
        """Grow the box so that it contains _other_; an empty _other_ changes nothing."""
        if other.is_empty:
            return
        self.expand(other.xmin, other.ymin)
        self.expand(other.xmax, other.ymax)

    def contains(self, point: Sequence[Number], tolerance: float = 0.0) -> bool:
        """Check if _point_ lies inside the box (borders included).

        Args:
            point (Sequence[float]): 2D point (x, y)
            tolerance (float, optional): Allowed distance outside the border. Defaults to 0.0.

        Returns:
            bool: True if the point is inside
        """
        x, y = point[0], point[1]
        return (self.xmin - tolerance <= x <= self.xmax + tolerance) and (
            self.ymin - tolerance <= y <= self.ymax + tolerance
        )

    def copy(self) -> AvBox:
        """Independent copy, the sentinel extent of an empty box included."""
        return copy.copy(self)

    def __str__(self):
        if self.is_empty:
            return "AvBox(empty)"
        return f"AvBox([{self.xmin}, {self.ymin}]..[{self.xmax}, {self.ymax}])"


def bounding_box_or_none(box: AvBox) -> Optional[AvBox]:
    """Return _box_ or None if it is still the empty sentinel."""
    return None if box.is_empty else box
