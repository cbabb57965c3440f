"""Central module containing types, enums and exceptions for path data handling."""

from __future__ import annotations

from enum import Enum
from typing import Tuple

###############################################################################
# Types
###############################################################################

AvPoint = Tuple[float, float]


###############################################################################
# Enums
###############################################################################


class DrawCommandKind(Enum):
    """Enum to define the closed set of draw command variants.

    The value is the absolute command letter used when serializing.
    """

    MOVE = "M"
    LINE = "L"
    QUADRATIC_CURVE = "Q"
    BEZIER_CURVE = "C"
    ELLIPTICAL_ARC = "A"
    CLOSE_PATH = "Z"


###############################################################################
# Exceptions
###############################################################################


class PathParseError(ValueError):
    """Raised if a path string can not be turned into draw commands."""


class ShapeMismatchError(ValueError):
    """Raised by a strict interpolation if the paths are not morphable."""


class UnsupportedOperationError(NotImplementedError):
    """Raised if an operation is not supported for a draw command variant."""
