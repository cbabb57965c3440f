"""Rendering backends that draw the commands of a path."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, List, Sequence, Tuple

import svgwrite.path
from svgwrite.utils import strlist

from avmorph.commands import SubPathCommand
from avmorph.common import AvPoint, DrawCommandKind


###############################################################################
# AvPathRenderer
###############################################################################
class AvPathRenderer(ABC):
    """Drawing primitives a rendering backend has to provide.

    The backend does no geometry itself, it receives the command payloads as they are.
    """

    @abstractmethod
    def move_to(self, point: AvPoint) -> None:
        """Start a new sub-path at _point_."""

    @abstractmethod
    def line_to(self, point: AvPoint) -> None:
        """Straight line to _point_."""

    @abstractmethod
    def quadratic_to(self, ctrl: AvPoint, end: AvPoint) -> None:
        """Quadratic Bezier curve to _end_."""

    @abstractmethod
    def cubic_to(self, ctrl1: AvPoint, ctrl2: AvPoint, end: AvPoint) -> None:
        """Cubic Bezier curve to _end_."""

    @abstractmethod
    def close_path(self) -> None:
        """Close the current sub-path."""

    @abstractmethod
    def arc_to(self, args: Sequence[float]) -> None:
        """Elliptical arc given by the 9 raw arguments (x0, y0, rx, ry, rot, large, sweep, x1, y1)."""


def render_commands(sub_paths: Sequence[SubPathCommand], renderer: AvPathRenderer) -> None:
    """Flatten the sub-paths and dispatch each command to the renderer in order."""
    for sub_path in sub_paths:
        for cmd in sub_path:
            kind = cmd.kind
            points = cmd.points
            if kind is DrawCommandKind.MOVE:
                renderer.move_to(cmd.end)
            elif kind is DrawCommandKind.LINE:
                renderer.line_to(cmd.end)
            elif kind is DrawCommandKind.QUADRATIC_CURVE:
                renderer.quadratic_to(points[1], points[2])
            elif kind is DrawCommandKind.BEZIER_CURVE:
                renderer.cubic_to(points[1], points[2], points[3])
            elif kind is DrawCommandKind.CLOSE_PATH:
                renderer.close_path()
            elif kind is DrawCommandKind.ELLIPTICAL_ARC:
                renderer.arc_to(tuple(cmd.args))
            else:
                raise ValueError(f"Unsupported draw command: {cmd!r}")


###############################################################################
# RecordingRenderer
###############################################################################
class RecordingRenderer(AvPathRenderer):
    """Records every primitive as (operation, payload) tuple."""

    def __init__(self):
        self.operations: List[Tuple[str, Any]] = []

    def move_to(self, point: AvPoint) -> None:
        self.operations.append(("move_to", point))

    def line_to(self, point: AvPoint) -> None:
        self.operations.append(("line_to", point))

    def quadratic_to(self, ctrl: AvPoint, end: AvPoint) -> None:
        self.operations.append(("quadratic_to", (ctrl, end)))

    def cubic_to(self, ctrl1: AvPoint, ctrl2: AvPoint, end: AvPoint) -> None:
        self.operations.append(("cubic_to", (ctrl1, ctrl2, end)))

    def close_path(self) -> None:
        self.operations.append(("close_path", None))

    def arc_to(self, args: Sequence[float]) -> None:
        self.operations.append(("arc_to", tuple(args)))


###############################################################################
# SvgwritePathRenderer
###############################################################################
class SvgwritePathRenderer(AvPathRenderer):
    """Builds a svgwrite path element from the drawing primitives."""

    def __init__(self, **extra):
        """
        Args:
            **extra: SVG attributes of the path element, e.g. fill="none", stroke="black"
        """
        self.path = svgwrite.path.Path(**extra)

    def move_to(self, point: AvPoint) -> None:
        self.path.push("M", point[0], point[1])

    def line_to(self, point: AvPoint) -> None:
        self.path.push("L", point[0], point[1])

    def quadratic_to(self, ctrl: AvPoint, end: AvPoint) -> None:
        self.path.push("Q", ctrl[0], ctrl[1], end[0], end[1])

    def cubic_to(self, ctrl1: AvPoint, ctrl2: AvPoint, end: AvPoint) -> None:
        self.path.push("C", ctrl1[0], ctrl1[1], ctrl2[0], ctrl2[1], end[0], end[1])

    def close_path(self) -> None:
        self.path.push("Z")

    def arc_to(self, args: Sequence[float]) -> None:
        _x0, _y0, rx, ry, rotation, large_arc_flag, sweep_flag, x1, y1 = args
        self.path.push("A", rx, ry, rotation, int(large_arc_flag), int(sweep_flag), x1, y1)

    @property
    def d(self) -> str:
        """str: the path data collected so far."""
        return strlist(self.path.commands, " ")
