"""Draw commands of a vector path and their grouping into sub-paths."""

from __future__ import annotations

from typing import ClassVar, Iterator, List, Optional, Sequence, Tuple

from avmorph.common import AvPoint, DrawCommandKind
from avmorph.consts import ARC_ARGS_COUNT


###############################################################################
# DrawCommand
###############################################################################
class DrawCommand:
    """One atomic path drawing instruction with its geometric payload.

    The point list always starts with the current point before the command
    followed by the command's own points, e.g. [start, cp1, cp2, end] for a
    cubic curve. An entry can be None where no previous point exists (first
    Move of a path); consumers skip such entries.
    """

    kind: ClassVar[DrawCommandKind]

    def __init__(self, *points: Optional[AvPoint]):
        self._points: List[Optional[AvPoint]] = [self._to_point(p) for p in points]

    @staticmethod
    def _to_point(point: Optional[Sequence[float]]) -> Optional[AvPoint]:
        if point is None:
            return None
        return (float(point[0]), float(point[1]))

    @property
    def points(self) -> List[Optional[AvPoint]]:
        """List[Optional[AvPoint]]: the ordered geometric points (mutable)."""
        return self._points

    @property
    def start(self) -> Optional[AvPoint]:
        """Optional[AvPoint]: current point before this command."""
        return self.points[0]

    @property
    def end(self) -> Optional[AvPoint]:
        """Optional[AvPoint]: current point after this command."""
        return self.points[-1]

    def set_point(self, index: int, point: AvPoint) -> None:
        """Replace the point at _index_."""
        self._points[index] = self._to_point(point)

    def __eq__(self, other):
        if not isinstance(other, DrawCommand):
            return NotImplemented
        return self.kind is other.kind and self.points == other.points

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self):
        return f"{type(self).__name__}({', '.join(repr(p) for p in self.points)})"


class MoveCommand(DrawCommand):
    """Start a new sub-path at _end_; _previous_ is None for the first Move."""

    kind = DrawCommandKind.MOVE

    def __init__(self, previous: Optional[AvPoint], end: AvPoint):
        super().__init__(previous, end)


class LineCommand(DrawCommand):
    """Straight line from _start_ to _end_."""

    kind = DrawCommandKind.LINE

    def __init__(self, start: AvPoint, end: AvPoint):
        super().__init__(start, end)


class QuadraticCurveCommand(DrawCommand):
    """Quadratic Bezier curve."""

    kind = DrawCommandKind.QUADRATIC_CURVE

    def __init__(self, start: AvPoint, cp: AvPoint, end: AvPoint):
        super().__init__(start, cp, end)


class BezierCurveCommand(DrawCommand):
    """Cubic Bezier curve."""

    kind = DrawCommandKind.BEZIER_CURVE

    def __init__(self, start: AvPoint, cp1: AvPoint, cp2: AvPoint, end: AvPoint):
        super().__init__(start, cp1, cp2, end)


class ClosePathCommand(DrawCommand):
    """Close the sub-path by a straight line from _start_ back to the sub-path's first point _end_."""

    kind = DrawCommandKind.CLOSE_PATH

    def __init__(self, start: AvPoint, end: AvPoint):
        super().__init__(start, end)


class EllipticalArcCommand(DrawCommand):
    """Elliptical arc carrying the 9 raw arguments.

    args = [x0, y0, rx, ry, x_axis_rotation, large_arc_flag, sweep_flag, x1, y1]

    The points (start and end) are derived from the args, so an update of
    the args always keeps them consistent.
    """

    kind = DrawCommandKind.ELLIPTICAL_ARC

    def __init__(self, *args: float):
        if len(args) != ARC_ARGS_COUNT:
            raise ValueError(f"An elliptical arc needs {ARC_ARGS_COUNT} arguments, got {len(args)}")
        super().__init__()
        self.args: List[float] = [float(a) for a in args]

    @property
    def points(self) -> List[Optional[AvPoint]]:
        return [(self.args[0], self.args[1]), (self.args[7], self.args[8])]

    def set_point(self, index: int, point: AvPoint) -> None:
        offset = 0 if index == 0 else 7
        self.args[offset] = float(point[0])
        self.args[offset + 1] = float(point[1])

    def __eq__(self, other):
        if not isinstance(other, EllipticalArcCommand):
            return NotImplemented
        return self.args == other.args

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self):
        return f"EllipticalArcCommand({', '.join(f'{a:g}' for a in self.args)})"


###############################################################################
# SubPathCommand
###############################################################################
class SubPathCommand:
    """An immutable ordered group of consecutive draw commands forming one drawn figure.

    A well-formed sub-path starts with exactly one MoveCommand.
    """

    def __init__(self, *commands: DrawCommand):
        self._commands: Tuple[DrawCommand, ...] = tuple(commands)

    @property
    def commands(self) -> Tuple[DrawCommand, ...]:
        """Tuple[DrawCommand, ...]: the grouped commands in drawing order."""
        return self._commands

    def __len__(self) -> int:
        return len(self._commands)

    def __iter__(self) -> Iterator[DrawCommand]:
        return iter(self._commands)

    def __getitem__(self, index: int) -> DrawCommand:
        return self._commands[index]

    def __repr__(self):
        return f"SubPathCommand({', '.join(repr(c) for c in self._commands)})"


def create_sub_path_commands(draw_commands: Sequence[DrawCommand]) -> List[SubPathCommand]:
    """Group a flat command list into sub-paths.

    The list is scanned backwards; each Move closes the group collected so far.
    Commands in front of the first Move (malformed input) end up in a leading
    group without a Move, nothing is dropped.
    """
    if not draw_commands:
        return []
    command_groups: List[List[DrawCommand]] = []
    current_group: List[DrawCommand] = []
    for cmd in reversed(draw_commands):
        current_group.append(cmd)
        if cmd.kind is DrawCommandKind.MOVE:
            command_groups.append(current_group)
            current_group = []
    if current_group:
        command_groups.append(current_group)
    command_groups.reverse()
    return [SubPathCommand(*reversed(group)) for group in command_groups]


def flatten_sub_path_commands(sub_paths: Sequence[SubPathCommand]) -> List[DrawCommand]:
    """Concatenate the commands of all sub-paths in order."""
    return [cmd for sub_path in sub_paths for cmd in sub_path]
