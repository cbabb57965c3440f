"""Path data of a vector drawable: measuring, morphing, projecting and splitting."""

from __future__ import annotations

import bisect
import copy
import logging
from dataclasses import dataclass
from typing import Callable, List, Optional, Sequence, Tuple

from avmorph.arc import arc_to_beziers
from avmorph.bezier import BezierCurve, Projection
from avmorph.commands import (
    BezierCurveCommand,
    ClosePathCommand,
    DrawCommand,
    LineCommand,
    QuadraticCurveCommand,
    SubPathCommand,
    create_sub_path_commands,
    flatten_sub_path_commands,
)
from avmorph.common import (
    AvPoint,
    DrawCommandKind,
    ShapeMismatchError,
    UnsupportedOperationError,
)
from avmorph.consts import ARC_FLAG_INDICES
from avmorph.geom import AvBox, GeomMath, bounding_box_or_none
from avmorph.pathparser import commands_to_string, parse_commands
from avmorph.renderer import AvPathRenderer, render_commands

logger = logging.getLogger(__name__)


###############################################################################
# ProjectionInfo
###############################################################################
@dataclass(frozen=True)
class ProjectionInfo:
    """Closest point on a path together with the operation to split the path there.

    Attributes:
        projection (Projection): point, parameter t and distance d
        split (Callable[[], None]): splits the winning command at t when called
    """

    projection: Projection
    split: Callable[[], None]


###############################################################################
# DrawCommandWrapper
###############################################################################
class DrawCommandWrapper:
    """Contains the canonical Bezier geometry and the split state of one draw command."""

    def __init__(self, source_command: DrawCommand, *source_beziers: BezierCurve):
        self.source_command = source_command
        self._source_beziers: Tuple[BezierCurve, ...] = tuple(source_beziers)
        self._splits: List[float] = []
        self._split_commands: List[DrawCommand] = []

    @property
    def source_beziers(self) -> Tuple[BezierCurve, ...]:
        """Tuple[BezierCurve, ...]: the Bezier segments of the source command (may be empty)."""
        return self._source_beziers

    @property
    def splits(self) -> Tuple[float, ...]:
        """Tuple[float, ...]: the ascending split parameters."""
        return tuple(self._splits)

    @property
    def commands(self) -> List[DrawCommand]:
        """The split commands if the command was split, else the source command alone."""
        if self._split_commands:
            return list(self._split_commands)
        return [self.source_command]

    def project(self, point: Sequence[float]) -> Optional[Projection]:
        """Closest point over all Bezier segments, None if there is no segment."""
        best: Optional[Projection] = None
        for bezier in self._source_beziers:
            projection = bezier.project(point)
            if best is None or projection.d < best.d:
                best = projection
        return best

    def split(self, t: float) -> bool:
        """Add the split parameter _t_ and rebuild the split commands.

        Returns:
            bool: False if there is no geometry to split

        Raises:
            UnsupportedOperationError: for elliptical arcs
        """
        if self.source_command.kind is DrawCommandKind.ELLIPTICAL_ARC:
            raise UnsupportedOperationError("Splitting elliptical arcs is not supported")
        if not self._source_beziers:
            return False
        bisect.insort_left(self._splits, t)
        self._rebuild_split_commands()
        return True

    def delete_split(self, index: int) -> None:
        """Remove the split parameter at _index_ and rebuild the split commands."""
        del self._splits[index]
        self._rebuild_split_commands()

    def split_index_of(self, command: DrawCommand) -> Optional[int]:
        """Index of the split parameter that ends _command_.

        The last split command is not deletable and returns None, same as
        commands not created by a split.
        """
        for i, split_command in enumerate(self._split_commands[:-1]):
            if split_command is command:
                return i
        return None

    def _rebuild_split_commands(self) -> None:
        self._split_commands = []
        if not self._splits:
            return
        # only arcs carry more than one segment and they are never split
        bezier = self._source_beziers[0]
        t_prev = 0.0
        for t_curr in self._splits + [1.0]:
            self._split_commands.append(self._bezier_to_draw_command(bezier.split(t_prev, t_curr)))
            t_prev = t_curr

    def _bezier_to_draw_command(self, bezier: BezierCurve) -> DrawCommand:
        """Create a command of the same variant as the source command from a sub-curve."""
        kind = self.source_command.kind
        if kind is DrawCommandKind.LINE:
            return LineCommand(bezier.start, bezier.end)
        if kind is DrawCommandKind.CLOSE_PATH:
            return ClosePathCommand(bezier.start, bezier.end)
        if kind is DrawCommandKind.QUADRATIC_CURVE:
            return QuadraticCurveCommand(bezier.start, bezier.cp1, bezier.end)
        if kind is DrawCommandKind.BEZIER_CURVE:
            return BezierCurveCommand(bezier.start, bezier.cp1, bezier.cp2, bezier.end)
        raise UnsupportedOperationError(f"Splitting {kind.name} commands is not supported")

    def __repr__(self):
        return f"DrawCommandWrapper({self.source_command!r}, splits={self._splits})"


###############################################################################
# Derivation pass
###############################################################################


def _degenerate_line(start: AvPoint, end: AvPoint) -> BezierCurve:
    """Cubic Bezier of a straight line with the control points on the end points."""
    return BezierCurve([start, start, end, end])


def init_internal_state(
    # pylint: disable=too-many-locals,too-many-branches,too-many-statements
    commands: Sequence[DrawCommand],
) -> Tuple[float, AvBox, List[DrawCommandWrapper]]:
    """Wrap and measure the draw commands in a single pass.

    Args:
        commands (Sequence[DrawCommand]): the flat command list

    Returns:
        Tuple of the total length, the bounding box (the empty sentinel if
        nothing contributed) and one wrapper per command.
    """
    length = 0.0
    bounds = AvBox.empty()
    wrappers: List[DrawCommandWrapper] = []

    first_point: Optional[AvPoint] = None
    current_point: AvPoint = (0.0, 0.0)

    for cmd in commands:
        kind = cmd.kind
        if kind is DrawCommandKind.MOVE:
            next_point = cmd.end
            first_point = next_point
            current_point = next_point
            bounds.expand(*next_point)
            wrappers.append(DrawCommandWrapper(cmd))

        elif kind is DrawCommandKind.LINE:
            next_point = cmd.end
            length += GeomMath.distance(current_point, next_point)
            wrappers.append(DrawCommandWrapper(cmd, _degenerate_line(current_point, next_point)))
            current_point = next_point
            bounds.expand(*next_point)

        elif kind is DrawCommandKind.CLOSE_PATH:
            if first_point is not None:
                # a split piece of a closing line ends before the first point
                close_to = cmd.end if cmd.end is not None else first_point
                length += GeomMath.distance(current_point, close_to)
                wrappers.append(DrawCommandWrapper(cmd, _degenerate_line(current_point, close_to)))
                current_point = close_to
                if close_to == first_point:
                    first_point = None
            else:
                wrappers.append(DrawCommandWrapper(cmd))

        elif kind is DrawCommandKind.BEZIER_CURVE:
            points = cmd.points
            bezier = BezierCurve([current_point, points[1], points[2], points[3]])
            wrappers.append(DrawCommandWrapper(cmd, bezier))
            length += bezier.length()
            current_point = points[3]
            bounds.expand_to_box(bezier.bbox())

        elif kind is DrawCommandKind.QUADRATIC_CURVE:
            points = cmd.points
            bezier = BezierCurve([current_point, points[1], points[2]])
            wrappers.append(DrawCommandWrapper(cmd, bezier))
            length += bezier.length()
            current_point = points[2]
            bounds.expand_to_box(bezier.bbox())

        elif kind is DrawCommandKind.ELLIPTICAL_ARC:
            x0, y0, rx, ry, rotation, large_arc_flag, sweep_flag, x1, y1 = cmd.args
            end_point = (x1, y1)

            if x0 == x1 and y0 == y1:
                # degenerate to point (0 length)
                wrappers.append(DrawCommandWrapper(cmd))
                current_point = end_point
                continue

            if rx == 0 or ry == 0:
                # degenerate to line
                length += GeomMath.distance((x0, y0), end_point)
                bounds.expand(x1, y1)
                wrappers.append(DrawCommandWrapper(cmd, _degenerate_line(current_point, end_point)))
                current_point = end_point
                continue

            arc_beziers: List[BezierCurve] = []
            for coords in arc_to_beziers(x0, y0, rx, ry, rotation, large_arc_flag, sweep_flag, x1, y1):
                bezier = BezierCurve([current_point, coords[2:4], coords[4:6], coords[6:8]])
                arc_beziers.append(bezier)
                length += bezier.length()
                current_point = (coords[6], coords[7])
                bounds.expand_to_box(bezier.bbox())
            wrappers.append(DrawCommandWrapper(cmd, *arc_beziers))
            current_point = end_point

        else:
            raise ValueError(f"Unsupported draw command: {cmd!r}")

    return length, bounds, wrappers


###############################################################################
# SvgPathData
###############################################################################
class SvgPathData:
    """Provides all of the information associated with a vector drawable's path data.

    The path string is parsed once. Each draw command is wrapped together with
    its Bezier geometry, the commands of all wrappers are grouped into
    sub-paths. Mutations (interpolate, split, delete split) rebuild the
    grouping right away so the wrapper view and the sub-path view never differ.
    """

    def __init__(self, path: str):
        self._path: str = path
        self._commands: List[SubPathCommand] = []
        self._length: float = 0.0
        self._bounds: AvBox = AvBox.empty()
        self._wrappers: List[DrawCommandWrapper] = []
        self._init_from_draw_commands(parse_commands(path))

    @classmethod
    def from_draw_commands(cls, commands: Sequence[DrawCommand]) -> SvgPathData:
        """Create path data from already parsed draw commands."""
        commands = copy.deepcopy(list(commands))
        path_data = cls.__new__(cls)
        path_data._path = commands_to_string(commands)
        path_data._commands = []
        path_data._init_from_draw_commands(commands)
        return path_data

    def _init_from_draw_commands(self, commands: Sequence[DrawCommand]) -> None:
        self._length, self._bounds, self._wrappers = init_internal_state(commands)
        self.rebuild()

    ###########################################################################
    # Read access
    ###########################################################################

    @property
    def id(self) -> str:
        """str: identity of the path, the last synchronized path string."""
        return self._path

    @property
    def commands(self) -> List[SubPathCommand]:
        """List[SubPathCommand]: the commands grouped into sub-paths."""
        return self._commands

    @property
    def draw_commands(self) -> List[DrawCommand]:
        """List[DrawCommand]: the flattened commands of all sub-paths."""
        return flatten_sub_path_commands(self._commands)

    @property
    def wrappers(self) -> Tuple[DrawCommandWrapper, ...]:
        """Tuple[DrawCommandWrapper, ...]: one wrapper per source command."""
        return tuple(self._wrappers)

    @property
    def length(self) -> float:
        """float: the path length."""
        return self._length

    @property
    def bounding_box(self) -> Optional[AvBox]:
        """Optional[AvBox]: the bounds of the path, None if no geometry contributed."""
        box = bounding_box_or_none(self._bounds)
        return box.copy() if box is not None else None

    def __str__(self):
        return self._path

    def __repr__(self):
        return f"SvgPathData({self._path!r})"

    def copy(self) -> SvgPathData:
        """Independent deep copy including the split state."""
        return copy.deepcopy(self)

    ###########################################################################
    # Rebuild
    ###########################################################################

    def rebuild(self, rebuild_path_string: bool = False) -> None:
        """Regroup the commands of all wrappers, optionally regenerate the path string."""
        draw_commands = [cmd for wrapper in self._wrappers for cmd in wrapper.commands]
        if rebuild_path_string:
            self._path = commands_to_string(draw_commands)
        self._commands = create_sub_path_commands(draw_commands)

    def sync_path_string(self) -> str:
        """Regenerate the path string from the current commands and return it."""
        self.rebuild(rebuild_path_string=True)
        return self._path

    ###########################################################################
    # Morphing
    ###########################################################################

    def is_morphable_with(self, other: SvgPathData) -> bool:
        """Returns true iff this path is morphable with the specified path.

        Sub-path count, command count per sub-path, command variant and number
        of points have to match. Arc arguments are not compared.
        """
        if len(self.commands) != len(other.commands):
            return False
        for sub_path, other_sub_path in zip(self.commands, other.commands):
            if len(sub_path) != len(other_sub_path):
                return False
            for cmd, other_cmd in zip(sub_path, other_sub_path):
                if cmd.kind is not other_cmd.kind or len(cmd.points) != len(other_cmd.points):
                    return False
        return True

    def interpolate(self, start: SvgPathData, end: SvgPathData, fraction: float, strict: bool = False) -> bool:
        """Interpolates this path between a start and end path using the specified fraction.

        The large-arc and sweep flags of arcs are not interpolated: they are
        taken from _start_ for a fraction of exactly 0 and from _end_ otherwise.
        The path string is not regenerated, use sync_path_string() for that.

        Args:
            start (SvgPathData): path at fraction 0
            end (SvgPathData): path at fraction 1
            fraction (float): interpolation fraction, not clamped
            strict (bool, optional): raise instead of returning False. Defaults to False.

        Returns:
            bool: True if applied, False if the paths are not morphable (nothing changed)

        Raises:
            ShapeMismatchError: if _strict_ and the paths are not morphable
        """
        if not self.is_morphable_with(start) or not self.is_morphable_with(end):
            if strict:
                raise ShapeMismatchError(f"Paths are not morphable: {start.id!r} -> {end.id!r} into {self.id!r}")
            logger.debug("interpolation rejected, paths are not morphable: %r -> %r", start.id, end.id)
            return False

        for i, sub_path in enumerate(self.commands):
            for j, cmd in enumerate(sub_path):
                start_cmd = start.commands[i][j]
                end_cmd = end.commands[i][j]
                if cmd.kind is DrawCommandKind.ELLIPTICAL_ARC:
                    for k in range(len(cmd.args)):
                        if k in ARC_FLAG_INDICES:
                            cmd.args[k] = start_cmd.args[k] if fraction == 0 else end_cmd.args[k]
                        else:
                            cmd.args[k] = GeomMath.lerp(start_cmd.args[k], end_cmd.args[k], fraction)
                else:
                    for k, (start_point, end_point) in enumerate(zip(start_cmd.points, end_cmd.points)):
                        if start_point is not None and end_point is not None:
                            cmd.set_point(k, GeomMath.lerp_point(start_point, end_point, fraction))

        # the wrappers are recreated from the interpolated command list
        self._init_from_draw_commands(self.draw_commands)
        return True

    def execute(self, renderer: AvPathRenderer) -> None:
        """Draws the path onto the provided renderer."""
        render_commands(self.commands, renderer)

    ###########################################################################
    # Projection and splitting
    ###########################################################################

    def project(self, point: Sequence[float]) -> Optional[ProjectionInfo]:
        """Calculates the point on this path that is closest to the specified point.

        Also returns a 'split' function that can be used to split the path at
        the returned projection point. On equal distances the earlier command wins.

        Returns:
            Optional[ProjectionInfo]: None if the path has no geometry
        """
        best_wrapper: Optional[DrawCommandWrapper] = None
        best_projection: Optional[Projection] = None
        for wrapper in self._wrappers:
            projection = wrapper.project(point)
            if projection is None:
                continue
            if best_projection is None or projection.d < best_projection.d:
                best_wrapper, best_projection = wrapper, projection
        if best_projection is None:
            return None

        wrapper, t = best_wrapper, best_projection.t
        return ProjectionInfo(projection=best_projection, split=lambda: self._split_wrapper(wrapper, t))

    def _split_wrapper(self, wrapper: DrawCommandWrapper, t: float) -> None:
        if not any(w is wrapper for w in self._wrappers):
            raise ValueError("The projection belongs to an outdated state of the path")
        if wrapper.split(t):
            logger.debug("split %r at t=%s", wrapper.source_command, t)
            self.rebuild(rebuild_path_string=True)

    def is_split_deletable(self, command: DrawCommand) -> bool:
        """True if _command_ is a split result whose split can be deleted."""
        return any(wrapper.split_index_of(command) is not None for wrapper in self._wrappers)

    def delete_split(self, command: DrawCommand) -> bool:
        """Delete the split that ends the split result _command_.

        The neighbouring split result is merged into it. The last split result
        of a command and commands not created by a split can not be deleted.

        Returns:
            bool: True if a split was deleted
        """
        for wrapper in self._wrappers:
            index = wrapper.split_index_of(command)
            if index is not None:
                wrapper.delete_split(index)
                logger.debug("deleted split %d of %r", index, wrapper.source_command)
                self.rebuild(rebuild_path_string=True)
                return True
        return False
