"""Conversion between SVG path strings and draw commands"""

from __future__ import annotations

import re
from typing import ClassVar, List, Optional, Sequence

from avmorph.commands import (
    BezierCurveCommand,
    ClosePathCommand,
    DrawCommand,
    EllipticalArcCommand,
    LineCommand,
    MoveCommand,
    QuadraticCurveCommand,
)
from avmorph.common import AvPoint, DrawCommandKind, PathParseError
from avmorph.consts import SVG_NUMBER_PRECISION


###############################################################################
# AvPathTokenizer
###############################################################################
class AvPathTokenizer:
    """
    Sequential reader for the tokens of a SVG path string.
    Commands (command : number of values : command-character):
        MoveTo:           2: Mm
        LineTo:           2: Ll   1: Hh(x)   1:Vv(y)
        CubicBezier:      6: Cc   4: Ss
        QuadraticBezier:  4: Qq   2: Tt
        ArcCurve:         7: Aa
        ClosePath:        0: Zz
    """

    # Command letters:
    SVG_CMDS: ClassVar[str] = "MmLlHhVvCcSsQqTtAaZz"
    # Definition of a number:
    SVG_ARGS: ClassVar[str] = r"[-+]?(?:[0-9]*\.[0-9]+|[0-9]+\.?)(?:[eE][-+]?[0-9]+)?"

    _command_re: ClassVar[re.Pattern] = re.compile(f"[{SVG_CMDS}]")
    _number_re: ClassVar[re.Pattern] = re.compile(SVG_ARGS)
    # arc flags are single digits and may be written without separator ("a1 1 0 01 5 5")
    _flag_re: ClassVar[re.Pattern] = re.compile(r"[01]")
    _separator_re: ClassVar[re.Pattern] = re.compile(r"[\s,]*")

    def __init__(self, path_string: str):
        self._text = path_string
        self._pos = 0

    def _skip_separators(self) -> None:
        self._pos = self._separator_re.match(self._text, self._pos).end()

    def at_end(self) -> bool:
        """True if only separators are left."""
        self._skip_separators()
        return self._pos >= len(self._text)

    def at_number(self) -> bool:
        """True if the next token is a number."""
        self._skip_separators()
        return self._number_re.match(self._text, self._pos) is not None

    def next_command(self) -> str:
        """Read the next command letter."""
        self._skip_separators()
        match = self._command_re.match(self._text, self._pos)
        if match is None:
            raise PathParseError(f"Expected a path command at position {self._pos} in {self._text!r}")
        self._pos = match.end()
        return match.group()

    def next_number(self) -> float:
        """Read the next number."""
        self._skip_separators()
        match = self._number_re.match(self._text, self._pos)
        if match is None:
            raise PathParseError(f"Expected a number at position {self._pos} in {self._text!r}")
        self._pos = match.end()
        return float(match.group())

    def next_flag(self) -> float:
        """Read the next arc flag (0 or 1)."""
        self._skip_separators()
        match = self._flag_re.match(self._text, self._pos)
        if match is None:
            raise PathParseError(f"Expected an arc flag at position {self._pos} in {self._text!r}")
        self._pos = match.end()
        return float(match.group())

    def next_point(self, relative_to: Optional[AvPoint] = None) -> AvPoint:
        """Read the next (x, y) pair, optionally relative to a point."""
        x = self.next_number()
        y = self.next_number()
        if relative_to is not None:
            return (relative_to[0] + x, relative_to[1] + y)
        return (x, y)


###############################################################################
# Parsing
###############################################################################


def _reflect(control: Optional[AvPoint], around: AvPoint) -> AvPoint:
    if control is None:
        return around
    return (2.0 * around[0] - control[0], 2.0 * around[1] - control[1])


def parse_commands(path_string: str) -> List[DrawCommand]:
    # pylint: disable=too-many-branches,too-many-statements
    """Parse the given SVG _path_string_ into a list of absolute draw commands.

    Relative commands are converted to absolute ones, H/V become lines,
    S/T become curves with the reflected control point and implicit
    repetitions are expanded (pairs following a Move are lines).

    Args:
        path_string (str): SVG path string

    Returns:
        List[DrawCommand]: the draw commands in order

    Raises:
        PathParseError: if the string contains unexpected characters or arguments
    """
    tokenizer = AvPathTokenizer(path_string)
    commands: List[DrawCommand] = []

    current: AvPoint = (0.0, 0.0)
    subpath_start: Optional[AvPoint] = None
    last_cubic_control: Optional[AvPoint] = None
    last_quadratic_control: Optional[AvPoint] = None

    while not tokenizer.at_end():
        letter = tokenizer.next_command()
        relative = letter.islower()
        command_letter = letter.upper()

        if command_letter == "Z":
            close_to = subpath_start if subpath_start is not None else current
            commands.append(ClosePathCommand(current, close_to))
            current = close_to
            last_cubic_control = last_quadratic_control = None
            continue

        first_group = True
        while first_group or tokenizer.at_number():
            base = current if relative else None
            cubic_control: Optional[AvPoint] = None
            quadratic_control: Optional[AvPoint] = None

            if command_letter == "M" and first_group:
                end = tokenizer.next_point(base)
                previous = current if commands else None
                commands.append(MoveCommand(previous, end))
                subpath_start = end
            elif command_letter in "ML":
                end = tokenizer.next_point(base)
                commands.append(LineCommand(current, end))
            elif command_letter == "H":
                x = tokenizer.next_number()
                end = (current[0] + x if relative else x, current[1])
                commands.append(LineCommand(current, end))
            elif command_letter == "V":
                y = tokenizer.next_number()
                end = (current[0], current[1] + y if relative else y)
                commands.append(LineCommand(current, end))
            elif command_letter == "C":
                cp1 = tokenizer.next_point(base)
                cp2 = tokenizer.next_point(base)
                end = tokenizer.next_point(base)
                commands.append(BezierCurveCommand(current, cp1, cp2, end))
                cubic_control = cp2
            elif command_letter == "S":
                cp1 = _reflect(last_cubic_control, current)
                cp2 = tokenizer.next_point(base)
                end = tokenizer.next_point(base)
                commands.append(BezierCurveCommand(current, cp1, cp2, end))
                cubic_control = cp2
            elif command_letter == "Q":
                cp = tokenizer.next_point(base)
                end = tokenizer.next_point(base)
                commands.append(QuadraticCurveCommand(current, cp, end))
                quadratic_control = cp
            elif command_letter == "T":
                cp = _reflect(last_quadratic_control, current)
                end = tokenizer.next_point(base)
                commands.append(QuadraticCurveCommand(current, cp, end))
                quadratic_control = cp
            else:  # "A"
                rx = tokenizer.next_number()
                ry = tokenizer.next_number()
                rotation = tokenizer.next_number()
                large_arc_flag = tokenizer.next_flag()
                sweep_flag = tokenizer.next_flag()
                end = tokenizer.next_point(base)
                commands.append(
                    EllipticalArcCommand(
                        current[0], current[1], rx, ry, rotation, large_arc_flag, sweep_flag, end[0], end[1]
                    )
                )

            current = end
            last_cubic_control = cubic_control
            last_quadratic_control = quadratic_control
            first_group = False

    return commands


###############################################################################
# Serializing
###############################################################################


def format_number(value: float, precision: int = SVG_NUMBER_PRECISION) -> str:
    """Format a number for a path string ("-0" is written as "0")."""
    text = f"{value:.{precision}g}"
    return "0" if text == "-0" else text


def commands_to_string(commands: Sequence[DrawCommand], precision: int = SVG_NUMBER_PRECISION) -> str:
    """Serialize draw commands into an absolute SVG path string.

    Args:
        commands (Sequence[DrawCommand]): the draw commands in order
        precision (int, optional): significant digits per number. Defaults to SVG_NUMBER_PRECISION.

    Returns:
        str: the path string, e.g. "M 0 0 L 10 0 Z"
    """
    parts: List[str] = []
    for cmd in commands:
        kind = cmd.kind
        if kind is DrawCommandKind.CLOSE_PATH:
            parts.append(kind.value)
            continue
        if kind is DrawCommandKind.ELLIPTICAL_ARC:
            values = cmd.args[2:]
        else:
            values = [v for point in cmd.points[1:] for v in point]
        parts.append(" ".join([kind.value] + [format_number(v, precision) for v in values]))
    return " ".join(parts)
