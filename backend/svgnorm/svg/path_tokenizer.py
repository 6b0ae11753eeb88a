"""Path tokenizer: split a path's ``d`` string into typed commands.

Grammar handled here:
- a command letter (upper case absolute, lower case relative),
- followed by numbers (optionally signed, optionally exponential) separated by
  whitespace and/or commas, or by nothing when the next number starts with a
  sign or a second decimal point (``1.5.5`` is ``1.5 .5``),
- arc flags are a single ``0``/``1`` character and may touch the next value
  (``a10 10 0 0120 20`` is ``a10 10 0 0 1 20 20``),
- extra operands repeat the command; after a moveto they continue as lineto.
"""

from __future__ import annotations

import enum
import math
import re
from dataclasses import dataclass

from svgnorm.errors import MalformedPathError

_NUMBER_RE = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")
_SEPARATORS = " \t\r\n\f,"


class CommandKind(str, enum.Enum):
    MOVE = "M"
    LINE = "L"
    HORIZONTAL = "H"
    VERTICAL = "V"
    CUBIC = "C"
    SMOOTH_CUBIC = "S"
    QUADRATIC = "Q"
    SMOOTH_QUADRATIC = "T"
    ARC = "A"
    CLOSE = "Z"


ARITY: dict[CommandKind, int] = {
    CommandKind.MOVE: 2,
    CommandKind.LINE: 2,
    CommandKind.HORIZONTAL: 1,
    CommandKind.VERTICAL: 1,
    CommandKind.CUBIC: 6,
    CommandKind.SMOOTH_CUBIC: 4,
    CommandKind.QUADRATIC: 4,
    CommandKind.SMOOTH_QUADRATIC: 2,
    CommandKind.ARC: 7,
    CommandKind.CLOSE: 0,
}

# Operand indexes of the large-arc and sweep flags within one arc group
_ARC_FLAG_SLOTS = (3, 4)


@dataclass(frozen=True)
class PathCommand:
    """One drawing instruction with its fixed-arity operand list."""

    kind: CommandKind
    relative: bool
    operands: tuple[float, ...] = ()

    @property
    def letter(self) -> str:
        return self.kind.value.lower() if self.relative else self.kind.value


def tokenize(path_data: str) -> list[PathCommand]:
    """Parse ``path_data`` into commands, one entry per operand group.

    Raises MalformedPathError when the string does not follow the grammar or a
    command's operand count is not a positive multiple of its arity.
    """
    commands: list[PathCommand] = []
    pos = _skip_separators(path_data, 0)
    end = len(path_data)

    while pos < end:
        letter = path_data[pos]
        try:
            kind = CommandKind(letter.upper())
        except ValueError:
            raise MalformedPathError(
                f"Expected a command letter at {pos}, found {letter!r}",
                path_data=path_data,
                position=pos,
            ) from None
        relative = letter.islower()
        start = pos
        operands, pos = _read_operands(path_data, pos + 1, kind)
        commands.extend(_group(path_data, start, kind, relative, operands))

    return commands


def _read_operands(path_data: str, pos: int, kind: CommandKind) -> tuple[list[float], int]:
    operands: list[float] = []
    end = len(path_data)
    while True:
        pos = _skip_separators(path_data, pos)
        if pos >= end or path_data[pos].isalpha():
            return operands, pos
        if kind is CommandKind.ARC and len(operands) % 7 in _ARC_FLAG_SLOTS:
            flag = path_data[pos]
            if flag not in "01":
                raise MalformedPathError(
                    f"Arc flag must be 0 or 1 at {pos}, found {flag!r}",
                    path_data=path_data,
                    position=pos,
                )
            operands.append(float(flag))
            pos += 1
            continue
        match = _NUMBER_RE.match(path_data, pos)
        if match is None:
            raise MalformedPathError(
                f"Invalid number at {pos}: {path_data[pos:pos + 10]!r}",
                path_data=path_data,
                position=pos,
            )
        value = float(match.group(0))
        if not math.isfinite(value):
            raise MalformedPathError(
                f"Non-finite number at {pos}: {match.group(0)!r}",
                path_data=path_data,
                position=pos,
            )
        operands.append(value)
        pos = match.end()


def _group(
    path_data: str,
    position: int,
    kind: CommandKind,
    relative: bool,
    operands: list[float],
) -> list[PathCommand]:
    arity = ARITY[kind]
    if arity == 0:
        if operands:
            raise MalformedPathError(
                f"{kind.value} takes no operands, got {len(operands)}",
                path_data=path_data,
                position=position,
            )
        return [PathCommand(kind, relative)]

    if not operands or len(operands) % arity:
        raise MalformedPathError(
            f"{kind.value} expects a multiple of {arity} operands, got {len(operands)}",
            path_data=path_data,
            position=position,
        )

    grouped: list[PathCommand] = []
    for i in range(0, len(operands), arity):
        group_kind = kind
        if kind is CommandKind.MOVE and i > 0:
            group_kind = CommandKind.LINE
        grouped.append(PathCommand(group_kind, relative, tuple(operands[i:i + arity])))
    return grouped


def _skip_separators(path_data: str, pos: int) -> int:
    end = len(path_data)
    while pos < end and path_data[pos] in _SEPARATORS:
        pos += 1
    return pos
