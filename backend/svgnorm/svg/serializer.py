"""Write path commands back to a compact, deterministic ``d`` string."""

from __future__ import annotations

import math

from svgnorm.errors import MalformedPathError
from svgnorm.svg.path_tokenizer import CommandKind, PathCommand


def format_number(value: float, precision: int = 3, compact: bool = True) -> str:
    """Round to ``precision`` digits and strip redundant characters.

    ``compact`` drops the leading zero of a fraction (``0.5`` -> ``.5``).
    """
    text = f"{round(value, precision):.{precision}f}"
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    if text in ("-0", ""):
        text = "0"
    if compact:
        if text.startswith("0."):
            text = text[1:]
        elif text.startswith("-0."):
            text = "-" + text[2:]
    return text


def format_size(value: float) -> str:
    """Shortest text that reads back as ``value``; whole numbers drop the ``.0``."""
    value = float(value)
    if value.is_integer() and abs(value) < 1e16:
        return str(int(value))
    return repr(value)


def round_commands(commands: list[PathCommand], precision: int = 3) -> list[PathCommand]:
    """Round every operand to ``precision`` digits.

    The rounding error of the current point is carried into the next relative
    endpoint, so a long run of relative segments ends where the exact one does.
    A closepath returns to the remainder of its subpath's start.
    """
    carry_x = carry_y = 0.0
    start_x = start_y = 0.0
    rounded: list[PathCommand] = []
    for cmd in commands:
        kind = cmd.kind
        if kind is CommandKind.CLOSE:
            carry_x, carry_y = start_x, start_y
            rounded.append(cmd)
            continue

        values = list(cmd.operands)
        if kind is CommandKind.HORIZONTAL:
            if cmd.relative:
                values[0] += carry_x
            exact = values[0]
            values[0] = round(exact, precision)
            carry_x = exact - values[0]
        elif kind is CommandKind.VERTICAL:
            if cmd.relative:
                values[0] += carry_y
            exact = values[0]
            values[0] = round(exact, precision)
            carry_y = exact - values[0]
        else:
            # Control points are relative to the rounded start, only the endpoint moves
            if cmd.relative:
                values[-2] += carry_x
                values[-1] += carry_y
            end_x, end_y = values[-2], values[-1]
            values = [round(v, precision) for v in values]
            carry_x, carry_y = end_x - values[-2], end_y - values[-1]

        if kind is CommandKind.MOVE:
            start_x, start_y = carry_x, carry_y
        rounded.append(PathCommand(kind, cmd.relative, tuple(values)))
    return rounded


def serialize_path(commands: list[PathCommand], precision: int = 3) -> str:
    """Render commands as ``<letter><operands>`` runs with minimal separators.

    Raises MalformedPathError when an operand is not a finite number.
    """
    if precision < 0:
        raise ValueError(f"precision must be >= 0, got {precision}")
    for index, cmd in enumerate(commands):
        if not all(math.isfinite(v) for v in cmd.operands):
            raise MalformedPathError(f"Command {index + 1} ({cmd.letter}) has a non-finite operand")

    parts: list[str] = []
    for cmd in round_commands(commands, precision):
        parts.append(cmd.letter)
        previous = ""
        for value in cmd.operands:
            text = format_number(value, precision)
            if previous and _needs_separator(previous, text):
                parts.append(" ")
            parts.append(text)
            previous = text
    return "".join(parts)


def _needs_separator(previous: str, text: str) -> bool:
    if text.startswith("-"):
        return False
    # ".5" only starts a new number if the previous one already has a decimal point
    if text.startswith(".") and "." in previous:
        return False
    return True
