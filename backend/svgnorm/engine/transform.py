"""Transform engine: translate-then-scale applied per path command.

Absolute coordinates map as ``x' = (x + dx) * sx`` and ``y' = (y + dy) * sy``.
Relative coordinates and arc radii are scaled only. Arc rotation and flags pass
through untouched, so under a non-uniform scale the rotation of a rotated
ellipse is an approximation; re-fitting the ellipse is out of scope.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from svgnorm.errors import InvalidScaleError
from svgnorm.engine.frame import Frame
from svgnorm.svg.path_tokenizer import CommandKind, PathCommand


@dataclass(frozen=True)
class Transform:
    dx: float = 0.0
    dy: float = 0.0
    sx: float = 1.0
    sy: float = 1.0

    def __post_init__(self) -> None:
        for name in ("dx", "dy"):
            if not math.isfinite(getattr(self, name)):
                raise InvalidScaleError(f"Translation {name} must be finite")
        for name in ("sx", "sy"):
            value = getattr(self, name)
            if not math.isfinite(value) or value == 0:
                raise InvalidScaleError(f"Scale {name} must be finite and non-zero, got {value}")

    @classmethod
    def from_frame(cls, frame: Frame, target_size: float) -> Transform:
        """Map ``frame`` onto the square ``[0, target_size]``."""
        validate_target_size(target_size)
        return cls(
            dx=-frame.origin_x,
            dy=-frame.origin_y,
            sx=target_size / frame.width,
            sy=target_size / frame.height,
        )

    @property
    def is_identity(self) -> bool:
        return self.dx == 0 and self.dy == 0 and self.sx == 1 and self.sy == 1

    def point(self, x: float, y: float, relative: bool = False) -> tuple[float, float]:
        if relative:
            return x * self.sx, y * self.sy
        return (x + self.dx) * self.sx, (y + self.dy) * self.sy


def validate_target_size(target_size: float) -> None:
    """Raise InvalidScaleError unless ``target_size`` is a positive finite number."""
    if isinstance(target_size, bool) or not isinstance(target_size, (int, float)):
        raise InvalidScaleError(f"Target size must be a number, got {target_size!r}")
    if not math.isfinite(target_size) or target_size <= 0:
        raise InvalidScaleError(f"Target size must be positive and finite, got {target_size}")


def apply_transform(commands: list[PathCommand], transform: Transform) -> list[PathCommand]:
    """Return new commands with every coordinate operand mapped through ``transform``."""
    result: list[PathCommand] = []
    for index, cmd in enumerate(commands):
        # A leading relative moveto is resolved against (0, 0), i.e. absolute
        relative = cmd.relative and not (index == 0 and cmd.kind is CommandKind.MOVE)
        result.append(PathCommand(cmd.kind, cmd.relative, _map_operands(cmd, relative, transform)))
    return result


def _map_operands(cmd: PathCommand, relative: bool, t: Transform) -> tuple[float, ...]:
    ops = cmd.operands
    kind = cmd.kind

    if kind is CommandKind.CLOSE:
        return ops

    if kind is CommandKind.HORIZONTAL:
        x = ops[0] * t.sx if relative else (ops[0] + t.dx) * t.sx
        return (x,)

    if kind is CommandKind.VERTICAL:
        y = ops[0] * t.sy if relative else (ops[0] + t.dy) * t.sy
        return (y,)

    if kind is CommandKind.ARC:
        rx, ry, rotation, large_arc, sweep, x, y = ops
        ex, ey = t.point(x, y, relative)
        return (abs(rx * t.sx), abs(ry * t.sy), rotation, large_arc, sweep, ex, ey)

    mapped: list[float] = []
    for i in range(0, len(ops), 2):
        mapped.extend(t.point(ops[i], ops[i + 1], relative))
    return tuple(mapped)
