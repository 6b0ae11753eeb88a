"""NormalizeContext: the mutable state for one document flowing through the pipeline."""

from __future__ import annotations

from dataclasses import dataclass, field

from svgnorm.engine.frame import Frame
from svgnorm.engine.transform import Transform
from svgnorm.svg.parser import PathElement


@dataclass
class PathResult:
    """Outcome for a single ``<path>``."""

    element: PathElement
    # Serialized transformed data; None when the path was left untouched
    data: str | None = None
    command_count: int = 0
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass
class NormalizeContext:
    """Shared state for one normalization pass over one document."""

    svg_raw: str
    target_size: float
    precision: int = 3

    frame: Frame | None = None
    transform: Transform | None = None
    paths: list[PathResult] = field(default_factory=list)
    bounds: tuple[float, float, float, float] | None = None
    # Non-fatal problems, one human-readable line each
    warnings: list[str] = field(default_factory=list)
    output: str = ""

    @property
    def malformed_count(self) -> int:
        return sum(1 for p in self.paths if not p.ok)
