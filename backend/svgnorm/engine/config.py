"""Pipeline configuration."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class PipelineConfig:
    """Controls rounding and post-checks of a normalization pass."""

    # Decimal digits kept by the serializer
    precision: int = 3

    # Measure drawn geometry and warn when it leaves the target square
    check_bounds: bool = True
