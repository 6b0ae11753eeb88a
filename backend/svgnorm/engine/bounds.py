"""Drawn-geometry extent of normalized paths, measured with svgpathtools."""

from __future__ import annotations

import logging
from collections.abc import Iterable

import numpy as np
from svgpathtools import parse_path

logger = logging.getLogger(__name__)


def path_bounds(path_data: str) -> tuple[float, float, float, float] | None:
    """Return (xmin, ymin, xmax, ymax) of the drawn path, or None if nothing is drawn."""
    try:
        path = parse_path(path_data)
        if len(path) == 0:
            return None
        xmin, xmax, ymin, ymax = path.bbox()
    except Exception as e:
        logger.warning("svgpathtools could not measure path: %s", e)
        return None
    return (float(xmin), float(ymin), float(xmax), float(ymax))


def union_bounds(
    boxes: Iterable[tuple[float, float, float, float] | None],
) -> tuple[float, float, float, float] | None:
    """Smallest box covering every non-empty box."""
    present = [b for b in boxes if b is not None]
    if not present:
        return None
    arr = np.array(present, dtype=np.float64)
    return (
        float(arr[:, 0].min()),
        float(arr[:, 1].min()),
        float(arr[:, 2].max()),
        float(arr[:, 3].max()),
    )


def fits_square(
    box: tuple[float, float, float, float],
    size: float,
    tolerance: float,
) -> bool:
    """True if ``box`` lies within ``[0, size]`` on both axes, give or take ``tolerance``."""
    xmin, ymin, xmax, ymax = box
    return xmin >= -tolerance and ymin >= -tolerance and xmax <= size + tolerance and ymax <= size + tolerance
