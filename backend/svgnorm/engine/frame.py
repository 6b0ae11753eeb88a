"""Frame inference: recover the coordinate window an icon was drawn against."""

from __future__ import annotations

import logging
import math
import re
from dataclasses import dataclass

from svgnorm.errors import NoFrameError

logger = logging.getLogger(__name__)

_ROOT_TAG_RE = re.compile(r"<svg\b[^>]*>", re.IGNORECASE)
_VIEWBOX_RE = re.compile(r"""\sviewBox\s*=\s*(["'])(.*?)\1""", re.IGNORECASE | re.DOTALL)
_WIDTH_RE = re.compile(r"""\swidth\s*=\s*(["'])(.*?)\1""", re.IGNORECASE)
_HEIGHT_RE = re.compile(r"""\sheight\s*=\s*(["'])(.*?)\1""", re.IGNORECASE)
# A length is a number with an optional absolute unit. Percentages are not a frame.
_LENGTH_RE = re.compile(
    r"^\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)\s*(px|pt|pc|mm|cm|in|em|ex)?\s*$",
    re.IGNORECASE,
)


@dataclass(frozen=True)
class Frame:
    """Origin and size of an icon's coordinate window."""

    origin_x: float
    origin_y: float
    width: float
    height: float

    @property
    def has_origin(self) -> bool:
        return self.origin_x != 0 or self.origin_y != 0


def find_root_tag(document: str) -> re.Match[str] | None:
    """Locate the first ``<svg ...>`` opening tag."""
    return _ROOT_TAG_RE.search(document)


def infer_frame(document: str) -> Frame:
    """Read the frame from the root element's viewBox, else its width/height.

    Raises NoFrameError when neither declaration yields a positive size.
    """
    root = find_root_tag(document)
    if root is None:
        raise NoFrameError("No <svg> root element found")
    tag = root.group(0)

    frame = _frame_from_viewbox(tag)
    if frame is not None:
        return frame

    frame = _frame_from_size(tag)
    if frame is not None:
        return frame

    raise NoFrameError("Could not detect original dimensions")


def _frame_from_viewbox(tag: str) -> Frame | None:
    match = _VIEWBOX_RE.search(tag)
    if not match:
        return None
    parts = [p for p in re.split(r"[\s,]+", match.group(2).strip()) if p]
    if len(parts) != 4:
        logger.debug("Ignoring viewBox with %d values: %r", len(parts), match.group(2))
        return None
    try:
        values = [float(p) for p in parts]
    except ValueError:
        logger.debug("Ignoring non-numeric viewBox %r", match.group(2))
        return None
    if not all(math.isfinite(v) for v in values):
        return None
    min_x, min_y, width, height = values
    if width <= 0 or height <= 0:
        logger.debug("Ignoring degenerate viewBox %r", match.group(2))
        return None
    return Frame(min_x, min_y, width, height)


def _frame_from_size(tag: str) -> Frame | None:
    width = _parse_length(_WIDTH_RE.search(tag))
    height = _parse_length(_HEIGHT_RE.search(tag))
    if width is None or height is None:
        return None
    return Frame(0.0, 0.0, width, height)


def _parse_length(match: re.Match[str] | None) -> float | None:
    if match is None:
        return None
    length = _LENGTH_RE.match(match.group(2))
    if length is None:
        return None
    value = float(length.group(1))
    if not math.isfinite(value) or value <= 0:
        return None
    return value
