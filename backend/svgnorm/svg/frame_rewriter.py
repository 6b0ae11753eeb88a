"""Splice rewritten path data and a canonical square frame into SVG text."""

from __future__ import annotations

import logging
import re
from collections.abc import Sequence

from svgnorm.errors import NoFrameError
from svgnorm.svg.parser import PathElement
from svgnorm.svg.serializer import format_size

logger = logging.getLogger(__name__)

_ROOT_TAG_RE = re.compile(r"<svg\b([^>]*?)(\s*/?)>", re.IGNORECASE | re.DOTALL)
_FRAME_ATTR_RE = re.compile(
    r"""\s(?:width|height|viewBox)\s*=\s*(["']).*?\1""",
    re.IGNORECASE | re.DOTALL,
)


def rewrite_document(
    document: str,
    paths: Sequence[PathElement],
    replacements: Sequence[str | None],
    target_size: float,
) -> str:
    """Replace path data and the root frame, leaving all other text byte-identical.

    ``replacements[i]`` is the new data for ``paths[i]``; ``None`` keeps the
    original string (used for paths that failed to tokenize).
    """
    if len(paths) != len(replacements):
        raise ValueError(f"Got {len(replacements)} replacements for {len(paths)} paths")

    root = _ROOT_TAG_RE.search(document)
    if root is None:
        raise NoFrameError("No <svg> root element found")

    # Splices as (start, end, text); the root tag is one of them
    splices: list[tuple[int, int, str]] = [(root.start(), root.end(), _rewrite_root_tag(root, target_size))]
    for element, new_data in zip(paths, replacements):
        if new_data is None or new_data == element.data:
            continue
        start, end = element.span
        splices.append((start, end, new_data))

    # Apply from the back so earlier offsets stay valid
    splices.sort(key=lambda s: s[0], reverse=True)
    result = document
    for start, end, text in splices:
        result = result[:start] + text + result[end:]
    return result


def _rewrite_root_tag(root: re.Match[str], target_size: float) -> str:
    attrs = _FRAME_ATTR_RE.sub("", root.group(1))
    size = format_size(target_size)
    closing = "/>" if root.group(2).strip() == "/" else ">"
    logger.debug("Root frame rewritten to %s", size)
    return f'<svg{attrs} width="{size}" height="{size}" viewBox="0 0 {size} {size}"{closing}'
