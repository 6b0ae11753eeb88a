"""Locate ``<path>`` elements and their ``d`` attributes in raw SVG text."""

from __future__ import annotations

import re
from dataclasses import dataclass

# Group 2 is the quote character, group 3 the path data
_PATH_D_RE = re.compile(
    r"""(<path\b[^>]*?\sd\s*=\s*)(["'])(.*?)\2""",
    re.IGNORECASE | re.DOTALL,
)


@dataclass(frozen=True)
class PathElement:
    """A path's ``d`` value and where it sits in the source document."""

    index: int
    data: str
    # Character offsets of the ``d`` value (without quotes) in the source
    span: tuple[int, int]


def find_paths(svg_text: str) -> list[PathElement]:
    """Return every ``<path d="...">`` in document order."""
    elements: list[PathElement] = []
    for i, match in enumerate(_PATH_D_RE.finditer(svg_text)):
        elements.append(PathElement(index=i, data=match.group(3), span=match.span(3)))
    return elements
