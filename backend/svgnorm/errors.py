"""Error kinds raised by the normalization pipeline."""

from __future__ import annotations


class NormalizeError(Exception):
    """Base class for every failure the pipeline reports."""

    kind = "NormalizeError"


class NoFrameError(NormalizeError):
    """The original coordinate frame of an icon could not be determined."""

    kind = "NoFrame"


class MalformedPathError(NormalizeError):
    """A path's drawing instructions could not be tokenized or written back."""

    kind = "MalformedPath"

    def __init__(self, message: str, path_data: str = "", position: int = -1) -> None:
        super().__init__(message)
        self.path_data = path_data
        self.position = position


class InvalidScaleError(NormalizeError):
    """Target size or scale factor is zero, negative or non-finite."""

    kind = "InvalidScale"
