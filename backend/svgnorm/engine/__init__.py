"""Geometry pipeline for SVG icon normalization."""

from svgnorm.errors import InvalidScaleError, MalformedPathError, NoFrameError, NormalizeError
from svgnorm.engine.frame import Frame, infer_frame
from svgnorm.engine.pipeline import NormalizeResult, Pipeline, normalize
from svgnorm.engine.transform import Transform, apply_transform

__all__ = [
    "Frame",
    "infer_frame",
    "Transform",
    "apply_transform",
    "Pipeline",
    "NormalizeResult",
    "normalize",
    "NormalizeError",
    "NoFrameError",
    "MalformedPathError",
    "InvalidScaleError",
]
