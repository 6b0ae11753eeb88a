"""Normalization pipeline: frame -> per-path tokenize/transform/serialize -> rewrite."""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field

from svgnorm.engine.bounds import fits_square, path_bounds, union_bounds
from svgnorm.engine.config import PipelineConfig
from svgnorm.engine.context import NormalizeContext, PathResult
from svgnorm.errors import MalformedPathError
from svgnorm.engine.frame import Frame, infer_frame
from svgnorm.engine.transform import Transform, apply_transform, validate_target_size
from svgnorm.svg.frame_rewriter import rewrite_document
from svgnorm.svg.parser import PathElement, find_paths
from svgnorm.svg.path_tokenizer import tokenize
from svgnorm.svg.serializer import format_number, serialize_path

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class NormalizeResult:
    content: str
    frame: Frame
    warnings: list[str] = field(default_factory=list)
    bounds: tuple[float, float, float, float] | None = None


class Pipeline:
    """Runs one document through the geometry pipeline."""

    def __init__(self, config: PipelineConfig | None = None) -> None:
        self.config = config or PipelineConfig()

    def run(self, ctx: NormalizeContext) -> NormalizeContext:
        """Normalize ``ctx.svg_raw`` in place.

        Raises InvalidScaleError or NoFrameError; malformed paths are recorded
        as warnings and left untouched.
        """
        start = time.perf_counter()
        validate_target_size(ctx.target_size)

        ctx.frame = infer_frame(ctx.svg_raw)
        ctx.transform = Transform.from_frame(ctx.frame, ctx.target_size)
        logger.debug("Frame %s -> transform %s", ctx.frame, ctx.transform)

        for element in find_paths(ctx.svg_raw):
            ctx.paths.append(self._transform_path(element, ctx))

        if self.config.check_bounds:
            self._check_bounds(ctx)

        ctx.output = rewrite_document(
            ctx.svg_raw,
            [p.element for p in ctx.paths],
            [p.data for p in ctx.paths],
            ctx.target_size,
        )

        total = (time.perf_counter() - start) * 1000
        logger.info(
            "Normalized %d paths (%d malformed, %d warnings) in %.1fms",
            len(ctx.paths),
            ctx.malformed_count,
            len(ctx.warnings),
            total,
        )
        return ctx

    def _transform_path(self, element: PathElement, ctx: NormalizeContext) -> PathResult:
        t0 = time.perf_counter()
        try:
            commands = tokenize(element.data)
            data = serialize_path(apply_transform(commands, ctx.transform), ctx.precision)
        except MalformedPathError as e:
            message = f"path {element.index + 1}: {e}; left unchanged"
            logger.warning("Malformed %s", message)
            ctx.warnings.append(message)
            return PathResult(element=element, error=str(e))

        logger.debug(
            "  path %d: %d commands in %.2fms",
            element.index + 1,
            len(commands),
            (time.perf_counter() - t0) * 1000,
        )
        return PathResult(element=element, data=data, command_count=len(commands))

    def _check_bounds(self, ctx: NormalizeContext) -> None:
        ctx.bounds = union_bounds(path_bounds(p.data) for p in ctx.paths if p.ok and p.data)
        if ctx.bounds is None:
            return
        tolerance = 10.0 ** -ctx.precision
        if not fits_square(ctx.bounds, ctx.target_size, tolerance):
            box = " ".join(format_number(v, ctx.precision, compact=False) for v in ctx.bounds)
            message = f"geometry extends outside the target frame (bounds {box})"
            logger.warning(message)
            ctx.warnings.append(message)


def create_pipeline(config: PipelineConfig | None = None) -> Pipeline:
    """Factory function for creating a pipeline instance."""
    return Pipeline(config=config)


def normalize(content: str, target_size: float, precision: int | None = None) -> NormalizeResult:
    """Normalize one icon document to a ``target_size`` square.

    Raises InvalidScaleError for a bad target size and NoFrameError when the
    original dimensions cannot be inferred.
    """
    config = PipelineConfig() if precision is None else PipelineConfig(precision=precision)
    ctx = NormalizeContext(svg_raw=content, target_size=target_size, precision=config.precision)
    ctx = create_pipeline(config).run(ctx)
    return NormalizeResult(
        content=ctx.output,
        frame=ctx.frame,
        warnings=list(ctx.warnings),
        bounds=ctx.bounds,
    )
