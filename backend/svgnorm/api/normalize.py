"""POST /api/normalize: normalize a single SVG document."""

from __future__ import annotations

from fastapi import APIRouter, HTTPException

from svgnorm.config import settings
from svgnorm.errors import InvalidScaleError, NoFrameError
from svgnorm.engine.pipeline import normalize
from svgnorm.models.requests import NormalizeRequest
from svgnorm.models.responses import FrameModel, NormalizeResponse

router = APIRouter()


@router.post("/normalize", response_model=NormalizeResponse)
async def normalize_svg(req: NormalizeRequest) -> NormalizeResponse:
    target_size = req.target_size if req.target_size is not None else settings.default_target_size
    precision = req.precision if req.precision is not None else settings.precision

    try:
        result = normalize(req.svg, target_size, precision)
    except (NoFrameError, InvalidScaleError) as e:
        raise HTTPException(status_code=422, detail={"kind": e.kind, "message": str(e)}) from e

    frame = result.frame
    return NormalizeResponse(
        svg=result.content,
        frame=FrameModel(
            origin_x=frame.origin_x,
            origin_y=frame.origin_y,
            width=frame.width,
            height=frame.height,
        ),
        warnings=result.warnings,
        bounds=result.bounds,
    )
