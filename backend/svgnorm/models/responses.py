"""API response models."""

from __future__ import annotations

from pydantic import BaseModel, Field

from svgnorm.models.items import ProcessedItem


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str = "0.1.0"
    target_size: float = 24.0


class FrameModel(BaseModel):
    origin_x: float
    origin_y: float
    width: float
    height: float


class NormalizeResponse(BaseModel):
    svg: str
    frame: FrameModel
    warnings: list[str] = Field(default_factory=list)
    # (xmin, ymin, xmax, ymax) of the drawn geometry after normalization
    bounds: tuple[float, float, float, float] | None = None


class BatchResponse(BaseModel):
    target_size: float
    archive_name: str
    items: list[ProcessedItem] = Field(default_factory=list)
    success: int = 0
    errors: int = 0
