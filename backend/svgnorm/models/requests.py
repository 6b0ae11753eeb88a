"""API request models."""

from __future__ import annotations

from pydantic import BaseModel, Field


class NormalizeRequest(BaseModel):
    svg: str = Field(..., description="Raw SVG code")
    target_size: float | None = Field(default=None, gt=0, description="Target square size in px")
    precision: int | None = Field(default=None, ge=0, le=12, description="Decimal digits kept")


class UploadedFile(BaseModel):
    name: str = Field(..., description="File name, reused as the archive entry name")
    content: str = Field(..., description="Raw SVG code")


class BatchAddRequest(BaseModel):
    files: list[UploadedFile] = Field(..., description="Icons to add to the batch")
    target_size: float | None = Field(
        default=None,
        gt=0,
        description="Switch the batch to this size before processing",
    )


class TargetSizeRequest(BaseModel):
    target_size: float = Field(..., gt=0, description="New target square size in px")
