"""Batch item model."""

from __future__ import annotations

import enum

from pydantic import BaseModel, ConfigDict, Field


class ItemStatus(str, enum.Enum):
    PENDING = "pending"
    SUCCESS = "success"
    ERROR = "error"


class ProcessedItem(BaseModel):
    """One uploaded icon and the outcome of its latest normalization pass.

    Items are immutable; the orchestrator replaces them with ``model_copy``.
    """

    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    original_content: str
    processed_content: str | None = None
    status: ItemStatus = ItemStatus.PENDING
    message: str | None = None
    error_kind: str | None = None  # e.g. "NoFrame" when status is error
    warnings: list[str] = Field(default_factory=list)

    def reset(self) -> ProcessedItem:
        return self.model_copy(
            update={
                "processed_content": None,
                "status": ItemStatus.PENDING,
                "message": None,
                "error_kind": None,
                "warnings": [],
            }
        )
