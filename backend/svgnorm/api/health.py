"""Health check endpoint."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from svgnorm import __version__
from svgnorm.dependencies import get_orchestrator
from svgnorm.engine.batch import BatchOrchestrator
from svgnorm.models.responses import HealthResponse

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health(orchestrator: BatchOrchestrator = Depends(get_orchestrator)) -> HealthResponse:
    return HealthResponse(
        status="ok",
        version=__version__,
        target_size=orchestrator.target_size,
    )
