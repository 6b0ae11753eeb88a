"""FastAPI dependency injection."""

from __future__ import annotations

from functools import lru_cache

from svgnorm.config import settings
from svgnorm.engine.batch import BatchOrchestrator


@lru_cache(maxsize=1)
def get_orchestrator() -> BatchOrchestrator:
    """The process-local batch; state is volatile and lost on restart."""
    return BatchOrchestrator(
        target_size=settings.default_target_size,
        precision=settings.precision,
        workers=settings.batch_workers,
        archive_extension=settings.archive_extension,
    )
