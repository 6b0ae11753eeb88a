"""/api/batch: process-local icon batch, re-sizing and archive download."""

from __future__ import annotations

from fastapi import APIRouter, Depends, File, Form, HTTPException, UploadFile
from fastapi.responses import Response

from svgnorm.dependencies import get_orchestrator
from svgnorm.engine.batch import BatchOrchestrator
from svgnorm.errors import InvalidScaleError
from svgnorm.models.items import ItemStatus
from svgnorm.models.requests import BatchAddRequest, TargetSizeRequest
from svgnorm.models.responses import BatchResponse

router = APIRouter(prefix="/batch")

_MEDIA_TYPES = {"zip": "application/zip"}


def _snapshot(orchestrator: BatchOrchestrator) -> BatchResponse:
    return BatchResponse(
        target_size=orchestrator.target_size,
        archive_name=orchestrator.archive_name,
        items=list(orchestrator.items),
        success=orchestrator.count(ItemStatus.SUCCESS),
        errors=orchestrator.count(ItemStatus.ERROR),
    )


async def _apply_target_size(orchestrator: BatchOrchestrator, target_size: float | None) -> None:
    if target_size is None or target_size == orchestrator.target_size:
        return
    try:
        await orchestrator.set_target_size_async(target_size)
    except InvalidScaleError as e:
        raise HTTPException(status_code=422, detail={"kind": e.kind, "message": str(e)}) from e


@router.get("", response_model=BatchResponse)
async def get_batch(orchestrator: BatchOrchestrator = Depends(get_orchestrator)) -> BatchResponse:
    return _snapshot(orchestrator)


@router.post("/items", response_model=BatchResponse)
async def add_items(
    req: BatchAddRequest,
    orchestrator: BatchOrchestrator = Depends(get_orchestrator),
) -> BatchResponse:
    await _apply_target_size(orchestrator, req.target_size)
    added = [orchestrator.add(f.name, f.content) for f in req.files]
    await orchestrator.process_async(item.id for item in added)
    return _snapshot(orchestrator)


@router.post("/upload", response_model=BatchResponse)
async def upload_files(
    files: list[UploadFile] = File(...),
    target_size: float | None = Form(default=None, gt=0),
    orchestrator: BatchOrchestrator = Depends(get_orchestrator),
) -> BatchResponse:
    await _apply_target_size(orchestrator, target_size)
    await orchestrator.ingest_async((f.filename or "icon.svg", f.read()) for f in files)
    return _snapshot(orchestrator)


@router.put("/target-size", response_model=BatchResponse)
async def set_target_size(
    req: TargetSizeRequest,
    orchestrator: BatchOrchestrator = Depends(get_orchestrator),
) -> BatchResponse:
    try:
        await orchestrator.set_target_size_async(req.target_size)
    except InvalidScaleError as e:
        raise HTTPException(status_code=422, detail={"kind": e.kind, "message": str(e)}) from e
    return _snapshot(orchestrator)


@router.delete("", response_model=BatchResponse)
async def clear_batch(orchestrator: BatchOrchestrator = Depends(get_orchestrator)) -> BatchResponse:
    orchestrator.clear()
    return _snapshot(orchestrator)


@router.get("/archive")
async def download_archive(
    include_failed: bool = False,
    orchestrator: BatchOrchestrator = Depends(get_orchestrator),
) -> Response:
    data = await orchestrator.archive_async(include_failed)
    return Response(
        content=data,
        media_type=_MEDIA_TYPES.get(orchestrator.archive_extension, "application/octet-stream"),
        headers={"Content-Disposition": f'attachment; filename="{orchestrator.archive_name}"'},
    )
