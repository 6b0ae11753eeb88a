"""Archive packaging of normalized icons."""

from __future__ import annotations

import asyncio
import functools
import io
import logging
import zipfile
from collections.abc import Iterable
from concurrent.futures import Executor
from pathlib import PurePosixPath

from svgnorm.models.items import ItemStatus, ProcessedItem
from svgnorm.svg.serializer import format_size

logger = logging.getLogger(__name__)


def archive_filename(target_size: float, extension: str = "zip") -> str:
    """``icons-<size>px.<extension>``."""
    return f"icons-{format_size(target_size)}px.{extension}"


def entry_name(item: ProcessedItem) -> str:
    """Archive entry name: the item's file name with any directory part removed."""
    name = PurePosixPath(item.name.replace("\\", "/")).name
    if name in ("", ".", ".."):
        return f"{item.id}.svg"
    return name


def archive_entries(items: Iterable[ProcessedItem], include_failed: bool = False) -> dict[str, str]:
    """Map entry name -> content for every item that belongs in the archive.

    Successful items contribute their normalized content. Failed items are
    skipped unless ``include_failed``, in which case their original content is
    stored. A later item with the same name replaces an earlier one.
    """
    entries: dict[str, str] = {}
    for item in items:
        if item.status is ItemStatus.SUCCESS and item.processed_content is not None:
            content = item.processed_content
        elif item.status is ItemStatus.ERROR and include_failed:
            content = item.original_content
        else:
            continue
        name = entry_name(item)
        if name in entries:
            logger.warning("Duplicate archive entry %s, keeping the later item", name)
        entries[name] = content
    return entries


def build_archive(items: Iterable[ProcessedItem], include_failed: bool = False) -> bytes:
    """Zip the selected items into an in-memory archive."""
    entries = archive_entries(items, include_failed)
    buffer = io.BytesIO()
    with zipfile.ZipFile(buffer, "w", compression=zipfile.ZIP_DEFLATED) as zf:
        for name, content in entries.items():
            zf.writestr(name, content)
    logger.info("Packaged %d icons into archive (%d bytes)", len(entries), buffer.tell())
    return buffer.getvalue()


async def package_archive_async(
    items: Iterable[ProcessedItem],
    include_failed: bool = False,
    executor: Executor | None = None,
) -> bytes:
    """Build the archive off the event loop.

    Cancelling the awaiting task abandons the result; nothing is written anywhere
    until the bytes are returned.
    """
    snapshot = list(items)
    loop = asyncio.get_running_loop()
    return await loop.run_in_executor(
        executor, functools.partial(build_archive, snapshot, include_failed)
    )
