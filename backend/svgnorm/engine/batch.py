"""Batch orchestrator: owns the uploaded items and runs the pipeline over them.

The item collection is a tuple that is replaced on every write, never mutated,
so a caller holding a snapshot keeps a consistent view.
"""

from __future__ import annotations

import asyncio
import logging
import uuid
from collections.abc import Awaitable, Iterable
from concurrent.futures import ThreadPoolExecutor

from svgnorm.engine.archive import archive_filename, build_archive, package_archive_async
from svgnorm.errors import NormalizeError
from svgnorm.engine.pipeline import normalize
from svgnorm.engine.transform import validate_target_size
from svgnorm.models.items import ItemStatus, ProcessedItem

logger = logging.getLogger(__name__)


def process_item(item: ProcessedItem, target_size: float, precision: int = 3) -> ProcessedItem:
    """Normalize one item from its original content and return the updated copy."""
    try:
        result = normalize(item.original_content, target_size, precision)
    except NormalizeError as e:
        logger.warning("Item %s (%s) failed: %s: %s", item.id, item.name, e.kind, e)
        return item.model_copy(
            update={
                "processed_content": None,
                "status": ItemStatus.ERROR,
                "message": str(e),
                "error_kind": e.kind,
                "warnings": [],
            }
        )

    message = None
    if result.warnings:
        message = f"{len(result.warnings)} warning(s): " + "; ".join(result.warnings)
    return item.model_copy(
        update={
            "processed_content": result.content,
            "status": ItemStatus.SUCCESS,
            "message": message,
            "error_kind": None,
            "warnings": result.warnings,
        }
    )


def _new_id() -> str:
    return uuid.uuid4().hex[:9]


class BatchOrchestrator:
    """Process-local list of icons normalized to a shared target size."""

    def __init__(
        self,
        target_size: float = 24.0,
        precision: int = 3,
        workers: int = 4,
        archive_extension: str = "zip",
    ) -> None:
        validate_target_size(target_size)
        self._target_size = target_size
        self.precision = precision
        self.workers = workers
        self.archive_extension = archive_extension
        self._items: tuple[ProcessedItem, ...] = ()
        self._executor: ThreadPoolExecutor | None = None
        # Bumped on every target size change; passes started earlier are stale
        self._generation = 0

    # -- state ------------------------------------------------------------

    @property
    def items(self) -> tuple[ProcessedItem, ...]:
        return self._items

    @property
    def target_size(self) -> float:
        return self._target_size

    @property
    def archive_name(self) -> str:
        return archive_filename(self._target_size, self.archive_extension)

    def get(self, item_id: str) -> ProcessedItem | None:
        for item in self._items:
            if item.id == item_id:
                return item
        return None

    def count(self, status: ItemStatus) -> int:
        return sum(1 for item in self._items if item.status is status)

    def successful(self) -> list[ProcessedItem]:
        return [item for item in self._items if item.status is ItemStatus.SUCCESS]

    def add(self, name: str, content: str) -> ProcessedItem:
        """Append a pending item without processing it."""
        item = ProcessedItem(id=_new_id(), name=name, original_content=content)
        self._items = self._items + (item,)
        return item

    def clear(self) -> None:
        logger.info("Clearing %d items", len(self._items))
        self._items = ()

    def _merge(self, updated: Iterable[ProcessedItem], generation: int) -> None:
        if generation != self._generation:
            logger.info("Discarding results of a pass started before the last target size change")
            return
        # Matched by id; items cleared meanwhile are dropped
        by_id = {item.id: item for item in updated}
        self._items = tuple(by_id.get(item.id, item) for item in self._items)

    def _select(self, ids: Iterable[str] | None) -> list[ProcessedItem]:
        if ids is None:
            return list(self._items)
        wanted = set(ids)
        return [item for item in self._items if item.id in wanted]

    # -- processing -------------------------------------------------------

    def process(self, ids: Iterable[str] | None = None) -> list[ProcessedItem]:
        """Run the pipeline over the selected items (all by default), one after another."""
        generation = self._generation
        batch = self._select(ids)
        results = [process_item(item, self._target_size, self.precision) for item in batch]
        self._merge(results, generation)
        self._log_pass(results, self._target_size)
        return results

    async def process_async(self, ids: Iterable[str] | None = None) -> list[ProcessedItem]:
        """Run the pipeline over the selected items in parallel worker threads.

        Results are only stored if the target size has not changed meanwhile.
        """
        generation = self._generation
        batch = self._select(ids)
        loop = asyncio.get_running_loop()
        executor = self._get_executor()
        size, precision = self._target_size, self.precision
        results = await asyncio.gather(
            *(loop.run_in_executor(executor, process_item, item, size, precision) for item in batch)
        )
        self._merge(results, generation)
        self._log_pass(results, size)
        return list(results)

    def ingest(self, files: Iterable[tuple[str, str]]) -> list[ProcessedItem]:
        """Add ``(name, content)`` pairs and process them."""
        added = [self.add(name, content) for name, content in files]
        return self.process(item.id for item in added)

    async def ingest_async(
        self, sources: Iterable[tuple[str, Awaitable[str | bytes]]]
    ) -> list[ProcessedItem]:
        """Await one read per file, then add and process them together.

        Reads complete in any order; each content is paired with its own name.
        """
        sources = list(sources)
        contents = await asyncio.gather(*(read for _, read in sources))
        added = [
            self.add(name, _decode(content)) for (name, _), content in zip(sources, contents)
        ]
        return await self.process_async(item.id for item in added)

    def set_target_size(self, target_size: float) -> list[ProcessedItem]:
        """Change the target size and re-run every item from its original content."""
        self._reset_target(target_size)
        return self.process()

    async def set_target_size_async(self, target_size: float) -> list[ProcessedItem]:
        self._reset_target(target_size)
        return await self.process_async()

    def _reset_target(self, target_size: float) -> None:
        validate_target_size(target_size)
        logger.info("Target size %s -> %s, reprocessing %d items", self._target_size, target_size, len(self._items))
        self._target_size = target_size
        self._generation += 1
        self._items = tuple(item.reset() for item in self._items)

    def _log_pass(self, results: list[ProcessedItem], target_size: float) -> None:
        ok = sum(1 for r in results if r.status is ItemStatus.SUCCESS)
        logger.info(
            "Batch pass at %spx: %d ok, %d failed",
            target_size,
            ok,
            len(results) - ok,
        )

    # -- packaging --------------------------------------------------------

    def archive(self, include_failed: bool = False) -> bytes:
        return build_archive(self._items, include_failed)

    async def archive_async(self, include_failed: bool = False) -> bytes:
        return await package_archive_async(self._items, include_failed, self._get_executor())

    def _get_executor(self) -> ThreadPoolExecutor:
        if self._executor is None:
            self._executor = ThreadPoolExecutor(max_workers=self.workers, thread_name_prefix="svgnorm")
        return self._executor

    def close(self) -> None:
        if self._executor is not None:
            self._executor.shutdown(wait=False)
            self._executor = None


def _decode(content: str | bytes) -> str:
    if isinstance(content, bytes):
        return content.decode("utf-8-sig", errors="replace")
    return content
