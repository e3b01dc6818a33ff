"""Background family invalidation (fire-and-forget pattern deletes)."""

from __future__ import annotations

import asyncio
import logging

from catalog.application.interfaces.services import ICacheService

logger = logging.getLogger(__name__)


class PatternInvalidator:
    """Runs ``delete_pattern`` for a family pattern on a detached task.

    schedule() never awaits the deletion, so request latency does not depend
    on scanning the keyspace. Tasks are created with asyncio.create_task and
    are not part of any request's await chain: cancelling the request does
    not cancel them. Strong references are held until each task finishes,
    and drain() lets shutdown wait for the stragglers.
    """

    def __init__(self, cache: ICacheService | None) -> None:
        self.cache = cache
        self._tasks: set[asyncio.Task[None]] = set()

    @property
    def pending(self) -> int:
        """Number of invalidations still running."""
        return len(self._tasks)

    def schedule(self, pattern: str) -> asyncio.Task[None] | None:
        """Start evicting every key matching pattern; return the task (None without a cache).

        Must be called from a running event loop. A cache that currently
        reports itself unavailable still gets the attempt; the failure is logged.
        """
        if self.cache is None:
            return None
        task = asyncio.create_task(self._run(pattern), name=f"invalidate:{pattern}")
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)
        return task

    async def _run(self, pattern: str) -> None:
        if self.cache is None:
            return
        try:
            deleted = await self.cache.delete_pattern(pattern)
        except Exception:
            logger.warning("Cache invalidation failed for pattern %s", pattern, exc_info=True)
            return
        logger.debug("Invalidated %s keys for pattern %s", deleted, pattern)

    async def drain(self, timeout: float | None = None) -> None:
        """Wait up to timeout seconds for pending invalidations; cancel the rest."""
        if not self._tasks:
            return
        done, pending = await asyncio.wait(set(self._tasks), timeout=timeout)
        for task in pending:
            task.cancel()
        if pending:
            logger.warning(
                "Cancelled %s cache invalidations still running at shutdown",
                len(pending),
            )
            await asyncio.gather(*pending, return_exceptions=True)
        logger.debug("Drained %s cache invalidations", len(done))
