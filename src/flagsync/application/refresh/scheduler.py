"""Application refresh – RefreshScheduler runs notifications as detached tasks."""
from __future__ import annotations

import asyncio

from flagsync.application.refresh.notifier import RefreshNotifier
from flagsync.observability.logging import get_logger

logger = get_logger(__name__)


class RefreshScheduler:
    """Fire-and-forget dispatch of :meth:`RefreshNotifier.notify`.

    Tasks are referenced until they finish so they are not garbage collected
    mid-flight; :meth:`drain` awaits whatever is still pending (shutdown, tests).
    """

    def __init__(self, notifier: RefreshNotifier) -> None:
        self._notifier = notifier
        self._tasks: set[asyncio.Task[None]] = set()

    @property
    def pending(self) -> int:
        return len(self._tasks)

    def schedule(self, slug: str) -> None:
        """Start a refresh for *slug* without awaiting it. Never raises."""
        try:
            task = asyncio.get_running_loop().create_task(self._run(slug), name=f"refresh:{slug}")
        except RuntimeError:
            logger.warning("refresh.not_scheduled", slug=slug, reason="no running event loop")
            return
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)

    async def _run(self, slug: str) -> None:
        try:
            await self._notifier.notify(slug)
        except Exception:  # noqa: BLE001
            logger.exception("refresh.task_failed", slug=slug)

    async def drain(self) -> None:
        while self._tasks:
            await asyncio.gather(*list(self._tasks), return_exceptions=True)


__all__ = ["RefreshScheduler"]
