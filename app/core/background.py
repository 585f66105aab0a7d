"""Detached background work, decoupled from the request/response lifecycle."""

from __future__ import annotations

import asyncio
from typing import Any, Coroutine, Optional, Set

from app.core.logging import get_logger

log = get_logger("background")


class BackgroundTaskRunner:
    """Runs fire-and-forget coroutines as tracked asyncio tasks.

    Tasks are held in a set until they finish so the event loop does not
    garbage-collect them mid-flight. Nothing links a task back to the request
    that submitted it, so a finished or disconnected request never cancels it.
    """

    def __init__(self) -> None:
        self._tasks: Set[asyncio.Task] = set()
        self._closed = False

    @property
    def pending(self) -> int:
        return len(self._tasks)

    def submit(self, coro: Coroutine[Any, Any, Any], name: Optional[str] = None) -> asyncio.Task:
        if self._closed:
            coro.close()
            raise RuntimeError("Background runner is shut down")

        task = asyncio.create_task(coro, name=name)
        self._tasks.add(task)
        task.add_done_callback(self._on_done)
        log.debug(f"Background task queued: {task.get_name()} (pending={self.pending})")
        return task

    def _on_done(self, task: asyncio.Task) -> None:
        self._tasks.discard(task)
        if task.cancelled():
            log.warning(f"Background task cancelled: {task.get_name()}")
            return
        exc = task.exception()
        if exc is not None:
            log.error(f"Background task {task.get_name()} failed: {exc!r}")

    async def drain(self, timeout: float) -> None:
        """Stop accepting work, wait up to ``timeout`` seconds, cancel leftovers."""
        self._closed = True
        if not self._tasks:
            return

        log.info(f"Waiting for {self.pending} background task(s) to finish...")
        done, still_pending = await asyncio.wait(set(self._tasks), timeout=timeout)
        for task in still_pending:
            task.cancel()
        if still_pending:
            await asyncio.gather(*still_pending, return_exceptions=True)
            log.warning(f"Cancelled {len(still_pending)} background task(s) after {timeout}s")
        log.info(f"Background runner drained ({len(done)} finished)")
