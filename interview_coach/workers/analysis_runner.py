"""
Fire-and-forget runner for transcript analysis.

Schedules analysis runs on the running event loop without awaiting them.
The runner holds a strong reference to each task until it finishes and
wraps it in a top-level error boundary, so a failing run is logged and
never reaches a client. There is no timeout and callers get no
cancellation handle; `get_task` and `join` exist as completion signals for
tests and shutdown.

Dependencies: asyncio
System role: Background task processing
"""

import asyncio
import logging
from collections.abc import Awaitable, Callable
from typing import Any
from uuid import UUID

from interview_coach.observability.log_utils import log_exception_with_context

logger = logging.getLogger(__name__)


class AnalysisTaskRunner:
    """Track in-flight analysis tasks by session id."""

    def __init__(self) -> None:
        self._tasks: dict[str, asyncio.Task] = {}

    def schedule(
        self,
        session_id: UUID | str,
        coro_factory: Callable[[], Awaitable[Any]],
    ) -> asyncio.Task:
        """
        Start a run in the background and return immediately.

        Args:
            session_id: Session the run belongs to
            coro_factory: Zero-argument callable producing the run coroutine

        Returns:
            asyncio.Task: The scheduled task
        """
        key = str(session_id)
        task = asyncio.create_task(self._run(key, coro_factory), name=f"analysis-{key}")
        self._tasks[key] = task
        task.add_done_callback(lambda done: self._forget(key, done))
        logger.info(f"{__name__}:schedule - Scheduled analysis", extra={"session_id": key})
        return task

    async def _run(self, key: str, coro_factory: Callable[[], Awaitable[Any]]) -> None:
        try:
            await coro_factory()
        except asyncio.CancelledError:
            logger.warning(f"{__name__}:_run - Analysis cancelled", extra={"session_id": key})
            raise
        except Exception as e:
            log_exception_with_context(logger, "Background analysis crashed", e, session_id=key)

    def _forget(self, key: str, task: asyncio.Task) -> None:
        if self._tasks.get(key) is task:
            del self._tasks[key]

    def get_task(self, session_id: UUID | str) -> asyncio.Task | None:
        """Return the in-flight task of a session, if any."""
        return self._tasks.get(str(session_id))

    @property
    def active_count(self) -> int:
        return len(self._tasks)

    async def join(self) -> None:
        """Wait for every in-flight task to finish."""
        while self._tasks:
            await asyncio.gather(*list(self._tasks.values()), return_exceptions=True)
