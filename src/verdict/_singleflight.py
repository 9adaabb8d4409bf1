"""Async single-flight cell.

Wraps one awaitable so it is awaited at most once. The first caller schedules
it as a task; every caller, the first included, awaits that task through
``asyncio.shield`` so a cancelled or timed-out reader never aborts the shared
work.
"""

from __future__ import annotations

import asyncio
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Awaitable


def consume_future_exception(fut: asyncio.Future[Any]) -> None:
    """Avoid 'Future exception was never retrieved' for coordination futures."""
    try:
        _ = fut.exception()
    except asyncio.CancelledError:
        return


class SingleFlight[T]:
    """Single-assignment cell populated by awaiting *source* once."""

    __slots__ = ("_done", "_source", "_task", "_value")

    def __init__(self, source: Awaitable[T]) -> None:
        self._source = source
        self._done = False
        self._value: T | None = None
        self._task: asyncio.Future[T] | None = None

    @property
    def done(self) -> bool:
        """True once the source settled successfully."""
        return self._done

    @property
    def failed(self) -> bool:
        """True once the source settled by raising (or was cancelled)."""
        task = self._task
        return task is not None and task.done() and not self._done and (
            task.cancelled() or task.exception() is not None
        )

    async def get(self) -> T:
        """Return the settled value, starting the source on first use.

        If the source raised, every caller observes that same exception.
        """
        if self._done:
            return self._value  # type: ignore[return-value]

        # No await between the check and the publish below.
        task = self._task
        if task is None:
            task = asyncio.ensure_future(self._source)
            task.add_done_callback(consume_future_exception)
            self._task = task

        value = await asyncio.shield(task)
        if not self._done:
            self._value = value
            self._done = True
        return value
