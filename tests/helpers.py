"""Test helpers (small, reusable doubles)."""

from __future__ import annotations

import asyncio
from dataclasses import dataclass
from typing import Any

from verdict.core.result_primitives import Failure, Success


@dataclass
class CountingSource:
    """Awaitable factory that counts how often its work actually runs.

    Each call to ``make()`` returns a fresh coroutine; ``runs`` counts the
    coroutines that were awaited to completion or failure.
    """

    outcome: Success[Any] | Failure[Any] | BaseException
    delay_s: float = 0.0
    runs: int = 0

    async def _run(self) -> Success[Any] | Failure[Any]:
        self.runs += 1
        if self.delay_s:
            await asyncio.sleep(self.delay_s)
        else:
            await asyncio.sleep(0)
        if isinstance(self.outcome, BaseException):
            raise self.outcome
        return self.outcome

    def make(self):
        return self._run()


class Boom(Exception):
    """Distinct exception type for try_catch tests."""
