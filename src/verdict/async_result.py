"""Asynchronous Result wrapper.

``AsyncResult`` wraps an awaitable that settles to a ``Success`` or
``Failure``. Resolution is memoized per instance: the wrapped awaitable is
awaited at most once no matter how many combinators or accessors run on the
instance, concurrently or not.

Every factory and combinator is a coroutine and must be awaited:

    user = await AsyncResult.from_awaitable(fetch_user(uid), str)
    name = await (await user.map(lambda u: u.name)).unwrap_or("anonymous")
"""

from __future__ import annotations

import asyncio
import inspect
import logging
from typing import TYPE_CHECKING, Any

from verdict._capture import capture
from verdict._singleflight import SingleFlight
from verdict.core.result_primitives import Failure, Success, is_result_data
from verdict.errors import InternalError, UnwrapError
from verdict.result import as_rejection

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable

    from verdict.core.result_primitives import ResultData

log = logging.getLogger(__name__)


async def settle(value: Any) -> Any:
    """Await *value* until it is no longer awaitable.

    Mirrors native promise flattening, so ``async def`` callbacks that return
    another coroutine still yield a plain value.
    """
    while inspect.isawaitable(value):
        value = await value
    return value


def _settled[T](data: T) -> asyncio.Future[T]:
    # A done future never triggers "coroutine was never awaited" if dropped.
    fut: asyncio.Future[T] = asyncio.get_running_loop().create_future()
    fut.set_result(data)
    return fut


class AsyncResult[E, A]:
    """A success-or-failure value that resolves through an awaitable.

    Prefer the async factories (``ok``, ``err``, ``from_nullable_with_error``,
    ``try_catch``, ``from_awaitable``). The constructor wraps a raw awaitable
    of ``Success | Failure`` and is meant for adapters and tests.
    """

    __slots__ = ("_cell",)

    def __init__(self, source: Awaitable[ResultData[E, A]]) -> None:
        self._cell: SingleFlight[ResultData[E, A]] = SingleFlight(source)

    async def _resolve(self) -> ResultData[E, A]:
        try:
            data = await self._cell.get()
        except Exception as exc:
            log.debug("AsyncResult source raised %s: %s", type(exc).__name__, exc)
            raise
        if not is_result_data(data):
            raise InternalError(
                f"AsyncResult source settled to {type(data).__name__}, "
                "expected Success or Failure",
                hint="Build instances with the AsyncResult factories.",
            )
        return data

    @property
    def is_resolved(self) -> bool:
        """True once the wrapped awaitable settled to a Success or Failure.

        Stays False when the awaitable itself raised; see ``is_failed``.
        """
        return self._cell.done

    @property
    def is_failed(self) -> bool:
        """True once the wrapped awaitable raised instead of settling.

        Every later accessor re-raises that exception; the awaitable is not
        awaited again.
        """
        return self._cell.failed

    # --- Construction ---

    @classmethod
    def _of(cls, data: ResultData[Any, Any]) -> AsyncResult[Any, Any]:
        return cls(_settled(data))

    @classmethod
    async def ok(cls, value: A | Awaitable[A]) -> AsyncResult[Any, A]:
        """Settle *value* and wrap it as a success."""
        return cls._of(Success(await settle(value)))

    @classmethod
    async def err(cls, error: E | Awaitable[E]) -> AsyncResult[E, Any]:
        """Settle *error* and wrap it as a failure."""
        return cls._of(Failure(await settle(error)))

    @classmethod
    async def from_nullable_with_error(
        cls, error: E, value: A | None | Awaitable[A | None]
    ) -> AsyncResult[E, A]:
        """Settle *value*; fail with *error* if it is None, else succeed."""
        resolved = await settle(value)
        if resolved is None:
            return await cls.err(error)
        return await cls.ok(resolved)

    @classmethod
    async def try_catch(
        cls,
        f: Callable[[], Awaitable[A] | A],
        on_error: Callable[[Exception], E],
    ) -> AsyncResult[E, A]:
        """Call *f*, await its result, and capture any exception as a failure.

        Exceptions raised by the call itself and by the await are both
        captured. Cancellation is never captured.
        """
        try:
            value = await settle(f())
        except asyncio.CancelledError:
            raise
        except Exception as exc:
            return await cls.err(
                capture(exc, on_error, origin="AsyncResult.try_catch")
            )
        return await cls.ok(value)

    @classmethod
    async def from_awaitable(
        cls, awaitable: Awaitable[A], on_error: Callable[[Exception], E]
    ) -> AsyncResult[E, A]:
        """Await an already-created awaitable, capturing failure as data."""
        try:
            value = await settle(awaitable)
        except asyncio.CancelledError:
            raise
        except Exception as exc:
            return await cls.err(
                capture(exc, on_error, origin="AsyncResult.from_awaitable")
            )
        return await cls.ok(value)

    # --- Combinators ---

    async def map[B](self, f: Callable[[A], B | Awaitable[B]]) -> AsyncResult[E, B]:
        """Apply *f* (sync or async) to the success value."""
        match await self._resolve():
            case Success(value):
                return await AsyncResult.ok(await settle(f(value)))
            case Failure(error):
                return await AsyncResult.err(error)

    async def map_err[F](
        self, f: Callable[[E], F | Awaitable[F]]
    ) -> AsyncResult[F, A]:
        """Apply *f* (sync or async) to the error value."""
        match await self._resolve():
            case Failure(error):
                return await AsyncResult.err(await settle(f(error)))
            case Success(value):
                return await AsyncResult.ok(value)

    async def chain[B](
        self,
        f: Callable[[A], AsyncResult[E, B] | Awaitable[AsyncResult[E, B]]],
    ) -> AsyncResult[E, B]:
        """Continue with *f* on success; short-circuit on failure.

        An AsyncResult returned by *f* (directly or via an awaitable) is
        returned as-is. Any other value is wrapped as a success.
        """
        match await self._resolve():
            case Success(value):
                out = await settle(f(value))
                if isinstance(out, AsyncResult):
                    return out
                log.debug(
                    "chain() callback returned %s; wrapping as success",
                    type(out).__name__,
                )
                return await AsyncResult.ok(out)
            case Failure(error):
                return await AsyncResult.err(error)

    async def match[B](
        self,
        on_failure: Callable[[E], B | Awaitable[B]],
        on_success: Callable[[A], B | Awaitable[B]],
    ) -> B:
        """Run exactly one branch (sync or async) and return its value."""
        match await self._resolve():
            case Success(value):
                return await settle(on_success(value))
            case Failure(error):
                return await settle(on_failure(error))

    async def unwrap(self) -> A:
        """Return the success value.

        Raises:
            UnwrapError: If this resolves to a failure.
        """
        data = await self._resolve()
        match data:
            case Success(value):
                return value
            case Failure(error):
                raise UnwrapError(
                    f"Called unwrap on a Failure value: {error}", variant=data
                )

    async def unwrap_or(self, default: A) -> A:
        data = await self._resolve()
        return data.value if isinstance(data, Success) else default

    async def unwrap_err(self) -> E:
        """Return the error value.

        Raises:
            UnwrapError: If this resolves to a success.
        """
        data = await self._resolve()
        match data:
            case Failure(error):
                return error
            case Success():
                raise UnwrapError("Called unwrap_err on a Success value", variant=data)

    async def _value_or_raise(self) -> A:
        match await self._resolve():
            case Success(value):
                return value
            case Failure(error):
                raise as_rejection(error)

    def to_future(self) -> asyncio.Future[A]:
        """Return a future resolving to the value or rejecting with the error.

        Scheduled as a task on the running loop.

        Raises:
            RuntimeError: If no event loop is running.
        """
        return asyncio.get_running_loop().create_task(self._value_or_raise())

    async def is_ok(self) -> bool:
        return isinstance(await self._resolve(), Success)

    async def is_err(self) -> bool:
        return isinstance(await self._resolve(), Failure)

    def __repr__(self) -> str:
        if self.is_resolved:
            state = "resolved"
        elif self.is_failed:
            state = "failed"
        else:
            state = "pending"
        return f"<AsyncResult {state}>"
