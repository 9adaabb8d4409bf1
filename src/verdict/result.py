"""Synchronous Result wrapper.

A ``Result`` holds exactly one of ``Success(value)`` or ``Failure(error)`` and
exposes combinators that make failure an explicit part of a return type
instead of an exception.

Example:
    parsed = Result.try_catch(lambda: int(raw), lambda e: f"not a number: {e}")
    doubled = parsed.map(lambda n: n * 2).unwrap_or(0)
"""

from __future__ import annotations

import asyncio
import dataclasses
from typing import TYPE_CHECKING, Any

from verdict._capture import capture
from verdict.config import current_config
from verdict.core.result_primitives import Failure, Success
from verdict.errors import InternalError, RejectedError, UnwrapError

if TYPE_CHECKING:
    from collections.abc import Callable

    from verdict.core.result_primitives import ResultData


def as_rejection(error: Any) -> BaseException:
    """Return the exception a future should be rejected with for *error*.

    Futures refuse ``StopIteration`` and anything that is not an exception, so
    those payloads are wrapped in ``RejectedError``.
    """
    if isinstance(error, BaseException) and not isinstance(error, StopIteration):
        return error
    return RejectedError(error)


@dataclasses.dataclass(frozen=True, slots=True, repr=False)
class Result[E, A]:
    """An immutable success-or-failure value.

    Build instances with ``ok``, ``err``, ``from_nullable_with_error`` or
    ``try_catch``; the constructor is an implementation detail.
    """

    _data: ResultData[E, A]

    # --- Construction ---

    @staticmethod
    def ok(value: A) -> Result[Any, A]:
        """Wrap *value* as a success."""
        return Result(Success(value))

    @staticmethod
    def err(error: E) -> Result[E, Any]:
        """Wrap *error* as a failure."""
        return Result(Failure(error))

    @staticmethod
    def from_nullable_with_error(error: E, value: A | None) -> Result[E, A]:
        """Fail with *error* when *value* is None, else succeed with it.

        Only ``None`` counts as absent; falsy values such as ``0`` or ``""``
        are successes.
        """
        return Result.err(error) if value is None else Result.ok(value)

    @staticmethod
    def try_catch(
        f: Callable[[], A], on_error: Callable[[Exception], E]
    ) -> Result[E, A]:
        """Call *f* and capture any ``Exception`` it raises as a failure.

        Args:
            f: Zero-argument callable to run.
            on_error: Converts the caught exception into the error value.
                It is expected not to raise.

        Returns:
            ``Success(f())``, or ``Failure(on_error(exc))`` if *f* raised.
        """
        try:
            value = f()
        except Exception as exc:
            return Result.err(capture(exc, on_error, origin="Result.try_catch"))
        return Result.ok(value)

    # --- Combinators ---

    def map[B](self, f: Callable[[A], B]) -> Result[E, B]:
        """Apply *f* to the success value; a failure passes through."""
        match self._data:
            case Success(value):
                return Result(Success(f(value)))
            case Failure(error):
                return Result(Failure(error))

    def map_err[F](self, f: Callable[[E], F]) -> Result[F, A]:
        """Apply *f* to the error value; a success passes through."""
        match self._data:
            case Failure(error):
                return Result(Failure(f(error)))
            case Success(value):
                return Result(Success(value))

    def chain[F, B](self, f: Callable[[A], Result[F, B]]) -> Result[E | F, B]:
        """Continue with *f* on success; short-circuit on failure.

        *f* is never called for a failure, and the original failure is
        returned unchanged.

        Raises:
            InternalError: If ``validate_chain`` is enabled and *f* returned
                something other than a Result.
        """
        match self._data:
            case Success(value):
                out = f(value)
                # Config is only read once the callback has already misbehaved.
                if not isinstance(out, Result) and current_config().validate_chain:
                    raise InternalError(
                        f"chain() callback returned {type(out).__name__}, "
                        "expected Result",
                        hint="Use map() for callbacks that return plain values.",
                    )
                return out
            case Failure():
                return self  # type: ignore[return-value]

    def match[B](
        self, on_failure: Callable[[E], B], on_success: Callable[[A], B]
    ) -> B:
        """Run exactly one branch and return its value."""
        match self._data:
            case Success(value):
                return on_success(value)
            case Failure(error):
                return on_failure(error)

    def unwrap(self) -> A:
        """Return the success value.

        Raises:
            UnwrapError: If this is a failure.
        """
        match self._data:
            case Success(value):
                return value
            case Failure(error):
                raise UnwrapError(
                    f"Called unwrap on a Failure value: {error}", variant=self._data
                )

    def unwrap_or(self, default: A) -> A:
        """Return the success value, or *default* for a failure."""
        return self._data.value if isinstance(self._data, Success) else default

    def unwrap_err(self) -> E:
        """Return the error value.

        Raises:
            UnwrapError: If this is a success.
        """
        match self._data:
            case Failure(error):
                return error
            case Success():
                raise UnwrapError(
                    "Called unwrap_err on a Success value", variant=self._data
                )

    def to_future(self) -> asyncio.Future[A]:
        """Return a settled future on the running loop.

        The future holds the success value, or is rejected with the error
        (see ``as_rejection`` for non-exception errors).

        Raises:
            RuntimeError: If no event loop is running.
        """
        fut: asyncio.Future[A] = asyncio.get_running_loop().create_future()
        match self._data:
            case Success(value):
                fut.set_result(value)
            case Failure(error):
                fut.set_exception(as_rejection(error))
        return fut

    def is_ok(self) -> bool:
        return isinstance(self._data, Success)

    def is_err(self) -> bool:
        return isinstance(self._data, Failure)

    @property
    def variant(self) -> ResultData[E, A]:
        """The frozen ``Success``/``Failure`` record, for ``match`` statements.

        Example:
            match result.variant:
                case Success(value): ...
                case Failure(error): ...
        """
        return self._data

    def __repr__(self) -> str:
        match self._data:
            case Success(value):
                return f"Result.ok({value!r})"
            case Failure(error):
                return f"Result.err({error!r})"
