"""Exception hierarchy for verdict.

Represented failures travel as data inside ``Failure`` and are never raised.
The exceptions here cover the few places the library itself must raise.
"""

from __future__ import annotations

from typing import Any


class VerdictError(Exception):
    """Base exception for all verdict errors."""

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint = hint


class UnwrapError(VerdictError):
    """``unwrap``/``unwrap_err`` was called on the wrong variant.

    This signals a programming mistake, not a domain failure.
    """

    def __init__(
        self, message: str, *, variant: Any = None, hint: str | None = None
    ) -> None:
        if hint is None:
            hint = "Check is_ok()/is_err() first, or use unwrap_or() or match()."
        super().__init__(message, hint=hint)
        self.variant = variant


class RejectedError(VerdictError):
    """Carries a failure payload that cannot be raised directly.

    ``to_future`` rejects with the error itself when it is an exception;
    any other payload is wrapped here and exposed as ``.error``.
    """

    def __init__(self, error: Any) -> None:
        super().__init__(f"Result rejected with non-exception error: {error!r}")
        self.error = error


class ConfigurationError(VerdictError):
    """Configuration validation or resolution failed."""


class InternalError(VerdictError):
    """A combinator contract was violated (caught by dev-time validation)."""
