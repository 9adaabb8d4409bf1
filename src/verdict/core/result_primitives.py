"""Result primitives: the two-case tagged union behind every outcome.

Both wrappers (``Result`` and ``AsyncResult``) hold one of these records. The
records are frozen so an outcome's case is fixed at construction.
"""

from __future__ import annotations

import dataclasses
from typing import Any, TypeGuard


@dataclasses.dataclass(frozen=True, slots=True)
class Success[A]:
    """A successful outcome, carrying its value."""

    value: A


@dataclasses.dataclass(frozen=True, slots=True)
class Failure[E]:
    """A failed outcome, carrying its error."""

    error: E


type ResultData[E, A] = Success[A] | Failure[E]


def is_result_data(obj: Any) -> TypeGuard[Success[Any] | Failure[Any]]:
    """Return True when *obj* is a Success or Failure record."""
    return isinstance(obj, Success | Failure)
