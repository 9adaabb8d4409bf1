from __future__ import annotations

import pytest

from verdict.core.result_primitives import Failure
from verdict.errors import (
    ConfigurationError,
    InternalError,
    RejectedError,
    UnwrapError,
    VerdictError,
)

pytestmark = pytest.mark.unit


def test_verdict_error_keeps_hint_out_of_message() -> None:
    err = VerdictError("boom", hint="do this")
    assert str(err) == "boom"
    assert err.hint == "do this"


def test_hint_defaults_to_none() -> None:
    assert VerdictError("fail").hint is None
    assert ConfigurationError("fail").hint is None


def test_unwrap_error_structured_metadata() -> None:
    variant = Failure("bad")
    err = UnwrapError("Called unwrap on a Failure value: bad", variant=variant)
    assert err.variant is variant
    assert "unwrap_or" in (err.hint or "")


def test_unwrap_error_custom_hint_wins() -> None:
    assert UnwrapError("x", hint="custom").hint == "custom"


def test_rejected_error_carries_payload() -> None:
    payload = {"code": 404}
    err = RejectedError(payload)
    assert err.error is payload
    assert "{'code': 404}" in str(err)


def test_subclass_hierarchy() -> None:
    """Every library error is catchable as VerdictError."""
    for cls in (UnwrapError, RejectedError, ConfigurationError, InternalError):
        assert issubclass(cls, VerdictError)
    assert not issubclass(VerdictError, (ValueError, TypeError))
