"""Configuration for verdict's dev-time behaviors.

Follows resolve-once, freeze-then-flow: settings are validated through a
Pydantic schema, frozen into a ``FrozenConfig``, and read by the combinators
via ``current_config()``. Configuration is explicit only: the library never
reads environment variables or ``.env`` files, and every toggle defaults to
off outside a ``config_scope`` block.
"""

from __future__ import annotations

from contextlib import contextmanager
import contextvars
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from verdict.errors import ConfigurationError

if TYPE_CHECKING:
    from collections.abc import Generator, Mapping

# --- Schema (Pydantic wall) ---


class Settings(BaseModel):
    """Pydantic schema: the single source of truth for config fields."""

    # Make Result.chain reject callbacks that return a non-Result
    validate_chain: bool = Field(default=False)
    # Log exceptions converted by try_catch/from_awaitable at DEBUG
    log_captured: bool = Field(default=False)

    model_config = ConfigDict(extra="forbid")


# --- Immutable runtime payload ---


@dataclass(frozen=True)
class FrozenConfig:
    """Immutable, validated configuration read by the combinators."""

    validate_chain: bool = False
    log_captured: bool = False


DEFAULT_CONFIG = FrozenConfig()


# --- Public resolution API ---


def resolve_config(overrides: Mapping[str, Any] | None = None) -> FrozenConfig:
    """Validate *overrides* on top of the defaults into a FrozenConfig.

    Raises:
        ConfigurationError: If a value fails validation or a key is unknown.
    """
    try:
        settings = Settings.model_validate(dict(overrides or {}))
    except ValidationError as e:
        err = e.errors()[0]
        field = ".".join(str(p) for p in err.get("loc", ())) or "<root>"
        raise ConfigurationError(
            f"Configuration validation failed for {field!r}: {err.get('msg')}",
            hint=f"Known fields: {', '.join(sorted(Settings.model_fields))}",
        ) from e
    return FrozenConfig(**settings.model_dump())


# --- Ambient scope ---

_AMBIENT: contextvars.ContextVar[FrozenConfig] = contextvars.ContextVar(
    "verdict_ambient_config", default=DEFAULT_CONFIG
)


def current_config() -> FrozenConfig:
    """Return the configuration of the innermost ``config_scope``, or defaults."""
    return _AMBIENT.get()


@contextmanager
def config_scope(
    cfg_or_overrides: Mapping[str, Any] | FrozenConfig | None = None,
    **overrides: object,
) -> Generator[FrozenConfig]:
    """Run a block with a specific configuration.

    Scoping goes through ``contextvars``, so it is safe across threads and
    asyncio tasks.

    Example:
        with config_scope(validate_chain=True):
            Result.ok(1).chain(lambda x: x + 1)  # raises InternalError
    """
    if isinstance(cfg_or_overrides, FrozenConfig):
        cfg = cfg_or_overrides
    else:
        cfg = resolve_config({**(cfg_or_overrides or {}), **overrides})

    token = _AMBIENT.set(cfg)
    try:
        yield cfg
    finally:
        _AMBIENT.reset(token)
