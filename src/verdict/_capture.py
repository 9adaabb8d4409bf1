"""The single point where a caught exception becomes a represented failure."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from verdict.config import current_config

if TYPE_CHECKING:
    from collections.abc import Callable

log = logging.getLogger(__name__)


def capture[E](
    exc: Exception, on_error: Callable[[Exception], E], *, origin: str
) -> E:
    """Convert *exc* into an error value via *on_error*.

    When ``log_captured`` is enabled the exception is logged at DEBUG with its
    traceback before conversion.
    """
    if current_config().log_captured:
        log.debug(
            "%s captured %s: %s", origin, type(exc).__name__, exc, exc_info=exc
        )
    return on_error(exc)
