"""verdict: explicit success-or-failure values instead of exceptions.

Public API:
    - Result: synchronous success-or-failure wrapper
    - AsyncResult: awaitable counterpart with memoized resolution
    - Success / Failure: the frozen records behind both wrappers
    - config_scope / resolve_config: dev-time behavior toggles
"""

from __future__ import annotations

import logging

from verdict.async_result import AsyncResult
from verdict.config import FrozenConfig, config_scope, resolve_config
from verdict.core.result_primitives import Failure, ResultData, Success
from verdict.errors import (
    ConfigurationError,
    InternalError,
    RejectedError,
    UnwrapError,
    VerdictError,
)
from verdict.result import Result

try:
    from importlib.metadata import PackageNotFoundError, version

    __version__ = version("verdict-result")
except PackageNotFoundError:
    __version__ = "0.0.0+unknown"

# Library-level NullHandler: stay silent unless the consumer configures logging.
logging.getLogger("verdict").addHandler(logging.NullHandler())

__all__ = [
    "AsyncResult",
    "ConfigurationError",
    "Failure",
    "FrozenConfig",
    "InternalError",
    "RejectedError",
    "Result",
    "ResultData",
    "Success",
    "UnwrapError",
    "VerdictError",
    "config_scope",
    "resolve_config",
]
