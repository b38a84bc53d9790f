"""fallible: explicit success-or-error results for Python.

Public API:
    - Ok / Err / Result: the two-variant result type
    - of_ok(), of_err(): constructors
    - capture_failures(), capture_failures_async(), catching: exception capture
      that never swallows cancellation
    - fallible.combinators: the same operations as free functions
    - Config / use_config() / configure_from_env(): which exceptions count as
      cancellation

Example:
    from fallible import capture_failures

    port = (
        capture_failures(int, raw_port)
        .map(lambda p: p + 1)
        .get_or_else(lambda _err: 8080)
    )
"""

from __future__ import annotations

import logging

from fallible import combinators
from fallible.config import (
    Config,
    configure_from_env,
    get_config,
    reset_config,
    set_config,
    use_config,
)
from fallible.core import (
    Err,
    Ok,
    Result,
    capture_failures,
    capture_failures_async,
    is_cancellation,
    of_err,
    of_ok,
)
from fallible.decorators import catching
from fallible.errors import ConfigurationError, FallibleError, InvalidStateError

try:
    from importlib.metadata import PackageNotFoundError, version

    __version__ = version("fallible")
except PackageNotFoundError:
    __version__ = "0.0.0+unknown"

# Library-level NullHandler: stay silent unless the consumer configures logging.
logging.getLogger("fallible").addHandler(logging.NullHandler())

__all__ = [
    "Config",
    "ConfigurationError",
    "Err",
    "FallibleError",
    "InvalidStateError",
    "Ok",
    "Result",
    "capture_failures",
    "capture_failures_async",
    "catching",
    "combinators",
    "configure_from_env",
    "get_config",
    "is_cancellation",
    "of_err",
    "of_ok",
    "reset_config",
    "set_config",
    "use_config",
]
