"""Decorator form of ``capture_failures``."""

from __future__ import annotations

import functools
import inspect
import logging
from typing import TYPE_CHECKING, Any

from fallible.core import Err, capture_failures, capture_failures_async

if TYPE_CHECKING:
    from collections.abc import Callable

    from fallible.core import Result

__all__ = ["catching"]

log = logging.getLogger(__name__)


def catching[**P, V](fn: Callable[P, V]) -> Callable[P, Result[V, Exception]]:
    """Make ``fn`` return a Result instead of raising.

    Coroutine functions get an async wrapper built on
    ``capture_failures_async``; cancellation passes through either way.

    Example:
        @catching
        def load(path: str) -> bytes:
            return Path(path).read_bytes()

        load("missing.bin")  # Err(error=FileNotFoundError(...))
    """
    if inspect.iscoroutinefunction(fn):

        @functools.wraps(fn)
        async def async_wrapper(*args: Any, **kwargs: Any) -> Result[Any, Exception]:
            result = await capture_failures_async(fn, *args, **kwargs)
            _log_captured(fn, result)
            return result

        return async_wrapper  # type: ignore[return-value]

    @functools.wraps(fn)
    def wrapper(*args: P.args, **kwargs: P.kwargs) -> Result[V, Exception]:
        result = capture_failures(fn, *args, **kwargs)
        _log_captured(fn, result)
        return result

    return wrapper


def _log_captured(fn: Callable[..., Any], result: Result[Any, Exception]) -> None:
    if isinstance(result, Err) and log.isEnabledFor(logging.DEBUG):
        log.debug(
            "%s raised %s; returned as Err",
            getattr(fn, "__qualname__", repr(fn)),
            type(result.error).__name__,
        )
