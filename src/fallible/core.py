"""The two-variant result type and its constructors.

``Result[T, E]`` is either ``Ok(value)`` or ``Err(error)``, never both and
never neither. Both variants are frozen dataclasses, so they compare
structurally and work with ``match``::

    match parse(text):
        case Ok(value):
            use(value)
        case Err(error):
            report(error)

Fluent methods on both variants delegate to ``fallible.combinators``.
"""

from __future__ import annotations

import dataclasses
import typing
from typing import Never, Self

from fallible.config import get_config

if typing.TYPE_CHECKING:
    from collections.abc import Awaitable, Callable

__all__ = [
    "Err",
    "Ok",
    "Result",
    "capture_failures",
    "capture_failures_async",
    "is_cancellation",
    "of_err",
    "of_ok",
]

T = typing.TypeVar("T")
E = typing.TypeVar("E")


class _Fluent[T, E]:
    """Method-call spelling of the combinator functions."""

    __slots__ = ()

    def _this(self) -> Result[T, E]:
        return typing.cast("Result[T, E]", self)

    # --- Inspection ---

    def is_ok(self) -> bool:
        return _ops.is_ok(self._this())

    def is_err(self) -> bool:
        return _ops.is_err(self._this())

    def get_or_none(self) -> T | None:
        return _ops.get_or_none(self._this())

    def error_or_none(self) -> E | None:
        return _ops.error_or_none(self._this())

    def to_pair(self) -> tuple[T | None, E | None]:
        return _ops.to_pair(self._this())

    # --- Extraction ---

    def get_or_raise(self) -> T:
        return _ops.get_or_raise(typing.cast("Result[T, BaseException]", self))

    def error_or_raise(self) -> E:
        return _ops.error_or_raise(self._this())

    def get_or_raise_with(self, supplier: Callable[[], BaseException]) -> T:
        return _ops.get_or_raise_with(self._this(), supplier)

    def error_or_raise_with(self, supplier: Callable[[], BaseException]) -> E:
        return _ops.error_or_raise_with(self._this(), supplier)

    def get_or_else(self, on_error: Callable[[E], T]) -> T:
        return _ops.get_or_else(self._this(), on_error)

    # --- Transformation ---

    def map[R](self, transform: Callable[[T], R]) -> Result[R, E]:
        return _ops.map(self._this(), transform)

    def map_catching[R](self, transform: Callable[[T], R]) -> Result[R, E | Exception]:
        return _ops.map_catching(self._this(), transform)

    def map_error[F](self, transform: Callable[[E], F]) -> Result[T, F]:
        return _ops.map_error(self._this(), transform)

    def flat_map[R](self, transform: Callable[[T], Result[R, E]]) -> Result[R, E]:
        return _ops.flat_map(self._this(), transform)

    def recover_with(self, transform: Callable[[E], Result[T, E]]) -> Result[T, E]:
        return _ops.recover_with(self._this(), transform)

    def flatten[R](self: _Fluent[Result[R, E], E]) -> Result[R, E]:
        return _ops.flatten(self._this())

    def fold[R](self, on_ok: Callable[[T], R], on_err: Callable[[E], R]) -> R:
        return _ops.fold(self._this(), on_ok, on_err)

    def on_ok(self, action: Callable[[T], object]) -> Self:
        _ops.on_ok(self._this(), action)
        return self

    def on_err(self, action: Callable[[E], object]) -> Self:
        _ops.on_err(self._this(), action)
        return self


@dataclasses.dataclass(frozen=True, slots=True)
class Ok[T](_Fluent[T, Never]):
    """A successful result holding ``value``."""

    value: T


@dataclasses.dataclass(frozen=True, slots=True)
class Err[E](_Fluent[Never, E]):
    """A failed result holding ``error``."""

    error: E


Result = Ok[T] | Err[E]


def of_ok[V](value: V) -> Ok[V]:
    """Wrap ``value`` as a success; usable wherever any ``Result[V, X]`` is expected."""
    return Ok(value)


def of_err[X](error: X) -> Err[X]:
    """Wrap ``error`` as a failure; usable wherever any ``Result[V, X]`` is expected."""
    return Err(error)


def is_cancellation(exc: BaseException) -> bool:
    """Return True when ``exc`` is a cancellation signal that must not be captured.

    The active ``Config`` decides the category in one place; capture paths
    look it up before running their block so the handler itself cannot fail.
    """
    return get_config().is_cancellation(exc)


def capture_failures[**P, V](
    block: Callable[P, V], /, *args: P.args, **kwargs: P.kwargs
) -> Result[V, Exception]:
    """Run ``block`` and capture its outcome as a Result.

    A normal return becomes ``Ok``. A raised exception becomes ``Err`` holding
    the exact raised object, unless it is a cancellation signal, which is
    re-raised so structured cancellation in the caller keeps working.
    ``BaseException`` subclasses outside ``Exception`` (``KeyboardInterrupt``,
    ``SystemExit``, ``asyncio.CancelledError``) are never caught.

    Example:
        capture_failures(int, "42")    # Ok(value=42)
        capture_failures(int, "forty") # Err(error=ValueError(...))
    """
    config = get_config()
    try:
        value = block(*args, **kwargs)
    except Exception as exc:
        if config.is_cancellation(exc):
            raise
        return Err(exc)
    return Ok(value)


async def capture_failures_async[**P, V](
    block: Callable[P, Awaitable[V]], /, *args: P.args, **kwargs: P.kwargs
) -> Result[V, Exception]:
    """Await ``block(*args, **kwargs)`` with the same rules as ``capture_failures``."""
    config = get_config()
    try:
        value = await block(*args, **kwargs)
    except Exception as exc:
        if config.is_cancellation(exc):
            raise
        return Err(exc)
    return Ok(value)


# The combinator layer builds on the variants above.
from fallible import combinators as _ops  # noqa: E402
