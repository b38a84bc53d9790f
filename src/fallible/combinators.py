"""Combinator layer over ``Ok`` / ``Err``.

Each function takes the result as its first argument and dispatches with a
``match`` on the variant. Nothing here logs, retries or holds state; a
callable passed in is either invoked exactly once on the matching variant or
not at all.

Contracts worth remembering:

- Transforms short-circuit: ``map``, ``map_error``, ``flat_map`` and
  ``recover_with`` never call their argument on the other variant.
- Only ``map_catching`` turns a raised exception into data, through
  ``capture_failures``; everywhere else exceptions from callables propagate.
- ``on_ok`` / ``on_err`` hand back the very object they received.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from fallible.core import Err, Ok, capture_failures
from fallible.errors import InvalidStateError

if TYPE_CHECKING:
    from collections.abc import Callable

    from fallible.core import Result

__all__ = [
    "error_or_none",
    "error_or_raise",
    "error_or_raise_with",
    "flat_map",
    "flatten",
    "fold",
    "get_or_else",
    "get_or_none",
    "get_or_raise",
    "get_or_raise_with",
    "is_err",
    "is_ok",
    "map",
    "map_catching",
    "map_error",
    "on_err",
    "on_ok",
    "recover_with",
    "to_pair",
]


def _not_a_result(obj: object) -> TypeError:
    return TypeError(f"Expected Ok or Err, got {type(obj).__name__}")


# =============================================================================
# Inspection
# =============================================================================


def is_ok(result: Result[object, object]) -> bool:
    """Return True for ``Ok``."""
    match result:
        case Ok():
            return True
        case Err():
            return False
    raise _not_a_result(result)


def is_err(result: Result[object, object]) -> bool:
    """Return True for ``Err``."""
    match result:
        case Ok():
            return False
        case Err():
            return True
    raise _not_a_result(result)


def get_or_none[T](result: Result[T, object]) -> T | None:
    """Return the value of an ``Ok``, or None for an ``Err``."""
    match result:
        case Ok(value):
            return value
        case Err():
            return None
    raise _not_a_result(result)


def error_or_none[E](result: Result[object, E]) -> E | None:
    """Return the error of an ``Err``, or None for an ``Ok``."""
    match result:
        case Ok():
            return None
        case Err(error):
            return error
    raise _not_a_result(result)


def to_pair[T, E](result: Result[T, E]) -> tuple[T | None, E | None]:
    """Return ``(value, None)`` for ``Ok`` and ``(None, error)`` for ``Err``."""
    return get_or_none(result), error_or_none(result)


# =============================================================================
# Extraction
# =============================================================================


def get_or_raise[T](result: Result[T, BaseException]) -> T:
    """Return the value of an ``Ok``; raise the contained error of an ``Err``.

    The error object is raised as is, not wrapped.

    Raises:
        InvalidStateError: The ``Err`` payload is not an exception.
    """
    match result:
        case Ok(value):
            return value
        case Err(error):
            if isinstance(error, BaseException):
                raise error
            raise InvalidStateError(
                f"Err payload is not an exception: {error!r}",
                hint="Use get_or_raise_with() to choose the exception to raise.",
            )
    raise _not_a_result(result)


def error_or_raise[E](result: Result[object, E]) -> E:
    """Return the error of an ``Err``.

    Raises:
        InvalidStateError: The result is an ``Ok``.
    """
    match result:
        case Ok():
            raise InvalidStateError(
                "Cannot get error from Ok",
                hint="Check is_err() first or use error_or_none().",
            )
        case Err(error):
            return error
    raise _not_a_result(result)


def get_or_raise_with[T](
    result: Result[T, object], supplier: Callable[[], BaseException]
) -> T:
    """Return the value of an ``Ok``; for an ``Err`` raise whatever ``supplier`` builds.

    The original error is discarded and is not chained onto the raised one.
    """
    match result:
        case Ok(value):
            return value
        case Err():
            raise supplier()
    raise _not_a_result(result)


def error_or_raise_with[E](
    result: Result[object, E], supplier: Callable[[], BaseException]
) -> E:
    """Return the error of an ``Err``; for an ``Ok`` raise whatever ``supplier`` builds."""
    match result:
        case Ok():
            raise supplier()
        case Err(error):
            return error
    raise _not_a_result(result)


def get_or_else[T, E](result: Result[T, E], on_error: Callable[[E], T]) -> T:
    """Return the value of an ``Ok``, or ``on_error(error)`` for an ``Err``."""
    match result:
        case Ok(value):
            return value
        case Err(error):
            return on_error(error)
    raise _not_a_result(result)


# =============================================================================
# Transformation
# =============================================================================


def map[T, E, R](result: Result[T, E], transform: Callable[[T], R]) -> Result[R, E]:  # noqa: A001
    """Apply ``transform`` to the value of an ``Ok``; pass an ``Err`` through.

    Exceptions raised by ``transform`` propagate; use ``map_catching`` to
    capture them.
    """
    match result:
        case Ok(value):
            return Ok(transform(value))
        case Err():
            return result
    raise _not_a_result(result)


def map_catching[T, E, R](
    result: Result[T, E], transform: Callable[[T], R]
) -> Result[R, E | Exception]:
    """``map`` with ``transform`` run under ``capture_failures``.

    Meant for results whose error side is already an exception. Cancellation
    signals raised by ``transform`` still propagate.
    """
    match result:
        case Ok(value):
            return capture_failures(transform, value)
        case Err():
            return result
    raise _not_a_result(result)


def map_error[T, E, F](result: Result[T, E], transform: Callable[[E], F]) -> Result[T, F]:
    """Apply ``transform`` to the error of an ``Err``; pass an ``Ok`` through."""
    match result:
        case Ok():
            return result
        case Err(error):
            return Err(transform(error))
    raise _not_a_result(result)


def flat_map[T, E, R](
    result: Result[T, E], transform: Callable[[T], Result[R, E]]
) -> Result[R, E]:
    """Chain a dependent computation that itself returns a Result.

    A chain of ``flat_map`` calls stops at the first ``Err``; later transforms
    are never invoked.
    """
    match result:
        case Ok(value):
            return transform(value)
        case Err():
            return result
    raise _not_a_result(result)


def recover_with[T, E](
    result: Result[T, E], transform: Callable[[E], Result[T, E]]
) -> Result[T, E]:
    """Replace an ``Err`` with ``transform(error)``, which may be ``Ok`` or another ``Err``."""
    match result:
        case Ok():
            return result
        case Err(error):
            return transform(error)
    raise _not_a_result(result)


def flatten[T, E](result: Result[Result[T, E], E]) -> Result[T, E]:
    """Collapse one level of nesting: ``Ok(inner)`` becomes ``inner``."""
    match result:
        case Ok(inner):
            return inner
        case Err():
            return result
    raise _not_a_result(result)


def fold[T, E, R](
    result: Result[T, E], on_ok: Callable[[T], R], on_err: Callable[[E], R]
) -> R:
    """Run exactly one of ``on_ok`` / ``on_err`` and return its result."""
    match result:
        case Ok(value):
            return on_ok(value)
        case Err(error):
            return on_err(error)
    raise _not_a_result(result)


def on_ok[T, E](result: Result[T, E], action: Callable[[T], object]) -> Result[T, E]:
    """Call ``action`` with the value of an ``Ok``; return ``result`` itself."""
    match result:
        case Ok(value):
            action(value)
        case Err():
            pass
        case _:
            raise _not_a_result(result)
    return result


def on_err[T, E](result: Result[T, E], action: Callable[[E], object]) -> Result[T, E]:
    """Call ``action`` with the error of an ``Err``; return ``result`` itself."""
    match result:
        case Ok():
            pass
        case Err(error):
            action(error)
        case _:
            raise _not_a_result(result)
    return result
