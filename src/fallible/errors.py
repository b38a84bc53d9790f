"""Exception hierarchy for fallible.

These are the failures the library itself raises. Domain errors carried by
``Err`` are the caller's business and never pass through this hierarchy.
"""

from __future__ import annotations


class FallibleError(Exception):
    """Base exception for all fallible errors."""

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint = hint


class InvalidStateError(FallibleError):
    """A result was used in a way its variant does not allow.

    Signals programmer misuse (for example asking an ``Ok`` for its error),
    never a domain failure.
    """


class ConfigurationError(FallibleError):
    """Configuration validation or resolution failed."""
