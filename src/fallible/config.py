"""Configuration: which raised objects count as cancellation signals.

Capture-based operations never turn a cancellation signal into an ``Err``.
The defaults cover asyncio and ``concurrent.futures``; other frameworks can be
added per process (``set_config``, or ``configure_from_env`` for
``FALLIBLE_CANCELLATION_TYPES``) or per context (``use_config``).

Capture paths only ever read the already-built active config; the environment
and any ``.env`` file are consulted solely by an explicit ``from_env`` call.
"""

from __future__ import annotations

import asyncio
import concurrent.futures
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass, replace
import importlib
import logging
import os
from typing import TYPE_CHECKING

from dotenv import load_dotenv

from fallible.errors import ConfigurationError

if TYPE_CHECKING:
    from collections.abc import Iterator, Mapping

__all__ = [
    "CANCELLATION_TYPES_ENV_VAR",
    "DEFAULT_CANCELLATION_TYPES",
    "Config",
    "configure_from_env",
    "get_config",
    "reset_config",
    "set_config",
    "use_config",
]

log = logging.getLogger(__name__)

CANCELLATION_TYPES_ENV_VAR = "FALLIBLE_CANCELLATION_TYPES"

DEFAULT_CANCELLATION_TYPES: tuple[type[BaseException], ...] = (
    asyncio.CancelledError,
    concurrent.futures.CancelledError,
)


@dataclass(frozen=True)
class Config:
    """Immutable configuration for capture-based operations.

    Example:
        import trio

        config = Config().with_cancellation_types(trio.Cancelled)
        with use_config(config):
            ...
    """

    cancellation_types: tuple[type[BaseException], ...] = DEFAULT_CANCELLATION_TYPES

    def __post_init__(self) -> None:
        """Normalize to a tuple and validate every entry."""
        types = tuple(self.cancellation_types)
        for candidate in types:
            if not (isinstance(candidate, type) and issubclass(candidate, BaseException)):
                raise ConfigurationError(
                    f"cancellation_types entries must be exception classes, got {candidate!r}",
                    hint="Pass classes such as asyncio.CancelledError, not instances or names.",
                )
        object.__setattr__(self, "cancellation_types", types)

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> Config:
        """Build a config from the defaults plus ``FALLIBLE_CANCELLATION_TYPES``.

        The variable holds comma-separated dotted paths such as
        ``trio.Cancelled`` or ``anyio._backends._trio:Cancelled``.
        """
        if environ is None:
            load_dotenv()
            environ = os.environ
        raw = environ.get(CANCELLATION_TYPES_ENV_VAR, "")
        names = [name.strip() for name in raw.split(",") if name.strip()]
        if not names:
            return cls()
        extra = tuple(_resolve_exception_type(name) for name in names)
        log.debug(
            "Resolved cancellation types from %s: %s",
            CANCELLATION_TYPES_ENV_VAR,
            ", ".join(names),
        )
        return cls().with_cancellation_types(*extra)

    def with_cancellation_types(self, *types: type[BaseException]) -> Config:
        """Return a copy that also treats ``types`` as cancellation signals."""
        merged = self.cancellation_types + tuple(
            t for t in types if t not in self.cancellation_types
        )
        return replace(self, cancellation_types=merged)

    def is_cancellation(self, exc: BaseException) -> bool:
        """Return True when ``exc`` must never be captured."""
        return isinstance(exc, self.cancellation_types)


def _resolve_exception_type(dotted: str) -> type[BaseException]:
    module_name, sep, attr = dotted.partition(":")
    if not sep:
        module_name, _, attr = dotted.rpartition(".")
    if not module_name or not attr:
        raise ConfigurationError(
            f"Invalid exception path in {CANCELLATION_TYPES_ENV_VAR}: {dotted!r}",
            hint="Use 'package.module.ClassName' or 'package.module:ClassName'.",
        )
    try:
        module = importlib.import_module(module_name)
    except ImportError as exc:
        raise ConfigurationError(
            f"Cannot import module {module_name!r} named in {CANCELLATION_TYPES_ENV_VAR}",
            hint="Install the package or remove the entry.",
        ) from exc
    resolved = module
    for part in attr.split("."):
        try:
            resolved = getattr(resolved, part)
        except AttributeError as exc:
            raise ConfigurationError(
                f"{module_name!r} has no attribute {attr!r}",
                hint=f"Check the spelling of {dotted!r} in {CANCELLATION_TYPES_ENV_VAR}.",
            ) from exc
    if not (isinstance(resolved, type) and issubclass(resolved, BaseException)):
        raise ConfigurationError(
            f"{dotted!r} is not an exception class",
            hint=f"Entries in {CANCELLATION_TYPES_ENV_VAR} must name exception classes.",
        )
    return resolved


_default: Config = Config()
_override: ContextVar[Config | None] = ContextVar("fallible_config", default=None)


def get_config() -> Config:
    """Return the active config: a ``use_config`` override, else the process default.

    Never reads the environment; see ``configure_from_env``.
    """
    override = _override.get()
    if override is not None:
        return override
    return _default


def set_config(config: Config) -> None:
    """Replace the process-wide default config."""
    global _default
    if not isinstance(config, Config):
        raise ConfigurationError(
            f"Expected a Config instance, got {type(config).__name__}",
            hint="Build one with Config(...) or Config.from_env().",
        )
    _default = config


def configure_from_env(environ: Mapping[str, str] | None = None) -> Config:
    """Install ``Config.from_env(environ)`` as the process default and return it.

    Call once at application startup. A bad ``FALLIBLE_CANCELLATION_TYPES``
    entry raises ``ConfigurationError`` here and leaves the default untouched.
    """
    config = Config.from_env(environ)
    set_config(config)
    return config


def reset_config() -> None:
    """Restore the built-in default config."""
    global _default
    _default = Config()


@contextmanager
def use_config(config: Config) -> Iterator[Config]:
    """Apply ``config`` for the current context (thread or asyncio task)."""
    token = _override.set(config)
    try:
        yield config
    finally:
        _override.reset(token)
