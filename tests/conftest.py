"""Pytest configuration and fixtures.

Provides configuration and environment isolation plus a small call-recording
test double. All fixtures here are autouse unless noted.
"""

from __future__ import annotations

from dataclasses import dataclass, field
import os
from typing import Any

import pytest

from fallible.config import reset_config

# =============================================================================
# Test Doubles
# =============================================================================


@dataclass
class Recorder:
    """Callable test double that remembers every argument it was called with.

    Returns ``returns`` when set, otherwise echoes its argument back.
    """

    returns: Any = None
    calls: list[Any] = field(default_factory=list)

    def __call__(self, arg: Any = None) -> Any:
        self.calls.append(arg)
        return arg if self.returns is None else self.returns

    @property
    def called(self) -> bool:
        return bool(self.calls)


@pytest.fixture
def recorder() -> Recorder:
    """Fresh Recorder per test (not autouse)."""
    return Recorder()


# =============================================================================
# Environment Isolation (Autouse)
# =============================================================================


@pytest.fixture(autouse=True)
def block_dotenv(request, monkeypatch):
    """Prevent python-dotenv from loading project .env files during tests.

    Opt-out: @pytest.mark.allow_dotenv
    """
    if request.node.get_closest_marker("allow_dotenv"):
        return
    monkeypatch.setattr("fallible.config.load_dotenv", lambda *_args, **_kwargs: False)


@pytest.fixture(autouse=True)
def isolate_fallible_env(request, monkeypatch):
    """Clear FALLIBLE_* env vars so the process default config is predictable.

    Opt-out: @pytest.mark.allow_env_pollution
    """
    if request.node.get_closest_marker("allow_env_pollution"):
        return
    for key in list(os.environ.keys()):
        if key.startswith("FALLIBLE_"):
            monkeypatch.delenv(key, raising=False)


@pytest.fixture(autouse=True)
def fresh_config():
    """Drop any cached process default before and after each test."""
    reset_config()
    yield
    reset_config()
