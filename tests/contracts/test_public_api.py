"""Contract tests for the public surface and the core/combinator layering."""

from __future__ import annotations

import ast
import inspect
from pathlib import Path

import pytest

import fallible
from fallible import Err, Ok, combinators

pytestmark = pytest.mark.contract

_SRC = Path(fallible.__file__).parent

_RESULT_OPERATIONS = [
    "is_ok",
    "is_err",
    "get_or_none",
    "error_or_none",
    "to_pair",
    "get_or_raise",
    "error_or_raise",
    "get_or_raise_with",
    "error_or_raise_with",
    "get_or_else",
    "map",
    "map_catching",
    "map_error",
    "flat_map",
    "recover_with",
    "flatten",
    "fold",
    "on_ok",
    "on_err",
]


def test_top_level_exports_resolve() -> None:
    for name in fallible.__all__:
        assert getattr(fallible, name) is not None, name


def test_version_is_a_string() -> None:
    assert isinstance(fallible.__version__, str)


@pytest.mark.parametrize("name", _RESULT_OPERATIONS)
def test_every_operation_is_a_free_function_and_a_method(name: str) -> None:
    assert name in combinators.__all__
    assert inspect.isfunction(getattr(combinators, name))
    assert callable(getattr(Ok(1), name))
    assert callable(getattr(Err("e"), name))


def test_variants_are_slotted() -> None:
    assert not hasattr(Ok(1), "__dict__")
    assert not hasattr(Err("e"), "__dict__")


def test_variants_do_not_subclass_each_other() -> None:
    assert not issubclass(Ok, Err)
    assert not issubclass(Err, Ok)


def test_core_and_combinators_never_log() -> None:
    """The pure layers stay free of logging; only ambient modules log."""
    for module in ("core.py", "combinators.py"):
        tree = ast.parse((_SRC / module).read_text(encoding="utf-8"))
        imported = {
            alias.name
            for node in ast.walk(tree)
            if isinstance(node, ast.Import)
            for alias in node.names
        }
        assert "logging" not in imported, module


def test_library_logger_has_null_handler() -> None:
    import logging

    handlers = logging.getLogger("fallible").handlers
    assert any(isinstance(h, logging.NullHandler) for h in handlers)
