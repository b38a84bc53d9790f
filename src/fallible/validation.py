"""Pydantic validation that reports failures as ``Err`` instead of raising."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from pydantic import BaseModel, ValidationError

from fallible.core import Err, Ok

if TYPE_CHECKING:
    from fallible.core import Result

__all__ = ["validate", "validate_json"]


def validate[M: BaseModel](
    model: type[M], data: Any, *, strict: bool | None = None
) -> Result[M, ValidationError]:
    """Validate ``data`` against ``model``.

    Only ``pydantic.ValidationError`` becomes an ``Err``; anything else a
    validator raises propagates.
    """
    try:
        return Ok(model.model_validate(data, strict=strict))
    except ValidationError as exc:
        return Err(exc)


def validate_json[M: BaseModel](
    model: type[M], payload: str | bytes, *, strict: bool | None = None
) -> Result[M, ValidationError]:
    """Parse and validate a JSON document against ``model``.

    Malformed JSON is reported by pydantic as a ``ValidationError`` too.
    """
    try:
        return Ok(model.model_validate_json(payload, strict=strict))
    except ValidationError as exc:
        return Err(exc)
