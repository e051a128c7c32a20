"""validate_with_model — a check backed by Pydantic model validation."""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from typing import Any, TypeVar

from pydantic import BaseModel, TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from .result import Invalid, ValidationResult

logger = logging.getLogger("validation_chain.pydantic")

V = TypeVar("V")


def format_pydantic_error(error: Mapping[str, Any]) -> str:
    """Render one Pydantic error as ``"<dotted loc>: <msg>"``."""
    loc = ".".join(str(p) for p in error.get("loc", ())) or "__root__"
    msg = error.get("msg", "validation error")
    return f"{loc}: {msg}"


def validate_with_model(
    model: type[BaseModel] | TypeAdapter[Any],
    current: ValidationResult[V, Any],
    *,
    accessor: Callable[[V], Any] | None = None,
    format_error: Callable[[Mapping[str, Any]], Any] = format_pydantic_error,
) -> ValidationResult[V, Any]:
    """
    Validate the carried value (or ``accessor(value)``) against *model*.

    *current* is the last positional argument, like every other check;
    *accessor* and *format_error* are keyword-only and follow it, so
    ``partial(validate_with_model, model, accessor=...)`` still composes.

    Each Pydantic error becomes one entry in the error list, in the order
    Pydantic reports them.  The carried value is never replaced by the
    parsed model.

    Mappings are validated as-is; other objects are read through their
    attributes (``from_attributes=True``).
    """
    target = accessor(current.value) if accessor is not None else current.value

    try:
        if isinstance(model, TypeAdapter):
            model.validate_python(target)
        elif isinstance(target, Mapping):
            model.model_validate(target)
        else:
            model.model_validate(target, from_attributes=True)
    except PydanticValidationError as exc:
        errors = [format_error(error) for error in exc.errors()]
        logger.debug("Model check failed with %d error(s)", len(errors))
        if isinstance(current, Invalid):
            return current.extend(errors)
        return Invalid(current.value, errors)

    return current
