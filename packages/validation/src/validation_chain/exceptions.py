"""
Exception hierarchy for validation-chain.

Validation failures are returned as data (``Invalid``); these exceptions
only surface when a caller opts in via ``raise_for_errors()`` or when a
chain is configured incorrectly.  All of them provide ``to_dict()`` for
API-friendly error responses.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any


class ValidationChainError(Exception):
    """Root exception for the validation-chain library."""

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": self.__class__.__name__,
            "message": str(self),
        }


class ChainValidationError(ValidationChainError):
    """
    Raised by ``raise_for_errors()`` on an ``Invalid`` result.

    Carries the validated value and the accumulated errors in detection order.
    """

    def __init__(self, value: Any, errors: Iterable[Any]) -> None:
        self.value = value
        self.errors: tuple[Any, ...] = tuple(errors)
        count = len(self.errors)
        noun = "error" if count == 1 else "errors"
        detail = "; ".join(str(e) for e in self.errors)
        super().__init__(f"Validation failed with {count} {noun}: {detail}")

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": "VALIDATION_FAILED",
            "errors": list(self.errors),
        }


class ChainConfigurationError(ValidationChainError, ValueError):
    """A check or chain step was configured with invalid arguments."""
