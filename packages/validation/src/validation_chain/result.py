"""ValidationResult — the ``Valid`` / ``Invalid`` tagged union."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any, Generic, NoReturn, TypeVar, Union

from .exceptions import ChainValidationError

V = TypeVar("V")
E = TypeVar("E")


@dataclass(frozen=True)
class Valid(Generic[V]):
    """
    A value for which no check has failed yet.

    Usage::

        result = Valid({"email": "a@b.c"})
        assert result.is_valid and result.errors == ()
    """

    value: V

    @property
    def is_valid(self) -> bool:
        return True

    @property
    def is_invalid(self) -> bool:
        return False

    @property
    def errors(self) -> tuple[Any, ...]:
        return ()

    # ── Combining ────────────────────────────────────────────────

    def merge(self, other: ValidationResult[Any, E]) -> ValidationResult[V, E]:
        """Combine with *other*, keeping this result's value."""
        if other.errors:
            return Invalid(self.value, other.errors)
        return self

    # ── Inspection ───────────────────────────────────────────────

    def raise_for_errors(self) -> V:
        return self.value

    def to_dict(self) -> dict[str, Any]:
        return {"valid": True, "value": self.value, "errors": []}

    def __bool__(self) -> bool:
        return True


@dataclass(frozen=True)
class Invalid(Generic[V, E]):
    """
    A value for which at least one check failed.

    ``errors`` is a non-empty tuple in detection order (first failure first).
    Any iterable passed in is normalised to a tuple.
    """

    value: V
    errors: tuple[E, ...]

    def __post_init__(self) -> None:
        errors = tuple(self.errors)
        if not errors:
            raise ValueError("Invalid requires at least one error")
        object.__setattr__(self, "errors", errors)

    @property
    def is_valid(self) -> bool:
        return False

    @property
    def is_invalid(self) -> bool:
        return True

    # ── Combining ────────────────────────────────────────────────

    def append(self, error: E) -> Invalid[V, E]:
        """Return a new ``Invalid`` with *error* added at the end."""
        return Invalid(self.value, (*self.errors, error))

    def extend(self, errors: Iterable[E]) -> Invalid[V, E]:
        return Invalid(self.value, (*self.errors, *errors))

    def merge(self, other: ValidationResult[Any, E]) -> ValidationResult[V, E]:
        """Combine with *other*; *other*'s errors follow this result's."""
        if other.errors:
            return self.extend(other.errors)
        return self

    # ── Inspection ───────────────────────────────────────────────

    def raise_for_errors(self) -> NoReturn:
        raise ChainValidationError(self.value, self.errors)

    def to_dict(self) -> dict[str, Any]:
        return {"valid": False, "value": self.value, "errors": list(self.errors)}

    def __bool__(self) -> bool:
        return False


ValidationResult = Union[Valid[V], Invalid[V, E]]
