"""
Pipeline composition for checks.

Two equivalent styles are supported.  ``pipe`` threads a result through
single-argument steps::

    result = pipe(
        begin(user),
        partial(validate_presence_of, lambda u: u.email, "No email present"),
        partial(validate_length_of, lambda u: u.password, 8, "Password too short"),
    )

``ValidationChain`` is a fluent builder over the same checks::

    result = (
        ValidationChain(user)
        .presence_of(lambda u: u.email, "No email present")
        .length_of(lambda u: u.password, 8, "Password too short")
        .result()
    )
"""

from __future__ import annotations

import logging
import re
from collections.abc import Callable
from functools import partial
from typing import TYPE_CHECKING, Any, Generic, TypeVar

from .checks import (
    apply_check,
    begin,
    _check_min_length,
    equals,
    validate_length_of,
    validate_match_of,
    validate_presence_of,
)
from .exceptions import ChainConfigurationError
from .pydantic import format_pydantic_error, validate_with_model
from .result import ValidationResult

if TYPE_CHECKING:
    from collections.abc import Mapping

    from pydantic import BaseModel, TypeAdapter

logger = logging.getLogger("validation_chain.chain")

V = TypeVar("V")

Step = Callable[[ValidationResult[Any, Any]], ValidationResult[Any, Any]]


def pipe(result: ValidationResult[V, Any], *steps: Step) -> ValidationResult[V, Any]:
    """Apply *steps* to *result* from left to right."""
    for step in steps:
        result = step(result)
    return result


class ValidationChain(Generic[V]):
    """
    Fluent builder for a sequence of checks over one value.

    Steps are queued in call order and evaluated by ``result()``, which
    can be called repeatedly.  The order of calls is the order in which
    errors accumulate.
    """

    def __init__(self, value: V) -> None:
        self._value = value
        self._steps: list[Step] = []

    # -- generic steps -------------------------------------------------------

    def then(self, step: Step) -> ValidationChain[V]:
        """Queue any ``ValidationResult -> ValidationResult`` callable."""
        if not callable(step):
            raise ChainConfigurationError(
                f"Chain steps must be callable, got {type(step).__name__}"
            )
        self._steps.append(step)
        return self

    def check(self, fails_when: Callable[[V], Any], error: Any) -> ValidationChain[V]:
        """Queue a raw predicate check (see ``apply_check``)."""
        return self.then(partial(apply_check, fails_when, error))

    # -- derived checks ------------------------------------------------------

    def presence_of(
        self, accessor: Callable[[V], str], error: Any
    ) -> ValidationChain[V]:
        return self.then(partial(validate_presence_of, accessor, error))

    def length_of(
        self, accessor: Callable[[V], str], min_length: int, error: Any
    ) -> ValidationChain[V]:
        _check_min_length(min_length)
        return self.then(partial(validate_length_of, accessor, min_length, error))

    def equals(self, left: Any, right: Any, error: Any) -> ValidationChain[V]:
        return self.then(partial(equals, left, right, error))

    def match_of(
        self,
        accessor: Callable[[V], str],
        pattern: re.Pattern[str] | str,
        error: Any,
    ) -> ValidationChain[V]:
        compiled = re.compile(pattern) if isinstance(pattern, str) else pattern
        return self.then(partial(validate_match_of, accessor, compiled, error))

    def model(
        self,
        model: type[BaseModel] | TypeAdapter[Any],
        *,
        accessor: Callable[[V], Any] | None = None,
        format_error: Callable[[Mapping[str, Any]], Any] = format_pydantic_error,
    ) -> ValidationChain[V]:
        """Queue a Pydantic model check (see ``validate_with_model``)."""
        return self.then(
            partial(
                validate_with_model,
                model,
                accessor=accessor,
                format_error=format_error,
            )
        )

    # -- evaluation ----------------------------------------------------------

    def result(self) -> ValidationResult[V, Any]:
        """Run every queued step over ``begin(value)``."""
        outcome = pipe(begin(self._value), *self._steps)
        logger.debug(
            "Validation chain ran %d step(s), %d error(s)",
            len(self._steps),
            len(outcome.errors),
        )
        return outcome

    build = result

    def reset(self) -> ValidationChain[V]:
        """Clear all queued steps and return ``self`` for reuse."""
        self._steps.clear()
        return self

    def __len__(self) -> int:
        return len(self._steps)

