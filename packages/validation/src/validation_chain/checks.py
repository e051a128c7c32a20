"""
Check combinators.

Every check takes the running ``ValidationResult`` as its *final* argument
and returns a new one, so checks compose left to right::

    result = begin(user)
    result = validate_presence_of(lambda u: u.email, "No email present", result)
    result = validate_length_of(lambda u: u.password, 8, "Password too short", result)

Failing checks append their error; passing checks leave the result as is.
An ``Invalid`` result never reverts to ``Valid``.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Callable
from typing import Any, TypeVar

from .exceptions import ChainConfigurationError
from .result import Invalid, Valid, ValidationResult

logger = logging.getLogger("validation_chain.checks")

V = TypeVar("V")
E = TypeVar("E")
T = TypeVar("T")

Accessor = Callable[[V], str]


def begin(value: V) -> Valid[V]:
    """Wrap *value* as the start of a validation chain."""
    return Valid(value)


def apply_check(
    fails_when: Callable[[V], Any],
    error: E,
    current: ValidationResult[V, E],
) -> ValidationResult[V, E]:
    """
    Evaluate *fails_when* against the carried value.

    All other checks are built on this one.

    Args:
        fails_when: Predicate returning a truthy value when the check fails.
        error: Error appended when the check fails.
        current: The result accumulated so far.

    Returns:
        ``current`` unchanged when the check passes, otherwise an ``Invalid``
        with *error* appended after any existing errors.
    """
    if not fails_when(current.value):
        return current

    logger.debug("Check failed: %r", error)
    if isinstance(current, Invalid):
        return current.append(error)
    return Invalid(current.value, (error,))


def validate_presence_of(
    accessor: Accessor[V],
    error: E,
    current: ValidationResult[V, E],
) -> ValidationResult[V, E]:
    """Fail when ``accessor(value)`` is the empty string."""
    return apply_check(lambda value: accessor(value) == "", error, current)


def validate_length_of(
    accessor: Accessor[V],
    min_length: int,
    error: E,
    current: ValidationResult[V, E],
) -> ValidationResult[V, E]:
    """
    Fail when ``accessor(value)`` is shorter than *min_length* characters.

    This is a minimum-length check; use :func:`equals` for an exact length.
    A negative *min_length* never fails.
    """
    _check_min_length(min_length)
    return apply_check(lambda value: len(accessor(value)) < min_length, error, current)


def _check_min_length(min_length: int) -> None:
    """Raise ``ChainConfigurationError`` unless *min_length* is an int."""
    if isinstance(min_length, bool) or not isinstance(min_length, int):
        raise ChainConfigurationError(
            f"min_length must be an int, got {type(min_length).__name__}"
        )


def equals(
    left: T,
    right: T,
    error: E,
    current: ValidationResult[V, E],
) -> ValidationResult[V, E]:
    """Fail when ``left != right``.  The operands do not touch the carried value."""
    return apply_check(lambda _value: left != right, error, current)


def validate_match_of(
    accessor: Accessor[V],
    pattern: re.Pattern[str] | str,
    error: E,
    current: ValidationResult[V, E],
) -> ValidationResult[V, E]:
    """
    Fail when ``accessor(value)`` contains no match for *pattern*.

    The match is unanchored (``re.search``): a partial match passes.
    A string pattern is compiled with ``re.compile``; compilation errors
    propagate as ``re.error``.
    """
    compiled = re.compile(pattern) if isinstance(pattern, str) else pattern
    return apply_check(
        lambda value: compiled.search(accessor(value)) is None, error, current
    )
