from .chain import ValidationChain, pipe
from .checks import (
    apply_check,
    begin,
    equals,
    validate_length_of,
    validate_match_of,
    validate_presence_of,
)
from .exceptions import (
    ChainConfigurationError,
    ChainValidationError,
    ValidationChainError,
)
from .pydantic import format_pydantic_error, validate_with_model
from .result import Invalid, Valid, ValidationResult

__all__ = [
    # Core types
    "ValidationResult",
    "Valid",
    "Invalid",
    # Checks
    "begin",
    "apply_check",
    "validate_presence_of",
    "validate_length_of",
    "equals",
    "validate_match_of",
    "validate_with_model",
    "format_pydantic_error",
    # Composition
    "pipe",
    "ValidationChain",
    # Exceptions
    "ValidationChainError",
    "ChainValidationError",
    "ChainConfigurationError",
]
