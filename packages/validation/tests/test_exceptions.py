"""Tests for exceptions module."""

from __future__ import annotations

from validation_chain.exceptions import (
    ChainConfigurationError,
    ChainValidationError,
    ValidationChainError,
)

# -- ChainValidationError ----------------------------------------------------


def test_chain_validation_error_message():
    err = ChainValidationError("v", ["No email present", "Password too short"])
    assert "2 errors" in str(err)
    assert "No email present; Password too short" in str(err)


def test_chain_validation_error_singular():
    assert "1 error:" in str(ChainValidationError("v", ["only"]))


def test_chain_validation_error_to_dict():
    err = ChainValidationError({"email": ""}, ["No email present"])
    assert err.to_dict() == {
        "error": "VALIDATION_FAILED",
        "errors": ["No email present"],
    }
    assert err.value == {"email": ""}


# -- ChainConfigurationError -------------------------------------------------


def test_configuration_error_is_value_error():
    err = ChainConfigurationError("bad")
    assert isinstance(err, ValueError)
    assert isinstance(err, ValidationChainError)


def test_base_to_dict():
    d = ChainConfigurationError("min_length must be an int, got str").to_dict()
    assert d == {
        "error": "ChainConfigurationError",
        "message": "min_length must be an int, got str",
    }
