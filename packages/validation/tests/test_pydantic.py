from __future__ import annotations

from dataclasses import dataclass

from pydantic import BaseModel, Field, TypeAdapter

from validation_chain import (
    Invalid,
    Valid,
    ValidationChain,
    begin,
    validate_presence_of,
    validate_with_model,
)

# --- Test Models ---


class SignUp(BaseModel):
    email: str = Field(..., min_length=3)
    age: int = Field(..., gt=0)


@dataclass
class SignUpForm:
    email: str
    age: int


# --- Tests ---


def test_model_success_keeps_original_value():
    data = {"email": "a@b.c", "age": 30}
    current = begin(data)

    result = validate_with_model(SignUp, current)

    assert result is current
    assert result.value is data


def test_model_failure_one_error_per_field():
    data = {"email": "a", "age": -5}

    result = validate_with_model(SignUp, begin(data))

    assert isinstance(result, Invalid)
    assert result.value is data
    assert len(result.errors) == 2
    assert result.errors[0].startswith("email: ")
    assert result.errors[1].startswith("age: ")


def test_model_failure_appends_after_existing_errors():
    data = {"email": "", "age": 1}
    result = begin(data)
    result = validate_presence_of(lambda d: d["email"], "No email present", result)
    result = validate_with_model(SignUp, result)

    assert result.errors[0] == "No email present"
    assert result.errors[1].startswith("email: ")


def test_model_validates_attributes():
    form = SignUpForm(email="a@b.c", age=0)

    result = validate_with_model(SignUp, begin(form))

    assert result.is_invalid
    assert [e.split(":")[0] for e in result.errors] == ["age"]


def test_model_with_accessor():
    payload = {"meta": "x", "body": {"email": "a@b.c", "age": 2}}

    result = validate_with_model(SignUp, begin(payload), accessor=lambda p: p["body"])

    assert result == Valid(payload)


def test_model_with_custom_formatter():
    result = validate_with_model(
        SignUp,
        begin({"email": "a@b.c"}),
        format_error=lambda err: (err["loc"][0], err["type"]),
    )

    assert result.errors == (("age", "missing"),)


def test_type_adapter():
    adapter = TypeAdapter(list[int])

    assert validate_with_model(adapter, begin([1, 2])).is_valid

    result = validate_with_model(adapter, begin([1, "x"]))
    assert result.is_invalid
    assert result.errors[0].startswith("1: ")


def test_model_step_in_builder():
    result = (
        ValidationChain({"email": "", "age": "old"})
        .presence_of(lambda d: d["email"], "No email present")
        .model(SignUp)
        .result()
    )

    assert result.errors[0] == "No email present"
    assert {e.split(":")[0] for e in result.errors[1:]} == {"email", "age"}
