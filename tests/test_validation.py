"""Schema validation tests."""

import pytest

from randomuser_proxy.schemas import RandomUserResponse, UserInput
from randomuser_proxy.validation import ValidationFailure, field_errors, validate


def test_validate_returns_model(ada_record) -> None:
    payload = validate(RandomUserResponse, {"results": [ada_record]})
    assert payload.results[0].login.username == "ada"
    assert payload.results[0].location.postcode == 12345


def test_validate_user_applies_defaults() -> None:
    user = validate(UserInput, {"name": "Ada", "email": "Ada@Example.COM"})
    assert user.age == 28
    assert user.email == "ada@example.com"


def test_empty_results_are_rejected() -> None:
    with pytest.raises(ValidationFailure) as excinfo:
        validate(RandomUserResponse, {"results": []})
    assert [error.field for error in excinfo.value.errors] == ["results"]


def test_nested_errors_use_dotted_paths(ada_record) -> None:
    ada_record["name"] = {"first": "Ada"}
    ada_record["registered"]["date"] = 1588291200
    with pytest.raises(ValidationFailure) as excinfo:
        validate(RandomUserResponse, {"results": [ada_record]})
    assert [error.field for error in excinfo.value.errors] == [
        "results.0.name.last",
        "results.0.registered.date",
    ]


@pytest.mark.parametrize("postcode", [None, True, ["12345"], {"code": 1}])
def test_postcode_must_be_string_or_number(ada_record, postcode: object) -> None:
    ada_record["location"]["postcode"] = postcode
    with pytest.raises(ValidationFailure) as excinfo:
        validate(RandomUserResponse, {"results": [ada_record]})
    assert excinfo.value.details() == [
        {
            "field": "results.0.location.postcode",
            "message": "Input should be a valid string or number",
        }
    ]


def test_non_object_payload() -> None:
    with pytest.raises(ValidationFailure) as excinfo:
        validate(RandomUserResponse, "<html>")
    assert len(excinfo.value.errors) == 1


def test_field_errors_strip_body_prefix() -> None:
    errors = [
        {"loc": ("body", "name"), "msg": "Field required"},
        {"loc": ("body",), "msg": "Field required"},
        {"loc": ("query", "q"), "msg": "Field required"},
    ]
    assert [error.field for error in field_errors(errors, strip_prefix="body")] == ["name", "body", "query.q"]
