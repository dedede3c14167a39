"""Request, upstream and response models."""

from __future__ import annotations

from typing import Annotated, Any

from email_validator import EmailNotValidError, validate_email
from pydantic import BaseModel, Field, PlainValidator, field_validator
from pydantic_core import PydanticCustomError

NAME_MIN_LENGTH = 3
NAME_MAX_LENGTH = 12
AGE_MIN = 18
AGE_MAX = 100
DEFAULT_AGE = 28


class FieldError(BaseModel):
    """A single field-level validation problem."""

    field: str
    message: str


class ErrorBody(BaseModel):
    """JSON body returned for failed requests."""

    error: str
    details: list[FieldError] | None = None


# Inbound payloads


class UserInput(BaseModel):
    """Payload accepted by ``POST /users``."""

    name: str = Field(strict=True)
    age: int = Field(default=DEFAULT_AGE, strict=True)
    email: str = Field(strict=True)

    @field_validator("name")
    @classmethod
    def _check_name_length(cls, value: str) -> str:
        if len(value) < NAME_MIN_LENGTH:
            raise PydanticCustomError(
                "string_too_short", f"Name must be at least {NAME_MIN_LENGTH} characters"
            )
        if len(value) > NAME_MAX_LENGTH:
            raise PydanticCustomError(
                "string_too_long", f"Name must be at most {NAME_MAX_LENGTH} characters"
            )
        return value

    @field_validator("age", mode="before")
    @classmethod
    def _accept_integral_float(cls, value: Any) -> Any:
        # JSON 30.0 is an integer; 30.5 still fails the strict int check
        if isinstance(value, float) and value.is_integer():
            return int(value)
        return value

    @field_validator("age")
    @classmethod
    def _check_age_range(cls, value: int) -> int:
        if value < AGE_MIN:
            raise PydanticCustomError("greater_than_equal", f"Age must be at least {AGE_MIN}")
        if value > AGE_MAX:
            raise PydanticCustomError("less_than_equal", f"Age must be at most {AGE_MAX}")
        return value

    @field_validator("email")
    @classmethod
    def _normalize_email(cls, value: str) -> str:
        invalid = PydanticCustomError("value_error", "Must be a valid email")
        if not value.isascii():
            raise invalid
        try:
            validate_email(value, check_deliverability=False)
        except EmailNotValidError:
            raise invalid from None
        return value.lower()


# Upstream RandomUser API payloads


def _check_postcode(value: Any) -> str | int | float:
    # bool is an int subclass but never a postcode
    if isinstance(value, bool) or not isinstance(value, (str, int, float)):
        raise PydanticCustomError("postcode_type", "Input should be a valid string or number")
    return value


Postcode = Annotated[str | int | float, PlainValidator(_check_postcode)]


class PersonName(BaseModel):
    first: str
    last: str


class Location(BaseModel):
    country: str
    city: str
    postcode: Postcode


class Login(BaseModel):
    username: str


class Registration(BaseModel):
    date: str


class Person(BaseModel):
    """The subset of a RandomUser record this service relies on."""

    name: PersonName
    location: Location
    login: Login
    registered: Registration


class RandomUserResponse(BaseModel):
    """Envelope returned by the RandomUser API; only ``results[0]`` is used."""

    results: list[Person] = Field(min_length=1)


# Outbound shapes


class PersonSummary(BaseModel):
    fullName: str
    country: str


class AddressSummary(BaseModel):
    city: str
    postcode: str


class LoginSummary(BaseModel):
    username: str
    registeredDate: str
    summary: str


class PingResponse(BaseModel):
    message: str
