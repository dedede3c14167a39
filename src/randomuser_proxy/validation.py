"""Schema validation entry points shared by inbound and upstream payloads."""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from typing import Any, TypeVar

from pydantic import BaseModel, ValidationError

from randomuser_proxy.schemas import FieldError

ModelT = TypeVar("ModelT", bound=BaseModel)


class ValidationFailure(Exception):
    """One or more fields did not satisfy their declared schema."""

    def __init__(self, errors: Sequence[FieldError]) -> None:
        super().__init__(f"{len(errors)} validation error(s)")
        self.errors = list(errors)

    def details(self) -> list[dict[str, str]]:
        """Return the errors in their JSON response form."""

        return [error.model_dump() for error in self.errors]


def field_path(location: Sequence[int | str]) -> str:
    """Join a pydantic error location into a dotted field path."""

    return ".".join(str(part) for part in location)


def field_errors(
    errors: Iterable[Mapping[str, Any]], strip_prefix: str | None = None
) -> list[FieldError]:
    """Convert pydantic error dicts into ordered :class:`FieldError` items.

    ``strip_prefix`` drops a leading location segment, which FastAPI adds for
    request bodies (``("body", "name")``).
    """

    converted: list[FieldError] = []
    for error in errors:
        location = tuple(error.get("loc", ()))
        if strip_prefix is not None and len(location) > 1 and location[0] == strip_prefix:
            location = location[1:]
        converted.append(FieldError(field=field_path(location), message=error["msg"]))
    return converted


def validate(schema: type[ModelT], value: Any) -> ModelT:
    """Validate ``value`` against ``schema``.

    Every violated field is reported, in the order pydantic visits them.

    Raises:
        ValidationFailure: if ``value`` does not match ``schema``.
    """

    try:
        return schema.model_validate(value)
    except ValidationError as exc:
        raise ValidationFailure(field_errors(exc.errors())) from exc
