"""Proxy endpoints over the RandomUser API."""

from __future__ import annotations

from collections.abc import Callable
from typing import Annotated

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from randomuser_proxy.logging import get_logger
from randomuser_proxy.randomuser import RandomUserClient, get_randomuser_client
from randomuser_proxy.schemas import (
    AddressSummary,
    ErrorBody,
    LoginSummary,
    Person,
    PersonSummary,
)
from randomuser_proxy.shaping import address_summary, login_summary, person_summary
from randomuser_proxy.validation import ValidationFailure

router = APIRouter(tags=["random"])
_logger = get_logger("random")

INVALID_UPSTREAM_MESSAGE = "Invalid response from RandomUser API"

_ERROR_RESPONSES = {status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": ErrorBody}}

Client = Annotated[RandomUserClient, Depends(get_randomuser_client)]


async def _proxy(
    client: RandomUserClient,
    resource: str,
    shape: Callable[[Person], BaseModel],
) -> BaseModel | JSONResponse:
    """Fetch a person, shape it, and turn any failure into a 500 body."""

    try:
        person = await client.fetch_person()
        return shape(person)
    except ValidationFailure as exc:
        _logger.error("invalid upstream response for random %s: %s", resource, exc.details())
        body = ErrorBody(error=INVALID_UPSTREAM_MESSAGE, details=exc.errors)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=body.model_dump(),
        )
    except Exception:
        _logger.exception("Error fetching random %s", resource)
        body = ErrorBody(error=f"Failed to fetch random {resource}")
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=body.model_dump(exclude_none=True),
        )


@router.get(
    "/random-person",
    summary="Random person's name and country",
    response_model=PersonSummary,
    responses=_ERROR_RESPONSES,
)
async def random_person(client: Client):
    return await _proxy(client, "person", person_summary)


@router.get(
    "/random-address",
    summary="Random address (city, postcode)",
    response_model=AddressSummary,
    responses=_ERROR_RESPONSES,
)
async def random_address(client: Client):
    """Postcodes are always returned as strings, even when upstream sends a number."""

    return await _proxy(client, "address", address_summary)


@router.get(
    "/random-login",
    summary="Random login with registration summary",
    response_model=LoginSummary,
    responses=_ERROR_RESPONSES,
)
async def random_login(client: Client):
    return await _proxy(client, "login", login_summary)
