"""Endpoints focused on user interactions."""

from fastapi import APIRouter, status

from randomuser_proxy.logging import get_logger
from randomuser_proxy.schemas import ErrorBody, UserInput

router = APIRouter(prefix="/users", tags=["users"])
_logger = get_logger("users")


@router.post(
    "",
    summary="Validate a user",
    status_code=status.HTTP_201_CREATED,
    response_model=UserInput,
    responses={
        status.HTTP_400_BAD_REQUEST: {"model": ErrorBody},
        status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": ErrorBody},
    },
)
async def create_user(payload: UserInput) -> UserInput:
    """Return the validated user with defaults applied and email lowercased.

    Invalid bodies never reach this function; they are answered with 400 by
    the request validation handler.
    """

    _logger.debug("user validated age=%d", payload.age)
    return payload
