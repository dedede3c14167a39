"""Client for the third-party RandomUser API."""

from __future__ import annotations

from collections.abc import AsyncGenerator
from typing import Any

import httpx

from randomuser_proxy.config import get_settings
from randomuser_proxy.logging import get_logger
from randomuser_proxy.schemas import Person, RandomUserResponse
from randomuser_proxy.validation import validate

_logger = get_logger("randomuser")


class UpstreamError(Exception):
    """The RandomUser API could not be reached or returned a non-JSON body."""


class RandomUserClient:
    """Shared HTTP client for the RandomUser API.

    One GET per call, no retries and no caching. The HTTP status code is not
    inspected: whatever JSON comes back is handed to schema validation.
    """

    def __init__(
        self,
        url: str,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.url = url
        self.timeout = timeout
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    async def connect(self) -> None:
        """Open the underlying connection pool."""
        self._client = httpx.AsyncClient(
            timeout=httpx.Timeout(self.timeout),
            transport=self._transport,
        )

    async def disconnect(self) -> None:
        """Close the underlying connection pool."""
        if self._client:
            await self._client.aclose()
            self._client = None

    async def fetch_raw(self) -> Any:
        """Issue a single GET and return the decoded JSON body."""
        if not self._client:
            raise RuntimeError("RandomUser client not initialized")

        try:
            response = await self._client.get(self.url)
        except httpx.HTTPError as exc:
            raise UpstreamError(f"request to {self.url} failed: {exc}") from exc

        _logger.debug("upstream responded status=%s bytes=%d", response.status_code, len(response.content))
        try:
            return response.json()
        except ValueError as exc:
            raise UpstreamError(f"non-JSON body from {self.url} (status {response.status_code})") from exc

    async def fetch_person(self) -> Person:
        """Fetch one random person, validated.

        Raises:
            UpstreamError: on network failure or a non-JSON body.
            ValidationFailure: if the body does not match the expected shape.
        """
        payload = validate(RandomUserResponse, await self.fetch_raw())
        return payload.results[0]


def build_client(transport: httpx.AsyncBaseTransport | None = None) -> RandomUserClient:
    """Create a client configured from the application settings."""
    settings = get_settings()
    return RandomUserClient(
        url=settings.randomuser_url,
        timeout=settings.randomuser_timeout,
        transport=transport,
    )


# Global client instance
randomuser = build_client()


async def get_randomuser_client() -> AsyncGenerator[RandomUserClient, None]:
    """Dependency for FastAPI routes to get the RandomUser client."""
    yield randomuser
