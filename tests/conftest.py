"""Shared fixtures: in-process API client and a mocked RandomUser API."""

import logging
from collections.abc import AsyncIterator, Awaitable, Callable, Iterator

import httpx
import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from randomuser_proxy.main import app
from randomuser_proxy.randomuser import RandomUserClient, get_randomuser_client

UPSTREAM_URL = "https://randomuser.test/api/"

Handler = Callable[[httpx.Request], httpx.Response]


@pytest.fixture()
def ada_record() -> dict[str, object]:
    return {
        "gender": "female",
        "name": {"title": "Ms", "first": "Ada", "last": "Lovelace"},
        "location": {"country": "UK", "city": "London", "postcode": 12345},
        "login": {"username": "ada", "uuid": "8c1f"},
        "registered": {"date": "2020-05-01T00:00:00Z", "age": 6},
    }


@pytest.fixture()
def app_logs(caplog: pytest.LogCaptureFixture) -> Iterator[pytest.LogCaptureFixture]:
    """Capture records from the package logger, which does not propagate to root."""

    logger = logging.getLogger("randomuser_proxy")
    previous = logger.level
    logger.addHandler(caplog.handler)
    logger.setLevel(logging.DEBUG)
    try:
        yield caplog
    finally:
        logger.removeHandler(caplog.handler)
        logger.setLevel(previous)


@pytest_asyncio.fixture()
async def api_client() -> AsyncIterator[AsyncClient]:
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://testserver") as client:
        yield client


@pytest_asyncio.fixture()
async def upstream() -> AsyncIterator[Callable[..., Awaitable[RandomUserClient]]]:
    """Route the proxy endpoints to a mocked RandomUser API.

    Call with a request handler, or with ``json=`` (and optionally
    ``status_code=``) for a canned response.
    """

    opened: list[RandomUserClient] = []

    async def install(
        handler: Handler | None = None, *, json: object = None, status_code: int = 200
    ) -> RandomUserClient:
        if handler is None:
            handler = lambda request: httpx.Response(status_code, json=json)
        client = RandomUserClient(url=UPSTREAM_URL, transport=httpx.MockTransport(handler))
        await client.connect()
        opened.append(client)
        app.dependency_overrides[get_randomuser_client] = lambda: client
        return client

    yield install

    app.dependency_overrides.pop(get_randomuser_client, None)
    for client in opened:
        await client.disconnect()
