"""API test fixtures — FastAPI app + httpx clients over ASGITransport.

Invariants:
    - Every test gets a fresh app from create_app (no shared app state)
    - Requests go in-process through ASGITransport: no sockets, no server
    - plus_encoding_client differs from client only by the encode_plus_sign transform
"""

import pytest
from httpx import ASGITransport

from query_echo.client import create_client, encode_plus_sign
from query_echo.main import create_app


@pytest.fixture
def app():
    return create_app()


@pytest.fixture
async def client(app):
    async with create_client(
        "http://test", transport=ASGITransport(app=app),
    ) as c:
        yield c


@pytest.fixture
async def plus_encoding_client(app):
    """Client whose request URIs have every literal '+' rewritten to %2B."""
    async with create_client(
        "http://test",
        transport=ASGITransport(app=app),
        transforms=[encode_plus_sign],
    ) as c:
        yield c
