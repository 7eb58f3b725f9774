"""API test fixtures.

Loads the FastAPI app; unit tests under tests/unit/ do not need it.
"""

from __future__ import annotations

from typing import Any, AsyncIterator, cast

import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from nutriassess.app import app


@pytest_asyncio.fixture
async def client() -> AsyncIterator[AsyncClient]:
    """Async HTTP client bound to the ASGI app."""
    transport = ASGITransport(app=cast(Any, app))
    async with AsyncClient(
        transport=transport,
        base_url="http://testserver",
    ) as ac:
        yield ac
