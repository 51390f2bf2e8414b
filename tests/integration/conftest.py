from collections.abc import AsyncGenerator

import httpx
import pytest_asyncio

from doc_translator.api.app import create_app
from doc_translator.config.settings import Settings


@pytest_asyncio.fixture
async def client(local_settings: Settings) -> AsyncGenerator[httpx.AsyncClient, None]:
    transport = httpx.ASGITransport(app=create_app(local_settings))
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
