from os import environ
from typing import AsyncGenerator

import pytest
import pytest_asyncio
from asgi_lifespan import LifespanManager
from fastapi import FastAPI
from httpx import AsyncClient, ASGITransport
from pytest_httpx import HTTPXMock

STORE_URL = "https://donations-store.local"

environ["store_url"] = STORE_URL
environ["keep_draft_on_failure"] = "1"

from donapp.main import app
from tests.store_mock import StoreMockState


@pytest.fixture
def store(request: pytest.FixtureRequest, httpx_mock: HTTPXMock) -> StoreMockState:
    marker = request.node.get_closest_marker("store_donations")
    state = StoreMockState(marker.args[0] if marker else None)
    state.register(httpx_mock)
    return state


@pytest_asyncio.fixture
async def app_with_lifespan(store: StoreMockState) -> AsyncGenerator[FastAPI, None]:
    async with LifespanManager(app) as manager:
        yield manager.app


@pytest_asyncio.fixture
async def client(app_with_lifespan) -> AsyncGenerator[AsyncClient, None]:
    async with AsyncClient(transport=ASGITransport(app=app_with_lifespan), base_url="https://donapp.local") as client:
        yield client
