"""Test configuration and fixtures."""

import random
from collections.abc import AsyncGenerator
from datetime import UTC, datetime, timedelta

import pytest
import pytest_asyncio
from fastapi import FastAPI
from forecast_api.config import Settings
from forecast_api.main import create_app
from forecast_api.store import EphemeralForecastStore
from httpx import ASGITransport, AsyncClient


class FakeClock:
    """Manually advanced clock for expiry tests."""

    def __init__(self, start: datetime | None = None) -> None:
        self.now = start or datetime(2026, 10, 19, 12, 0, tzinfo=UTC)

    def __call__(self) -> datetime:
        return self.now

    def advance(self, delta: timedelta) -> None:
        self.now += delta


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def store(clock: FakeClock) -> EphemeralForecastStore:
    """Store with a fake clock and a seeded random source."""
    return EphemeralForecastStore(clock=clock, rng=random.Random(1234))


@pytest.fixture
def declared_app(store: EphemeralForecastStore) -> FastAPI:
    """Application building its documents from the declared list."""
    return create_app(
        settings=Settings(
            USE_API_VERSION_DESCRIPTION_PROVIDER_TO_BUILD_OPENAPI_DOCS=False
        ),
        store=store,
    )


@pytest.fixture
def discovery_app(store: EphemeralForecastStore) -> FastAPI:
    """Application building one document per mounted API version."""
    return create_app(
        settings=Settings(
            USE_API_VERSION_DESCRIPTION_PROVIDER_TO_BUILD_OPENAPI_DOCS=True
        ),
        store=store,
    )


@pytest_asyncio.fixture
async def client(declared_app: FastAPI) -> AsyncGenerator[AsyncClient]:
    async with AsyncClient(
        transport=ASGITransport(app=declared_app), base_url="http://test"
    ) as client:
        yield client
