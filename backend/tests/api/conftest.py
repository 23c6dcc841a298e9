"""API test fixtures — apps built per test from explicit Settings.

Invariants:
    - Every test gets a fresh app from create_app(), never the module-level app
    - Static directory points at an empty tmp path unless a test opts in
    - raise_app_exceptions=False so catch-all 500 responses reach the client

Design Decisions:
    - httpx AsyncClient over ASGITransport: same client the rest of the suite uses,
      no network, lifespan not run (logging setup is not under test here)
"""

import pytest
from httpx import ASGITransport, AsyncClient

from dice_api.config import Settings
from dice_api.main import create_app


@pytest.fixture
def settings(tmp_path):
    return Settings(
        port=3000,
        node_env="development",
        static_dir=str(tmp_path / "no-static"),
    )


@pytest.fixture
def app(settings):
    return create_app(settings)


@pytest.fixture
async def client(app):
    async with AsyncClient(
        transport=ASGITransport(app=app, raise_app_exceptions=False),
        base_url="http://test",
    ) as c:
        yield c


@pytest.fixture
async def make_client():
    """Build a client for an app with custom settings."""
    clients = []

    def _make(**overrides) -> AsyncClient:
        c = AsyncClient(
            transport=ASGITransport(
                app=create_app(Settings(**overrides)),
                raise_app_exceptions=False,
            ),
            base_url="http://test",
        )
        clients.append(c)
        return c

    yield _make
    for c in clients:
        await c.aclose()
