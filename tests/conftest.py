"""Shared test fixtures for pytest"""
import pytest
from httpx import ASGITransport, AsyncClient

from core.config import Settings
from main import create_app

TEST_TOKEN = "mysecrettoken"


@pytest.fixture
def settings():
    """Settings pinned to the default shared secret regardless of environment"""
    return Settings(api_token=TEST_TOKEN, debug=False)


@pytest.fixture
def app(settings):
    """Fresh application (and empty item store) per test"""
    return create_app(settings)


@pytest.fixture
def item_store(app):
    return app.state.item_store


@pytest.fixture
async def client(app):
    """HTTP client for API testing"""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest.fixture
def auth_headers():
    return {"Authorization": f"Bearer {TEST_TOKEN}"}
