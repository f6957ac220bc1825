"""
pytest configuration and fixtures for the User resource server
Each test gets its own app and store, so no state leaks between tests.
"""

import pytest
import pytest_asyncio
import httpx

from users_api.app import create_app
from users_api.services.user_store import UserStore


@pytest.fixture
def store():
    """Fresh, empty user store"""
    return UserStore()


@pytest.fixture
def app(store):
    """Application serving the per-test store"""
    return create_app(store=store)


@pytest_asyncio.fixture
async def client(app):
    """HTTP client driving the app in-process"""
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://testserver") as http_client:
        yield http_client


@pytest.fixture
def jane():
    """Example user payload"""
    return {"name": "Jane", "email": "jane@x.com"}
