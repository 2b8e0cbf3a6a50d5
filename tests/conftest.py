"""Pytest configuration and fixtures for the products API."""

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from src.config import settings
from src.services.product_store import (
    ProductStore,
    create_product_store,
    get_product_store,
)


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "unit: marks tests as unit tests")
    config.addinivalue_line("markers", "asyncio: marks tests as async tests")


@pytest.fixture()
def store() -> ProductStore:
    """Provide a freshly seeded store wired into the application."""
    from src.main import app

    fresh = create_product_store(seed=True)
    app.dependency_overrides[get_product_store] = lambda: fresh
    yield fresh
    app.dependency_overrides.pop(get_product_store, None)


@pytest.fixture()
def empty_store(store) -> ProductStore:
    """The same wired-in store with its seed records removed."""
    store.clear()
    return store


@pytest.fixture()
def auth_headers() -> dict[str, str]:
    return {settings.API_KEY_HEADER: settings.API_KEY}


@pytest.fixture()
def product_payload() -> dict:
    return {
        "name": "Desk Lamp",
        "description": "Adjustable LED desk lamp",
        "price": 49.5,
        "category": "Home",
        "inStock": False,
    }


@pytest_asyncio.fixture()
async def client(store):
    """Return an HTTPX async client pointing at the FastAPI app."""
    from src.main import app

    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://testserver",
    ) as test_client:
        yield test_client
