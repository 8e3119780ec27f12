"""
Pytest configuration and fixtures.
Provides an in-memory database, a test app client and small payload helpers.
"""

import pytest
from httpx import ASGITransport, AsyncClient

from graybay.db.session import Database
from graybay.main import create_app


# Test database URL (in-memory SQLite for testing)
TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


@pytest.fixture(scope="function")
async def test_database():
    """
    Create a fresh in-memory database with every table.
    """
    database = Database(TEST_DATABASE_URL)
    await database.create_all()

    yield database

    # Cleanup
    await database.drop_all()
    await database.dispose()


@pytest.fixture(scope="function")
async def test_client(test_database):
    """
    Create a test HTTP client against an app wired to the test database.
    """
    app = create_app(database=test_database)
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


@pytest.fixture
def make_client(test_client):
    """Create a client through the API and return its JSON."""

    async def _make_client(name: str = "Bayside Dental", **overrides) -> dict:
        payload = {"name": name, "industry": "Healthcare", "size": "11-50", **overrides}
        response = await test_client.post("/api/clients", json=payload)
        assert response.status_code == 201, response.text
        return response.json()

    return _make_client


@pytest.fixture
def make_service(test_client):
    """Create a service under a client and return its JSON."""

    async def _make_service(client_id: int, name: str = "Website Maintenance", **overrides) -> dict:
        payload = {"name": name, "type": "website-maintenance", **overrides}
        response = await test_client.post(f"/api/clients/{client_id}/services", json=payload)
        assert response.status_code == 201, response.text
        return response.json()

    return _make_service
