import os

# Settings are read at import time, so the test database must be configured first
os.environ["DATABASE_URL"] = "sqlite+aiosqlite://"
os.environ["API_URL"] = "http://testserver"
os.environ["API_PREFIX"] = ""
os.environ["LOG_LEVEL"] = "WARNING"

import pytest
from fastapi.testclient import TestClient

from products_api.main import app


@pytest.fixture
def client():
    """Client bound to a fresh in-memory database for each test."""
    # The lifespan creates the tables on entry and disposes the engine on exit
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def create_product(client):
    def _create(description="Coffee beans", value=12.5):
        response = client.post("/products", json={"description": description, "value": value})
        assert response.status_code == 200, response.text
        return response.json()

    return _create
