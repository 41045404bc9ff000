"""Fixtures for HTTP tests: the app on the in-memory store with a fixed clock."""

from collections.abc import Iterator

import pytest
from fastapi.testclient import TestClient

from cashdesk_payments.config import Settings
from cashdesk_payments.entrypoints.api import create_app
from cashdesk_payments.infrastructure.time_provider import FixedTimeProvider


@pytest.fixture
def settings() -> Settings:
    return Settings(DATABASE_URL="memory://")


@pytest.fixture
def client(settings: Settings, time_provider: FixedTimeProvider) -> Iterator[TestClient]:
    app = create_app(settings, time_provider=time_provider)
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def seeded_client(client: TestClient) -> TestClient:
    """Client whose store holds cash desk 1, manager 1001 and cashier 2002."""
    client.post("/api/cashdesks", json={"number": 1}).raise_for_status()
    client.post(
        "/api/employees",
        json={
            "registrationNumber": 1001,
            "firstName": "Anna",
            "lastName": "Manager",
            "type": "Manager",
        },
    ).raise_for_status()
    client.post(
        "/api/employees",
        json={
            "registrationNumber": 2002,
            "firstName": "Ben",
            "lastName": "Cashier",
            "type": "Cashier",
            "address": {"street": "Spengergasse 20", "zip": "1050", "city": "Wien"},
        },
    ).raise_for_status()
    return client
