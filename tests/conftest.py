"""Shared fixtures for the Ticket API tests."""
import pytest
from fastapi.testclient import TestClient

from ticket_api.app.core.store import RecordStore
from ticket_api.app.main import create_app


@pytest.fixture
def store():
    return RecordStore()


@pytest.fixture
def client(store):
    return TestClient(create_app(store))


@pytest.fixture
def ann():
    return {
        "id": 1,
        "name": "Ann",
        "sureName": "Lee",
        "passportNumber": "123456789",
        "age": 65,
    }
