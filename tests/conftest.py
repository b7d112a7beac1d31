import pytest
from fastapi.testclient import TestClient

from solarman.db.store import InMemoryOrderStore
from solarman.main import create_app


@pytest.fixture
def store():
    return InMemoryOrderStore()


@pytest.fixture
def client(store):
    return TestClient(create_app(store))


@pytest.fixture
def make_event():
    """Builds a minimal PayPal webhook body around the given resource."""

    def _make(event_type="PAYMENT.CAPTURE.COMPLETED", **resource):
        return {
            "id": "WH-TEST",
            "event_type": event_type,
            "create_time": "2025-01-15T10:00:00.000Z",
            "resource": resource,
        }

    return _make
