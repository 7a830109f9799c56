"""Fixtures for API tests."""

import pytest
from falcon.testing import TestClient

from boardgate.interfaces.api.app import create_app


@pytest.fixture
def app(uow_factory, gate):
    """Falcon ASGI app over the in-memory store."""
    return create_app(unit_of_work_factory=uow_factory, authorization_gate=gate)


@pytest.fixture
def client(app) -> TestClient:
    """Falcon ASGI test client."""
    return TestClient(app)
