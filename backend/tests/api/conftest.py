"""
Fixtures for API tests.

The container is pre-filled with the in-memory stores, clock and notifier
from the top-level conftest, so tests can arrange data directly and
inspect what the endpoints did.
"""

import pytest
from fastapi.testclient import TestClient

from api.app import create_app
from api.dependencies import ServiceContainer, set_container
from shared.config import Settings


@pytest.fixture
def container(users, pets, adoption_stores, report_stores, alerts, notifier, clock):
    """Service container wired to the shared in-memory fixtures."""
    container = ServiceContainer(Settings(enable_scheduler=False))
    container._clock = clock
    container._notifier = notifier
    container._users = users
    container._pets = pets
    container._adoption_stores = adoption_stores
    container._report_stores = report_stores
    container._alerts = alerts
    set_container(container)
    return container


@pytest.fixture
def client(container):
    """Create a test client for the API."""
    return TestClient(create_app())
