"""
Fixtures for API tests: TestClient over the real application with the DI
container replaced by mocks. The lifespan is not entered, so no database
connection is opened.
"""
from unittest.mock import MagicMock, patch

import pytest
from fastapi.testclient import TestClient

from swachhta_prahari.application.dto.user_dto import UserResponse

CONTROLLER_MODULES = (
    "auth_controller",
    "camera_controller",
    "incident_controller",
    "ai_controller",
    "report_controller",
    "payout_controller",
    "manager_controller",
    "analytics_controller",
    "realtime_controller",
    "dependencies",
)


@pytest.fixture
def registry():
    """Maps use case class -> mock; tests fill it in"""
    return {}


@pytest.fixture
def mock_container(registry):
    container = MagicMock()
    container.get.side_effect = lambda cls: registry.get(cls, None)
    return container


@pytest.fixture
def current_user():
    return UserResponse(
        id="usr-admin",
        name="Site Admin",
        username="siteadmin",
        email="admin@example.com",
        role="admin",
        department="UPSIDA",
        is_active=True,
    )


@pytest.fixture
def app(mock_container, current_user):
    from swachhta_prahari.main import app as application
    from swachhta_prahari.api.v1.dependencies import get_current_user

    patches = [
        patch(f"swachhta_prahari.api.v1.{module}.get_container", return_value=mock_container)
        for module in CONTROLLER_MODULES
    ]
    for p in patches:
        p.start()
    application.dependency_overrides[get_current_user] = lambda: current_user
    try:
        yield application
    finally:
        application.dependency_overrides.clear()
        for p in patches:
            p.stop()


@pytest.fixture
def client(app):
    """Create test client with mocked container."""
    return TestClient(app)
