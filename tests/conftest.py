"""
Shared pytest fixtures for swachhta_prahari tests.
"""
import os
from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from swachhta_prahari.core import config


@pytest.fixture(autouse=True)
def reset_settings():
    """Drop the cached settings so each test sees its own environment."""
    config._settings = None
    yield
    config._settings = None


@pytest.fixture
def mock_env():
    """Fixture to set common test environment variables."""
    env_vars = {
        "MONGO_URI": "mongodb://localhost:27017",
        "MONGO_DB_NAME": "test_prahari_db",
        "JWT_SECRET_KEY": "test_secret_key_for_testing_only",
        "JWT_REFRESH_SECRET_KEY": "test_refresh_secret_for_testing_only",
        "BCRYPT_ROUNDS": "4",
        "ENVIRONMENT": "test",
        "SERVER_URL": "",
    }
    with patch.dict(os.environ, env_vars, clear=False):
        yield env_vars


@pytest.fixture
def mock_settings():
    """Fixture to mock get_settings for tests. Patches the modules that use it."""
    mock = MagicMock()
    mock.mongo_uri = "mongodb://localhost:27017"
    mock.mongo_database_name = "test_db"
    mock.jwt_secret_key = "test_jwt_secret"
    mock.jwt_refresh_secret_key = "test_jwt_refresh_secret"
    mock.jwt_algorithm = "HS256"
    mock.access_token_expire_minutes = 1440
    mock.refresh_token_expire_minutes = 10080
    mock.bcrypt_rounds = 4
    mock.ai_model_version = "1.2.3"
    mock.total_camera_slots = 16

    # Patch at source and at use sites (modules import get_settings at load time)
    with patch("swachhta_prahari.core.config.get_settings", return_value=mock), patch(
        "swachhta_prahari.core.security.get_settings", return_value=mock
    ), patch(
        "swachhta_prahari.application.use_cases.detection.process_detection.get_settings",
        return_value=mock,
    ):
        yield mock


@pytest.fixture
def broadcaster():
    return AsyncMock()
