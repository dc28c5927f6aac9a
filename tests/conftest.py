"""
Shared pytest fixtures for userpay tests.
"""
import os
from unittest.mock import patch

import pytest

# Settings are read once; pin in-memory stores before anything imports userpay.main
os.environ.setdefault("USER_STORE", "memory")
os.environ.setdefault("PAYMENT_STORE", "memory")
os.environ.setdefault("USER_PORT_ADAPTER", "local")
os.environ.setdefault("LOG_LEVEL", "WARNING")

from userpay.core.config import Settings  # noqa: E402
from userpay.di.container import DIContainer  # noqa: E402


@pytest.fixture
def mock_env():
    """Fixture to set common test environment variables."""
    env_vars = {
        "MONGO_URI": "mongodb://localhost:27017",
        "MONGO_DB_NAME": "test_userpay",
        "USER_STORE": "memory",
        "PAYMENT_STORE": "memory",
        "USER_PORT_ADAPTER": "local",
        "USER_SERVICE_URL": "http://user-service.test",
        "USER_SERVICE_TIMEOUT": "2000",
    }
    with patch.dict(os.environ, env_vars, clear=False):
        yield env_vars


@pytest.fixture
def memory_settings(mock_env):
    """Fresh Settings built from the in-memory test environment."""
    return Settings()


@pytest.fixture
def memory_container(memory_settings):
    """DI container wired to in-memory repositories and the local user adapter."""
    return DIContainer(settings=memory_settings)


@pytest.fixture
def api_client(memory_container):
    """TestClient whose controllers resolve services from ``memory_container``."""
    from fastapi.testclient import TestClient
    from userpay.main import app

    with patch("userpay.api.v1.user_controller.get_container", return_value=memory_container), patch(
        "userpay.api.v1.payment_controller.get_container", return_value=memory_container
    ):
        with TestClient(app) as client:
            yield client
