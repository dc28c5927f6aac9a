"""
Unit tests for the DI container wiring.
"""
import os
from unittest.mock import MagicMock, patch

import pytest

from userpay.application.services.payment_service import PaymentService
from userpay.application.services.user_service import UserService
from userpay.core.config import Settings
from userpay.di.base_container import BaseContainer
from userpay.di.container import DIContainer
from userpay.domain.ports.external_user_port import ExternalUserPort
from userpay.domain.repositories.payment_repository import PaymentRepository
from userpay.domain.repositories.user_repository import UserRepository
from userpay.infrastructure.db.in_memory_repositories import (
    InMemoryPaymentRepository,
    InMemoryUserRepository,
)
from userpay.infrastructure.db.mongo_user_repository import MongoUserRepository
from userpay.infrastructure.external.user_http_adapter import UserRepositoryHttpAdapter
from userpay.infrastructure.external.user_local_adapter import UserRepositoryLocalAdapter


def _settings(**env) -> Settings:
    with patch.dict(os.environ, env, clear=False):
        return Settings()


class TestBaseContainer:
    """Tests for BaseContainer"""

    def test_singleton_and_factory(self):
        container = BaseContainer()
        container.register_singleton("answer", 42)
        container.register_factory(list, lambda: [])

        assert container.get("answer") == 42
        assert container.get(list) is not container.get(list)
        assert container.has("answer") and not container.has("missing")

    def test_unknown_key_raises_value_error(self):
        with pytest.raises(ValueError, match="UserService"):
            BaseContainer().get(UserService)


class TestDIContainer:
    """Tests for DIContainer provider composition"""

    def test_memory_stores_with_local_adapter(self):
        container = DIContainer(settings=_settings(
            USER_STORE="memory", PAYMENT_STORE="memory", USER_PORT_ADAPTER="local"
        ))

        assert isinstance(container.get(UserRepository), InMemoryUserRepository)
        assert isinstance(container.get(PaymentRepository), InMemoryPaymentRepository)

        port = container.get(ExternalUserPort)
        assert isinstance(port, UserRepositoryLocalAdapter)
        assert port.user_repository is container.get(UserRepository)

        assert isinstance(container.get(UserService), UserService)
        assert container.get(PaymentService).external_user_port is port

    def test_http_adapter_selected_from_settings(self):
        container = DIContainer(settings=_settings(
            USER_STORE="memory",
            PAYMENT_STORE="memory",
            USER_PORT_ADAPTER="HTTP",
            USER_SERVICE_URL="http://users.internal:3001/",
            USER_SERVICE_TIMEOUT="2500",
        ))

        port = container.get(ExternalUserPort)
        assert isinstance(port, UserRepositoryHttpAdapter)
        assert port.base_url == "http://users.internal:3001"
        assert port.timeout == 2.5

    def test_unknown_adapter_raises(self):
        with pytest.raises(ValueError, match="USER_PORT_ADAPTER"):
            DIContainer(settings=_settings(
                USER_STORE="memory", PAYMENT_STORE="memory", USER_PORT_ADAPTER="grpc"
            ))

    def test_unknown_store_raises(self):
        with pytest.raises(ValueError, match="PAYMENT_STORE"):
            DIContainer(settings=_settings(USER_STORE="memory", PAYMENT_STORE="redis"))

    def test_mongo_user_store_uses_registered_collection(self):
        collection = MagicMock()
        with patch(
            "userpay.di.providers.database_provider.get_database", return_value=MagicMock()
        ), patch(
            "userpay.di.providers.database_provider.get_user_collection", return_value=collection
        ):
            container = DIContainer(settings=_settings(
                USER_STORE="mongo", PAYMENT_STORE="memory", USER_PORT_ADAPTER="local"
            ))

        user_repository = container.get(UserRepository)
        assert isinstance(user_repository, MongoUserRepository)
        assert user_repository.user_collection is collection
        assert not container.has("payment_collection")
