from typing import TYPE_CHECKING
from ...core.config import STORE_MEMORY, STORE_MONGO, Settings
from ...domain.repositories.user_repository import UserRepository
from ...domain.repositories.payment_repository import PaymentRepository
from ...infrastructure.db.mongo_user_repository import MongoUserRepository
from ...infrastructure.db.mongo_payment_repository import MongoPaymentRepository
from ...infrastructure.db.in_memory_repositories import (
    InMemoryPaymentRepository,
    InMemoryUserRepository,
)

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class RepositoryProvider:
    """Repository registration provider - wires domain interfaces to infrastructure implementations"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Register one repository implementation per aggregate, chosen by
        USER_STORE / PAYMENT_STORE.

        Raises:
            ValueError: On an unknown store name
        """
        settings: Settings = container.get(Settings)

        if settings.user_store == STORE_MONGO:
            user_repository = MongoUserRepository(user_collection=container.get("user_collection"))
        elif settings.user_store == STORE_MEMORY:
            user_repository = InMemoryUserRepository()
        else:
            raise ValueError(f"Unknown USER_STORE: {settings.user_store}")

        if settings.payment_store == STORE_MONGO:
            payment_repository = MongoPaymentRepository(
                payment_collection=container.get("payment_collection")
            )
        elif settings.payment_store == STORE_MEMORY:
            payment_repository = InMemoryPaymentRepository()
        else:
            raise ValueError(f"Unknown PAYMENT_STORE: {settings.payment_store}")

        container.register_singleton(UserRepository, user_repository)
        container.register_singleton(PaymentRepository, payment_repository)
