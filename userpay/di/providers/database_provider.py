from typing import TYPE_CHECKING
from ...core.config import STORE_MONGO, Settings
from ...infrastructure.db.mongo_connection import (
    get_database,
    get_user_collection,
    get_payment_collection,
)

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class DatabaseProvider:
    """Centralized database connection provider - single source of truth for all DB connections"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Register the MongoDB collections needed by the configured stores.
        Nothing is registered (and no client is created) when both stores are in memory.
        """
        settings: Settings = container.get(Settings)
        if STORE_MONGO not in (settings.user_store, settings.payment_store):
            return

        container.register_singleton("database", get_database())

        if settings.user_store == STORE_MONGO:
            container.register_singleton("user_collection", get_user_collection())
        if settings.payment_store == STORE_MONGO:
            container.register_singleton("payment_collection", get_payment_collection())
