# Standard library imports
import logging
from typing import Optional

# External package imports
from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase, AsyncIOMotorCollection

# Local application imports
from ...core.config import get_settings
from ...domain.constants import PaymentFields, UserFields

logger = logging.getLogger(__name__)


# Global MongoDB connection instances (singleton pattern)
_mongo_client: Optional[AsyncIOMotorClient] = None
_mongo_database: Optional[AsyncIOMotorDatabase] = None


def get_database() -> AsyncIOMotorDatabase:
    """
    Get MongoDB database instance (singleton pattern)

    Returns:
        MongoDB database instance
    """
    global _mongo_client, _mongo_database

    if _mongo_database is not None:
        return _mongo_database

    settings = get_settings()
    # tz_aware so stored UTC timestamps come back as aware datetimes
    _mongo_client = AsyncIOMotorClient(settings.mongo_uri, tz_aware=True)
    _mongo_database = _mongo_client[settings.mongo_database_name]
    return _mongo_database


def get_user_collection() -> AsyncIOMotorCollection:
    """
    Get users collection from MongoDB

    Returns:
        MongoDB collection for users
    """
    return get_database()["users"]


def get_payment_collection() -> AsyncIOMotorCollection:
    """
    Get payments collection from MongoDB

    Returns:
        MongoDB collection for payments
    """
    return get_database()["payments"]


async def ensure_indexes(
    user_collection: Optional[AsyncIOMotorCollection] = None,
    payment_collection: Optional[AsyncIOMotorCollection] = None,
) -> None:
    """Create the indexes the repositories rely on (idempotent)"""
    if user_collection is not None:
        await user_collection.create_index(UserFields.EMAIL, unique=True)
        await user_collection.create_index(UserFields.CREATED_AT)
        logger.info("Ensured indexes on users collection")

    if payment_collection is not None:
        await payment_collection.create_index(PaymentFields.USER_ID)
        logger.info("Ensured indexes on payments collection")


def close_database() -> None:
    """Close the MongoDB client (call on application shutdown)"""
    global _mongo_client, _mongo_database

    if _mongo_client is not None:
        _mongo_client.close()
        _mongo_client = None
        _mongo_database = None
        logger.info("Closed MongoDB client")
