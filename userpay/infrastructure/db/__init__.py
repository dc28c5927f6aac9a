from .mongo_connection import get_database, get_user_collection, get_payment_collection
from .mongo_user_repository import MongoUserRepository
from .mongo_payment_repository import MongoPaymentRepository
from .in_memory_repositories import InMemoryUserRepository, InMemoryPaymentRepository

__all__ = [
    "get_database",
    "get_user_collection",
    "get_payment_collection",
    "MongoUserRepository",
    "MongoPaymentRepository",
    "InMemoryUserRepository",
    "InMemoryPaymentRepository",
]
