from .user_repository import UserRepository
from .payment_repository import PaymentRepository

__all__ = ["UserRepository", "PaymentRepository"]
