from .user_service import UserService
from .payment_service import PaymentService

__all__ = ["UserService", "PaymentService"]
