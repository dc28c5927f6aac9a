from .user import User
from .payment import Payment, PaymentStatus

__all__ = ["User", "Payment", "PaymentStatus"]
