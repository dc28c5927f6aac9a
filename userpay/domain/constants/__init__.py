"""Constants for domain model field names"""

from .user_fields import UserFields
from .payment_fields import PaymentFields

__all__ = [
    "UserFields",
    "PaymentFields",
]
