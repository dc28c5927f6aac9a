from .payment_domain_service import PaymentDomainService
from .user_domain_service import UserDomainService

__all__ = ["PaymentDomainService", "UserDomainService"]
