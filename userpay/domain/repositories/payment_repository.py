from abc import ABC, abstractmethod
from typing import List, Optional
from ..models.payment import Payment


class PaymentRepository(ABC):
    """Repository interface - defines contract for payment data access"""

    @abstractmethod
    async def save(self, payment: Payment) -> None:
        """Save payment as a whole (upsert)"""
        pass

    @abstractmethod
    async def find_by_id(self, payment_id: str) -> Optional[Payment]:
        """Find payment by ID"""
        pass

    @abstractmethod
    async def find_by_user_id(self, user_id: str) -> List[Payment]:
        """Find all payments referencing a user"""
        pass

    @abstractmethod
    async def delete(self, payment_id: str) -> None:
        """Delete payment by ID"""
        pass
