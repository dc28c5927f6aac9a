"""
In-memory repository adapters.

Used for local demos (``PAYMENT_STORE=memory`` is the default) and tests.
Plain dicts, no locking: concurrent writes to the same key are
last-write-wins. Stored aggregates are copied in and out so callers never
share mutable state with the store.
"""
# Standard library imports
from copy import deepcopy
from typing import Dict, List, Optional, Sequence

# Local application imports
from ...domain.models.payment import Payment
from ...domain.models.user import User, normalize_email
from ...domain.repositories.payment_repository import PaymentRepository
from ...domain.repositories.user_repository import UserRepository


class InMemoryUserRepository(UserRepository):
    """In-memory implementation of UserRepository"""

    def __init__(self) -> None:
        self._users: Dict[str, User] = {}

    async def save(self, user: User) -> None:
        self._users[user.id] = deepcopy(user)

    async def find_by_id(self, user_id: str) -> Optional[User]:
        return deepcopy(self._users.get(user_id))

    async def find_by_ids(self, user_ids: Sequence[str]) -> List[User]:
        return [deepcopy(self._users[user_id]) for user_id in user_ids if user_id in self._users]

    async def find_by_email(self, email: str) -> Optional[User]:
        normalized = normalize_email(email)
        for user in self._users.values():
            if user.email == normalized:
                return deepcopy(user)
        return None

    async def find_all(self, limit: int = 10, offset: int = 0) -> List[User]:
        users = sorted(self._users.values(), key=lambda u: u.created_at, reverse=True)
        return [deepcopy(user) for user in users[offset:offset + limit]]

    async def delete(self, user_id: str) -> None:
        self._users.pop(user_id, None)

    async def exists_by_email(self, email: str, exclude_user_id: Optional[str] = None) -> bool:
        normalized = normalize_email(email)
        return any(
            user.email == normalized and user.id != exclude_user_id
            for user in self._users.values()
        )


class InMemoryPaymentRepository(PaymentRepository):
    """In-memory implementation of PaymentRepository"""

    def __init__(self) -> None:
        self._payments: Dict[str, Payment] = {}

    async def save(self, payment: Payment) -> None:
        self._payments[payment.id] = deepcopy(payment)

    async def find_by_id(self, payment_id: str) -> Optional[Payment]:
        return deepcopy(self._payments.get(payment_id))

    async def find_by_user_id(self, user_id: str) -> List[Payment]:
        payments = [p for p in self._payments.values() if p.user_id == user_id]
        payments.sort(key=lambda p: p.created_at)
        return [deepcopy(payment) for payment in payments]

    async def delete(self, payment_id: str) -> None:
        self._payments.pop(payment_id, None)
