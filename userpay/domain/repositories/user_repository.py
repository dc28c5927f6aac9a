from abc import ABC, abstractmethod
from typing import List, Optional, Sequence
from ..models.user import User


class UserRepository(ABC):
    """Repository interface - defines contract for user data access"""

    @abstractmethod
    async def save(self, user: User) -> None:
        """Save user (create or update). Raises ConflictException if the email is taken."""
        pass

    @abstractmethod
    async def find_by_id(self, user_id: str) -> Optional[User]:
        """Find user by ID"""
        pass

    @abstractmethod
    async def find_by_ids(self, user_ids: Sequence[str]) -> List[User]:
        """Find all users whose ID is in ``user_ids``; unknown IDs are skipped"""
        pass

    @abstractmethod
    async def find_by_email(self, email: str) -> Optional[User]:
        """Find user by email address (case-insensitive)"""
        pass

    @abstractmethod
    async def find_all(self, limit: int = 10, offset: int = 0) -> List[User]:
        """List users, newest first"""
        pass

    @abstractmethod
    async def delete(self, user_id: str) -> None:
        """Delete user by ID"""
        pass

    @abstractmethod
    async def exists_by_email(self, email: str, exclude_user_id: Optional[str] = None) -> bool:
        """Check whether another user already owns ``email``"""
        pass
