# Standard library imports
from typing import Optional

# Local application imports
from ..exceptions import EMAIL_IN_USE_MESSAGE, ConflictException
from ..repositories.user_repository import UserRepository
from ..result import Result
from ...core.security import hash_password, verify_password


class UserDomainService:
    """User rules that need the repository: email uniqueness and password hashing"""

    def __init__(self, user_repository: UserRepository) -> None:
        self.user_repository = user_repository

    async def is_email_unique(self, email: str, exclude_user_id: Optional[str] = None) -> bool:
        exists = await self.user_repository.exists_by_email(email, exclude_user_id)
        return not exists

    async def validate_user_creation(self, email: str) -> Result[None]:
        if not await self.is_email_unique(email):
            return Result.fail(ConflictException(EMAIL_IN_USE_MESSAGE))
        return Result.ok()

    def hash_password(self, password: str) -> str:
        return hash_password(password)

    def verify_password(self, plain_password: str, hashed_password: str) -> bool:
        return verify_password(plain_password, hashed_password)
