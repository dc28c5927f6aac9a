# Standard library imports
import logging
from typing import List, Sequence

# Local application imports
from ...domain.exceptions import EMAIL_IN_USE_MESSAGE, ConflictException, EntityNotFoundException
from ...domain.models.user import User, normalize_email
from ...domain.repositories.user_repository import UserRepository
from ...domain.result import Result
from ...domain.services.user_domain_service import UserDomainService
from ..dto.user_dto import (
    CreateUserRequest,
    UpdateUserRequest,
    UserListResponse,
    UserResponse,
)

logger = logging.getLogger(__name__)


class UserService:
    """Application service orchestrating user use cases"""

    def __init__(
        self,
        user_repository: UserRepository,
        user_domain_service: UserDomainService,
    ) -> None:
        self.user_repository = user_repository
        self.user_domain_service = user_domain_service

    async def create_user(self, request: CreateUserRequest) -> Result[UserResponse]:
        """
        Register a new user

        Args:
            request: Creation request with email, name and plain password

        Returns:
            Result with the created user, or a failure carrying
            ConflictException (email taken) or ValidationException (bad field)
        """
        # Check email uniqueness
        validation_result = await self.user_domain_service.validate_user_creation(request.email)
        if validation_result.is_failure:
            return Result.fail(validation_result.error)

        # Create domain user entity
        user_result = User.create(
            email=request.email,
            name=request.name,
            password=request.password,
        )
        if user_result.is_failure:
            return Result.fail(user_result.error)

        user = user_result.value

        # Hash password
        user.update_password(self.user_domain_service.hash_password(request.password))

        # A concurrent request can pass the uniqueness check too; the unique index rejects it on save
        try:
            await self.user_repository.save(user)
        except ConflictException as e:
            return Result.fail(e)
        logger.info(f"User created: {user.id}")

        return Result.ok(self._to_response(user))

    async def get_user_by_id(self, user_id: str) -> Result[UserResponse]:
        user = await self.user_repository.find_by_id(user_id)
        if user is None:
            return Result.fail(EntityNotFoundException("User", user_id))
        return Result.ok(self._to_response(user))

    async def get_users(self, limit: int = 10, offset: int = 0) -> Result[UserListResponse]:
        users = await self.user_repository.find_all(limit=limit, offset=offset)
        return Result.ok(UserListResponse(users=[self._to_response(user) for user in users]))

    async def get_users_by_ids(self, user_ids: Sequence[str]) -> Result[List[UserResponse]]:
        """Batch projection backing POST /users/batch; unknown IDs are skipped"""
        if not user_ids:
            return Result.ok([])
        users = await self.user_repository.find_by_ids(list(dict.fromkeys(user_ids)))
        return Result.ok([self._to_response(user) for user in users])

    async def update_user(self, user_id: str, request: UpdateUserRequest) -> Result[UserResponse]:
        """
        Partially update a user

        Only the fields present in the request are touched, and each one is
        validated on its own. Uniqueness is re-checked only when the email
        actually changes.
        """
        user = await self.user_repository.find_by_id(user_id)
        if user is None:
            return Result.fail(EntityNotFoundException("User", user_id))

        if request.email is not None and normalize_email(request.email) != user.email:
            if not await self.user_domain_service.is_email_unique(request.email, user_id):
                return Result.fail(ConflictException(EMAIL_IN_USE_MESSAGE))

            email_result = user.update_email(request.email)
            if email_result.is_failure:
                return Result.fail(email_result.error)

        if request.name is not None:
            name_result = user.update_name(request.name)
            if name_result.is_failure:
                return Result.fail(name_result.error)

        if request.password is not None:
            user.update_password(self.user_domain_service.hash_password(request.password))

        try:
            await self.user_repository.save(user)
        except ConflictException as e:
            return Result.fail(e)
        logger.info(f"User updated: {user.id} (version {user.version})")

        return Result.ok(self._to_response(user))

    async def delete_user(self, user_id: str) -> Result[None]:
        user = await self.user_repository.find_by_id(user_id)
        if user is None:
            return Result.fail(EntityNotFoundException("User", user_id))

        await self.user_repository.delete(user_id)
        logger.info(f"User deleted: {user_id}")

        return Result.ok()

    @staticmethod
    def _to_response(user: User) -> UserResponse:
        return UserResponse(
            id=user.id,
            email=user.email,
            name=user.name,
            created_at=user.created_at,
            updated_at=user.updated_at,
        )
