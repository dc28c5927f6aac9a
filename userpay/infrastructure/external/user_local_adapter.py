# Standard library imports
import asyncio
import logging
from typing import Dict, Sequence

# Local application imports
from ...domain.exceptions import EntityNotFoundException, LookupFailedException
from ...domain.models.user import User
from ...domain.ports.external_user_port import ExternalUserData
from ...domain.repositories.user_repository import UserRepository
from ...domain.result import Result

logger = logging.getLogger(__name__)


class UserRepositoryLocalAdapter:
    """
    External user port backed by the in-process user repository.

    Used when the user and payment components run in the same process
    (``USER_PORT_ADAPTER=local``).
    """

    def __init__(self, user_repository: UserRepository) -> None:
        self.user_repository = user_repository

    async def find_by_id(self, user_id: str) -> Result[ExternalUserData]:
        try:
            user = await self.user_repository.find_by_id(user_id)
        except Exception as e:
            logger.error(f"Local user lookup failed for {user_id}: {e}")
            return Result.fail(LookupFailedException())

        if user is None:
            return Result.fail(EntityNotFoundException("User", user_id))

        return Result.ok(self._to_external(user))

    async def exists(self, user_id: str) -> bool:
        try:
            return await self.user_repository.find_by_id(user_id) is not None
        except Exception as e:
            logger.warning(f"Local user existence check failed for {user_id}: {e}")
            return False

    async def find_by_ids(self, user_ids: Sequence[str]) -> Dict[str, ExternalUserData]:
        unique_ids = list(dict.fromkeys(user_ids))
        results = await asyncio.gather(*(self.find_by_id(user_id) for user_id in unique_ids))

        return {
            user_id: result.value
            for user_id, result in zip(unique_ids, results)
            if result.is_success
        }

    @staticmethod
    def _to_external(user: User) -> ExternalUserData:
        return ExternalUserData(id=user.id, email=user.email, name=user.name)
