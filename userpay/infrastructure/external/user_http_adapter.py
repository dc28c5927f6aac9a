# Standard library imports
import asyncio
import logging
from typing import Any, Dict, List, Optional, Sequence
from urllib.parse import quote

# External package imports
import httpx

# Local application imports
from ...core.config import get_settings
from ...domain.exceptions import EntityNotFoundException, LookupFailedException
from ...domain.ports.external_user_port import ExternalUserData
from ...domain.result import Result
from ..http_client_factory import get_shared_http_client

logger = logging.getLogger(__name__)


class UserRepositoryHttpAdapter:
    """
    External user port that calls a remote user service over HTTP.

    The remote service exposes the same ``/users`` routes as this one:
    ``GET /users/{id}``, ``HEAD /users/{id}`` and ``POST /users/batch``.
    Every call uses a single timeout; there are no retries.
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout_ms: Optional[int] = None,
        http_client: Optional[httpx.AsyncClient] = None,
    ) -> None:
        """
        Args:
            base_url: User service base URL. If None, reads USER_SERVICE_URL.
            timeout_ms: Per-request timeout in milliseconds. If None, reads USER_SERVICE_TIMEOUT.
            http_client: Client to use. If None, the shared pooled client is used.
        """
        settings = get_settings()
        self.base_url = (base_url or settings.user_service_url).rstrip("/")
        self.timeout = (timeout_ms if timeout_ms is not None else settings.user_service_timeout_ms) / 1000.0
        self._http_client = http_client

    @property
    def client(self) -> httpx.AsyncClient:
        if self._http_client is None:
            self._http_client = get_shared_http_client()
        return self._http_client

    def _user_url(self, user_id: str) -> str:
        return f"{self.base_url}/users/{quote(user_id, safe='')}"

    async def find_by_id(self, user_id: str) -> Result[ExternalUserData]:
        try:
            response = await self.client.get(self._user_url(user_id), timeout=self.timeout)
        except httpx.HTTPError as e:
            logger.error(f"User service request failed for {user_id}: {type(e).__name__}: {e}")
            return Result.fail(LookupFailedException())

        if response.status_code == 404:
            return Result.fail(EntityNotFoundException("User", user_id))

        if not response.is_success:
            logger.error(
                f"User service returned {response.status_code} for user {user_id}"
            )
            return Result.fail(LookupFailedException())

        try:
            return Result.ok(self._to_external(response.json()))
        except (ValueError, KeyError, TypeError) as e:
            logger.error(f"Malformed user service response for {user_id}: {e}")
            return Result.fail(LookupFailedException())

    async def exists(self, user_id: str) -> bool:
        try:
            response = await self.client.head(self._user_url(user_id), timeout=self.timeout)
            return response.is_success
        except httpx.HTTPError as e:
            logger.warning(f"User service existence check failed for {user_id}: {e}")
            return False

    async def find_by_ids(self, user_ids: Sequence[str]) -> Dict[str, ExternalUserData]:
        unique_ids = list(dict.fromkeys(user_ids))
        if not unique_ids:
            return {}

        try:
            response = await self.client.post(
                f"{self.base_url}/users/batch",
                json={"ids": unique_ids},
                timeout=self.timeout,
            )
            response.raise_for_status()
            users = [self._to_external(item) for item in self._as_list(response.json())]
            return {user.id: user for user in users}
        except (httpx.HTTPError, ValueError, KeyError, TypeError) as e:
            logger.warning(f"Batch user lookup failed, falling back to single lookups: {e}")

        results = await asyncio.gather(*(self.find_by_id(user_id) for user_id in unique_ids))
        return {
            user_id: result.value
            for user_id, result in zip(unique_ids, results)
            if result.is_success
        }

    @staticmethod
    def _as_list(payload: Any) -> List[Dict[str, Any]]:
        if not isinstance(payload, list):
            raise TypeError("Expected a JSON array of users")
        return payload

    @staticmethod
    def _to_external(payload: Dict[str, Any]) -> ExternalUserData:
        return ExternalUserData(
            id=str(payload["id"]),
            email=str(payload["email"]),
            name=str(payload["name"]),
        )
