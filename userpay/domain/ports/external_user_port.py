"""
External user port.

The payment component reads user data exclusively through this interface.
Two adapters implement it (see ``infrastructure/external``):

- ``UserRepositoryLocalAdapter``: wraps the in-process ``UserRepository``
- ``UserRepositoryHttpAdapter``: calls the user service over HTTP

Which one is used is decided once in the DI container from
``USER_PORT_ADAPTER``; payment code never knows.
"""
from dataclasses import dataclass
from typing import Dict, Protocol, Sequence, runtime_checkable

from ..result import Result


@dataclass(frozen=True)
class ExternalUserData:
    """The narrow view of a user that the payment component may depend on"""
    id: str
    email: str
    name: str


@runtime_checkable
class ExternalUserPort(Protocol):
    """Read-only access to user data from outside the user component"""

    async def find_by_id(self, user_id: str) -> Result[ExternalUserData]:
        """
        Look up one user.

        Fails with EntityNotFoundException when the user does not exist and
        with LookupFailedException on any other error.
        """
        ...

    async def exists(self, user_id: str) -> bool:
        """True if the user exists. Never raises: errors count as False."""
        ...

    async def find_by_ids(self, user_ids: Sequence[str]) -> Dict[str, ExternalUserData]:
        """Best-effort batch lookup; IDs that cannot be resolved are omitted."""
        ...
