from typing import TYPE_CHECKING
from ...domain.repositories.user_repository import UserRepository
from ...domain.services.user_domain_service import UserDomainService
from ...application.services.user_service import UserService

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class UserProvider:
    """User service provider - registers the user domain and application services"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        container.register_factory(
            UserDomainService,
            lambda: UserDomainService(user_repository=container.get(UserRepository)),
        )

        container.register_factory(
            UserService,
            lambda: UserService(
                user_repository=container.get(UserRepository),
                user_domain_service=container.get(UserDomainService),
            ),
        )
