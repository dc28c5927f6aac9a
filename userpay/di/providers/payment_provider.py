from typing import TYPE_CHECKING
from ...core.config import ADAPTER_HTTP, ADAPTER_LOCAL, Settings
from ...domain.ports.external_user_port import ExternalUserPort
from ...domain.repositories.payment_repository import PaymentRepository
from ...domain.repositories.user_repository import UserRepository
from ...domain.services.payment_domain_service import PaymentDomainService
from ...application.services.payment_service import PaymentService
from ...infrastructure.external.user_http_adapter import UserRepositoryHttpAdapter
from ...infrastructure.external.user_local_adapter import UserRepositoryLocalAdapter

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class PaymentProvider:
    """Payment service provider - registers payment services and the external user port"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Register the external user port adapter selected by USER_PORT_ADAPTER,
        then the payment services that depend on it.

        Raises:
            ValueError: On an unknown adapter name
        """
        settings: Settings = container.get(Settings)

        if settings.user_port_adapter == ADAPTER_LOCAL:
            user_port = UserRepositoryLocalAdapter(user_repository=container.get(UserRepository))
        elif settings.user_port_adapter == ADAPTER_HTTP:
            user_port = UserRepositoryHttpAdapter(
                base_url=settings.user_service_url,
                timeout_ms=settings.user_service_timeout_ms,
            )
        else:
            raise ValueError(f"Unknown USER_PORT_ADAPTER: {settings.user_port_adapter}")

        container.register_singleton(ExternalUserPort, user_port)

        container.register_singleton(PaymentDomainService, PaymentDomainService())

        container.register_factory(
            PaymentService,
            lambda: PaymentService(
                payment_repository=container.get(PaymentRepository),
                payment_domain_service=container.get(PaymentDomainService),
                external_user_port=container.get(ExternalUserPort),
            ),
        )
