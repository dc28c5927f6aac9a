# Standard library imports
import logging
from typing import Callable, List, Optional

# Local application imports
from ...domain.exceptions import EntityNotFoundException, LookupFailedException
from ...domain.models.payment import Payment
from ...domain.ports.external_user_port import ExternalUserData, ExternalUserPort
from ...domain.repositories.payment_repository import PaymentRepository
from ...domain.result import Result
from ...domain.services.payment_domain_service import PaymentDomainService
from ..dto.payment_dto import UNKNOWN_USER_FIELD, CreatePaymentRequest, PaymentResponse

logger = logging.getLogger(__name__)


class PaymentService:
    """
    Application service orchestrating payment use cases.

    User data is read only through ``ExternalUserPort``. Whether that is the
    local adapter or the HTTP adapter is decided by the DI container; nothing
    in here changes between the two.
    """

    def __init__(
        self,
        payment_repository: PaymentRepository,
        payment_domain_service: PaymentDomainService,
        external_user_port: ExternalUserPort,
    ) -> None:
        self.payment_repository = payment_repository
        self.payment_domain_service = payment_domain_service
        self.external_user_port = external_user_port

    async def create_payment(self, request: CreatePaymentRequest) -> Result[PaymentResponse]:
        """
        Create a payment for an existing user

        Steps run in order and the first failure short-circuits, so nothing
        is persisted on any failure path:
        1. user lookup through the external user port
        2. amount/currency validation (domain service)
        3. aggregate construction
        4. persistence

        Returns:
            Result with the payment enriched with the user's name and email
        """
        user_result = await self.external_user_port.find_by_id(request.user_id)
        if user_result.is_failure:
            if isinstance(user_result.error, LookupFailedException):
                return Result.fail(user_result.error)
            return Result.fail(EntityNotFoundException("User", request.user_id))

        user = user_result.value

        validation_result = self.payment_domain_service.validate_payment(
            amount=request.amount,
            currency=request.currency,
        )
        if validation_result.is_failure:
            return Result.fail(validation_result.error)

        payment_result = Payment.create(
            user_id=request.user_id,
            amount=request.amount,
            currency=request.currency,
            description=request.description,
        )
        if payment_result.is_failure:
            return Result.fail(payment_result.error)

        payment = payment_result.value
        await self.payment_repository.save(payment)
        logger.info(f"Payment created: {payment.id} for user {payment.user_id}")

        return Result.ok(self._to_response(payment, user))

    async def get_payment_by_id(self, payment_id: str) -> Result[PaymentResponse]:
        payment = await self.payment_repository.find_by_id(payment_id)
        if payment is None:
            return Result.fail(EntityNotFoundException("Payment", payment_id))

        user = await self._lookup_user(payment.user_id)
        return Result.ok(self._to_response(payment, user))

    async def get_payments_by_user_id(self, user_id: str) -> Result[List[PaymentResponse]]:
        if not await self.external_user_port.exists(user_id):
            return Result.fail(EntityNotFoundException("User", user_id))

        payments = await self.payment_repository.find_by_user_id(user_id)
        user = await self._lookup_user(user_id)

        return Result.ok([self._to_response(payment, user) for payment in payments])

    async def complete_payment(self, payment_id: str) -> Result[PaymentResponse]:
        return await self._transition(payment_id, Payment.complete)

    async def fail_payment(self, payment_id: str) -> Result[PaymentResponse]:
        return await self._transition(payment_id, Payment.fail)

    async def _transition(
        self,
        payment_id: str,
        apply: Callable[[Payment], Result[None]],
    ) -> Result[PaymentResponse]:
        payment = await self.payment_repository.find_by_id(payment_id)
        if payment is None:
            return Result.fail(EntityNotFoundException("Payment", payment_id))

        transition_result = apply(payment)
        if transition_result.is_failure:
            return Result.fail(transition_result.error)

        await self.payment_repository.save(payment)
        logger.info(f"Payment {payment.id} moved to {payment.status.value}")

        user = await self._lookup_user(payment.user_id)
        return Result.ok(self._to_response(payment, user))

    async def _lookup_user(self, user_id: str) -> Optional[ExternalUserData]:
        """Best-effort enrichment: a failed lookup yields None, never an error"""
        user_result = await self.external_user_port.find_by_id(user_id)
        if user_result.is_failure:
            logger.warning(
                f"Could not enrich payment data for user {user_id}: {user_result.error.code}"
            )
            return None
        return user_result.value

    @staticmethod
    def _to_response(payment: Payment, user: Optional[ExternalUserData]) -> PaymentResponse:
        return PaymentResponse(
            id=payment.id,
            user_id=payment.user_id,
            user_name=user.name if user else UNKNOWN_USER_FIELD,
            user_email=user.email if user else UNKNOWN_USER_FIELD,
            amount=payment.amount,
            currency=payment.currency,
            status=payment.status,
            description=payment.description,
            created_at=payment.created_at,
            updated_at=payment.updated_at,
        )
