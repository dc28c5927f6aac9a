# Standard library imports
import math
from typing import Final, Tuple

# Local application imports
from ..constants import PaymentFields
from ..exceptions import ErrorCodes, ValidationException
from ..result import Result


SUPPORTED_CURRENCIES: Final[Tuple[str, ...]] = ("USD", "VND", "EUR", "GBP")
MAX_PAYMENT_AMOUNT: Final[int] = 10_000_000


class PaymentDomainService:
    """Stateless payment checks (amount bounds, currency allow-list)"""

    def validate_payment(self, amount: float, currency: str) -> Result[None]:
        if not math.isfinite(amount) or amount <= 0:
            return self._invalid(PaymentFields.AMOUNT, "Amount must be positive")

        if amount > MAX_PAYMENT_AMOUNT:
            return self._invalid(
                PaymentFields.AMOUNT,
                f"Amount exceeds maximum limit of {MAX_PAYMENT_AMOUNT}",
            )

        if (currency or "").upper() not in SUPPORTED_CURRENCIES:
            return self._invalid(
                PaymentFields.CURRENCY,
                f"Currency not supported. Supported: {', '.join(SUPPORTED_CURRENCIES)}",
            )

        return Result.ok()

    @staticmethod
    def _invalid(field: str, message: str) -> Result[None]:
        return Result.fail(
            ValidationException.for_field(field, message, code=ErrorCodes.PAYMENT_VALIDATION_ERROR)
        )
