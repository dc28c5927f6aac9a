# Standard library imports
import math
import uuid
from dataclasses import dataclass
from datetime import datetime, timezone
from enum import Enum
from typing import Optional

# Local application imports
from ..exceptions import BusinessRuleViolationException
from ..result import Result


CURRENCY_CODE_LENGTH = 3


class PaymentStatus(str, Enum):
    PENDING = "PENDING"
    COMPLETED = "COMPLETED"
    FAILED = "FAILED"
    # Declared for storage compatibility; nothing transitions into it yet.
    REFUNDED = "REFUNDED"


@dataclass
class Payment:
    """
    Payment aggregate root.

    ``user_id`` references a User owned by the user component; the payment
    never loads or mutates that user. Status moves PENDING -> COMPLETED or
    PENDING -> FAILED only.
    """
    id: str
    user_id: str
    amount: float
    currency: str
    status: PaymentStatus
    created_at: datetime
    description: Optional[str] = None
    updated_at: Optional[datetime] = None

    @classmethod
    def create(
        cls,
        user_id: str,
        amount: float,
        currency: str,
        description: Optional[str] = None,
    ) -> Result["Payment"]:
        if not math.isfinite(amount) or amount <= 0:
            return Result.fail(BusinessRuleViolationException("Amount must be positive"))

        if not currency or len(currency) != CURRENCY_CODE_LENGTH:
            return Result.fail(BusinessRuleViolationException("Currency must be 3-letter code"))

        return Result.ok(cls(
            id=str(uuid.uuid4()),
            user_id=user_id,
            amount=amount,
            currency=currency.upper(),
            status=PaymentStatus.PENDING,
            created_at=datetime.now(timezone.utc),
            description=description,
        ))

    @classmethod
    def reconstitute(
        cls,
        id: str,
        user_id: str,
        amount: float,
        currency: str,
        status: PaymentStatus,
        created_at: datetime,
        description: Optional[str] = None,
        updated_at: Optional[datetime] = None,
    ) -> "Payment":
        return cls(
            id=id,
            user_id=user_id,
            amount=amount,
            currency=currency,
            status=PaymentStatus(status),
            created_at=created_at,
            description=description,
            updated_at=updated_at,
        )

    def complete(self) -> Result[None]:
        if self.status != PaymentStatus.PENDING:
            return Result.fail(
                BusinessRuleViolationException("Only pending payments can be completed")
            )
        self.status = PaymentStatus.COMPLETED
        self.updated_at = datetime.now(timezone.utc)
        return Result.ok()

    def fail(self) -> Result[None]:
        if self.status != PaymentStatus.PENDING:
            return Result.fail(BusinessRuleViolationException("Only pending payments can fail"))
        self.status = PaymentStatus.FAILED
        self.updated_at = datetime.now(timezone.utc)
        return Result.ok()
