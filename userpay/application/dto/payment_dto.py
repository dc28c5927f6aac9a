from datetime import datetime
from typing import Optional

from pydantic import Field

from .base import CamelModel
from ...domain.models.payment import PaymentStatus


UNKNOWN_USER_FIELD = "Unknown"


class CreatePaymentRequest(CamelModel):
    """
    DTO for payment creation request.

    Amount and currency bounds are enforced by the payment domain service,
    not here, so that they surface as domain validation failures.
    """
    user_id: str = Field(min_length=1)
    amount: float = Field(allow_inf_nan=False)
    currency: str
    description: Optional[str] = Field(default=None, max_length=500)


class PaymentResponse(CamelModel):
    """DTO for payment response, enriched with user data from the external user port"""
    id: str
    user_id: str
    user_name: str
    user_email: str
    amount: float
    currency: str
    status: PaymentStatus
    description: Optional[str] = None
    created_at: datetime
    updated_at: Optional[datetime] = None
