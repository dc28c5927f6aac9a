from .user_dto import (
    CreateUserRequest,
    UpdateUserRequest,
    UserBatchRequest,
    UserResponse,
    UserListResponse,
)
from .payment_dto import CreatePaymentRequest, PaymentResponse

__all__ = [
    "CreateUserRequest",
    "UpdateUserRequest",
    "UserBatchRequest",
    "UserResponse",
    "UserListResponse",
    "CreatePaymentRequest",
    "PaymentResponse",
]
