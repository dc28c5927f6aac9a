# Standard library imports
from typing import List

# External package imports
from fastapi import APIRouter, status

# Local application imports
from ...application.dto.payment_dto import CreatePaymentRequest, PaymentResponse
from ...application.services.payment_service import PaymentService
from ...di.container import get_container


router = APIRouter(tags=["payments"])


@router.post("", response_model=PaymentResponse, status_code=status.HTTP_201_CREATED)
async def create_payment(request: CreatePaymentRequest) -> PaymentResponse:
    """
    Create a payment for an existing user

    Args:
        request: Payment creation request (userId, amount, currency, description)

    Returns:
        PaymentResponse enriched with the user's name and email
    """
    container = get_container()
    payment_service = container.get(PaymentService)

    result = await payment_service.create_payment(request)
    return result.unwrap()


@router.get("/user/{user_id}", response_model=List[PaymentResponse])
async def get_payments_by_user(user_id: str) -> List[PaymentResponse]:
    """List all payments of a user"""
    container = get_container()
    payment_service = container.get(PaymentService)

    result = await payment_service.get_payments_by_user_id(user_id)
    return result.unwrap()


@router.get("/{payment_id}", response_model=PaymentResponse)
async def get_payment(payment_id: str) -> PaymentResponse:
    container = get_container()
    payment_service = container.get(PaymentService)

    result = await payment_service.get_payment_by_id(payment_id)
    return result.unwrap()


@router.post("/{payment_id}/complete", response_model=PaymentResponse)
async def complete_payment(payment_id: str) -> PaymentResponse:
    """Mark a pending payment as completed"""
    container = get_container()
    payment_service = container.get(PaymentService)

    result = await payment_service.complete_payment(payment_id)
    return result.unwrap()


@router.post("/{payment_id}/fail", response_model=PaymentResponse)
async def fail_payment(payment_id: str) -> PaymentResponse:
    """Mark a pending payment as failed"""
    container = get_container()
    payment_service = container.get(PaymentService)

    result = await payment_service.fail_payment(payment_id)
    return result.unwrap()
