# Standard library imports
from typing import Any, Dict, List, Optional

# External package imports
from motor.motor_asyncio import AsyncIOMotorCollection
from pymongo import ASCENDING

# Local application imports
from ...domain.repositories.payment_repository import PaymentRepository
from ...domain.models.payment import Payment, PaymentStatus
from ...domain.constants import PaymentFields
from .mongo_connection import get_payment_collection


class MongoPaymentRepository(PaymentRepository):
    """MongoDB implementation of PaymentRepository"""

    def __init__(self, payment_collection: Optional[AsyncIOMotorCollection] = None) -> None:
        self.payment_collection = (
            payment_collection if payment_collection is not None else get_payment_collection()
        )

    async def save(self, payment: Payment) -> None:
        """Save the whole payment document (upsert)"""
        if not payment:
            raise ValueError("Payment cannot be None")

        try:
            await self.payment_collection.replace_one(
                {PaymentFields.MONGO_ID: payment.id},
                self._payment_to_dict(payment),
                upsert=True,
            )
        except Exception as e:
            raise RuntimeError(f"Error saving payment: {str(e)}")

    async def find_by_id(self, payment_id: str) -> Optional[Payment]:
        """Find payment by ID"""
        if not payment_id:
            return None

        try:
            document = await self.payment_collection.find_one({PaymentFields.MONGO_ID: payment_id})
            if document is None:
                return None
            return self._document_to_payment(document)
        except Exception as e:
            raise RuntimeError(f"Error finding payment by ID: {str(e)}")

    async def find_by_user_id(self, user_id: str) -> List[Payment]:
        """Find all payments for a user, oldest first"""
        if not user_id:
            return []

        try:
            cursor = self.payment_collection.find(
                {PaymentFields.USER_ID: user_id}
            ).sort(PaymentFields.CREATED_AT, ASCENDING)
            payments = []
            async for document in cursor:
                payments.append(self._document_to_payment(document))
            return payments
        except Exception as e:
            raise RuntimeError(f"Error listing payments for user: {str(e)}")

    async def delete(self, payment_id: str) -> None:
        """Delete payment by ID"""
        try:
            await self.payment_collection.delete_one({PaymentFields.MONGO_ID: payment_id})
        except Exception as e:
            raise RuntimeError(f"Error deleting payment: {str(e)}")

    def _document_to_payment(self, document: Dict[str, Any]) -> Payment:
        """Convert MongoDB document to Payment domain model"""
        if not document or PaymentFields.MONGO_ID not in document:
            raise ValueError("Invalid document: missing _id field")

        return Payment.reconstitute(
            id=str(document[PaymentFields.MONGO_ID]),
            user_id=document.get(PaymentFields.USER_ID, ""),
            amount=float(document.get(PaymentFields.AMOUNT, 0)),
            currency=document.get(PaymentFields.CURRENCY, ""),
            status=PaymentStatus(document.get(PaymentFields.STATUS, PaymentStatus.PENDING.value)),
            created_at=document.get(PaymentFields.CREATED_AT),
            description=document.get(PaymentFields.DESCRIPTION),
            updated_at=document.get(PaymentFields.UPDATED_AT),
        )

    def _payment_to_dict(self, payment: Payment) -> Dict[str, Any]:
        """Convert Payment domain model to MongoDB document"""
        return {
            PaymentFields.MONGO_ID: payment.id,
            PaymentFields.USER_ID: payment.user_id,
            PaymentFields.AMOUNT: payment.amount,
            PaymentFields.CURRENCY: payment.currency,
            PaymentFields.STATUS: payment.status.value,
            PaymentFields.DESCRIPTION: payment.description,
            PaymentFields.CREATED_AT: payment.created_at,
            PaymentFields.UPDATED_AT: payment.updated_at,
        }
