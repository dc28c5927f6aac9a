"""
Unit tests for the Payment aggregate.
"""
import pytest

from userpay.domain.exceptions import BusinessRuleViolationException
from userpay.domain.models.payment import Payment, PaymentStatus


class TestPaymentCreate:
    """Tests for Payment.create"""

    def test_valid_payment_is_pending(self):
        result = Payment.create(user_id="usr-1", amount=100.50, currency="usd", description="Order")
        assert result.is_success
        payment = result.value
        assert payment.status == PaymentStatus.PENDING
        assert payment.currency == "USD"
        assert payment.amount == 100.50
        assert payment.description == "Order"
        assert payment.updated_at is None

    @pytest.mark.parametrize("amount", [0, -1, -0.01, float("nan"), float("inf")])
    def test_non_positive_amount_fails(self, amount):
        result = Payment.create(user_id="usr-1", amount=amount, currency="USD")
        assert result.is_failure
        assert isinstance(result.error, BusinessRuleViolationException)
        assert result.error.message == "Amount must be positive"

    @pytest.mark.parametrize("currency", ["", "US", "USDT"])
    def test_currency_must_have_three_letters(self, currency):
        result = Payment.create(user_id="usr-1", amount=10, currency=currency)
        assert result.is_failure
        assert result.error.message == "Currency must be 3-letter code"


class TestPaymentTransitions:
    """Tests for complete / fail"""

    @pytest.fixture
    def payment(self):
        return Payment.create(user_id="usr-1", amount=10, currency="EUR").value

    def test_complete_twice(self, payment):
        assert payment.complete().is_success
        assert payment.status == PaymentStatus.COMPLETED
        assert payment.updated_at is not None

        second = payment.complete()
        assert second.is_failure
        assert second.error.message == "Only pending payments can be completed"

    def test_fail_from_pending(self, payment):
        assert payment.fail().is_success
        assert payment.status == PaymentStatus.FAILED

    def test_fail_after_complete_is_rejected(self, payment):
        payment.complete()
        result = payment.fail()
        assert result.is_failure
        assert result.error.message == "Only pending payments can fail"
        assert payment.status == PaymentStatus.COMPLETED
