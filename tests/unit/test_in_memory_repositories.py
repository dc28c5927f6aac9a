"""
Unit tests for the in-memory repositories.
"""
from datetime import datetime, timedelta, timezone

import pytest

from userpay.domain.models.payment import Payment
from userpay.domain.models.user import User
from userpay.infrastructure.db.in_memory_repositories import (
    InMemoryPaymentRepository,
    InMemoryUserRepository,
)


def _user(user_id: str, email: str, days_ago: int = 0) -> User:
    return User.reconstitute(
        id=user_id,
        email=email,
        name="Name",
        password="hash",
        created_at=datetime(2024, 1, 10, tzinfo=timezone.utc) - timedelta(days=days_ago),
    )


class TestInMemoryUserRepository:
    """Tests for InMemoryUserRepository"""

    @pytest.mark.asyncio
    async def test_save_and_find(self):
        repo = InMemoryUserRepository()
        await repo.save(_user("usr-1", "a@b.com"))

        assert (await repo.find_by_id("usr-1")).email == "a@b.com"
        assert (await repo.find_by_email(" A@B.com ")).id == "usr-1"
        assert await repo.find_by_id("missing") is None

    @pytest.mark.asyncio
    async def test_returned_users_are_copies(self):
        repo = InMemoryUserRepository()
        await repo.save(_user("usr-1", "a@b.com"))

        loaded = await repo.find_by_id("usr-1")
        loaded.name = "Changed"

        assert (await repo.find_by_id("usr-1")).name == "Name"

    @pytest.mark.asyncio
    async def test_find_all_newest_first_with_paging(self):
        repo = InMemoryUserRepository()
        await repo.save(_user("old", "old@b.com", days_ago=2))
        await repo.save(_user("new", "new@b.com", days_ago=0))
        await repo.save(_user("mid", "mid@b.com", days_ago=1))

        assert [u.id for u in await repo.find_all()] == ["new", "mid", "old"]
        assert [u.id for u in await repo.find_all(limit=1, offset=1)] == ["mid"]

    @pytest.mark.asyncio
    async def test_exists_by_email_excludes_user(self):
        repo = InMemoryUserRepository()
        await repo.save(_user("usr-1", "a@b.com"))

        assert await repo.exists_by_email("A@B.COM") is True
        assert await repo.exists_by_email("a@b.com", exclude_user_id="usr-1") is False

    @pytest.mark.asyncio
    async def test_find_by_ids_and_delete(self):
        repo = InMemoryUserRepository()
        await repo.save(_user("usr-1", "a@b.com"))
        await repo.save(_user("usr-2", "c@d.com"))

        assert [u.id for u in await repo.find_by_ids(["usr-2", "missing"])] == ["usr-2"]

        await repo.delete("usr-2")
        await repo.delete("missing")
        assert await repo.find_by_id("usr-2") is None


class TestInMemoryPaymentRepository:
    """Tests for InMemoryPaymentRepository"""

    @pytest.mark.asyncio
    async def test_save_upserts_whole_payment(self):
        repo = InMemoryPaymentRepository()
        payment = Payment.create(user_id="usr-1", amount=10, currency="USD").value
        await repo.save(payment)

        payment.complete()
        await repo.save(payment)

        stored = await repo.find_by_id(payment.id)
        assert stored.status == payment.status

    @pytest.mark.asyncio
    async def test_find_by_user_id(self):
        repo = InMemoryPaymentRepository()
        first = Payment.create(user_id="usr-1", amount=10, currency="USD").value
        second = Payment.create(user_id="usr-1", amount=20, currency="USD").value
        other = Payment.create(user_id="usr-2", amount=30, currency="USD").value
        for payment in (first, second, other):
            await repo.save(payment)

        payments = await repo.find_by_user_id("usr-1")

        assert {p.id for p in payments} == {first.id, second.id}
        assert await repo.find_by_user_id("nobody") == []
