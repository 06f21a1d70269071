"""Tests for the in-memory repositories used by unit and E2E tests."""

from datetime import timedelta
from decimal import Decimal
from uuid import uuid4

import pytest
from sqlalchemy.exc import IntegrityError

from watchearn.domain.model import Vote, Withdrawal
from watchearn.domain.value import (
    AccountId,
    Email,
    VideoId,
    VoteId,
    VoteType,
    WithdrawalId,
    WithdrawalStatus,
)
from watchearn.persistence.repository.inmemory import (
    InMemoryAccountRepository,
    InMemoryVideoRepository,
    InMemoryVoteRepository,
    InMemoryWithdrawalRepository,
)
from tests.conftest import T0, make_account, make_video


def _withdrawal(account_id: AccountId, status=WithdrawalStatus.PENDING, at=T0):
    return Withdrawal(
        id=WithdrawalId(uuid4()),
        account_id=account_id,
        amount=Decimal("10.00"),
        method="paypal",
        status=status,
        requested_at=at,
    )


class TestInMemoryAccountRepository:
    @pytest.mark.asyncio
    async def test_email_is_unique(self):
        repo = InMemoryAccountRepository()
        await repo.save(make_account(email="ada@example.com"))

        with pytest.raises(IntegrityError):
            await repo.save(make_account(email="ADA@example.com"))

    @pytest.mark.asyncio
    async def test_update_keeps_email(self):
        repo = InMemoryAccountRepository()
        account = await repo.save(make_account())

        await repo.save(account.model_copy(update={"balance": Decimal("1.00")}))

        found = await repo.find_by_email(Email("viewer@example.com"))
        assert found.balance == Decimal("1.00")


class TestInMemoryVideoRepository:
    @pytest.mark.asyncio
    async def test_explicit_videos_replace_catalog(self):
        repo = InMemoryVideoRepository(videos=[make_video()])

        assert [v.id for v in await repo.find_all()] == ["test-video"]
        assert await repo.find_by_id(VideoId("W5PRZuaQ3VM")) is None


class TestInMemoryVoteRepository:
    @pytest.mark.asyncio
    async def test_count_since_is_inclusive(self):
        # Arrange
        repo = InMemoryVoteRepository()
        account_id = AccountId(uuid4())
        for minutes in (0, 30, 90):
            await repo.save(
                Vote(
                    id=VoteId(uuid4()),
                    account_id=account_id,
                    video_id=VideoId("test-video"),
                    vote_type=VoteType.LIKE,
                    reward_amount=Decimal("1.00"),
                    created_at=T0 + timedelta(minutes=minutes),
                )
            )

        # Act & Assert
        assert await repo.count_by_account(account_id) == 3
        assert await repo.count_by_account_since(account_id, T0 + timedelta(minutes=30)) == 2
        assert await repo.count_by_account_since(AccountId(uuid4()), T0) == 0


class TestInMemoryWithdrawalRepository:
    @pytest.mark.asyncio
    async def test_one_pending_per_account(self):
        repo = InMemoryWithdrawalRepository()
        account_id = AccountId(uuid4())
        await repo.save(_withdrawal(account_id))

        with pytest.raises(IntegrityError):
            await repo.save(_withdrawal(account_id))

    @pytest.mark.asyncio
    async def test_settled_withdrawals_do_not_block(self):
        # Arrange
        repo = InMemoryWithdrawalRepository()
        account_id = AccountId(uuid4())
        await repo.save(_withdrawal(account_id, status=WithdrawalStatus.COMPLETED))

        # Act
        pending = await repo.save(_withdrawal(account_id, at=T0 + timedelta(days=1)))

        # Assert
        assert await repo.find_pending_by_account(account_id) == pending
        assert [w.id for w in await repo.find_by_account(account_id)][0] == pending.id
