"""Integration tests for the PostgreSQL repositories.

Run with ``pytest -m integration`` against a migrated database at
DATABASE__URL.
"""

from datetime import timedelta
from decimal import Decimal
from uuid import uuid4

import pytest

from watchearn.domain.model import Transaction, Vote
from watchearn.domain.repository import (
    AccountRepository,
    TransactionRepository,
    VideoRepository,
    VoteRepository,
)
from watchearn.domain.value import (
    Email,
    TransactionId,
    TransactionStatus,
    TransactionType,
    VideoId,
    VoteId,
    VoteType,
)
from tests.conftest import T0, make_account
from tests.harness import create_env_fixture

pytestmark = pytest.mark.integration

# Integration test fixture
integration_env = create_env_fixture(unmock={"persistence"})


def _email() -> str:
    return f"viewer-{uuid4().hex[:12]}@example.com"


class TestPostgresRepositories:
    """Round trips through PostgreSQL."""

    @pytest.mark.asyncio
    async def test_account_round_trip(self, integration_env):
        """Money comes back as Decimal and the email as a value object."""
        # Arrange
        account_repo = await integration_env.get(AccountRepository)
        account = make_account(email=_email(), first_earn_at=T0)

        # Act
        await account_repo.save(account)
        found = await account_repo.find_by_email(account.email)

        # Assert
        assert found is not None
        assert found.id == account.id
        assert found.balance == Decimal("213.19")
        assert isinstance(found.email, Email)
        assert found.first_earn_at == T0

    @pytest.mark.asyncio
    async def test_seeded_catalog(self, integration_env):
        video_repo = await integration_env.get(VideoRepository)

        video = await video_repo.find_by_id(VideoId("W5PRZuaQ3VM"))

        assert video is not None
        assert video.title == "Video 1"
        assert video.reward_min == Decimal("0.30")

    @pytest.mark.asyncio
    async def test_votes_counted_since(self, integration_env):
        # Arrange
        account_repo = await integration_env.get(AccountRepository)
        vote_repo = await integration_env.get(VoteRepository)
        account = await account_repo.save(make_account(email=_email()))
        for minutes in (0, 10, 20):
            await vote_repo.save(
                Vote(
                    id=VoteId(uuid4()),
                    account_id=account.id,
                    video_id=VideoId("W5PRZuaQ3VM"),
                    vote_type=VoteType.LIKE,
                    reward_amount=Decimal("0.75"),
                    created_at=T0 + timedelta(minutes=minutes),
                )
            )

        # Act & Assert
        assert await vote_repo.count_by_account(account.id) == 3
        assert (
            await vote_repo.count_by_account_since(account.id, T0 + timedelta(minutes=10))
            == 2
        )

    @pytest.mark.asyncio
    async def test_transactions_newest_first(self, integration_env):
        # Arrange
        account_repo = await integration_env.get(AccountRepository)
        transaction_repo = await integration_env.get(TransactionRepository)
        account = await account_repo.save(make_account(email=_email()))
        for hours, description in ((0, "older"), (1, "newer")):
            await transaction_repo.save(
                Transaction(
                    id=TransactionId(uuid4()),
                    account_id=account.id,
                    type=TransactionType.CREDIT,
                    amount=Decimal("1.00"),
                    description=description,
                    status=TransactionStatus.COMPLETED,
                    created_at=T0 + timedelta(hours=hours),
                )
            )

        # Act
        entries = await transaction_repo.find_by_account(account.id)

        # Assert
        assert [e.description for e in entries] == ["newer", "older"]
