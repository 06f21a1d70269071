"""Unit tests for AccountService."""

from datetime import timedelta
from decimal import Decimal

import pytest

from watchearn.domain.error import DuplicateEmailError, NotFoundError, ValidationError
from watchearn.domain.repository import AccountRepository
from watchearn.domain.service import AccountService
from tests.conftest import T0, make_account
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked, no docker needed
unit_env = create_env_fixture()


class TestCreateAccount:
    """Tests for create_account."""

    @pytest.mark.asyncio
    async def test_new_account_gets_starting_balance(self, unit_env):
        """New accounts start with the configured balance and no votes."""
        # Arrange
        account_service = await unit_env.get(AccountService)

        # Act
        account = await account_service.create_account("Ada", "Ada@Example.com ")

        # Assert
        assert account.balance == Decimal("213.19")
        assert account.email.root == "ada@example.com"
        assert account.first_earn_at is None
        assert account.voting_days_count == 0
        assert account.voting_streak == 0

    @pytest.mark.asyncio
    async def test_duplicate_email_is_rejected_case_insensitively(self, unit_env):
        """Emails are unique regardless of case."""
        # Arrange
        account_service = await unit_env.get(AccountService)
        await account_service.create_account("Ada", "ada@example.com")

        # Act & Assert
        with pytest.raises(DuplicateEmailError) as exc_info:
            await account_service.create_account("Other Ada", "ADA@example.com")

        assert exc_info.value.reason == "email_taken"
        assert str(exc_info.value) == "Email already registered"

    @pytest.mark.asyncio
    async def test_blank_name_is_rejected(self, unit_env):
        account_service = await unit_env.get(AccountService)

        with pytest.raises(ValidationError, match="Name and email are required"):
            await account_service.create_account("   ", "ada@example.com")

    @pytest.mark.asyncio
    async def test_malformed_email_is_rejected(self, unit_env):
        account_service = await unit_env.get(AccountService)

        with pytest.raises(ValidationError, match="Invalid email address"):
            await account_service.create_account("Ada", "not-an-email")

    @pytest.mark.asyncio
    async def test_explicit_starting_balance_is_rounded(self, unit_env):
        account_service = await unit_env.get(AccountService)

        account = await account_service.create_account(
            "Ada", "ada@example.com", starting_balance=Decimal("10.005")
        )

        assert account.balance == Decimal("10.01")


class TestLookup:
    """Tests for get_by_id and get_by_email."""

    @pytest.mark.asyncio
    async def test_get_by_email_ignores_case(self, unit_env):
        account_service = await unit_env.get(AccountService)
        created = await account_service.create_account("Ada", "ada@example.com")

        found = await account_service.get_by_email("ADA@EXAMPLE.COM")

        assert found.id == created.id

    @pytest.mark.asyncio
    async def test_unknown_email_raises_not_found(self, unit_env):
        account_service = await unit_env.get(AccountService)

        with pytest.raises(NotFoundError):
            await account_service.get_by_email("nobody@example.com")

    def test_parse_account_id_rejects_garbage(self):
        """A token carrying a non-UUID subject resolves to no account."""
        with pytest.raises(NotFoundError):
            AccountService.parse_account_id("not-a-uuid")


class TestApplyCredit:
    """Tests for apply_credit."""

    @pytest.mark.asyncio
    async def test_credit_sets_first_earn_at_once(self, unit_env):
        """first_earn_at records the first reward and never moves."""
        # Arrange
        account_service = await unit_env.get(AccountService)
        account = make_account()
        await (await unit_env.get(AccountRepository)).save(account)

        # Act
        account = await account_service.apply_credit(
            account, Decimal("0.75"), earned_at=T0
        )
        account = await account_service.apply_credit(
            account, Decimal("1.25"), earned_at=T0 + timedelta(days=3)
        )

        # Assert
        assert account.balance == Decimal("215.19")
        assert account.first_earn_at == T0

    @pytest.mark.asyncio
    async def test_negative_credit_is_rejected(self, unit_env):
        account_service = await unit_env.get(AccountService)

        with pytest.raises(ValueError):
            await account_service.apply_credit(make_account(), Decimal("-1.00"))


class TestVotingWindow:
    """Tests for touch_voting_window and window_start."""

    @pytest.mark.asyncio
    async def test_first_vote_opens_window(self, unit_env):
        # Arrange
        account_service = await unit_env.get(AccountService)
        account = make_account()
        await (await unit_env.get(AccountRepository)).save(account)

        # Act
        updated = await account_service.touch_voting_window(account, T0)

        # Assert
        assert updated.voting_days_count == 1
        assert updated.voting_streak == 1
        assert updated.last_vote_date_reset == T0
        assert updated.last_voted_at == T0

    @pytest.mark.asyncio
    async def test_vote_inside_window_only_moves_last_voted_at(self, unit_env):
        # Arrange
        account_service = await unit_env.get(AccountService)
        account = make_account()
        await (await unit_env.get(AccountRepository)).save(account)
        account = await account_service.touch_voting_window(account, T0)
        later = T0 + timedelta(hours=23, minutes=59, seconds=59)

        # Act
        updated = await account_service.touch_voting_window(account, later)

        # Assert
        assert updated.voting_days_count == 1
        assert updated.voting_streak == 1
        assert updated.last_vote_date_reset == T0
        assert updated.last_voted_at == later

    @pytest.mark.asyncio
    async def test_vote_after_window_opens_next_one(self, unit_env):
        # Arrange
        account_service = await unit_env.get(AccountService)
        account = make_account()
        await (await unit_env.get(AccountRepository)).save(account)
        account = await account_service.touch_voting_window(account, T0)
        later = T0 + timedelta(days=3)

        # Act
        updated = await account_service.touch_voting_window(account, later)

        # Assert
        assert updated.voting_days_count == 2
        assert updated.voting_streak == 2
        assert updated.last_vote_date_reset == later

    @pytest.mark.asyncio
    async def test_window_start(self, unit_env):
        """The anchor is reported only while its window is open."""
        account_service = await unit_env.get(AccountService)
        fresh = make_account()
        voted = make_account(voting_days_count=1, last_vote_date_reset=T0)

        assert account_service.window_start(fresh, T0) is None
        assert account_service.window_start(voted, T0 + timedelta(hours=5)) == T0
        assert account_service.window_start(voted, T0 + timedelta(hours=24)) is None
