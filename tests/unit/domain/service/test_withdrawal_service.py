"""Unit tests for WithdrawalService."""

from datetime import timedelta
from decimal import Decimal

import pytest

from watchearn.domain.error import (
    CooldownNotElapsedError,
    InsufficientBalanceError,
    InvalidAmountError,
    NoEarningsYetError,
    PendingWithdrawalExistsError,
    ValidationError,
)
from watchearn.domain.repository import (
    AccountRepository,
    TransactionRepository,
    WithdrawalRepository,
)
from watchearn.domain.service import WithdrawalService
from watchearn.domain.value import TransactionStatus, TransactionType, WithdrawalStatus
from tests.conftest import T0, make_account
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked, no docker needed
unit_env = create_env_fixture()

ELIGIBLE_AT = T0 + timedelta(days=20)


async def _earner(unit_env, balance: str = "250.00"):
    """Save an account that earned its first reward at T0."""
    account = make_account(balance=balance, first_earn_at=T0, voting_days_count=1)
    await (await unit_env.get(AccountRepository)).save(account)
    return account


class TestEligibility:
    """Tests for the cooldown computation."""

    @pytest.mark.asyncio
    async def test_never_earned_waits_full_cooldown(self, unit_env):
        withdrawal_service = await unit_env.get(WithdrawalService)

        eligibility = withdrawal_service.eligibility(make_account(), T0)

        assert eligibility.days_until_withdrawal == 20
        assert eligibility.eligible is False

    @pytest.mark.asyncio
    async def test_partial_days_do_not_count(self, unit_env):
        """Days are counted whole; 19 days and 23 hours is still 19."""
        withdrawal_service = await unit_env.get(WithdrawalService)
        account = make_account(first_earn_at=T0)

        eligibility = withdrawal_service.eligibility(
            account, T0 + timedelta(days=19, hours=23)
        )

        assert eligibility.days_passed == 19
        assert eligibility.days_until_withdrawal == 1
        assert eligibility.eligible is False

    @pytest.mark.asyncio
    async def test_eligible_after_twenty_days(self, unit_env):
        withdrawal_service = await unit_env.get(WithdrawalService)
        account = make_account(first_earn_at=T0)

        eligibility = withdrawal_service.eligibility(account, ELIGIBLE_AT)

        assert eligibility.days_until_withdrawal == 0
        assert eligibility.eligible is True


class TestRequestWithdrawal:
    """Tests for request_withdrawal."""

    @pytest.mark.asyncio
    async def test_request_creates_pending_withdrawal_without_debit(self, unit_env):
        """A request is recorded as pending and leaves the balance alone."""
        # Arrange
        withdrawal_service = await unit_env.get(WithdrawalService)
        account_repo = await unit_env.get(AccountRepository)
        transaction_repo = await unit_env.get(TransactionRepository)
        account = await _earner(unit_env)

        # Act
        withdrawal = await withdrawal_service.request_withdrawal(
            account.id, "50", "paypal", now=ELIGIBLE_AT
        )

        # Assert
        assert withdrawal.amount == Decimal("50.00")
        assert withdrawal.status == WithdrawalStatus.PENDING
        assert withdrawal.requested_at == ELIGIBLE_AT
        assert (await account_repo.find_by_id(account.id)).balance == Decimal("250.00")

        transactions = await transaction_repo.find_by_account(account.id)
        assert len(transactions) == 1
        assert transactions[0].type == TransactionType.WITHDRAWAL
        assert transactions[0].status == TransactionStatus.PENDING
        assert transactions[0].description == "Withdrawal request via paypal"

    @pytest.mark.asyncio
    async def test_no_earnings_yet(self, unit_env):
        # Arrange
        withdrawal_service = await unit_env.get(WithdrawalService)
        account = make_account()
        await (await unit_env.get(AccountRepository)).save(account)

        # Act & Assert
        with pytest.raises(NoEarningsYetError) as exc_info:
            await withdrawal_service.request_withdrawal(
                account.id, 10, "paypal", now=ELIGIBLE_AT
            )

        assert exc_info.value.reason == "no_earnings_yet"

    @pytest.mark.asyncio
    async def test_cooldown_reports_days_remaining(self, unit_env):
        # Arrange
        withdrawal_service = await unit_env.get(WithdrawalService)
        account = await _earner(unit_env)

        # Act & Assert
        with pytest.raises(CooldownNotElapsedError) as exc_info:
            await withdrawal_service.request_withdrawal(
                account.id, 10, "paypal", now=T0 + timedelta(days=5)
            )

        assert exc_info.value.days_remaining == 15
        assert exc_info.value.context == {"days_remaining": 15}

    @pytest.mark.asyncio
    async def test_second_pending_withdrawal_is_rejected(self, unit_env):
        # Arrange
        withdrawal_service = await unit_env.get(WithdrawalService)
        account = await _earner(unit_env)
        await withdrawal_service.request_withdrawal(
            account.id, 10, "paypal", now=ELIGIBLE_AT
        )

        # Act & Assert
        with pytest.raises(PendingWithdrawalExistsError):
            await withdrawal_service.request_withdrawal(
                account.id, 10, "paypal", now=ELIGIBLE_AT + timedelta(hours=1)
            )

    @pytest.mark.parametrize("amount", ["abc", "0", -5, "NaN", "Infinity"])
    @pytest.mark.asyncio
    async def test_invalid_amounts(self, unit_env, amount):
        withdrawal_service = await unit_env.get(WithdrawalService)
        account = await _earner(unit_env)

        with pytest.raises(InvalidAmountError, match="Invalid withdrawal amount"):
            await withdrawal_service.request_withdrawal(
                account.id, amount, "paypal", now=ELIGIBLE_AT
            )

    @pytest.mark.asyncio
    async def test_amount_above_balance(self, unit_env):
        """A rejected request leaves balance, ledger and withdrawals untouched."""
        # Arrange
        withdrawal_service = await unit_env.get(WithdrawalService)
        account_repo = await unit_env.get(AccountRepository)
        transaction_repo = await unit_env.get(TransactionRepository)
        withdrawal_repo = await unit_env.get(WithdrawalRepository)
        account = await _earner(unit_env, balance="20.00")

        # Act & Assert
        with pytest.raises(InsufficientBalanceError):
            await withdrawal_service.request_withdrawal(
                account.id, 20.01, "paypal", now=ELIGIBLE_AT
            )

        assert (await account_repo.find_by_id(account.id)).balance == Decimal("20.00")
        assert await transaction_repo.find_by_account(account.id) == []
        assert await withdrawal_repo.find_pending_by_account(account.id) is None

    @pytest.mark.asyncio
    async def test_whole_balance_can_be_requested(self, unit_env):
        withdrawal_service = await unit_env.get(WithdrawalService)
        account = await _earner(unit_env, balance="20.00")

        withdrawal = await withdrawal_service.request_withdrawal(
            account.id, 20.0, "bank", now=ELIGIBLE_AT
        )

        assert withdrawal.amount == Decimal("20.00")

    @pytest.mark.asyncio
    async def test_blank_method(self, unit_env):
        withdrawal_service = await unit_env.get(WithdrawalService)
        account = await _earner(unit_env)

        with pytest.raises(ValidationError, match="Amount and method are required"):
            await withdrawal_service.request_withdrawal(
                account.id, 10, "  ", now=ELIGIBLE_AT
            )


class TestBalanceInfo:
    """Tests for get_balance_info."""

    @pytest.mark.asyncio
    async def test_balance_info_reports_pending_withdrawal(self, unit_env):
        # Arrange
        withdrawal_service = await unit_env.get(WithdrawalService)
        account = await _earner(unit_env)
        withdrawal = await withdrawal_service.request_withdrawal(
            account.id, 25, "paypal", now=ELIGIBLE_AT
        )

        # Act
        info = await withdrawal_service.get_balance_info(account.id, now=ELIGIBLE_AT)

        # Assert
        assert info.account.balance == Decimal("250.00")
        assert info.withdrawal_eligible is True
        assert info.days_until_withdrawal == 0
        assert info.pending_withdrawal == withdrawal

    @pytest.mark.asyncio
    async def test_balance_info_during_cooldown(self, unit_env):
        withdrawal_service = await unit_env.get(WithdrawalService)
        account = await _earner(unit_env)

        info = await withdrawal_service.get_balance_info(
            account.id, now=T0 + timedelta(days=2)
        )

        assert info.withdrawal_eligible is False
        assert info.days_until_withdrawal == 18
        assert info.pending_withdrawal is None
