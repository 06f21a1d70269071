"""Withdrawal domain service (the withdrawal gate)."""

from dataclasses import dataclass
from datetime import datetime, timedelta
from decimal import Decimal, InvalidOperation
from typing import Any
from uuid import uuid4

import logfire
from sqlalchemy.exc import IntegrityError

from watchearn.config import RewardSettings
from watchearn.domain.error import (
    CooldownNotElapsedError,
    InsufficientBalanceError,
    InvalidAmountError,
    NoEarningsYetError,
    PendingWithdrawalExistsError,
    ValidationError,
)
from watchearn.domain.model import Account, Withdrawal
from watchearn.domain.model.common import utcnow
from watchearn.domain.repository import WithdrawalRepository
from watchearn.domain.value import (
    AccountId,
    WithdrawalId,
    WithdrawalStatus,
    round_currency,
)

from .account_service import AccountService
from .base import Service
from .transaction_service import TransactionService


@dataclass
class WithdrawalEligibility:
    """Cooldown state of an account at a point in time.

    The cooldown is measured in whole days since the first reward the
    account ever earned.
    """

    days_passed: int
    days_until_withdrawal: int
    eligible: bool


@dataclass
class BalanceInfo:
    """Balance overview shown to the account holder."""

    account: Account
    days_until_withdrawal: int
    withdrawal_eligible: bool
    pending_withdrawal: Withdrawal | None


class WithdrawalService(Service):
    """Domain service for withdrawal requests."""

    def __init__(
        self,
        withdrawal_repository: WithdrawalRepository,
        account_service: AccountService,
        transaction_service: TransactionService,
        reward_settings: RewardSettings,
    ) -> None:
        """Initialize withdrawal service.

        Args:
            withdrawal_repository: Withdrawal repository
            account_service: Account domain service
            transaction_service: Transaction domain service
            reward_settings: Reward ledger settings
        """
        self.withdrawal_repository = withdrawal_repository
        self.account_service = account_service
        self.transaction_service = transaction_service
        self.reward_settings = reward_settings

    def eligibility(self, account: Account, now: datetime) -> WithdrawalEligibility:
        """Compute the withdrawal cooldown for an account.

        Args:
            account: Account to check
            now: Reference time

        Returns:
            Days passed, days remaining and whether a withdrawal is allowed
        """
        cooldown = self.reward_settings.withdrawal_cooldown_days
        if account.first_earn_at is None:
            return WithdrawalEligibility(
                days_passed=0, days_until_withdrawal=cooldown, eligible=False
            )

        days_passed = max(0, (now - account.first_earn_at) // timedelta(days=1))
        days_until = max(0, cooldown - days_passed)
        return WithdrawalEligibility(
            days_passed=days_passed,
            days_until_withdrawal=days_until,
            eligible=days_until == 0,
        )

    async def request_withdrawal(
        self,
        account_id: AccountId,
        amount: Any,
        method: str,
        now: datetime | None = None,
    ) -> Withdrawal:
        """Request a payout of part of the balance.

        The balance is not debited here; that happens at settlement.

        Args:
            account_id: Requesting account
            amount: Amount as a number or numeric string
            method: Payout method label
            now: Time of the request (defaults to the current time)

        Returns:
            The pending withdrawal

        Raises:
            ValidationError: If method is blank
            NotFoundError: If account does not exist
            NoEarningsYetError: If the account never earned a reward
            CooldownNotElapsedError: If the cooldown is still running
            PendingWithdrawalExistsError: If a withdrawal is already pending
            InvalidAmountError: If amount is not a positive number
            InsufficientBalanceError: If amount exceeds the balance
        """
        now = now or utcnow()
        with logfire.span(
            "withdrawal_service.request_withdrawal",
            account_id=str(account_id),
            method=method,
        ):
            method = (method or "").strip()
            if not method:
                raise ValidationError("Amount and method are required")

            account = await self.account_service.get_by_id(account_id)

            if account.first_earn_at is None:
                logfire.warn("Withdrawal before any earnings", account_id=str(account_id))
                raise NoEarningsYetError()

            eligibility = self.eligibility(account, now)
            if not eligibility.eligible:
                logfire.warn(
                    "Withdrawal cooldown not elapsed",
                    account_id=str(account_id),
                    days_remaining=eligibility.days_until_withdrawal,
                )
                raise CooldownNotElapsedError(eligibility.days_until_withdrawal)

            if await self.withdrawal_repository.find_pending_by_account(account_id):
                logfire.warn("Pending withdrawal exists", account_id=str(account_id))
                raise PendingWithdrawalExistsError()

            withdraw_amount = self._parse_amount(amount)
            if withdraw_amount > account.balance:
                logfire.warn(
                    "Insufficient balance",
                    account_id=str(account_id),
                    amount=str(withdraw_amount),
                    balance=str(account.balance),
                )
                raise InsufficientBalanceError()

            withdrawal = Withdrawal(
                id=WithdrawalId(uuid4()),
                account_id=account_id,
                amount=withdraw_amount,
                method=method,
                status=WithdrawalStatus.PENDING,
                requested_at=now,
            )
            try:
                saved = await self.withdrawal_repository.save(withdrawal)
            except IntegrityError:
                logfire.warn(
                    "Concurrent pending withdrawal", account_id=str(account_id)
                )
                raise PendingWithdrawalExistsError()

            await self.transaction_service.record_withdrawal_request(
                account_id, withdraw_amount, method, now
            )

            logfire.info(
                "Withdrawal requested",
                account_id=str(account_id),
                withdrawal_id=str(saved.id),
                amount=str(withdraw_amount),
            )
            return saved

    async def get_balance_info(
        self, account_id: AccountId, now: datetime | None = None
    ) -> BalanceInfo:
        """Build the balance overview for an account.

        Raises:
            NotFoundError: If account does not exist
        """
        now = now or utcnow()
        with logfire.span(
            "withdrawal_service.get_balance_info", account_id=str(account_id)
        ):
            account = await self.account_service.get_by_id(account_id)
            eligibility = self.eligibility(account, now)
            pending = await self.withdrawal_repository.find_pending_by_account(
                account_id
            )
            return BalanceInfo(
                account=account,
                days_until_withdrawal=eligibility.days_until_withdrawal,
                withdrawal_eligible=eligibility.eligible,
                pending_withdrawal=pending,
            )

    async def list_withdrawals(self, account_id: AccountId) -> list[Withdrawal]:
        """List an account's withdrawals, newest first."""
        with logfire.span(
            "withdrawal_service.list_withdrawals", account_id=str(account_id)
        ):
            return await self.withdrawal_repository.find_by_account(account_id)

    @staticmethod
    def _parse_amount(amount: Any) -> Decimal:
        if isinstance(amount, bool):
            raise InvalidAmountError(amount)
        try:
            parsed = round_currency(amount)
        except (InvalidOperation, TypeError, ValueError):
            raise InvalidAmountError(amount)
        if parsed <= 0:
            raise InvalidAmountError(amount)
        return parsed
