"""In-memory withdrawal repository for testing."""

from typing import Optional

from sqlalchemy.exc import IntegrityError

from watchearn.domain.model.withdrawal import Withdrawal
from watchearn.domain.repository.withdrawal import WithdrawalRepository
from watchearn.domain.value import AccountId, WithdrawalStatus, WithdrawalId


class InMemoryWithdrawalRepository(WithdrawalRepository):
    """In-memory implementation of WithdrawalRepository for testing."""

    def __init__(self) -> None:
        self._withdrawals: dict[WithdrawalId, Withdrawal] = {}

    async def save(self, withdrawal: Withdrawal) -> Withdrawal:
        """Save or update a withdrawal.

        Raises:
            IntegrityError: If the account already has another pending withdrawal
        """
        if withdrawal.status == WithdrawalStatus.PENDING:
            pending = await self.find_pending_by_account(withdrawal.account_id)
            if pending and pending.id != withdrawal.id:
                raise IntegrityError("Pending withdrawal exists", None, Exception())

        self._withdrawals[withdrawal.id] = withdrawal
        return withdrawal

    async def find_by_account(self, account_id: AccountId) -> list[Withdrawal]:
        """Find an account's withdrawals, newest first."""
        withdrawals = [
            w for w in self._withdrawals.values() if w.account_id == account_id
        ]
        return sorted(withdrawals, key=lambda w: w.requested_at, reverse=True)

    async def find_pending_by_account(
        self, account_id: AccountId
    ) -> Optional[Withdrawal]:
        """Find the account's pending withdrawal."""
        for withdrawal in self._withdrawals.values():
            if (
                withdrawal.account_id == account_id
                and withdrawal.status == WithdrawalStatus.PENDING
            ):
                return withdrawal
        return None
