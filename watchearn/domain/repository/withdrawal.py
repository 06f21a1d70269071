"""Withdrawal repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from watchearn.domain.model.withdrawal import Withdrawal
from watchearn.domain.value import AccountId


class WithdrawalRepository(ABC):
    """Repository for Withdrawal entity."""

    @abstractmethod
    async def save(self, withdrawal: Withdrawal) -> Withdrawal:
        """Save a withdrawal (create or update).

        Args:
            withdrawal: The withdrawal to save

        Returns:
            The saved withdrawal

        Raises:
            IntegrityError: If the account already has a pending withdrawal
        """
        pass

    @abstractmethod
    async def find_by_account(self, account_id: AccountId) -> List[Withdrawal]:
        """Find an account's withdrawals, newest first.

        Args:
            account_id: The account's ID

        Returns:
            List of withdrawals
        """
        pass

    @abstractmethod
    async def find_pending_by_account(
        self, account_id: AccountId
    ) -> Optional[Withdrawal]:
        """Find the account's pending withdrawal.

        Args:
            account_id: The account's ID

        Returns:
            The pending withdrawal if one exists, None otherwise
        """
        pass
