"""Transaction repository interface."""

from abc import ABC, abstractmethod
from typing import List

from watchearn.domain.model.transaction import Transaction
from watchearn.domain.value import AccountId


class TransactionRepository(ABC):
    """Repository for the append-only transaction ledger."""

    @abstractmethod
    async def save(self, transaction: Transaction) -> Transaction:
        """Append a ledger entry.

        Args:
            transaction: The entry to append

        Returns:
            The saved entry
        """
        pass

    @abstractmethod
    async def find_by_account(self, account_id: AccountId) -> List[Transaction]:
        """Find an account's ledger entries, newest first.

        Args:
            account_id: The account's ID

        Returns:
            List of transactions
        """
        pass
