"""In-memory transaction repository for testing."""

from watchearn.domain.model.transaction import Transaction
from watchearn.domain.repository.transaction import TransactionRepository
from watchearn.domain.value import AccountId


class InMemoryTransactionRepository(TransactionRepository):
    """In-memory implementation of TransactionRepository for testing."""

    def __init__(self) -> None:
        self._transactions: list[Transaction] = []

    async def save(self, transaction: Transaction) -> Transaction:
        """Append a ledger entry."""
        self._transactions.append(transaction)
        return transaction

    async def find_by_account(self, account_id: AccountId) -> list[Transaction]:
        """Find an account's ledger entries, newest first."""
        entries = [t for t in self._transactions if t.account_id == account_id]
        return sorted(entries, key=lambda t: t.created_at, reverse=True)
