"""PostgreSQL implementation of Transaction repository."""

from typing import List

from sqlalchemy import insert, select
from sqlalchemy.ext.asyncio import AsyncSession

from watchearn.domain.model import Transaction
from watchearn.domain.repository import TransactionRepository
from watchearn.domain.value import AccountId
from watchearn.persistence.mappers import row_to_transaction, transaction_to_dict
from watchearn.persistence.tables import transactions_table


class PostgresTransactionRepository(TransactionRepository):
    """PostgreSQL implementation of TransactionRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def save(self, transaction: Transaction) -> Transaction:
        """Append a ledger entry."""
        stmt = insert(transactions_table).values(**transaction_to_dict(transaction))
        await self.session.execute(stmt)
        await self.session.flush()
        return transaction

    async def find_by_account(self, account_id: AccountId) -> List[Transaction]:
        """Find an account's ledger entries, newest first."""
        stmt = (
            select(transactions_table)
            .where(transactions_table.c.account_id == account_id)
            .order_by(transactions_table.c.created_at.desc())
        )
        result = await self.session.execute(stmt)
        return [row_to_transaction(dict(row)) for row in result.mappings().all()]
