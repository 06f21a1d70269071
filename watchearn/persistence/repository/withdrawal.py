"""PostgreSQL implementation of Withdrawal repository."""

from typing import List, Optional

from sqlalchemy import and_, insert, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from watchearn.domain.model import Withdrawal
from watchearn.domain.repository import WithdrawalRepository
from watchearn.domain.value import AccountId, WithdrawalStatus
from watchearn.persistence.mappers import row_to_withdrawal, withdrawal_to_dict
from watchearn.persistence.tables import withdrawals_table


class PostgresWithdrawalRepository(WithdrawalRepository):
    """PostgreSQL implementation of WithdrawalRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def save(self, withdrawal: Withdrawal) -> Withdrawal:
        """Save a withdrawal (create or update).

        The partial unique index on pending withdrawals rejects a second
        pending request with an IntegrityError, after which the session is
        rolled back.
        """
        existing = await self.session.execute(
            select(withdrawals_table.c.id).where(withdrawals_table.c.id == withdrawal.id)
        )
        withdrawal_dict = withdrawal_to_dict(withdrawal)

        if existing.first():
            stmt = (
                withdrawals_table.update()
                .where(withdrawals_table.c.id == withdrawal.id)
                .values(**withdrawal_dict)
            )
        else:
            stmt = insert(withdrawals_table).values(**withdrawal_dict)

        try:
            await self.session.execute(stmt)
            await self.session.flush()
        except IntegrityError:
            # The request transaction is abandoned, never committed
            await self.session.rollback()
            raise
        return withdrawal

    async def find_by_account(self, account_id: AccountId) -> List[Withdrawal]:
        """Find an account's withdrawals, newest first."""
        stmt = (
            select(withdrawals_table)
            .where(withdrawals_table.c.account_id == account_id)
            .order_by(withdrawals_table.c.requested_at.desc())
        )
        result = await self.session.execute(stmt)
        return [row_to_withdrawal(dict(row)) for row in result.mappings().all()]

    async def find_pending_by_account(
        self, account_id: AccountId
    ) -> Optional[Withdrawal]:
        """Find the account's pending withdrawal."""
        stmt = select(withdrawals_table).where(
            and_(
                withdrawals_table.c.account_id == account_id,
                withdrawals_table.c.status == WithdrawalStatus.PENDING.value,
            )
        )
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_withdrawal(dict(row)) if row else None
