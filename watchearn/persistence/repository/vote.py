"""PostgreSQL implementation of Vote repository."""

from datetime import datetime
from typing import List

from sqlalchemy import and_, func, insert, select
from sqlalchemy.ext.asyncio import AsyncSession

from watchearn.domain.model import Vote
from watchearn.domain.repository import VoteRepository
from watchearn.domain.value import AccountId
from watchearn.persistence.mappers import row_to_vote, vote_to_dict
from watchearn.persistence.tables import votes_table


class PostgresVoteRepository(VoteRepository):
    """PostgreSQL implementation of VoteRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def save(self, vote: Vote) -> Vote:
        """Save a vote (create)."""
        stmt = insert(votes_table).values(**vote_to_dict(vote))
        await self.session.execute(stmt)
        await self.session.flush()
        return vote

    async def find_by_account(self, account_id: AccountId) -> List[Vote]:
        """Find all votes by an account, newest first."""
        stmt = (
            select(votes_table)
            .where(votes_table.c.account_id == account_id)
            .order_by(votes_table.c.created_at.desc())
        )
        result = await self.session.execute(stmt)
        return [row_to_vote(dict(row)) for row in result.mappings().all()]

    async def count_by_account(self, account_id: AccountId) -> int:
        """Count every vote an account has cast."""
        stmt = (
            select(func.count())
            .select_from(votes_table)
            .where(votes_table.c.account_id == account_id)
        )
        result = await self.session.execute(stmt)
        return result.scalar_one()

    async def count_by_account_since(
        self, account_id: AccountId, since: datetime
    ) -> int:
        """Count votes an account cast at or after ``since``."""
        stmt = select(func.count()).select_from(votes_table).where(
            and_(
                votes_table.c.account_id == account_id,
                votes_table.c.created_at >= since,
            )
        )
        result = await self.session.execute(stmt)
        return result.scalar_one()
