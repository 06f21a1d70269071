"""PostgreSQL implementation of Account repository."""

from typing import Optional

from sqlalchemy import insert, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from watchearn.domain.model import Account
from watchearn.domain.repository import AccountRepository
from watchearn.domain.value import AccountId, Email
from watchearn.persistence.mappers import account_to_dict, row_to_account
from watchearn.persistence.tables import accounts_table


class PostgresAccountRepository(AccountRepository):
    """PostgreSQL implementation of AccountRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, account_id: AccountId) -> Optional[Account]:
        """Find an account by ID."""
        stmt = select(accounts_table).where(accounts_table.c.id == account_id)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_account(dict(row)) if row else None

    async def find_by_email(self, email: Email) -> Optional[Account]:
        """Find an account by its normalized email."""
        stmt = select(accounts_table).where(accounts_table.c.email == email.root)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_account(dict(row)) if row else None

    async def save(self, account: Account) -> Account:
        """Save an account (create or update).

        Raises:
            IntegrityError: If another account already uses the email; the
                session is rolled back first
        """
        existing = await self.find_by_id(account.id)
        account_dict = account_to_dict(account)

        if existing:
            stmt = (
                accounts_table.update()
                .where(accounts_table.c.id == account.id)
                .values(**account_dict)
            )
        else:
            stmt = insert(accounts_table).values(**account_dict)

        try:
            await self.session.execute(stmt)
            await self.session.flush()
        except IntegrityError:
            # The request transaction is abandoned, never committed
            await self.session.rollback()
            raise
        return account
