"""Persistence infrastructure providers."""

from collections.abc import AsyncIterator

import logfire
from dishka import Scope, provide
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from watchearn.config import Settings
from watchearn.domain.repository import (
    AccountRepository,
    TransactionRepository,
    VideoRepository,
    VoteRepository,
    WithdrawalRepository,
)
from watchearn.persistence.database import create_engine, create_session_factory
from watchearn.persistence.repository import (
    PostgresAccountRepository,
    PostgresTransactionRepository,
    PostgresVideoRepository,
    PostgresVoteRepository,
    PostgresWithdrawalRepository,
)
from watchearn.util.di.base import ProviderBase
from watchearn.util.observability import instrument_sqlalchemy


class PersistenceProvider(ProviderBase):
    """Persistence component base."""

    __mock_component__ = "persistence"


class ProdPersistenceProvider(PersistenceProvider):
    """Production persistence provider using PostgreSQL."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    async def get_engine(self, settings: Settings) -> AsyncIterator[AsyncEngine]:
        """Provide database engine, disposed with the container."""
        engine = create_engine(settings)
        instrument_sqlalchemy(engine)
        yield engine
        await engine.dispose()

    @provide(scope=Scope.APP)
    def get_session_factory(
        self, engine: AsyncEngine
    ) -> async_sessionmaker[AsyncSession]:
        """Provide session factory."""
        return create_session_factory(engine)

    @provide(scope=Scope.REQUEST)
    async def get_session(
        self, session_factory: async_sessionmaker[AsyncSession]
    ) -> AsyncIterator[AsyncSession]:
        """Provide one database session per request.

        Committed when the request finishes cleanly, rolled back otherwise,
        so a vote and its credit land together or not at all.
        """
        async with session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception as e:
                logfire.warn("Session rollback", error=str(e))
                await session.rollback()
                raise

    @provide(scope=Scope.REQUEST)
    def get_account_repository(self, session: AsyncSession) -> AccountRepository:
        """Provide Account repository."""
        return PostgresAccountRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_video_repository(self, session: AsyncSession) -> VideoRepository:
        """Provide Video repository."""
        return PostgresVideoRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_vote_repository(self, session: AsyncSession) -> VoteRepository:
        """Provide Vote repository."""
        return PostgresVoteRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_transaction_repository(
        self, session: AsyncSession
    ) -> TransactionRepository:
        """Provide Transaction repository."""
        return PostgresTransactionRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_withdrawal_repository(self, session: AsyncSession) -> WithdrawalRepository:
        """Provide Withdrawal repository."""
        return PostgresWithdrawalRepository(session)
