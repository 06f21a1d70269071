"""Vote repository interface."""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import List

from watchearn.domain.model.vote import Vote
from watchearn.domain.value import AccountId


class VoteRepository(ABC):
    """Repository for Vote entity.

    Defines the contract for vote persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def save(self, vote: Vote) -> Vote:
        """Save a new vote.

        Args:
            vote: The vote to save

        Returns:
            The saved vote
        """
        pass

    @abstractmethod
    async def find_by_account(self, account_id: AccountId) -> List[Vote]:
        """Find all votes cast by an account, newest first.

        Args:
            account_id: The account's ID

        Returns:
            List of votes by the account
        """
        pass

    @abstractmethod
    async def count_by_account(self, account_id: AccountId) -> int:
        """Count every vote an account has ever cast.

        Args:
            account_id: The account's ID

        Returns:
            Number of votes
        """
        pass

    @abstractmethod
    async def count_by_account_since(
        self, account_id: AccountId, since: datetime
    ) -> int:
        """Count votes an account cast at or after a point in time.

        Used to count the votes inside the current voting window.

        Args:
            account_id: The account's ID
            since: Inclusive lower bound on created_at

        Returns:
            Number of votes
        """
        pass
