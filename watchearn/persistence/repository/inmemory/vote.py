"""In-memory vote repository for testing."""

from datetime import datetime

from watchearn.domain.model.vote import Vote
from watchearn.domain.repository.vote import VoteRepository
from watchearn.domain.value import AccountId


class InMemoryVoteRepository(VoteRepository):
    """In-memory implementation of VoteRepository for testing."""

    def __init__(self) -> None:
        self._votes: list[Vote] = []

    async def save(self, vote: Vote) -> Vote:
        """Save a vote."""
        self._votes.append(vote)
        return vote

    async def find_by_account(self, account_id: AccountId) -> list[Vote]:
        """Find all votes by an account, newest first."""
        votes = [v for v in self._votes if v.account_id == account_id]
        return sorted(votes, key=lambda v: v.created_at, reverse=True)

    async def count_by_account(self, account_id: AccountId) -> int:
        """Count every vote an account has cast."""
        return sum(1 for v in self._votes if v.account_id == account_id)

    async def count_by_account_since(
        self, account_id: AccountId, since: datetime
    ) -> int:
        """Count votes an account cast at or after ``since``."""
        return sum(
            1
            for v in self._votes
            if v.account_id == account_id and v.created_at >= since
        )
