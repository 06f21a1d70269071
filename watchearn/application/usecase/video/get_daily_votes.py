"""Daily votes use case."""

from pydantic import BaseModel

from watchearn.application.usecase.common import CamelModel
from watchearn.domain.service import AccountService, VoteService


class GetDailyVotesRequest(BaseModel):
    """Daily votes request."""

    account_id: str


class GetDailyVotesResponse(CamelModel):
    """Votes used and left in the current voting window."""

    remaining: int
    voted: int
    total_votes: int


class GetDailyVotesUseCase:
    """Use case for reporting vote usage of the current window."""

    def __init__(
        self, vote_service: VoteService, account_service: AccountService
    ) -> None:
        self.vote_service = vote_service
        self.account_service = account_service

    async def execute(self, request: GetDailyVotesRequest) -> GetDailyVotesResponse:
        account_id = self.account_service.parse_account_id(request.account_id)
        status = await self.vote_service.daily_vote_status(account_id)
        return GetDailyVotesResponse(
            remaining=status.remaining,
            voted=status.voted,
            total_votes=status.total_votes,
        )
