"""Cast vote use case."""

from pydantic import BaseModel

from watchearn.application.usecase.common import CamelModel, VoteInfo
from watchearn.domain.service import AccountService, VoteService
from watchearn.domain.value import Money, VideoId


class CastVoteRequest(BaseModel):
    """Cast vote request."""

    account_id: str  # From the verified session token
    video_id: str
    vote_type: str  # Checked by the vote ledger


class CastVoteResponse(CamelModel):
    """Accepted vote with the account's updated counters."""

    vote: VoteInfo
    new_balance: Money
    daily_votes_remaining: int
    reward_amount: Money
    voting_streak: int
    voting_days_count: int


class CastVoteUseCase:
    """Use case for voting on a video and collecting its reward."""

    def __init__(
        self, vote_service: VoteService, account_service: AccountService
    ) -> None:
        """Initialize cast vote use case.

        Args:
            vote_service: Vote domain service
            account_service: Account domain service
        """
        self.vote_service = vote_service
        self.account_service = account_service

    async def execute(self, request: CastVoteRequest) -> CastVoteResponse:
        """Execute cast vote flow.

        Raises:
            InvalidVoteTypeError: If vote type is not like/dislike
            NotFoundError: If video or account does not exist
            DailyLimitExceededError: If the voting window is used up
        """
        account_id = self.account_service.parse_account_id(request.account_id)
        result = await self.vote_service.cast_vote(
            account_id, VideoId(request.video_id), request.vote_type
        )
        return CastVoteResponse(
            vote=VoteInfo.from_vote(result.vote),
            new_balance=result.new_balance,
            daily_votes_remaining=result.daily_votes_remaining,
            reward_amount=result.reward_amount,
            voting_streak=result.voting_streak,
            voting_days_count=result.voting_days_count,
        )
