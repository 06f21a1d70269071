"""Vote domain service (the vote ledger)."""

import random
from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from uuid import uuid4

import logfire

from watchearn.config import RewardSettings
from watchearn.domain.error import DailyLimitExceededError, InvalidVoteTypeError
from watchearn.domain.model import Account, Video, Vote
from watchearn.domain.model.common import utcnow
from watchearn.domain.repository import VoteRepository
from watchearn.domain.value import AccountId, VideoId, VoteId, VoteType, round_currency

from .account_service import AccountService
from .base import Service
from .transaction_service import TransactionService
from .video_service import VideoService


@dataclass
class VoteResult:
    """Outcome of an accepted vote."""

    vote: Vote
    new_balance: Decimal
    daily_votes_remaining: int
    reward_amount: Decimal
    voting_streak: int
    voting_days_count: int


@dataclass
class DailyVoteStatus:
    """Vote usage of the voting window open at a point in time."""

    remaining: int
    voted: int
    total_votes: int


class VoteService(Service):
    """Domain service for vote operations."""

    def __init__(
        self,
        vote_repository: VoteRepository,
        account_service: AccountService,
        video_service: VideoService,
        transaction_service: TransactionService,
        reward_settings: RewardSettings,
        rng: random.Random | None = None,
    ) -> None:
        """Initialize vote service.

        Args:
            vote_repository: Vote repository
            account_service: Account domain service
            video_service: Video domain service
            transaction_service: Transaction domain service
            reward_settings: Reward ledger settings
            rng: Random source for rewards (a fresh one if omitted)
        """
        self.vote_repository = vote_repository
        self.account_service = account_service
        self.video_service = video_service
        self.transaction_service = transaction_service
        self.reward_settings = reward_settings
        self.rng = rng or random.Random()

    async def cast_vote(
        self,
        account_id: AccountId,
        video_id: VideoId,
        vote_type: str | VoteType,
        now: datetime | None = None,
    ) -> VoteResult:
        """Cast a vote on a video and pay out its reward.

        Preconditions are checked in order: vote type, video, account,
        then the per-window vote cap. Nothing is written unless all pass.

        Args:
            account_id: Voting account
            video_id: Catalog video
            vote_type: "like" or "dislike"
            now: Time of the vote (defaults to the current time)

        Returns:
            Vote result with the updated counters

        Raises:
            InvalidVoteTypeError: If vote type is not like/dislike
            NotFoundError: If video or account does not exist
            DailyLimitExceededError: If the voting window is used up
        """
        now = now or utcnow()
        with logfire.span(
            "vote_service.cast_vote",
            account_id=str(account_id),
            video_id=video_id,
            vote_type=str(vote_type),
        ):
            try:
                parsed_type = VoteType(vote_type)
            except ValueError:
                logfire.warn("Invalid vote type", vote_type=str(vote_type))
                raise InvalidVoteTypeError(str(vote_type))

            video = await self.video_service.get_video(video_id)
            account = await self.account_service.get_by_id(account_id)

            limit = self.reward_settings.daily_vote_limit
            used = await self._votes_in_window(account, now)
            if used >= limit:
                logfire.warn(
                    "Daily vote limit reached", account_id=str(account_id), used=used
                )
                raise DailyLimitExceededError(limit)

            reward = self.draw_reward(video)

            account = await self.account_service.touch_voting_window(account, now)

            vote = await self.vote_repository.save(
                Vote(
                    id=VoteId(uuid4()),
                    account_id=account.id,
                    video_id=video.id,
                    vote_type=parsed_type,
                    reward_amount=reward,
                    created_at=now,
                )
            )

            account = await self.account_service.apply_credit(
                account, reward, earned_at=now
            )

            await self.transaction_service.record_credit(
                account.id, reward, f"Video vote reward - {video.title}", now
            )

            logfire.info(
                "Vote recorded",
                account_id=str(account.id),
                video_id=video.id,
                reward=str(reward),
                balance=str(account.balance),
            )

            return VoteResult(
                vote=vote,
                new_balance=account.balance,
                daily_votes_remaining=limit - (used + 1),
                reward_amount=reward,
                voting_streak=account.voting_streak,
                voting_days_count=account.voting_days_count,
            )

    async def daily_vote_status(
        self, account_id: AccountId, now: datetime | None = None
    ) -> DailyVoteStatus:
        """Report vote usage for the voting window open at ``now``.

        Raises:
            NotFoundError: If account does not exist
        """
        now = now or utcnow()
        with logfire.span(
            "vote_service.daily_vote_status", account_id=str(account_id)
        ):
            account = await self.account_service.get_by_id(account_id)
            voted = await self._votes_in_window(account, now)
            total = await self.vote_repository.count_by_account(account_id)
            limit = self.reward_settings.daily_vote_limit
            return DailyVoteStatus(
                remaining=max(0, limit - voted),
                voted=voted,
                total_votes=total,
            )

    def draw_reward(self, video: Video) -> Decimal:
        """Draw a uniform reward within the video's bounds, rounded to cents."""
        bounds = video.reward_range
        reward = round_currency(
            self.rng.uniform(float(bounds.minimum), float(bounds.maximum))
        )
        return min(max(reward, bounds.minimum), bounds.maximum)

    async def _votes_in_window(self, account: Account, now: datetime) -> int:
        start = self.account_service.window_start(account, now)
        if start is None:
            return 0
        return await self.vote_repository.count_by_account_since(account.id, start)
