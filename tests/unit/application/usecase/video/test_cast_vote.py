"""Unit tests for the voting use cases."""

from decimal import Decimal

from dishka import AsyncContainer
import pytest

from watchearn.application.usecase.video import (
    CastVoteRequest,
    CastVoteUseCase,
    GetDailyVotesRequest,
    GetDailyVotesUseCase,
    GetVideoRequest,
    GetVideoUseCase,
    ListVideosUseCase,
)
from watchearn.domain.error import InvalidVoteTypeError, NotFoundError
from watchearn.domain.repository import AccountRepository, VideoRepository
from tests.conftest import make_account, make_video
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


async def _seed(unit_env: AsyncContainer):
    account = make_account()
    await (await unit_env.get(AccountRepository)).save(account)
    await (await unit_env.get(VideoRepository)).save(make_video())
    return account


class TestCastVoteUseCase:
    """Tests for CastVoteUseCase."""

    @pytest.mark.asyncio
    async def test_vote_pays_reward(self, unit_env: AsyncContainer):
        """A vote credits the fixed reward and reports the new counters."""
        # Arrange
        account = await _seed(unit_env)
        use_case = await unit_env.get(CastVoteUseCase)

        # Act
        response = await use_case.execute(
            CastVoteRequest(
                account_id=str(account.id), video_id="test-video", vote_type="like"
            )
        )

        # Assert
        assert response.new_balance == Decimal("214.69")
        assert response.reward_amount == Decimal("1.50")
        assert response.daily_votes_remaining == 6
        assert response.voting_days_count == 1
        assert response.vote.user_id == str(account.id)

        body = response.model_dump(mode="json", by_alias=True)
        assert body["newBalance"] == 214.69
        assert body["vote"]["voteType"] == "like"
        assert body["vote"]["videoId"] == "test-video"

    @pytest.mark.asyncio
    async def test_invalid_vote_type(self, unit_env: AsyncContainer):
        account = await _seed(unit_env)
        use_case = await unit_env.get(CastVoteUseCase)

        with pytest.raises(InvalidVoteTypeError):
            await use_case.execute(
                CastVoteRequest(
                    account_id=str(account.id), video_id="test-video", vote_type="meh"
                )
            )

    @pytest.mark.asyncio
    async def test_token_for_unknown_account(self, unit_env: AsyncContainer):
        await _seed(unit_env)
        use_case = await unit_env.get(CastVoteUseCase)

        with pytest.raises(NotFoundError):
            await use_case.execute(
                CastVoteRequest(
                    account_id="not-a-uuid", video_id="test-video", vote_type="like"
                )
            )


class TestDailyVotesUseCase:
    """Tests for GetDailyVotesUseCase."""

    @pytest.mark.asyncio
    async def test_counts_votes_in_current_window(self, unit_env: AsyncContainer):
        # Arrange
        account = await _seed(unit_env)
        cast_vote = await unit_env.get(CastVoteUseCase)
        daily_votes = await unit_env.get(GetDailyVotesUseCase)
        for vote_type in ("like", "dislike"):
            await cast_vote.execute(
                CastVoteRequest(
                    account_id=str(account.id),
                    video_id="test-video",
                    vote_type=vote_type,
                )
            )

        # Act
        response = await daily_votes.execute(
            GetDailyVotesRequest(account_id=str(account.id))
        )

        # Assert
        assert response.model_dump(by_alias=True) == {
            "remaining": 5,
            "voted": 2,
            "totalVotes": 2,
        }


class TestCatalogUseCases:
    """Tests for ListVideosUseCase and GetVideoUseCase."""

    @pytest.mark.asyncio
    async def test_list_videos(self, unit_env: AsyncContainer):
        use_case = await unit_env.get(ListVideosUseCase)

        videos = await use_case.execute()

        assert len(videos) == 34
        body = videos[0].model_dump(mode="json", by_alias=True)
        assert body["title"] == "Video 1"
        assert body["rewardMin"] == 0.3
        assert body["rewardMax"] == 2.0

    @pytest.mark.asyncio
    async def test_get_unknown_video(self, unit_env: AsyncContainer):
        use_case = await unit_env.get(GetVideoUseCase)

        with pytest.raises(NotFoundError):
            await use_case.execute(GetVideoRequest(video_id="missing"))
