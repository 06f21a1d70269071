"""Core DI providers (non-mockable)."""

from dishka import Scope, provide

from watchearn.config import AuthSettings, RewardSettings, Settings
from watchearn.util.di.base import ProviderBase


class ProdConfigProvider(ProviderBase):
    """Configuration provider.

    Settings are read once per container from the environment and .env file.
    """

    scope = Scope.APP

    @provide
    def provide_settings(self) -> Settings:
        """Provide application settings from environment."""
        return Settings()

    @provide
    def provide_auth_settings(self, settings: Settings) -> AuthSettings:
        """Provide auth settings."""
        return settings.auth

    @provide
    def provide_reward_settings(self, settings: Settings) -> RewardSettings:
        """Provide reward ledger settings."""
        return settings.rewards
