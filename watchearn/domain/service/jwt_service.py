"""JWT token domain service."""

import logfire

from watchearn.config import AuthSettings
from watchearn.util.jwt import TokenPayload, create_token, verify_token

from .base import Service


class JWTService(Service):
    """Domain service for session token operations."""

    def __init__(self, auth_settings: AuthSettings) -> None:
        """Initialize JWT service.

        Args:
            auth_settings: Authentication settings
        """
        self.auth_settings = auth_settings

    def create_token(self, account_id: str, email: str) -> str:
        """Create a session token for an account.

        Args:
            account_id: Account ID
            email: Account email

        Returns:
            JWT token string
        """
        with logfire.span("jwt_service.create_token", account_id=account_id):
            token = create_token(account_id, email, self.auth_settings)
            logfire.info("JWT token created", account_id=account_id)
            return token

    def verify_token(self, token: str) -> TokenPayload:
        """Verify JWT token and extract payload.

        Args:
            token: JWT token string

        Returns:
            Token payload

        Raises:
            JWTError: If token is invalid or expired
        """
        with logfire.span("jwt_service.verify_token"):
            try:
                return verify_token(token, self.auth_settings)
            except Exception as e:
                logfire.warn("JWT token verification failed", error=str(e))
                raise

    def get_account_id_from_token(self, token: str | None) -> str | None:
        """Extract account ID from a token without raising.

        Args:
            token: JWT token string (optional)

        Returns:
            Account ID if token is valid, None if token is missing or invalid
        """
        if not token:
            return None

        try:
            return self.verify_token(token).account_id
        except Exception as e:
            # Invalid or expired token, treat as unauthenticated
            logfire.debug(
                "JWT verification failed, treating as unauthenticated", error=str(e)
            )
            return None
