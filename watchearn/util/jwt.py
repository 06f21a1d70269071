"""JWT token utilities."""

from datetime import datetime, timedelta, timezone

import jwt
from pydantic import BaseModel

from watchearn.config import AuthSettings


class TokenPayload(BaseModel):
    """JWT token payload."""

    account_id: str
    email: str
    exp: datetime


class JWTError(Exception):
    """JWT-related error."""

    pass


def create_token(account_id: str, email: str, settings: AuthSettings) -> str:
    """Create a signed session token for an account.

    Args:
        account_id: Account ID
        email: Account email
        settings: Authentication settings

    Returns:
        Encoded JWT token
    """
    expiry = datetime.now(timezone.utc) + timedelta(days=settings.jwt_expiry_days)

    payload = {
        "account_id": account_id,
        "email": email,
        "exp": expiry,
    }

    return jwt.encode(payload, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def verify_token(token: str, settings: AuthSettings) -> TokenPayload:
    """Verify and decode a JWT token.

    Args:
        token: JWT token to verify
        settings: Authentication settings

    Returns:
        Token payload if valid

    Raises:
        JWTError: If token is invalid, expired or missing claims
    """
    try:
        payload = jwt.decode(
            token, settings.jwt_secret, algorithms=[settings.jwt_algorithm]
        )
    except jwt.ExpiredSignatureError:
        raise JWTError("Token has expired")
    except jwt.InvalidTokenError:
        raise JWTError("Invalid token")

    try:
        return TokenPayload(**payload)
    except ValueError:
        raise JWTError("Invalid token payload")
