"""Signup use case."""

import logfire
from pydantic import BaseModel

from watchearn.application.usecase.common import AccountInfo, CamelModel
from watchearn.domain.error import ValidationError
from watchearn.domain.service import AccountService, JWTService


class SignupRequest(BaseModel):
    """Signup request.

    Missing fields default to empty strings and are rejected by the use case.
    """

    name: str = ""
    email: str = ""


class AuthResponse(CamelModel):
    """Authenticated account with its session token."""

    user: AccountInfo
    token: str


class SignupUseCase:
    """Use case for registering a new account."""

    def __init__(self, account_service: AccountService, jwt_service: JWTService) -> None:
        """Initialize signup use case.

        Args:
            account_service: Account domain service
            jwt_service: JWT token domain service
        """
        self.account_service = account_service
        self.jwt_service = jwt_service

    async def execute(self, request: SignupRequest) -> AuthResponse:
        """Register an account with the starting balance and sign it in.

        Raises:
            ValidationError: If name or email is missing or malformed
            DuplicateEmailError: If the email is already registered
        """
        with logfire.span("signup.execute"):
            if not request.name.strip() or not request.email.strip():
                raise ValidationError("Name and email are required")

            account = await self.account_service.create_account(
                name=request.name, email=request.email
            )
            token = self.jwt_service.create_token(str(account.id), account.email.root)
            return AuthResponse(user=AccountInfo.from_account(account), token=token)
