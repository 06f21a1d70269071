"""Login use case."""

import logfire
from pydantic import BaseModel

from watchearn.application.usecase.auth.signup import AuthResponse
from watchearn.application.usecase.common import AccountInfo
from watchearn.domain.error import ValidationError
from watchearn.domain.service import AccountService, JWTService


class LoginRequest(BaseModel):
    """Login request. Accounts sign in by email alone."""

    email: str = ""


class LoginUseCase:
    """Use case for signing in to an existing account."""

    def __init__(self, account_service: AccountService, jwt_service: JWTService) -> None:
        """Initialize login use case.

        Args:
            account_service: Account domain service
            jwt_service: JWT token domain service
        """
        self.account_service = account_service
        self.jwt_service = jwt_service

    async def execute(self, request: LoginRequest) -> AuthResponse:
        """Look up the account by email and issue a session token.

        Raises:
            ValidationError: If the email is missing or malformed
            NotFoundError: If no account uses the email
        """
        with logfire.span("login.execute"):
            if not request.email.strip():
                raise ValidationError("Email is required")

            account = await self.account_service.get_by_email(request.email)
            token = self.jwt_service.create_token(str(account.id), account.email.root)
            logfire.info("Account logged in", account_id=str(account.id))
            return AuthResponse(user=AccountInfo.from_account(account), token=token)
