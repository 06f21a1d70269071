"""Get current account use case."""

from pydantic import BaseModel

from watchearn.application.usecase.common import AccountInfo
from watchearn.domain.service import AccountService


class GetCurrentAccountRequest(BaseModel):
    """Get current account request."""

    account_id: str  # From the verified session token


class GetCurrentAccountUseCase:
    """Use case for loading the signed-in account."""

    def __init__(self, account_service: AccountService) -> None:
        self.account_service = account_service

    async def execute(self, request: GetCurrentAccountRequest) -> AccountInfo:
        """Load the account behind a session.

        Raises:
            NotFoundError: If the account no longer exists
        """
        account_id = self.account_service.parse_account_id(request.account_id)
        account = await self.account_service.get_by_id(account_id)
        return AccountInfo.from_account(account)
