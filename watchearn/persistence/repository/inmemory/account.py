"""In-memory account repository for testing."""

from typing import Optional

from sqlalchemy.exc import IntegrityError

from watchearn.domain.model.account import Account
from watchearn.domain.repository.account import AccountRepository
from watchearn.domain.value import AccountId, Email


class InMemoryAccountRepository(AccountRepository):
    """In-memory implementation of AccountRepository for testing."""

    def __init__(self) -> None:
        self._accounts: dict[AccountId, Account] = {}

    async def find_by_id(self, account_id: AccountId) -> Optional[Account]:
        """Find an account by ID."""
        return self._accounts.get(account_id)

    async def find_by_email(self, email: Email) -> Optional[Account]:
        """Find an account by its normalized email."""
        for account in self._accounts.values():
            if account.email == email:
                return account
        return None

    async def save(self, account: Account) -> Account:
        """Save or update an account.

        Raises:
            IntegrityError: If another account already uses the email
        """
        existing = await self.find_by_email(account.email)
        if existing and existing.id != account.id:
            raise IntegrityError("Duplicate email", None, Exception())

        self._accounts[account.id] = account
        return account
