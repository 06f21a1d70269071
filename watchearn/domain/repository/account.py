"""Account repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from watchearn.domain.model.account import Account
from watchearn.domain.value import AccountId, Email


class AccountRepository(ABC):
    """Repository for Account aggregate.

    Defines the contract for account persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_id(self, account_id: AccountId) -> Optional[Account]:
        """Find an account by ID.

        Args:
            account_id: The account's unique identifier

        Returns:
            The account if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_email(self, email: Email) -> Optional[Account]:
        """Find an account by its email.

        Args:
            email: The normalized email address

        Returns:
            The account if found, None otherwise
        """
        pass

    @abstractmethod
    async def save(self, account: Account) -> Account:
        """Save an account (create or update).

        Persists the full account state.

        Args:
            account: The account to save

        Returns:
            The saved account

        Raises:
            IntegrityError: If another account already uses the email
        """
        pass
