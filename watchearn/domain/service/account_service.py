"""Account domain service (the account store)."""

from datetime import datetime, timedelta
from decimal import Decimal
from uuid import UUID, uuid4

import logfire
from pydantic import ValidationError as PydanticValidationError
from sqlalchemy.exc import IntegrityError

from watchearn.config import RewardSettings
from watchearn.domain.error import DuplicateEmailError, NotFoundError, ValidationError
from watchearn.domain.model import Account
from watchearn.domain.model.common import utcnow
from watchearn.domain.repository import AccountRepository
from watchearn.domain.value import AccountId, Email, round_currency

from .base import Service


class AccountService(Service):
    """Domain service for account operations."""

    def __init__(
        self,
        account_repository: AccountRepository,
        reward_settings: RewardSettings,
    ) -> None:
        """Initialize account service.

        Args:
            account_repository: Account repository
            reward_settings: Reward ledger settings
        """
        self.account_repository = account_repository
        self.reward_settings = reward_settings

    @property
    def window_length(self) -> timedelta:
        """Length of one voting window."""
        return timedelta(hours=self.reward_settings.voting_window_hours)

    async def create_account(
        self,
        name: str,
        email: str,
        starting_balance: Decimal | None = None,
    ) -> Account:
        """Register a new account.

        Args:
            name: Display name
            email: Email address (normalized before storage)
            starting_balance: Opening balance, defaults to the configured one

        Returns:
            Created account

        Raises:
            ValidationError: If name or email is malformed
            DuplicateEmailError: If the email is already registered
        """
        with logfire.span("account_service.create_account", email=email):
            email_value = self._parse_email(email)
            name = name.strip()
            if not name:
                raise ValidationError("Name and email are required")

            if await self.account_repository.find_by_email(email_value):
                logfire.warn("Email already registered", email=email_value.root)
                raise DuplicateEmailError(email_value.root)

            balance = (
                self.reward_settings.starting_balance
                if starting_balance is None
                else starting_balance
            )
            account = Account(
                id=AccountId(uuid4()),
                name=name,
                email=email_value,
                balance=round_currency(balance),
                created_at=utcnow(),
            )

            try:
                saved = await self.account_repository.save(account)
            except IntegrityError:
                logfire.warn("Duplicate email on insert", email=email_value.root)
                raise DuplicateEmailError(email_value.root)

            logfire.info(
                "Account created", account_id=str(saved.id), email=saved.email.root
            )
            return saved

    async def get_by_id(self, account_id: AccountId) -> Account:
        """Get account by ID.

        Raises:
            NotFoundError: If account not found
        """
        with logfire.span("account_service.get_by_id", account_id=str(account_id)):
            account = await self.account_repository.find_by_id(account_id)
            if not account:
                logfire.warn("Account not found", account_id=str(account_id))
                raise NotFoundError("Account", str(account_id))
            return account

    async def get_by_email(self, email: str) -> Account:
        """Get account by email.

        Raises:
            ValidationError: If the email is malformed
            NotFoundError: If no account uses the email
        """
        with logfire.span("account_service.get_by_email", email=email):
            email_value = self._parse_email(email)
            account = await self.account_repository.find_by_email(email_value)
            if not account:
                logfire.warn("Account not found", email=email_value.root)
                raise NotFoundError("Account", email_value.root)
            return account

    async def apply_credit(
        self,
        account: Account,
        amount: Decimal,
        earned_at: datetime | None = None,
    ) -> Account:
        """Add an amount to the account balance and persist it.

        Args:
            account: Account to credit
            amount: Non-negative amount, rounded to cents
            earned_at: When the amount was earned; marks first_earn_at if unset

        Returns:
            Updated account

        Raises:
            ValueError: If amount is negative
        """
        amount = round_currency(amount)
        if amount < 0:
            raise ValueError("Credit amount must not be negative")

        with logfire.span(
            "account_service.apply_credit",
            account_id=str(account.id),
            amount=str(amount),
        ):
            update: dict = {
                "balance": max(Decimal("0.00"), round_currency(account.balance + amount))
            }
            if earned_at is not None and account.first_earn_at is None:
                update["first_earn_at"] = earned_at

            updated = await self.account_repository.save(
                account.model_copy(update=update)
            )
            logfire.info(
                "Balance credited",
                account_id=str(account.id),
                balance=str(updated.balance),
            )
            return updated

    def window_start(self, account: Account, now: datetime) -> datetime | None:
        """Anchor of the voting window still open at ``now``.

        Returns:
            The window anchor, or None when the next vote opens a new window
        """
        reset = account.last_vote_date_reset
        if reset is None or account.voting_days_count == 0:
            return None
        if now - reset >= self.window_length:
            return None
        return reset

    async def touch_voting_window(self, account: Account, now: datetime) -> Account:
        """Advance the voting window markers for a vote cast at ``now``.

        The very first vote opens window 1 and starts the streak. Later, a
        vote at least one window length after the current anchor opens a
        new window and extends both counters; inside the window nothing
        but last_voted_at changes.

        Args:
            account: Account casting the vote
            now: Time of the vote

        Returns:
            Updated, persisted account
        """
        with logfire.span(
            "account_service.touch_voting_window", account_id=str(account.id)
        ):
            update: dict = {"last_voted_at": now}

            if account.voting_days_count == 0:
                update.update(
                    voting_days_count=1,
                    voting_streak=max(account.voting_streak, 1),
                    last_vote_date_reset=now,
                )
                logfire.info("First voting window opened", account_id=str(account.id))
            elif (
                account.last_vote_date_reset is None
                or now - account.last_vote_date_reset >= self.window_length
            ):
                update.update(
                    voting_days_count=account.voting_days_count + 1,
                    voting_streak=account.voting_streak + 1,
                    last_vote_date_reset=now,
                )
                logfire.info(
                    "New voting window opened",
                    account_id=str(account.id),
                    voting_days_count=account.voting_days_count + 1,
                )

            return await self.account_repository.save(account.model_copy(update=update))

    @staticmethod
    def _parse_email(email: str) -> Email:
        try:
            return Email(email)
        except PydanticValidationError:
            raise ValidationError("Invalid email address")

    @staticmethod
    def parse_account_id(account_id: str) -> AccountId:
        """Parse an account ID coming from a session token.

        Raises:
            NotFoundError: If the value is not a valid account ID
        """
        try:
            return AccountId(UUID(account_id))
        except ValueError:
            raise NotFoundError("Account", account_id)
