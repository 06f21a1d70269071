"""Domain layer errors."""

from typing import Any


class DomainError(Exception):
    """Base domain error."""

    pass


class ValidationError(DomainError):
    """Domain validation error."""

    pass


class InvalidVoteTypeError(ValidationError):
    """Raised when a vote is neither a like nor a dislike."""

    def __init__(self, vote_type: str):
        self.vote_type = vote_type
        super().__init__("Invalid vote type")


class InvalidAmountError(ValidationError):
    """Raised when a withdrawal amount is not a positive number."""

    def __init__(self, amount: Any):
        self.amount = amount
        super().__init__("Invalid withdrawal amount")


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class BusinessRuleViolationError(DomainError):
    """Business rule violation error.

    Carries a machine-readable ``reason`` and optional context values
    that are reported back to the client alongside the message.
    """

    reason: str = "business_rule_violation"

    def __init__(self, message: str, **context: Any):
        self.context = context
        super().__init__(message)


class DuplicateEmailError(BusinessRuleViolationError):
    """Raised when signing up with an email that is already registered."""

    reason = "email_taken"

    def __init__(self, email: str):
        self.email = email
        super().__init__("Email already registered")


class DailyLimitExceededError(BusinessRuleViolationError):
    """Raised when an account has used every vote of its voting window."""

    reason = "daily_limit_exceeded"

    def __init__(self, limit: int):
        super().__init__(
            f"You've reached your daily vote limit ({limit} votes)",
            daily_votes_remaining=0,
        )


class NoEarningsYetError(BusinessRuleViolationError):
    """Raised when withdrawing before any reward was ever earned."""

    reason = "no_earnings_yet"

    def __init__(self) -> None:
        super().__init__("You have not earned any money yet")


class CooldownNotElapsedError(BusinessRuleViolationError):
    """Raised when withdrawing before the cooldown period has passed."""

    reason = "cooldown_not_elapsed"

    def __init__(self, days_remaining: int):
        self.days_remaining = days_remaining
        super().__init__(
            f"You can withdraw in {days_remaining} day(s)",
            days_remaining=days_remaining,
        )


class PendingWithdrawalExistsError(BusinessRuleViolationError):
    """Raised when an account already has a withdrawal awaiting settlement."""

    reason = "pending_withdrawal_exists"

    def __init__(self) -> None:
        super().__init__("You already have a pending withdrawal")


class InsufficientBalanceError(BusinessRuleViolationError):
    """Raised when withdrawing more than the current balance."""

    reason = "insufficient_balance"

    def __init__(self) -> None:
        super().__init__("Insufficient balance")
