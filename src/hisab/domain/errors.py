"""Shared domain error messages and error types."""

from decimal import Decimal


class DomainError(ValueError):
    """Base class for domain-level errors.

    Subclasses provide semantic categories while preserving ValueError
    compatibility for existing error handling.
    """


class ValidationError(DomainError):
    """Invalid input or failed validation in domain logic."""


class NotFoundError(DomainError):
    """Requested domain entity does not exist in the active account."""


class ConflictError(DomainError):
    """Domain conflict, such as a repeated delete or a concurrent update."""


class InvalidStateError(DomainError):
    """Operation not allowed in the entity's current state."""


class StorageError(DomainError):
    """The database rejected a read or write."""


def wallet_not_found(wallet_id: int) -> str:
    """Return message for missing wallet."""
    return f"Wallet {wallet_id} not found"


def category_not_found(category_id: int) -> str:
    """Return message for missing category by ID."""
    return f"Category {category_id} not found"


def transaction_not_found(transaction_id: int) -> str:
    """Return message for missing transaction."""
    return f"Transaction {transaction_id} not found"


def transaction_already_deleted(transaction_id: int) -> str:
    """Return message for a transaction that was already soft-deleted."""
    return f"Transaction {transaction_id} is already deleted"


def entry_not_found(kind: str, entry_id: int) -> str:
    """Return message for missing debt or receivable entry."""
    return f"{kind.capitalize()} entry {entry_id} not found"


def entry_closed(kind: str, entry_id: int, status: str) -> str:
    """Return message when a settled or written-off entry is touched."""
    return f"{kind.capitalize()} entry {entry_id} is {status}; no further settlement is possible"


def payment_exceeds_remaining(payment: Decimal, remaining: Decimal) -> str:
    """Return message for an overpayment."""
    return f"Payment {payment} exceeds the remaining amount {remaining}"


def amount_not_positive(amount: Decimal) -> str:
    """Return message for zero or negative amounts."""
    return f"Amount must be positive, got {amount}"


def amount_too_precise(amount: Decimal) -> str:
    """Return message for amounts finer than one paisa."""
    return f"Amount {amount} has more than two decimal places"


def category_kind_mismatch(category_name: str, category_kind: str, kind: str) -> str:
    """Return message when a category is used with the wrong transaction kind."""
    return f"Category '{category_name}' is an {category_kind} category and cannot be used for {kind}"


def entry_version_conflict(kind: str, entry_id: int) -> str:
    """Return message when an entry changed after it was read."""
    return f"{kind.capitalize()} entry {entry_id} was changed by another session; please retry"


def wallet_version_conflict(wallet_id: int) -> str:
    """Return message when a wallet changed underneath an update."""
    return f"Wallet {wallet_id} was changed by another session; please retry"
