"""Domain layer for hisab application.

Services live in their own modules (``hisab.domain.transaction`` etc.) and
are imported from there; only the dependency-free types are re-exported
here so the database layer can import them without a cycle.
"""

from hisab.domain.entities import (
    Account,
    Wallet,
    WalletType,
    Category,
    Transaction,
    TransactionKind,
    DebtEntry,
    EntryKind,
    EntryStatus,
)
from hisab.domain.errors import (
    DomainError,
    ValidationError,
    NotFoundError,
    ConflictError,
    InvalidStateError,
    StorageError,
)

__all__ = [
    "Account",
    "Wallet",
    "WalletType",
    "Category",
    "Transaction",
    "TransactionKind",
    "DebtEntry",
    "EntryKind",
    "EntryStatus",
    "DomainError",
    "ValidationError",
    "NotFoundError",
    "ConflictError",
    "InvalidStateError",
    "StorageError",
]
