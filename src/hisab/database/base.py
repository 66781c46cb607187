"""Abstract database interface."""

from abc import ABC, abstractmethod
from contextlib import AbstractContextManager
from typing import Optional
from datetime import date, datetime
from decimal import Decimal

# Import entities directly to avoid circular import through domain/__init__.py
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


class Database(ABC):
    """Abstract database interface for hisab."""

    @abstractmethod
    def connect(self) -> None:
        """Connect to the database."""
        pass

    @abstractmethod
    def disconnect(self) -> None:
        """Disconnect from the database."""
        pass

    @abstractmethod
    def initialize_schema(self) -> None:
        """Initialize database schema (create tables)."""
        pass

    @abstractmethod
    def atomic(self) -> AbstractContextManager[None]:
        """Group writes into one all-or-nothing unit.

        Writes made inside the block are committed together when it exits
        normally and rolled back together when it raises. Blocks may nest;
        only the outermost one commits.
        """
        pass

    # Account operations
    @abstractmethod
    def create_account(self, name: str) -> int:
        """Create a new account. Returns account ID."""
        pass

    @abstractmethod
    def get_account(self, account_id: int) -> Optional[Account]:
        """Get account by ID."""
        pass

    @abstractmethod
    def list_accounts(self, active_only: bool = False) -> list[Account]:
        """List accounts, oldest first."""
        pass

    # Wallet operations
    @abstractmethod
    def create_wallet(
        self, account_id: int, name: str, wallet_type: WalletType, opening_balance: Decimal
    ) -> int:
        """Create a wallet whose balance starts at opening_balance. Returns wallet ID."""
        pass

    @abstractmethod
    def get_wallet(self, wallet_id: int) -> Optional[Wallet]:
        """Get wallet by ID."""
        pass

    @abstractmethod
    def list_wallets(self, account_id: int) -> list[Wallet]:
        """List wallets of an account."""
        pass

    @abstractmethod
    def adjust_wallet_balance(self, wallet_id: int, delta: Decimal) -> Decimal:
        """Add delta to the wallet's stored balance. Returns the new balance.

        The current balance is re-read from the store before the write.

        Raises:
            ConflictError: If the wallet changed between the read and the write
        """
        pass

    # Category operations
    @abstractmethod
    def create_category(
        self, account_id: int, name: str, kind: TransactionKind, icon: Optional[str] = None
    ) -> int:
        """Create a category. Returns category ID."""
        pass

    @abstractmethod
    def get_category(self, category_id: int) -> Optional[Category]:
        """Get category by ID."""
        pass

    @abstractmethod
    def get_category_by_name(self, account_id: int, name: str) -> Optional[Category]:
        """Get category by name within an account."""
        pass

    @abstractmethod
    def list_categories(self, account_id: int, kind: Optional[TransactionKind] = None) -> list[Category]:
        """List categories, optionally filtered by kind."""
        pass

    @abstractmethod
    def count_categories(self, account_id: int) -> int:
        """Count categories of an account."""
        pass

    # Transaction operations
    @abstractmethod
    def create_transaction(
        self,
        account_id: int,
        wallet_id: int,
        kind: TransactionKind,
        amount: Decimal,
        transaction_date: date,
        category_id: Optional[int] = None,
        note: Optional[str] = None,
    ) -> int:
        """Create a transaction row (no balance effect). Returns transaction ID."""
        pass

    @abstractmethod
    def get_transaction(self, transaction_id: int) -> Optional[Transaction]:
        """Get transaction by ID, including soft-deleted ones."""
        pass

    @abstractmethod
    def update_transaction(
        self,
        transaction_id: int,
        wallet_id: int,
        kind: TransactionKind,
        amount: Decimal,
        transaction_date: date,
        category_id: Optional[int],
        note: Optional[str],
    ) -> None:
        """Overwrite the editable fields of a transaction row."""
        pass

    @abstractmethod
    def mark_transaction_deleted(self, transaction_id: int, deleted_at: datetime) -> None:
        """Stamp a transaction as soft-deleted."""
        pass

    @abstractmethod
    def list_transactions(
        self,
        account_id: int,
        wallet_id: Optional[int] = None,
        kind: Optional[TransactionKind] = None,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
        limit: Optional[int] = None,
    ) -> list[Transaction]:
        """List non-deleted transactions, newest transaction date first.

        Args:
            account_id: Account to list for
            wallet_id: Optional wallet filter
            kind: Optional income/expense filter
            start_date: Optional inclusive start date
            end_date: Optional inclusive end date
            limit: Optional maximum number of rows
        """
        pass

    # Debt / receivable operations
    @abstractmethod
    def create_debt_entry(self, kind: EntryKind, account_id: int, person_name: str, amount: Decimal) -> int:
        """Create a pending debt or receivable entry. Returns entry ID."""
        pass

    @abstractmethod
    def get_debt_entry(self, kind: EntryKind, entry_id: int) -> Optional[DebtEntry]:
        """Get a debt or receivable entry by ID."""
        pass

    @abstractmethod
    def list_debt_entries(
        self, kind: EntryKind, account_id: int, status: Optional[EntryStatus] = None
    ) -> list[DebtEntry]:
        """List entries of one kind, newest first."""
        pass

    @abstractmethod
    def update_debt_entry(
        self,
        kind: EntryKind,
        entry_id: int,
        amount: Optional[Decimal] = None,
        status: Optional[EntryStatus] = None,
        expected_version: Optional[int] = None,
    ) -> None:
        """Update remaining amount and/or status of an entry.

        If expected_version is given and the stored row has moved on,
        ConflictError is raised and nothing is written.
        """
        pass

    @abstractmethod
    def delete_debt_entry(self, kind: EntryKind, entry_id: int) -> None:
        """Permanently delete an entry."""
        pass
