"""Domain model entities for hisab.

These are pure data classes representing business concepts, independent of
database schema. Services and the CLI only ever see these types; the
SQLAlchemy models stay inside the database layer.
"""

from dataclasses import dataclass, field
from datetime import datetime, date
from decimal import Decimal
from enum import Enum
from typing import Optional


class WalletType(str, Enum):
    """Kind of money pool a wallet represents."""

    CASH = "cash"
    BANK = "bank"
    MOBILE_BANKING = "mobile_banking"


class TransactionKind(str, Enum):
    """Direction of a money movement."""

    INCOME = "income"
    EXPENSE = "expense"


class EntryKind(str, Enum):
    """Debt (owed by the user) or receivable (owed to the user)."""

    DEBT = "debt"
    RECEIVABLE = "receivable"


class EntryStatus(str, Enum):
    """Settlement state of a debt or receivable entry."""

    PENDING = "pending"
    PARTIAL = "partial"
    PAID = "paid"
    UNCOLLECTIBLE = "uncollectible"


OPEN_STATUSES = (EntryStatus.PENDING, EntryStatus.PARTIAL)


@dataclass(frozen=True)
class Account:
    """Top-level tenant that owns wallets, categories and records."""

    id: int
    name: str
    is_active: bool
    created_at: datetime


@dataclass(frozen=True)
class Wallet:
    """Wallet domain entity."""

    id: int
    account_id: int
    wallet_type: WalletType
    name: str
    balance: Decimal
    opening_balance: Decimal
    created_at: datetime


@dataclass(frozen=True)
class Category:
    """Category domain entity."""

    id: int
    account_id: int
    name: str
    kind: TransactionKind
    icon: Optional[str]
    created_at: datetime


@dataclass(frozen=True)
class Transaction:
    """Transaction domain entity.

    Amount is always positive; ``kind`` decides the direction.
    """

    id: int
    account_id: int
    wallet_id: int
    category_id: Optional[int]
    amount: Decimal
    kind: TransactionKind
    note: Optional[str]
    transaction_date: date
    created_at: datetime
    deleted_at: Optional[datetime] = None

    @property
    def is_deleted(self) -> bool:
        return self.deleted_at is not None


@dataclass(frozen=True)
class DebtEntry:
    """Debt or receivable entry. ``amount`` is what is still outstanding.

    ``version`` is the row version the entry was read at; updates pass it
    back so a change made in between is detected.
    """

    id: int
    account_id: int
    kind: EntryKind
    person_name: str
    amount: Decimal
    status: EntryStatus
    created_at: datetime
    version: int = 1

    @property
    def is_open(self) -> bool:
        return self.status in OPEN_STATUSES


@dataclass(frozen=True)
class BalanceCheck:
    """Result of checking a wallet's stored balance against its history."""

    wallet: Wallet
    expected_balance: Decimal

    @property
    def drift(self) -> Decimal:
        return self.wallet.balance - self.expected_balance

    @property
    def is_consistent(self) -> bool:
        return self.drift == 0


@dataclass(frozen=True)
class DashboardSummary:
    """Snapshot shown on the dashboard."""

    total_cash: Decimal
    total_bank: Decimal
    total_mobile_banking: Decimal
    monthly_income: Decimal
    monthly_expense: Decimal
    total_payable: Decimal
    total_receivable: Decimal
    recent_transactions: tuple[Transaction, ...] = field(default_factory=tuple)

    @property
    def total_balance(self) -> Decimal:
        return self.total_cash + self.total_bank + self.total_mobile_banking
