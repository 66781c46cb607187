"""Mapper functions to convert between domain models and SQLAlchemy models.

This layer isolates the conversion logic, including the string-to-enum
conversion of stored kinds and statuses.
"""

from hisab.domain import entities as domain
from hisab.database.models import (
    Account as ORMAccount,
    Wallet as ORMWallet,
    Category as ORMCategory,
    Transaction as ORMTransaction,
    DebtTaken as ORMDebtTaken,
    DebtGiven as ORMDebtGiven,
)


def account_to_domain(orm_account: ORMAccount) -> domain.Account:
    """Convert SQLAlchemy Account model to domain Account entity."""
    return domain.Account(
        id=orm_account.id,
        name=orm_account.name,
        is_active=orm_account.is_active,
        created_at=orm_account.created_at,
    )


def wallet_to_domain(orm_wallet: ORMWallet) -> domain.Wallet:
    """Convert SQLAlchemy Wallet model to domain Wallet entity."""
    return domain.Wallet(
        id=orm_wallet.id,
        account_id=orm_wallet.account_id,
        wallet_type=domain.WalletType(orm_wallet.wallet_type),
        name=orm_wallet.name,
        balance=orm_wallet.balance,
        opening_balance=orm_wallet.opening_balance,
        created_at=orm_wallet.created_at,
    )


def category_to_domain(orm_category: ORMCategory) -> domain.Category:
    """Convert SQLAlchemy Category model to domain Category entity."""
    return domain.Category(
        id=orm_category.id,
        account_id=orm_category.account_id,
        name=orm_category.name,
        kind=domain.TransactionKind(orm_category.kind),
        icon=orm_category.icon,
        created_at=orm_category.created_at,
    )


def transaction_to_domain(orm_transaction: ORMTransaction) -> domain.Transaction:
    """Convert SQLAlchemy Transaction model to domain Transaction entity."""
    return domain.Transaction(
        id=orm_transaction.id,
        account_id=orm_transaction.account_id,
        wallet_id=orm_transaction.wallet_id,
        category_id=orm_transaction.category_id,
        amount=orm_transaction.amount,
        kind=domain.TransactionKind(orm_transaction.kind),
        note=orm_transaction.note,
        transaction_date=orm_transaction.transaction_date,
        created_at=orm_transaction.created_at,
        deleted_at=orm_transaction.deleted_at,
    )


def debt_entry_to_domain(orm_entry: ORMDebtTaken | ORMDebtGiven) -> domain.DebtEntry:
    """Convert a debts_taken or debts_given row to a domain DebtEntry."""
    kind = domain.EntryKind.DEBT if isinstance(orm_entry, ORMDebtTaken) else domain.EntryKind.RECEIVABLE
    return domain.DebtEntry(
        id=orm_entry.id,
        account_id=orm_entry.account_id,
        kind=kind,
        person_name=orm_entry.person_name,
        amount=orm_entry.amount,
        status=domain.EntryStatus(orm_entry.status),
        created_at=orm_entry.created_at,
        version=orm_entry.version,
    )
