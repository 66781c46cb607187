"""Tests for database mappers."""

from datetime import datetime, date, UTC
from decimal import Decimal

from hisab.database.models import (
    Account as ORMAccount,
    Wallet as ORMWallet,
    Category as ORMCategory,
    Transaction as ORMTransaction,
    DebtTaken as ORMDebtTaken,
    DebtGiven as ORMDebtGiven,
)
from hisab.database.mappers import (
    account_to_domain,
    wallet_to_domain,
    category_to_domain,
    transaction_to_domain,
    debt_entry_to_domain,
)
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


class TestAccountMapper:
    """Tests for Account mapper."""

    def test_account_to_domain(self):
        """Test converting ORM Account to domain Account."""
        orm_account = ORMAccount(id=1, name="আমার হিসাব", is_active=True, created_at=datetime.now(UTC))
        domain_account = account_to_domain(orm_account)

        assert isinstance(domain_account, Account)
        assert domain_account.id == 1
        assert domain_account.name == "আমার হিসাব"
        assert domain_account.is_active is True
        assert domain_account.created_at == orm_account.created_at


class TestWalletMapper:
    """Tests for Wallet mapper."""

    def test_wallet_to_domain(self):
        """Stored wallet type string becomes a WalletType."""
        orm_wallet = ORMWallet(
            id=3,
            account_id=1,
            wallet_type="mobile_banking",
            name="bKash",
            balance=Decimal("750.00"),
            opening_balance=Decimal("500.00"),
            created_at=datetime.now(UTC),
        )
        wallet = wallet_to_domain(orm_wallet)

        assert isinstance(wallet, Wallet)
        assert wallet.wallet_type == WalletType.MOBILE_BANKING
        assert wallet.balance == Decimal("750.00")
        assert wallet.opening_balance == Decimal("500.00")


class TestCategoryMapper:
    """Tests for Category mapper."""

    def test_category_to_domain(self):
        orm_category = ORMCategory(
            id=1, account_id=1, name="বেতন", kind="income", icon="💰", created_at=datetime.now(UTC)
        )
        category = category_to_domain(orm_category)

        assert isinstance(category, Category)
        assert category.kind == TransactionKind.INCOME
        assert category.icon == "💰"


class TestTransactionMapper:
    """Tests for Transaction mapper."""

    def test_transaction_to_domain(self):
        orm_txn = ORMTransaction(
            id=7,
            account_id=1,
            wallet_id=2,
            category_id=None,
            amount=Decimal("200.00"),
            kind="expense",
            note="বাজার",
            transaction_date=date(2024, 1, 15),
            created_at=datetime.now(UTC),
            deleted_at=None,
        )
        txn = transaction_to_domain(orm_txn)

        assert isinstance(txn, Transaction)
        assert txn.kind == TransactionKind.EXPENSE
        assert txn.amount == Decimal("200.00")
        assert txn.note == "বাজার"
        assert txn.is_deleted is False

    def test_deleted_transaction(self):
        orm_txn = ORMTransaction(
            id=8,
            account_id=1,
            wallet_id=2,
            amount=Decimal("1.00"),
            kind="income",
            transaction_date=date(2024, 1, 15),
            created_at=datetime.now(UTC),
            deleted_at=datetime.now(UTC),
        )
        assert transaction_to_domain(orm_txn).is_deleted is True


class TestDebtEntryMapper:
    """The entry kind follows the table the row came from."""

    def test_debt_taken_is_debt(self):
        orm_entry = ORMDebtTaken(
            id=1,
            account_id=1,
            person_name="Rahim",
            amount=Decimal("500.00"),
            status="partial",
            version=3,
            created_at=datetime.now(UTC),
        )
        entry = debt_entry_to_domain(orm_entry)

        assert isinstance(entry, DebtEntry)
        assert entry.kind == EntryKind.DEBT
        assert entry.status == EntryStatus.PARTIAL
        assert entry.version == 3

    def test_debt_given_is_receivable(self):
        orm_entry = ORMDebtGiven(
            id=1,
            account_id=1,
            person_name="Karim",
            amount=Decimal("300.00"),
            status="pending",
            created_at=datetime.now(UTC),
        )
        assert debt_entry_to_domain(orm_entry).kind == EntryKind.RECEIVABLE
