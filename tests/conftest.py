"""Shared pytest fixtures for hisab tests."""

import tempfile
import os
from decimal import Decimal
import pytest

from hisab.database.factories import create_sqlite_database
from hisab.domain.account import AccountService
from hisab.domain.category import CategoryService
from hisab.domain.dashboard import DashboardService
from hisab.domain.debt import DebtService
from hisab.domain.transaction import TransactionService
from hisab.domain.wallet import WalletService


@pytest.fixture
def temp_db():
    """Create a temporary database for testing."""
    # Create a temporary file for the database
    fd, db_path = tempfile.mkstemp(suffix=".db")
    os.close(fd)

    # Create database
    db = create_sqlite_database(database_path=db_path)
    # Store the path for tests that need it
    db.database_path = db_path
    db.connect()
    db.initialize_schema()

    yield db

    # Cleanup
    db.disconnect()
    if os.path.exists(db_path):
        os.unlink(db_path)


@pytest.fixture
def account(temp_db):
    """The active account, created and seeded with default categories."""
    return AccountService(temp_db).ensure_active_account()


@pytest.fixture
def wallet_service(temp_db, account):
    """Create a WalletService for the active account."""
    return WalletService(temp_db, account.id)


@pytest.fixture
def category_service(temp_db, account):
    """Create a CategoryService for the active account."""
    return CategoryService(temp_db, account.id)


@pytest.fixture
def transaction_service(temp_db, account):
    """Create a TransactionService for the active account."""
    return TransactionService(temp_db, account.id)


@pytest.fixture
def debt_service(temp_db, account):
    """Create a DebtService for the active account."""
    return DebtService(temp_db, account.id)


@pytest.fixture
def dashboard_service(temp_db, account):
    """Create a DashboardService for the active account."""
    return DashboardService(temp_db, account.id)


@pytest.fixture
def cash_wallet(wallet_service):
    """Cash wallet opening at 1000."""
    wallet_id = wallet_service.create_wallet("Cash", "cash", Decimal("1000"))
    return wallet_service.get_wallet(wallet_id)


@pytest.fixture
def bank_wallet(wallet_service):
    """Bank wallet opening at 5000."""
    wallet_id = wallet_service.create_wallet("Bank", "bank", Decimal("5000"))
    return wallet_service.get_wallet(wallet_id)


@pytest.fixture
def food_category(category_service):
    """Default expense category for food."""
    return category_service.get_category_by_name("খাদ্য ও মুদি")


@pytest.fixture
def salary_category(category_service):
    """Default income category for salary."""
    return category_service.get_category_by_name("বেতন")


@pytest.fixture
def cli_runner():
    """Create a Click CLI test runner."""
    from click.testing import CliRunner

    return CliRunner()
