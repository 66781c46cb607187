"""Dashboard domain service."""

from datetime import date
from decimal import Decimal
from typing import Optional

from hisab.database.base import Database
from hisab.domain.debt import DebtService
from hisab.domain.entities import DashboardSummary, EntryKind, TransactionKind, WalletType
from hisab.domain.transaction import TransactionService
from hisab.domain.wallet import WalletService


class DashboardService:
    """Builds the account overview: balances, this month's flow, open debts."""

    def __init__(self, db: Database, account_id: int):
        self.db = db
        self.account_id = account_id
        self.wallets = WalletService(db, account_id)
        self.transactions = TransactionService(db, account_id)
        self.debts = DebtService(db, account_id)

    def wallet_totals(self) -> dict[WalletType, Decimal]:
        """Sum of balances per wallet type. Every type is present."""
        totals = {wallet_type: Decimal("0") for wallet_type in WalletType}
        for wallet in self.wallets.list_wallets():
            totals[wallet.wallet_type] += wallet.balance
        return totals

    def monthly_totals(self, today: Optional[date] = None) -> tuple[Decimal, Decimal]:
        """Income and expense dated from the first of the current month.

        Args:
            today: Reference date (defaults to today)

        Returns:
            Tuple of (income, expense), both non-negative
        """
        if today is None:
            today = date.today()
        month_start = today.replace(day=1)

        income = Decimal("0")
        expense = Decimal("0")
        for txn in self.transactions.list_transactions(start_date=month_start):
            if txn.kind == TransactionKind.INCOME:
                income += txn.amount
            else:
                expense += txn.amount
        return income, expense

    def get_summary(self, today: Optional[date] = None, recent_limit: int = 5) -> DashboardSummary:
        """Build the dashboard summary."""
        totals = self.wallet_totals()
        income, expense = self.monthly_totals(today)
        return DashboardSummary(
            total_cash=totals[WalletType.CASH],
            total_bank=totals[WalletType.BANK],
            total_mobile_banking=totals[WalletType.MOBILE_BANKING],
            monthly_income=income,
            monthly_expense=expense,
            total_payable=self.debts.open_total(EntryKind.DEBT),
            total_receivable=self.debts.open_total(EntryKind.RECEIVABLE),
            recent_transactions=tuple(self.transactions.recent_transactions(recent_limit)),
        )
