"""Tests for transaction service."""

from datetime import date
from decimal import Decimal

import pytest

from hisab.domain.entities import TransactionKind
from hisab.domain.errors import ConflictError, NotFoundError, ValidationError


def _balance(service, wallet_id):
    return service.wallets.require_wallet(wallet_id).balance


class TestCreateTransaction:
    """Tests for recording transactions."""

    def test_expense_decreases_balance(self, transaction_service, cash_wallet, food_category):
        txn_id = transaction_service.create_transaction(
            wallet_id=cash_wallet.id,
            kind="expense",
            amount=Decimal("200"),
            category_id=food_category.id,
            transaction_date=date(2024, 1, 15),
            note="বাজার",
        )

        txn = transaction_service.get_transaction(txn_id)
        assert txn.amount == Decimal("200")
        assert txn.kind == TransactionKind.EXPENSE
        assert txn.note == "বাজার"
        assert _balance(transaction_service, cash_wallet.id) == Decimal("800")

    def test_income_increases_balance(self, transaction_service, cash_wallet, salary_category):
        transaction_service.create_transaction(
            cash_wallet.id, TransactionKind.INCOME, Decimal("500"), category_id=salary_category.id
        )
        assert _balance(transaction_service, cash_wallet.id) == Decimal("1500")

    def test_defaults_to_today(self, transaction_service, cash_wallet):
        txn_id = transaction_service.create_transaction(cash_wallet.id, "expense", Decimal("1"))
        assert transaction_service.get_transaction(txn_id).transaction_date == date.today()

    def test_expense_may_overdraw(self, transaction_service, cash_wallet):
        transaction_service.create_transaction(cash_wallet.id, "expense", Decimal("1500"))
        assert _balance(transaction_service, cash_wallet.id) == Decimal("-500")

    @pytest.mark.parametrize("amount", [Decimal("0"), Decimal("-5")])
    def test_non_positive_amount_rejected(self, transaction_service, cash_wallet, amount):
        with pytest.raises(ValidationError):
            transaction_service.create_transaction(cash_wallet.id, "expense", amount)
        assert _balance(transaction_service, cash_wallet.id) == Decimal("1000")
        assert transaction_service.list_transactions() == []

    def test_unknown_kind_rejected(self, transaction_service, cash_wallet):
        with pytest.raises(ValidationError):
            transaction_service.create_transaction(cash_wallet.id, "transfer", Decimal("5"))

    def test_category_kind_must_match(self, transaction_service, cash_wallet, salary_category):
        with pytest.raises(ValidationError, match="income category"):
            transaction_service.create_transaction(
                cash_wallet.id, "expense", Decimal("5"), category_id=salary_category.id
            )

    def test_missing_wallet(self, transaction_service):
        with pytest.raises(NotFoundError):
            transaction_service.create_transaction(999, "expense", Decimal("5"))

    def test_missing_category(self, transaction_service, cash_wallet):
        with pytest.raises(NotFoundError):
            transaction_service.create_transaction(cash_wallet.id, "expense", Decimal("5"), category_id=999)


class TestUpdateTransaction:
    """Editing moves the balance effect between wallets."""

    def test_change_amount(self, transaction_service, cash_wallet):
        txn_id = transaction_service.create_transaction(cash_wallet.id, "expense", Decimal("200"))

        transaction_service.update_transaction(txn_id, amount=Decimal("300"))

        assert transaction_service.get_transaction(txn_id).amount == Decimal("300")
        assert _balance(transaction_service, cash_wallet.id) == Decimal("700")

    def test_move_and_flip_kind(self, transaction_service, cash_wallet, bank_wallet):
        """Expense 200 on cash becomes income 300 on bank."""
        txn_id = transaction_service.create_transaction(cash_wallet.id, "expense", Decimal("200"))

        transaction_service.update_transaction(
            txn_id, wallet_id=bank_wallet.id, kind="income", amount=Decimal("300")
        )

        assert _balance(transaction_service, cash_wallet.id) == Decimal("1000")
        assert _balance(transaction_service, bank_wallet.id) == Decimal("5300")
        txn = transaction_service.get_transaction(txn_id)
        assert txn.wallet_id == bank_wallet.id
        assert txn.kind == TransactionKind.INCOME

    def test_note_only_keeps_balance(self, transaction_service, cash_wallet):
        txn_id = transaction_service.create_transaction(cash_wallet.id, "expense", Decimal("200"), note="old")

        transaction_service.update_transaction(txn_id, note="new")

        assert transaction_service.get_transaction(txn_id).note == "new"
        assert _balance(transaction_service, cash_wallet.id) == Decimal("800")

    def test_flip_kind_with_old_category_rejected(self, transaction_service, cash_wallet, food_category):
        txn_id = transaction_service.create_transaction(
            cash_wallet.id, "expense", Decimal("200"), category_id=food_category.id
        )

        with pytest.raises(ValidationError):
            transaction_service.update_transaction(txn_id, kind="income")
        assert _balance(transaction_service, cash_wallet.id) == Decimal("800")

    def test_invalid_amount_leaves_everything(self, transaction_service, cash_wallet):
        txn_id = transaction_service.create_transaction(cash_wallet.id, "expense", Decimal("200"))

        with pytest.raises(ValidationError):
            transaction_service.update_transaction(txn_id, amount=Decimal("0"))

        assert transaction_service.get_transaction(txn_id).amount == Decimal("200")
        assert _balance(transaction_service, cash_wallet.id) == Decimal("800")

    def test_update_deleted_rejected(self, transaction_service, cash_wallet):
        txn_id = transaction_service.create_transaction(cash_wallet.id, "expense", Decimal("200"))
        transaction_service.delete_transaction(txn_id)

        with pytest.raises(ConflictError):
            transaction_service.update_transaction(txn_id, amount=Decimal("1"))

    def test_update_missing(self, transaction_service):
        with pytest.raises(NotFoundError):
            transaction_service.update_transaction(999, amount=Decimal("1"))


class TestDeleteTransaction:
    """Deleting soft-deletes and reverses the balance effect."""

    def test_delete_expense_restores_balance(self, transaction_service, cash_wallet):
        txn_id = transaction_service.create_transaction(cash_wallet.id, "expense", Decimal("200"))

        transaction_service.delete_transaction(txn_id)

        assert _balance(transaction_service, cash_wallet.id) == Decimal("1000")
        assert transaction_service.get_transaction(txn_id).is_deleted
        assert transaction_service.list_transactions() == []

    def test_delete_income(self, transaction_service, cash_wallet):
        txn_id = transaction_service.create_transaction(cash_wallet.id, "income", Decimal("500"))

        transaction_service.delete_transaction(txn_id)

        assert _balance(transaction_service, cash_wallet.id) == Decimal("1000")

    def test_delete_twice_rejected(self, transaction_service, cash_wallet):
        txn_id = transaction_service.create_transaction(cash_wallet.id, "expense", Decimal("200"))
        transaction_service.delete_transaction(txn_id)

        with pytest.raises(ConflictError, match="already deleted"):
            transaction_service.delete_transaction(txn_id)
        assert _balance(transaction_service, cash_wallet.id) == Decimal("1000")

    def test_delete_missing(self, transaction_service):
        with pytest.raises(NotFoundError, match="Transaction 999 not found"):
            transaction_service.delete_transaction(999)


class TestListTransactions:
    def test_filters(self, transaction_service, cash_wallet, bank_wallet):
        transaction_service.create_transaction(cash_wallet.id, "expense", Decimal("10"), transaction_date=date(2024, 1, 5))
        transaction_service.create_transaction(cash_wallet.id, "income", Decimal("20"), transaction_date=date(2024, 2, 5))
        transaction_service.create_transaction(bank_wallet.id, "expense", Decimal("30"), transaction_date=date(2024, 3, 5))

        assert len(transaction_service.list_transactions(wallet_id=cash_wallet.id)) == 2
        assert len(transaction_service.list_transactions(kind="expense")) == 2
        assert len(transaction_service.list_transactions(start_date=date(2024, 2, 1))) == 2
        assert len(transaction_service.list_transactions(end_date=date(2024, 1, 31))) == 1

    def test_recent_transactions_newest_first(self, transaction_service, cash_wallet):
        for day in range(1, 8):
            transaction_service.create_transaction(
                cash_wallet.id, "expense", Decimal(day), transaction_date=date(2024, 1, day)
            )

        recent = transaction_service.recent_transactions()

        assert len(recent) == 5
        assert [t.transaction_date.day for t in recent] == [7, 6, 5, 4, 3]


class TestAmountPrecision:
    """Amounts finer than one paisa would be rounded differently in each column."""

    def test_sub_paisa_amount_rejected(self, transaction_service, cash_wallet):
        for _ in range(3):
            with pytest.raises(ValidationError, match="more than two decimal places"):
                transaction_service.create_transaction(cash_wallet.id, "expense", Decimal("10.005"))

        assert transaction_service.list_transactions() == []
        assert transaction_service.wallets.check_balance(cash_wallet.id).is_consistent
        assert _balance(transaction_service, cash_wallet.id) == Decimal("1000")

    def test_whole_paisa_amounts_stay_reconciled(self, transaction_service, cash_wallet):
        for _ in range(3):
            transaction_service.create_transaction(cash_wallet.id, "expense", Decimal("10.01"))

        check = transaction_service.wallets.check_balance(cash_wallet.id)
        assert check.is_consistent
        assert check.wallet.balance == Decimal("969.97")

    def test_trailing_zeros_accepted(self, transaction_service, cash_wallet):
        transaction_service.create_transaction(cash_wallet.id, "income", Decimal("5.5000"))
        assert _balance(transaction_service, cash_wallet.id) == Decimal("1005.50")

    def test_update_to_sub_paisa_rejected(self, transaction_service, cash_wallet):
        txn_id = transaction_service.create_transaction(cash_wallet.id, "expense", Decimal("200"))

        with pytest.raises(ValidationError):
            transaction_service.update_transaction(txn_id, amount=Decimal("199.999"))

        assert transaction_service.get_transaction(txn_id).amount == Decimal("200")
        assert _balance(transaction_service, cash_wallet.id) == Decimal("800")


class TestClearingFields:
    def test_clear_category_when_flipping_kind(self, transaction_service, cash_wallet, food_category):
        txn_id = transaction_service.create_transaction(
            cash_wallet.id, "expense", Decimal("200"), category_id=food_category.id
        )

        transaction_service.update_transaction(txn_id, kind="income", clear_category=True)

        txn = transaction_service.get_transaction(txn_id)
        assert txn.category_id is None
        assert txn.kind == TransactionKind.INCOME
        assert _balance(transaction_service, cash_wallet.id) == Decimal("1200")

    def test_clear_and_set_category_together_rejected(
        self, transaction_service, cash_wallet, food_category
    ):
        txn_id = transaction_service.create_transaction(cash_wallet.id, "expense", Decimal("200"))

        with pytest.raises(ValidationError):
            transaction_service.update_transaction(
                txn_id, category_id=food_category.id, clear_category=True
            )

    def test_empty_note_clears_note(self, transaction_service, cash_wallet):
        txn_id = transaction_service.create_transaction(cash_wallet.id, "expense", Decimal("5"), note="চা")

        transaction_service.update_transaction(txn_id, note="")

        assert transaction_service.get_transaction(txn_id).note is None
