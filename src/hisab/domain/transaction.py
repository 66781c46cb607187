"""Transaction domain service.

Every write here moves money, so each one runs inside ``db.atomic()``: the
transaction row and the wallet balance change commit together or not at all.
"""

from typing import Optional
from datetime import date, datetime, UTC
from decimal import Decimal
from hisab.database.base import Database
from hisab.domain.balance import is_whole_paisa, reversal_amount, signed_amount
from hisab.domain.category import CategoryService
from hisab.domain.entities import Transaction as TransactionEntity, TransactionKind
from hisab.domain.errors import (
    ConflictError,
    NotFoundError,
    ValidationError,
    amount_not_positive,
    amount_too_precise,
    category_kind_mismatch,
    transaction_already_deleted,
    transaction_not_found,
)
from hisab.domain.wallet import WalletService
from hisab.log import get_logger

logger = get_logger(__name__)


def _parse_kind(kind: TransactionKind | str) -> TransactionKind:
    try:
        return TransactionKind(kind)
    except ValueError:
        raise ValidationError(f"Unknown transaction kind '{kind}'. Use 'income' or 'expense'")


def _require_valid_amount(amount: Decimal) -> None:
    if amount <= 0:
        raise ValidationError(amount_not_positive(amount))
    if not is_whole_paisa(amount):
        raise ValidationError(amount_too_precise(amount))


class TransactionService:
    """Service for recording income and expense against wallets."""

    def __init__(self, db: Database, account_id: int):
        """Initialize transaction service.

        Args:
            db: Database instance
            account_id: Account whose transactions are managed
        """
        self.db = db
        self.account_id = account_id
        self.wallets = WalletService(db, account_id)
        self.categories = CategoryService(db, account_id)

    def _check_category(self, category_id: Optional[int], kind: TransactionKind) -> None:
        """Verify the category exists and is of the transaction's kind."""
        if category_id is None:
            return
        category = self.categories.require_category(category_id)
        if category.kind != kind:
            raise ValidationError(category_kind_mismatch(category.name, category.kind.value, kind.value))

    def create_transaction(
        self,
        wallet_id: int,
        kind: TransactionKind | str,
        amount: Decimal,
        category_id: Optional[int] = None,
        transaction_date: Optional[date] = None,
        note: Optional[str] = None,
    ) -> int:
        """Record a transaction and apply it to its wallet.

        Args:
            wallet_id: Wallet the money moves in or out of
            kind: "income" or "expense"
            amount: Positive amount
            category_id: Optional category of the same kind
            transaction_date: Date of the movement (defaults to today)
            note: Optional free text

        Returns:
            Transaction ID

        Raises:
            ValidationError: If amount is not positive or category kind differs
            NotFoundError: If wallet or category does not exist in the account
        """
        kind = _parse_kind(kind)
        _require_valid_amount(amount)
        self.wallets.require_wallet(wallet_id)
        self._check_category(category_id, kind)
        if transaction_date is None:
            transaction_date = date.today()

        with self.db.atomic():
            transaction_id = self.db.create_transaction(
                account_id=self.account_id,
                wallet_id=wallet_id,
                kind=kind,
                amount=amount,
                transaction_date=transaction_date,
                category_id=category_id,
                note=note,
            )
            new_balance = self.db.adjust_wallet_balance(wallet_id, signed_amount(kind, amount))

        logger.info(
            "transaction_created",
            transaction_id=transaction_id,
            wallet_id=wallet_id,
            kind=kind.value,
            amount=str(amount),
            balance=str(new_balance),
        )
        return transaction_id

    def get_transaction(self, transaction_id: int) -> Optional[TransactionEntity]:
        """Get transaction by ID (soft-deleted ones included).

        Args:
            transaction_id: Transaction ID

        Returns:
            Transaction entity or None if not found in this account
        """
        txn = self.db.get_transaction(transaction_id)
        if txn is None or txn.account_id != self.account_id:
            return None
        return txn

    def require_transaction(self, transaction_id: int) -> TransactionEntity:
        """Get transaction by ID, raising NotFoundError if it is not available."""
        txn = self.get_transaction(transaction_id)
        if txn is None:
            raise NotFoundError(transaction_not_found(transaction_id))
        return txn

    def update_transaction(
        self,
        transaction_id: int,
        wallet_id: Optional[int] = None,
        kind: Optional[TransactionKind | str] = None,
        amount: Optional[Decimal] = None,
        category_id: Optional[int] = None,
        transaction_date: Optional[date] = None,
        note: Optional[str] = None,
        clear_category: bool = False,
    ) -> None:
        """Edit a transaction and move its balance effect accordingly.

        Fields left as None keep their stored values. ``clear_category``
        removes the category and an empty ``note`` removes the note.

        The stored wallet, kind and amount are captured first; their effect is reversed on the
        original wallet, then the edited effect is applied to the (possibly
        different) new wallet. These are two separate balance writes even
        when the wallet does not change.

        Raises:
            NotFoundError: If the transaction, wallet or category is missing
            ConflictError: If the transaction was deleted
            ValidationError: If amount is not positive or category kind differs,
                or both category_id and clear_category are given
        """
        original = self.require_transaction(transaction_id)
        if original.is_deleted:
            raise ConflictError(transaction_already_deleted(transaction_id))

        new_wallet_id = wallet_id if wallet_id is not None else original.wallet_id
        new_kind = _parse_kind(kind) if kind is not None else original.kind
        new_amount = amount if amount is not None else original.amount
        if clear_category and category_id is not None:
            raise ValidationError("Give either a new category or clear it, not both")
        if clear_category:
            new_category_id = None
        else:
            new_category_id = category_id if category_id is not None else original.category_id
        new_date = transaction_date if transaction_date is not None else original.transaction_date
        new_note = (note or None) if note is not None else original.note

        _require_valid_amount(new_amount)
        self.wallets.require_wallet(new_wallet_id)
        self._check_category(new_category_id, new_kind)

        with self.db.atomic():
            self.db.adjust_wallet_balance(
                original.wallet_id, reversal_amount(original.kind, original.amount)
            )
            self.db.update_transaction(
                transaction_id=transaction_id,
                wallet_id=new_wallet_id,
                kind=new_kind,
                amount=new_amount,
                transaction_date=new_date,
                category_id=new_category_id,
                note=new_note,
            )
            self.db.adjust_wallet_balance(new_wallet_id, signed_amount(new_kind, new_amount))

        logger.info(
            "transaction_updated",
            transaction_id=transaction_id,
            old_wallet_id=original.wallet_id,
            new_wallet_id=new_wallet_id,
            old_signed=str(signed_amount(original.kind, original.amount)),
            new_signed=str(signed_amount(new_kind, new_amount)),
        )

    def delete_transaction(self, transaction_id: int) -> None:
        """Soft-delete a transaction and reverse its effect on its wallet.

        The row is kept with a deletion timestamp and disappears from
        listings and totals.

        Raises:
            NotFoundError: If the transaction doesn't exist
            ConflictError: If it was already deleted
        """
        txn = self.require_transaction(transaction_id)
        if txn.is_deleted:
            raise ConflictError(transaction_already_deleted(transaction_id))

        with self.db.atomic():
            self.db.mark_transaction_deleted(transaction_id, datetime.now(UTC))
            new_balance = self.db.adjust_wallet_balance(
                txn.wallet_id, reversal_amount(txn.kind, txn.amount)
            )

        logger.info(
            "transaction_deleted",
            transaction_id=transaction_id,
            wallet_id=txn.wallet_id,
            balance=str(new_balance),
        )

    def list_transactions(
        self,
        wallet_id: Optional[int] = None,
        kind: Optional[TransactionKind | str] = None,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
        limit: Optional[int] = None,
    ) -> list[TransactionEntity]:
        """List non-deleted transactions, newest first.

        Args:
            wallet_id: Optional wallet filter
            kind: Optional income/expense filter
            start_date: Optional start date filter
            end_date: Optional end date filter
            limit: Optional maximum number of transactions

        Returns:
            List of transaction entities
        """
        if kind is not None:
            kind = _parse_kind(kind)
        return self.db.list_transactions(
            account_id=self.account_id,
            wallet_id=wallet_id,
            kind=kind,
            start_date=start_date,
            end_date=end_date,
            limit=limit,
        )

    def recent_transactions(self, limit: int = 5) -> list[TransactionEntity]:
        """Most recent non-deleted transactions."""
        return self.list_transactions(limit=limit)
