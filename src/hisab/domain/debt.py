"""Debt and receivable domain service.

Debts (``debts_taken``) are money the user owes; receivables
(``debts_given``) are money owed to the user. Settling either one reduces
the outstanding amount and records a transaction on the wallet the money
goes through: an expense for a debt payment, income for a collection.

Status transitions::

    pending --settle(part)--> partial
    pending --settle(all)---> paid
    partial --settle(rest)--> paid
    pending|partial --write off--> uncollectible

``paid`` and ``uncollectible`` are terminal.
"""

from datetime import date
from decimal import Decimal
from typing import Optional
from hisab.database.base import Database
from hisab.domain.balance import apply_payment, is_whole_paisa, settlement_kind
from hisab.domain.entities import DebtEntry, EntryKind, EntryStatus
from hisab.domain.errors import (
    InvalidStateError,
    NotFoundError,
    ValidationError,
    amount_not_positive,
    amount_too_precise,
    entry_closed,
    entry_not_found,
    payment_exceeds_remaining,
)
from hisab.domain.transaction import TransactionService
from hisab.log import get_logger

logger = get_logger(__name__)

# Note suffixes on settlement transactions
SETTLEMENT_NOTES = {
    EntryKind.DEBT: "পরিশোধ",
    EntryKind.RECEIVABLE: "আদায়",
}


def _parse_entry_kind(kind: EntryKind | str) -> EntryKind:
    try:
        return EntryKind(kind)
    except ValueError:
        raise ValidationError(f"Unknown entry kind '{kind}'. Use 'debt' or 'receivable'")


class DebtService:
    """Service for debts and receivables of one account."""

    def __init__(self, db: Database, account_id: int):
        """Initialize debt service.

        Args:
            db: Database instance
            account_id: Account whose entries are managed
        """
        self.db = db
        self.account_id = account_id
        self.transactions = TransactionService(db, account_id)

    def create_entry(self, kind: EntryKind | str, person_name: str, amount: Decimal) -> int:
        """Record a new debt or receivable with status pending.

        Raises:
            ValidationError: If the name is empty or amount not positive
        """
        kind = _parse_entry_kind(kind)
        person_name = person_name.strip()
        if not person_name:
            raise ValidationError("Person name is required")
        if amount <= 0:
            raise ValidationError(amount_not_positive(amount))
        if not is_whole_paisa(amount):
            raise ValidationError(amount_too_precise(amount))

        entry_id = self.db.create_debt_entry(
            kind=kind, account_id=self.account_id, person_name=person_name, amount=amount
        )
        logger.info("entry_created", kind=kind.value, entry_id=entry_id, amount=str(amount))
        return entry_id

    def get_entry(self, kind: EntryKind | str, entry_id: int) -> Optional[DebtEntry]:
        """Get an entry, or None if missing or owned by another account."""
        entry = self.db.get_debt_entry(_parse_entry_kind(kind), entry_id)
        if entry is None or entry.account_id != self.account_id:
            return None
        return entry

    def require_entry(self, kind: EntryKind | str, entry_id: int) -> DebtEntry:
        """Get an entry, raising NotFoundError if it is not available."""
        kind = _parse_entry_kind(kind)
        entry = self.get_entry(kind, entry_id)
        if entry is None:
            raise NotFoundError(entry_not_found(kind.value, entry_id))
        return entry

    def list_entries(
        self, kind: EntryKind | str, status: Optional[EntryStatus | str] = None
    ) -> list[DebtEntry]:
        """List entries of one kind, newest first, optionally by status."""
        if status is not None:
            status = EntryStatus(status)
        return self.db.list_debt_entries(_parse_entry_kind(kind), self.account_id, status=status)

    def open_total(self, kind: EntryKind | str) -> Decimal:
        """Outstanding amount over all pending and partial entries of a kind."""
        return sum(
            (e.amount for e in self.list_entries(kind) if e.is_open),
            Decimal("0"),
        )

    def settle(
        self,
        kind: EntryKind | str,
        entry_id: int,
        payment: Decimal,
        wallet_id: int,
        settlement_date: Optional[date] = None,
    ) -> DebtEntry:
        """Pay down a debt or collect on a receivable through a wallet.

        In one atomic unit: reduce the outstanding amount, set the status to
        partial or paid, record the settlement transaction and apply it to
        the wallet balance.

        Args:
            kind: "debt" or "receivable"
            entry_id: Entry to settle
            payment: Positive amount, at most the outstanding amount
            wallet_id: Wallet the money leaves (debt) or enters (receivable)
            settlement_date: Transaction date (defaults to today)

        Returns:
            The updated entry

        Raises:
            NotFoundError: If entry or wallet is missing
            InvalidStateError: If the entry is paid or uncollectible
            ValidationError: If payment is not positive or exceeds the remainder
            ConflictError: If the entry changed after it was read
        """
        kind = _parse_entry_kind(kind)
        entry = self.require_entry(kind, entry_id)
        if not entry.is_open:
            raise InvalidStateError(entry_closed(kind.value, entry_id, entry.status.value))
        if payment <= 0:
            raise ValidationError(amount_not_positive(payment))
        if not is_whole_paisa(payment):
            raise ValidationError(amount_too_precise(payment))
        if payment > entry.amount:
            raise ValidationError(payment_exceeds_remaining(payment, entry.amount))

        remaining, status = apply_payment(entry.amount, payment)
        note = f"{entry.person_name} ({SETTLEMENT_NOTES[kind]})"

        with self.db.atomic():
            self.db.update_debt_entry(
                kind, entry_id, amount=remaining, status=status, expected_version=entry.version
            )
            transaction_id = self.transactions.create_transaction(
                wallet_id=wallet_id,
                kind=settlement_kind(kind),
                amount=payment,
                transaction_date=settlement_date,
                note=note,
            )

        logger.info(
            "entry_settled",
            kind=kind.value,
            entry_id=entry_id,
            payment=str(payment),
            remaining=str(remaining),
            status=status.value,
            transaction_id=transaction_id,
        )
        return self.require_entry(kind, entry_id)

    def write_off(self, kind: EntryKind | str, entry_id: int) -> DebtEntry:
        """Mark an open entry uncollectible, whatever amount is left.

        No wallet or transaction is touched.

        Raises:
            InvalidStateError: If the entry is already paid or uncollectible
            ConflictError: If the entry changed after it was read
        """
        kind = _parse_entry_kind(kind)
        entry = self.require_entry(kind, entry_id)
        if not entry.is_open:
            raise InvalidStateError(entry_closed(kind.value, entry_id, entry.status.value))

        self.db.update_debt_entry(
            kind, entry_id, status=EntryStatus.UNCOLLECTIBLE, expected_version=entry.version
        )
        logger.info("entry_written_off", kind=kind.value, entry_id=entry_id, remaining=str(entry.amount))
        return self.require_entry(kind, entry_id)

    def delete_entry(self, kind: EntryKind | str, entry_id: int) -> None:
        """Permanently delete an entry.

        Settlement transactions already recorded for it stay in place, and
        so do their wallet effects.
        """
        kind = _parse_entry_kind(kind)
        self.require_entry(kind, entry_id)
        self.db.delete_debt_entry(kind, entry_id)
        logger.info("entry_deleted", kind=kind.value, entry_id=entry_id)
