"""Sign convention and settlement arithmetic.

Income adds its amount to a wallet, expense subtracts it. The same rule
covers plain transactions and debt/receivable settlements: paying a debt
is an expense, collecting a receivable is income.
"""

from decimal import Decimal
from typing import Iterable

from hisab.domain.entities import (
    EntryKind,
    EntryStatus,
    Transaction,
    TransactionKind,
)

ZERO = Decimal("0")
PAISA = Decimal("0.01")


def is_whole_paisa(amount: Decimal) -> bool:
    """Return True if the amount has no more than two decimal places."""
    return amount == amount.quantize(PAISA)


def signed_amount(kind: TransactionKind, amount: Decimal) -> Decimal:
    """Return the change a movement makes to its wallet's balance."""
    if kind == TransactionKind.INCOME:
        return amount
    return -amount


def reversal_amount(kind: TransactionKind, amount: Decimal) -> Decimal:
    """Return the change that undoes a movement."""
    return -signed_amount(kind, amount)


def settlement_kind(entry_kind: EntryKind) -> TransactionKind:
    """Return the transaction kind a settlement of this entry kind records."""
    if entry_kind == EntryKind.DEBT:
        return TransactionKind.EXPENSE
    return TransactionKind.INCOME


def apply_payment(remaining: Decimal, payment: Decimal) -> tuple[Decimal, EntryStatus]:
    """Apply a payment to an outstanding amount.

    Args:
        remaining: Amount still outstanding on the entry
        payment: Amount being paid or collected

    Returns:
        Tuple of (new remaining amount, new status). The remaining amount is
        clamped at zero; the status is PAID once nothing is left.
    """
    left = remaining - payment
    status = EntryStatus.PAID if left <= ZERO else EntryStatus.PARTIAL
    return max(ZERO, left), status


def expected_balance(opening_balance: Decimal, transactions: Iterable[Transaction]) -> Decimal:
    """Recompute a wallet balance from its opening balance and history.

    Soft-deleted transactions are skipped.
    """
    total = opening_balance
    for txn in transactions:
        if txn.is_deleted:
            continue
        total += signed_amount(txn.kind, txn.amount)
    return total
