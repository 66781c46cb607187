"""Bengali display labels for stored enum values."""

from hisab.domain.entities import EntryStatus, TransactionKind, WalletType

WALLET_TYPE_LABELS = {
    WalletType.CASH: "নগদ ক্যাশ",
    WalletType.BANK: "ব্যাংক একাউন্ট",
    WalletType.MOBILE_BANKING: "মোবাইল ফিন্যান্স",
}

KIND_LABELS = {
    TransactionKind.INCOME: "আয়",
    TransactionKind.EXPENSE: "ব্যয়",
}

STATUS_LABELS = {
    EntryStatus.PENDING: "বাকি",
    EntryStatus.PARTIAL: "আংশিক",
    EntryStatus.PAID: "পরিশোধিত",
    EntryStatus.UNCOLLECTIBLE: "অনাদায়ী",
}
