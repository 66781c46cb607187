"""Wallet domain service."""

from decimal import Decimal
from typing import Optional
from hisab.database.base import Database
from hisab.domain.balance import expected_balance, is_whole_paisa
from hisab.domain.entities import BalanceCheck, Wallet as WalletEntity, WalletType
from hisab.domain.errors import NotFoundError, ValidationError, amount_too_precise, wallet_not_found
from hisab.log import get_logger

logger = get_logger(__name__)


class WalletService:
    """Service for managing the wallets of one account.

    A wallet's balance is written only by ``adjust_wallet_balance`` calls
    made from the transaction and debt services, never set directly.
    """

    def __init__(self, db: Database, account_id: int):
        """Initialize wallet service.

        Args:
            db: Database instance
            account_id: Account whose wallets are managed
        """
        self.db = db
        self.account_id = account_id

    def create_wallet(
        self, name: str, wallet_type: WalletType | str, opening_balance: Decimal = Decimal("0")
    ) -> int:
        """Create a wallet.

        Args:
            name: Display name (e.g. "bKash", "Sonali Bank")
            wallet_type: cash, bank or mobile_banking
            opening_balance: Balance the wallet starts with

        Returns:
            Wallet ID

        Raises:
            ValidationError: If name is empty, wallet_type is unknown or the
                opening balance is finer than one paisa
        """
        name = name.strip()
        if not name:
            raise ValidationError("Wallet name is required")
        try:
            wallet_type = WalletType(wallet_type)
        except ValueError:
            valid = ", ".join(t.value for t in WalletType)
            raise ValidationError(f"Unknown wallet type '{wallet_type}'. Use one of: {valid}")
        if not is_whole_paisa(opening_balance):
            raise ValidationError(amount_too_precise(opening_balance))

        wallet_id = self.db.create_wallet(
            account_id=self.account_id,
            name=name,
            wallet_type=wallet_type,
            opening_balance=opening_balance,
        )
        logger.info(
            "wallet_created",
            wallet_id=wallet_id,
            wallet_type=wallet_type.value,
            opening_balance=str(opening_balance),
        )
        return wallet_id

    def get_wallet(self, wallet_id: int) -> Optional[WalletEntity]:
        """Get wallet by ID, or None if missing or owned by another account."""
        wallet = self.db.get_wallet(wallet_id)
        if wallet is None or wallet.account_id != self.account_id:
            return None
        return wallet

    def require_wallet(self, wallet_id: int) -> WalletEntity:
        """Get wallet by ID, raising NotFoundError if it is not available."""
        wallet = self.get_wallet(wallet_id)
        if wallet is None:
            raise NotFoundError(wallet_not_found(wallet_id))
        return wallet

    def list_wallets(self) -> list[WalletEntity]:
        """List wallets of the account."""
        return self.db.list_wallets(self.account_id)

    def total_balance(self) -> Decimal:
        """Sum of all wallet balances."""
        return sum((w.balance for w in self.list_wallets()), Decimal("0"))

    def check_balance(self, wallet_id: int) -> BalanceCheck:
        """Compare a wallet's stored balance with the one its history implies.

        The expected balance is the opening balance plus the signed amounts
        of every non-deleted transaction on the wallet, settlements included.
        """
        wallet = self.require_wallet(wallet_id)
        transactions = self.db.list_transactions(self.account_id, wallet_id=wallet_id)
        check = BalanceCheck(
            wallet=wallet,
            expected_balance=expected_balance(wallet.opening_balance, transactions),
        )
        if not check.is_consistent:
            logger.warning(
                "wallet_balance_drift",
                wallet_id=wallet_id,
                stored=str(wallet.balance),
                expected=str(check.expected_balance),
            )
        return check

    def check_all(self) -> list[BalanceCheck]:
        """Check every wallet of the account."""
        return [self.check_balance(w.id) for w in self.list_wallets()]
