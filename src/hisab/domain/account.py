"""Account domain service."""

from typing import Optional
from hisab.database.base import Database
from hisab.domain.category import CategoryService
from hisab.domain.entities import Account as AccountEntity
from hisab.domain.errors import ValidationError
from hisab.log import get_logger

logger = get_logger(__name__)

DEFAULT_ACCOUNT_NAME = "আমার হিসাব"


class AccountService:
    """Service for managing accounts."""

    def __init__(self, db: Database):
        """Initialize account service.

        Args:
            db: Database instance
        """
        self.db = db

    def create_account(self, name: str) -> int:
        """Create a new account.

        Args:
            name: Account name

        Returns:
            Account ID

        Raises:
            ValidationError: If name is empty
        """
        if not name or not name.strip():
            raise ValidationError("Account name is required")
        return self.db.create_account(name=name.strip())

    def get_account(self, account_id: int) -> Optional[AccountEntity]:
        """Get account by ID.

        Args:
            account_id: Account ID

        Returns:
            Account entity or None if not found
        """
        return self.db.get_account(account_id)

    def list_accounts(self) -> list[AccountEntity]:
        """List all accounts.

        Returns:
            List of account entities
        """
        return self.db.list_accounts()

    def ensure_active_account(self) -> AccountEntity:
        """Return the active account, creating and seeding one on first use.

        The oldest active account wins when there are several. The returned
        account always has categories; defaults are inserted if it has none.
        """
        accounts = self.db.list_accounts(active_only=True)
        if accounts:
            account = accounts[0]
        else:
            account_id = self.create_account(DEFAULT_ACCOUNT_NAME)
            account = self.db.get_account(account_id)
            logger.info("account_created", account_id=account_id)

        CategoryService(self.db, account.id).seed_defaults()
        return account
