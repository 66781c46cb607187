"""Category domain service."""

from typing import Optional
from hisab.database.base import Database
from hisab.domain.entities import Category as CategoryEntity, TransactionKind
from hisab.domain.errors import (
    ConflictError,
    NotFoundError,
    ValidationError,
    category_not_found,
)
from hisab.log import get_logger

logger = get_logger(__name__)


# Categories every new account starts with: (name, kind, icon)
DEFAULT_CATEGORIES = [
    # Income
    ("বেতন", TransactionKind.INCOME, "💰"),
    ("ভাড়া", TransactionKind.INCOME, "🏠"),
    ("কোচিং", TransactionKind.INCOME, "👨‍🏫"),
    ("টিউশন", TransactionKind.INCOME, "📖"),
    ("সার্ভিস", TransactionKind.INCOME, "🛠️"),
    ("ফ্রিল্যান্সিং", TransactionKind.INCOME, "💻"),
    ("ব্যবসা", TransactionKind.INCOME, "🏢"),
    ("অন্যান্য", TransactionKind.INCOME, "🪙"),
    # Expense
    ("খাদ্য ও মুদি", TransactionKind.EXPENSE, "🍲"),
    ("যাতায়াত", TransactionKind.EXPENSE, "🚌"),
    ("স্বাস্থ্য", TransactionKind.EXPENSE, "🏥"),
    ("ইউটিলিটি বিল", TransactionKind.EXPENSE, "⚡"),
    ("ব্যক্তিগত", TransactionKind.EXPENSE, "👕"),
    ("শপিং", TransactionKind.EXPENSE, "🛍️"),
    ("শিক্ষা", TransactionKind.EXPENSE, "📚"),
    ("বিনোদন", TransactionKind.EXPENSE, "🎉"),
]


class CategoryService:
    """Service for managing the categories of one account."""

    def __init__(self, db: Database, account_id: int):
        """Initialize category service.

        Args:
            db: Database instance
            account_id: Account whose categories are managed
        """
        self.db = db
        self.account_id = account_id

    def create_category(self, name: str, kind: TransactionKind | str, icon: Optional[str] = None) -> int:
        """Create a category.

        Args:
            name: Category name, unique within the account
            kind: "income" or "expense"
            icon: Optional display icon

        Returns:
            Category ID

        Raises:
            ValidationError: If name is empty or kind is unknown
            ConflictError: If a category with this name already exists
        """
        name = name.strip()
        if not name:
            raise ValidationError("Category name is required")
        try:
            kind = TransactionKind(kind)
        except ValueError:
            raise ValidationError(f"Unknown category kind '{kind}'. Use 'income' or 'expense'")

        if self.db.get_category_by_name(self.account_id, name) is not None:
            raise ConflictError(f"Category '{name}' already exists")

        return self.db.create_category(account_id=self.account_id, name=name, kind=kind, icon=icon)

    def get_category(self, category_id: int) -> Optional[CategoryEntity]:
        """Get category by ID, or None if missing or owned by another account."""
        category = self.db.get_category(category_id)
        if category is None or category.account_id != self.account_id:
            return None
        return category

    def require_category(self, category_id: int) -> CategoryEntity:
        """Get category by ID, raising NotFoundError if it is not available."""
        category = self.get_category(category_id)
        if category is None:
            raise NotFoundError(category_not_found(category_id))
        return category

    def get_category_by_name(self, name: str) -> Optional[CategoryEntity]:
        """Get category by name."""
        return self.db.get_category_by_name(self.account_id, name.strip())

    def list_categories(self, kind: Optional[TransactionKind | str] = None) -> list[CategoryEntity]:
        """List categories, optionally only those of one kind."""
        if kind is not None:
            kind = TransactionKind(kind)
        return self.db.list_categories(self.account_id, kind=kind)

    def seed_defaults(self) -> int:
        """Insert DEFAULT_CATEGORIES if the account has no categories yet.

        Returns:
            Number of categories created (0 if the account already had some)
        """
        if self.db.count_categories(self.account_id) > 0:
            return 0

        with self.db.atomic():
            for name, kind, icon in DEFAULT_CATEGORIES:
                self.db.create_category(account_id=self.account_id, name=name, kind=kind, icon=icon)

        logger.info("categories_seeded", account_id=self.account_id, count=len(DEFAULT_CATEGORIES))
        return len(DEFAULT_CATEGORIES)
