"""Utilities for resolving wallet and category names to IDs."""

from hisab.domain.category import CategoryService
from hisab.domain.wallet import WalletService


def resolve_wallet(wallet_service: WalletService, wallet: str | int) -> int:
    """Resolve wallet name or ID to wallet ID.

    Args:
        wallet_service: WalletService instance
        wallet: Wallet name (str) or ID (int or string representation of int)

    Returns:
        Wallet ID

    Raises:
        ValueError: If wallet is not found
    """
    # If it's already an integer, use it as ID
    if isinstance(wallet, int):
        if wallet_service.get_wallet(wallet) is None:
            raise ValueError(f"Wallet ID {wallet} not found")
        return wallet

    # Try to parse as integer (handles string IDs like "1")
    try:
        wallet_id = int(wallet)
    except (ValueError, TypeError):
        wallet_id = None

    if wallet_id is not None:
        if wallet_service.get_wallet(wallet_id) is None:
            raise ValueError(f"Wallet ID {wallet_id} not found")
        return wallet_id

    # Try to find by name
    for w in wallet_service.list_wallets():
        if w.name == wallet:
            return w.id

    raise ValueError(f"Wallet '{wallet}' not found")


def resolve_category(category_service: CategoryService, category: str | int) -> int:
    """Resolve category name or ID to category ID.

    Raises:
        ValueError: If category is not found
    """
    if isinstance(category, int):
        if category_service.get_category(category) is None:
            raise ValueError(f"Category ID {category} not found")
        return category

    try:
        category_id = int(category)
    except (ValueError, TypeError):
        category_id = None

    if category_id is not None:
        if category_service.get_category(category_id) is None:
            raise ValueError(f"Category ID {category_id} not found")
        return category_id

    found = category_service.get_category_by_name(category)
    if found is None:
        raise ValueError(f"Category '{category}' not found")
    return found.id
