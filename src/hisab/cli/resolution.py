"""CLI helpers that turn user input into IDs and amounts, or exit."""

from __future__ import annotations

from decimal import Decimal

import click
from hisab.cli.error_handling import handle_domain_error
from hisab.domain.category import CategoryService
from hisab.domain.wallet import WalletService
from hisab.utils.amount_parser import parse_amount
from hisab.utils.resolvers import resolve_category, resolve_wallet


def resolve_wallet_or_exit(ctx: click.Context, wallet_service: WalletService, wallet: str | int) -> int:
    """Resolve wallet name or ID, or exit with a CLI error."""
    try:
        return resolve_wallet(wallet_service, wallet)
    except ValueError as exc:
        handle_domain_error(ctx, exc)


def resolve_category_or_exit(
    ctx: click.Context, category_service: CategoryService, category: str | int
) -> int:
    """Resolve category name or ID, or exit with a CLI error."""
    try:
        return resolve_category(category_service, category)
    except ValueError as exc:
        handle_domain_error(ctx, exc)


def parse_amount_or_exit(ctx: click.Context, amount: str) -> Decimal:
    """Parse an amount argument, or exit with a CLI error."""
    try:
        return parse_amount(amount)
    except ValueError as exc:
        click.echo(f"Error: Invalid amount format: {exc}", err=True)
        ctx.exit(1)
