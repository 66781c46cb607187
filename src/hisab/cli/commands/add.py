"""Add transaction command."""

import click
from hisab.cli.error_handling import handle_domain_error
from hisab.cli.labels import KIND_LABELS
from hisab.cli.resolution import parse_amount_or_exit, resolve_category_or_exit, resolve_wallet_or_exit
from hisab.domain.entities import TransactionKind
from hisab.domain.transaction import TransactionService
from hisab.utils.currency import format_taka
from hisab.utils.date_parser import parse_date


@click.command("add")
@click.option("--wallet", required=True, help="Wallet name or ID")
@click.option(
    "--kind",
    type=click.Choice([k.value for k in TransactionKind]),
    default=TransactionKind.EXPENSE.value,
    show_default=True,
    help="Income or expense",
)
@click.option("--amount", required=True, help="Positive amount (e.g. 250, ৳১,২০০)")
@click.option("--category", help="Category name or ID (must match --kind)")
@click.option("--date", "date_str", default="today", help="Transaction date (YYYY-MM-DD, 'today', 'গতকাল')")
@click.option("--note", help="Free-text note")
@click.pass_context
def add_transaction(
    ctx,
    wallet: str,
    kind: str,
    amount: str,
    category: str | None,
    date_str: str,
    note: str | None,
):
    """Record an income or expense and update the wallet balance.

    Examples:
        hisab add --wallet Cash --amount 200 --category "খাদ্য ও মুদি"
        hisab add --wallet bKash --kind income --amount 15000 --category বেতন
    """
    service = TransactionService(ctx.obj["db"], ctx.obj["account_id"])

    # Parse input before touching the database
    txn_amount = parse_amount_or_exit(ctx, amount)

    try:
        txn_date = parse_date(date_str)
    except ValueError as e:
        click.echo(f"Error: Invalid date format: {e}", err=True)
        ctx.exit(1)

    wallet_id = resolve_wallet_or_exit(ctx, service.wallets, wallet)
    category_id = None
    if category:
        category_id = resolve_category_or_exit(ctx, service.categories, category)

    try:
        transaction_id = service.create_transaction(
            wallet_id=wallet_id,
            kind=kind,
            amount=txn_amount,
            category_id=category_id,
            transaction_date=txn_date,
            note=note,
        )
    except ValueError as e:
        handle_domain_error(ctx, e)

    updated = service.wallets.require_wallet(wallet_id)
    click.echo(f"Created transaction {transaction_id}")
    click.echo(f"  {KIND_LABELS[TransactionKind(kind)]}: {format_taka(txn_amount)}")
    click.echo(f"  Date: {txn_date}")
    if note:
        click.echo(f"  Note: {note}")
    click.echo(f"  Wallet: {updated.name} ({format_taka(updated.balance)})")


def register_commands(cli):
    """Register add command with main CLI."""
    cli.add_command(add_transaction)
