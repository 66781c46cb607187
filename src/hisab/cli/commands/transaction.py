"""Transaction management commands."""

import click
from hisab.cli.error_handling import handle_domain_error
from hisab.cli.resolution import parse_amount_or_exit, resolve_category_or_exit, resolve_wallet_or_exit
from hisab.domain.entities import TransactionKind
from hisab.domain.transaction import TransactionService
from hisab.utils.currency import format_taka
from hisab.utils.date_parser import get_date_range, parse_date


@click.group()
def transaction_group():
    """Manage transactions."""
    pass


@transaction_group.command("list")
@click.option("--wallet", help="Wallet name or ID")
@click.option("--kind", type=click.Choice([k.value for k in TransactionKind]), help="Only income or only expense")
@click.option("--start-date", help="Start date (YYYY-MM-DD or 'this month')")
@click.option("--end-date", help="End date (YYYY-MM-DD or 'today')")
@click.option(
    "--period",
    type=click.Choice(["this-month", "last-month", "this-year", "last-year"]),
    help="Date range shortcut (ignored when --start-date/--end-date are given)",
)
@click.option("--limit", type=int, help="Show at most this many transactions")
@click.pass_context
def list_transactions(
    ctx,
    wallet: str | None,
    kind: str | None,
    start_date: str | None,
    end_date: str | None,
    period: str | None,
    limit: int | None,
):
    """View transactions, newest first. Deleted transactions are hidden."""
    service = TransactionService(ctx.obj["db"], ctx.obj["account_id"])

    start = None
    end = None
    if period and not (start_date or end_date):
        start, end = get_date_range(period)

    if start_date:
        try:
            start = parse_date(start_date)
        except ValueError as e:
            click.echo(f"Error: Invalid start date: {e}", err=True)
            ctx.exit(1)

    if end_date:
        try:
            end = parse_date(end_date)
        except ValueError as e:
            click.echo(f"Error: Invalid end date: {e}", err=True)
            ctx.exit(1)

    wallet_id = None
    if wallet:
        wallet_id = resolve_wallet_or_exit(ctx, service.wallets, wallet)

    transactions = service.list_transactions(
        wallet_id=wallet_id, kind=kind, start_date=start, end_date=end, limit=limit
    )

    if not transactions:
        click.echo("No transactions found.")
        return

    wallets = {w.id: w.name for w in service.wallets.list_wallets()}
    categories = {c.id: c for c in service.categories.list_categories()}

    click.echo(f"\nFound {len(transactions)} transaction(s):")
    click.echo("-" * 100)
    click.echo(f"{'ID':<6} {'Date':<12} {'Amount':<18} {'Wallet':<16} {'Category':<20} {'Note':<26}")
    click.echo("-" * 100)

    for txn in transactions:
        category_name = ""
        if txn.category_id in categories:
            cat = categories[txn.category_id]
            category_name = f"{cat.icon or ''} {cat.name}".strip()
        sign = "+" if txn.kind == TransactionKind.INCOME else "-"
        amount_str = f"{sign} {format_taka(txn.amount)}"
        click.echo(
            f"{txn.id:<6} {str(txn.transaction_date):<12} {amount_str:<18} "
            f"{wallets.get(txn.wallet_id, 'Unknown'):<16} {category_name:<20} {(txn.note or '')[:26]:<26}"
        )

    total_income = sum(t.amount for t in transactions if t.kind == TransactionKind.INCOME)
    total_expense = sum(t.amount for t in transactions if t.kind == TransactionKind.EXPENSE)
    click.echo("-" * 100)
    click.echo(
        f"Income: {format_taka(total_income)} | Expense: {format_taka(total_expense)} | "
        f"Count: {len(transactions)}"
    )


@transaction_group.command("update")
@click.argument("transaction_id", type=int)
@click.option("--wallet", help="Move the transaction to this wallet (name or ID)")
@click.option("--kind", type=click.Choice([k.value for k in TransactionKind]), help="New kind")
@click.option("--amount", help="New amount")
@click.option("--category", help="New category name or ID (must match the new kind)")
@click.option("--no-category", "clear_category", is_flag=True, help="Remove the category")
@click.option("--date", "date_str", help="New transaction date")
@click.option("--note", help="New note; an empty string removes it")
@click.pass_context
def update_transaction(
    ctx,
    transaction_id: int,
    wallet: str | None,
    kind: str | None,
    amount: str | None,
    category: str | None,
    date_str: str | None,
    note: str | None,
    clear_category: bool,
) -> None:
    """Edit a transaction; wallet balances are corrected.

    Updates only the fields that are provided. When flipping --kind, also
    pass a --category of the new kind or --no-category.

    Examples:
        hisab transaction update 3 --amount 300
        hisab transaction update 3 --wallet bKash --kind income --category বেতন
    """
    service = TransactionService(ctx.obj["db"], ctx.obj["account_id"])

    txn_amount = None
    if amount is not None:
        txn_amount = parse_amount_or_exit(ctx, amount)

    txn_date = None
    if date_str is not None:
        try:
            txn_date = parse_date(date_str)
        except ValueError as e:
            click.echo(f"Error: Invalid date format: {e}", err=True)
            ctx.exit(1)

    wallet_id = None
    if wallet is not None:
        wallet_id = resolve_wallet_or_exit(ctx, service.wallets, wallet)

    category_id = None
    if category is not None:
        category_id = resolve_category_or_exit(ctx, service.categories, category)

    try:
        service.update_transaction(
            transaction_id=transaction_id,
            wallet_id=wallet_id,
            kind=kind,
            amount=txn_amount,
            category_id=category_id,
            transaction_date=txn_date,
            note=note,
            clear_category=clear_category,
        )
    except ValueError as e:
        handle_domain_error(ctx, e)

    click.echo(f"Updated transaction {transaction_id}")


@transaction_group.command("delete")
@click.argument("transaction_id", type=int)
@click.pass_context
def delete_transaction(ctx, transaction_id: int) -> None:
    """Delete a transaction and reverse its effect on the wallet.

    Examples:
        hisab transaction delete 1
    """
    service = TransactionService(ctx.obj["db"], ctx.obj["account_id"])

    # Get transaction info for display
    txn = service.get_transaction(transaction_id)
    if txn is None or txn.is_deleted:
        click.echo(f"Error: Transaction {transaction_id} not found", err=True)
        ctx.exit(1)

    # Confirm deletion
    if not click.confirm(
        f"আপনি কি নিশ্চিত যে লেনদেন {transaction_id} ({format_taka(txn.amount)}) ডিলিট করতে চান?"
    ):
        click.echo("Deletion cancelled.")
        return

    try:
        service.delete_transaction(transaction_id)
    except ValueError as e:
        handle_domain_error(ctx, e)

    click.echo(f"Deleted transaction {transaction_id}")


def register_commands(cli: click.Group) -> None:
    """Register transaction commands with main CLI."""
    cli.add_command(transaction_group, name="transaction")
