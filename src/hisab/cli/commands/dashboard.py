"""Dashboard command."""

import click
from hisab.cli.labels import WALLET_TYPE_LABELS
from hisab.domain.dashboard import DashboardService
from hisab.domain.entities import TransactionKind, WalletType
from hisab.utils.currency import format_taka


@click.command("dashboard")
@click.option("--recent", default=5, show_default=True, help="Number of recent transactions to show")
@click.pass_context
def dashboard(ctx, recent: int):
    """Show balances, this month's income and expense, and open debts."""
    service = DashboardService(ctx.obj["db"], ctx.obj["account_id"])
    summary = service.get_summary(recent_limit=recent)

    click.echo("\nড্যাশবোর্ড")
    click.echo("=" * 50)
    click.echo(f"{WALLET_TYPE_LABELS[WalletType.CASH]:<20} {format_taka(summary.total_cash):>20}")
    click.echo(f"{WALLET_TYPE_LABELS[WalletType.BANK]:<20} {format_taka(summary.total_bank):>20}")
    click.echo(
        f"{WALLET_TYPE_LABELS[WalletType.MOBILE_BANKING]:<20} {format_taka(summary.total_mobile_banking):>20}"
    )
    click.echo(f"{'মোট ব্যালেন্স':<20} {format_taka(summary.total_balance):>20}")
    click.echo("-" * 50)
    click.echo(f"{'এই মাসের আয়':<20} {format_taka(summary.monthly_income):>20}")
    click.echo(f"{'এই মাসের ব্যয়':<20} {format_taka(summary.monthly_expense):>20}")
    click.echo("-" * 50)
    click.echo(f"{'পাওনা (receivable)':<20} {format_taka(summary.total_receivable):>20}")
    click.echo(f"{'দেনা (payable)':<20} {format_taka(summary.total_payable):>20}")

    click.echo("\nসাম্প্রতিক লেনদেন")
    click.echo("-" * 50)
    if not summary.recent_transactions:
        click.echo("No transactions found.")
        return
    for txn in summary.recent_transactions:
        sign = "+" if txn.kind == TransactionKind.INCOME else "-"
        click.echo(f"{txn.id:<5} {str(txn.transaction_date):<12} {sign} {format_taka(txn.amount)}  {txn.note or ''}")


def register_commands(cli):
    """Register dashboard command with main CLI."""
    cli.add_command(dashboard)
