"""Wallet management commands."""

import click
from hisab.cli.error_handling import handle_domain_error
from hisab.cli.labels import WALLET_TYPE_LABELS
from hisab.cli.resolution import parse_amount_or_exit, resolve_wallet_or_exit
from hisab.domain.entities import WalletType
from hisab.domain.wallet import WalletService
from hisab.utils.currency import format_taka


@click.group()
def wallet_group():
    """Manage wallets (cash, bank, mobile banking)."""
    pass


@wallet_group.command("create")
@click.argument("name", metavar="WALLET_NAME")
@click.option(
    "--type",
    "wallet_type",
    type=click.Choice([t.value for t in WalletType]),
    default=WalletType.CASH.value,
    show_default=True,
    help="Wallet type",
)
@click.option("--balance", default="0", help="Opening balance (e.g. 1000 or ৳১,০০০)")
@click.pass_context
def create_wallet(ctx, name: str, wallet_type: str, balance: str):
    """Create a new wallet.

    Examples:
        hisab wallet create "Cash" --balance 1000
        hisab wallet create "bKash" --type mobile_banking
        hisab wallet create "Sonali Bank" --type bank --balance 25000
    """
    service = WalletService(ctx.obj["db"], ctx.obj["account_id"])

    opening_balance = parse_amount_or_exit(ctx, balance)

    try:
        wallet_id = service.create_wallet(name=name, wallet_type=wallet_type, opening_balance=opening_balance)
    except ValueError as e:
        handle_domain_error(ctx, e)

    click.echo(f"Created wallet '{name.strip()}' (ID: {wallet_id})")
    click.echo(f"Opening balance: {format_taka(opening_balance)}")


@wallet_group.command("list")
@click.pass_context
def list_wallets(ctx):
    """List wallets with their balances."""
    service = WalletService(ctx.obj["db"], ctx.obj["account_id"])

    wallets = service.list_wallets()
    if not wallets:
        click.echo("No wallets found.")
        return

    click.echo("\nWallets:")
    click.echo("-" * 70)
    for w in wallets:
        click.echo(
            f"ID: {w.id:3d} | {w.name:20s} | {WALLET_TYPE_LABELS[w.wallet_type]:18s} | {format_taka(w.balance)}"
        )
    click.echo("-" * 70)
    click.echo(f"Total: {format_taka(service.total_balance())}")


@wallet_group.command("check")
@click.argument("wallet", metavar="WALLET", required=False)
@click.pass_context
def check_wallets(ctx, wallet: str | None):
    """Verify stored balances against transaction history.

    WALLET can be a wallet name or ID; all wallets are checked when omitted.
    Exits with status 1 if any balance has drifted.
    """
    service = WalletService(ctx.obj["db"], ctx.obj["account_id"])

    if wallet is not None:
        wallet_id = resolve_wallet_or_exit(ctx, service, wallet)
        checks = [service.check_balance(wallet_id)]
    else:
        checks = service.check_all()

    if not checks:
        click.echo("No wallets found.")
        return

    drifted = 0
    for check in checks:
        if check.is_consistent:
            click.echo(f"OK     {check.wallet.name}: {format_taka(check.wallet.balance)}")
        else:
            drifted += 1
            click.echo(
                f"DRIFT  {check.wallet.name}: stored {format_taka(check.wallet.balance)}, "
                f"expected {format_taka(check.expected_balance)}"
            )

    if drifted:
        ctx.exit(1)


def register_commands(cli):
    """Register wallet commands with main CLI."""
    cli.add_command(wallet_group, name="wallet")
