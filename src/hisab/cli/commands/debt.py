"""Debt and receivable commands.

``hisab debt`` manages money the user owes, ``hisab receivable`` money owed
to the user. Both groups have the same commands.
"""

import click
from hisab.cli.error_handling import handle_domain_error
from hisab.cli.labels import STATUS_LABELS
from hisab.cli.resolution import parse_amount_or_exit, resolve_wallet_or_exit
from hisab.domain.debt import DebtService
from hisab.domain.entities import EntryKind, EntryStatus
from hisab.utils.currency import format_taka


def make_entry_group(kind: EntryKind, help_text: str) -> click.Group:
    """Build the command group for one entry kind."""
    settle_verb = "Pay" if kind == EntryKind.DEBT else "Collect"

    @click.group(help=help_text)
    def entry_group():
        pass

    @entry_group.command("add")
    @click.argument("person", metavar="PERSON_NAME")
    @click.argument("amount")
    @click.pass_context
    def add_entry(ctx, person: str, amount: str):
        """Record a new entry with status pending."""
        service = DebtService(ctx.obj["db"], ctx.obj["account_id"])
        entry_amount = parse_amount_or_exit(ctx, amount)

        try:
            entry_id = service.create_entry(kind, person, entry_amount)
        except ValueError as e:
            handle_domain_error(ctx, e)

        click.echo(f"Created {kind.value} entry {entry_id}: {person.strip()} {format_taka(entry_amount)}")

    @entry_group.command("list")
    @click.option("--status", type=click.Choice([s.value for s in EntryStatus]), help="Only this status")
    @click.pass_context
    def list_entries(ctx, status: str | None):
        """List entries, newest first."""
        service = DebtService(ctx.obj["db"], ctx.obj["account_id"])

        entries = service.list_entries(kind, status=status)
        if not entries:
            click.echo(f"No {kind.value} entries found.")
            return

        click.echo("-" * 70)
        for entry in entries:
            click.echo(
                f"ID: {entry.id:3d} | {entry.person_name:20s} | {format_taka(entry.amount):>16s} | "
                f"{STATUS_LABELS[entry.status]} ({entry.status.value})"
            )
        click.echo("-" * 70)
        click.echo(f"Outstanding: {format_taka(service.open_total(kind))}")

    @entry_group.command("settle")
    @click.argument("entry_id", type=int)
    @click.argument("amount")
    @click.option("--wallet", required=True, help="Wallet name or ID the money moves through")
    @click.pass_context
    def settle_entry(ctx, entry_id: int, amount: str, wallet: str):
        """Pay or collect part or all of an entry through a wallet."""
        service = DebtService(ctx.obj["db"], ctx.obj["account_id"])
        payment = parse_amount_or_exit(ctx, amount)
        wallet_id = resolve_wallet_or_exit(ctx, service.transactions.wallets, wallet)

        try:
            entry = service.settle(kind, entry_id, payment, wallet_id)
        except ValueError as e:
            handle_domain_error(ctx, e)

        updated_wallet = service.transactions.wallets.require_wallet(wallet_id)
        click.echo(f"{settle_verb} {format_taka(payment)} for {entry.person_name}")
        click.echo(f"  Remaining: {format_taka(entry.amount)} ({entry.status.value})")
        click.echo(f"  Wallet: {updated_wallet.name} ({format_taka(updated_wallet.balance)})")

    @entry_group.command("write-off")
    @click.argument("entry_id", type=int)
    @click.pass_context
    def write_off_entry(ctx, entry_id: int):
        """Mark an entry uncollectible. No further settlement is possible."""
        service = DebtService(ctx.obj["db"], ctx.obj["account_id"])

        if not click.confirm(f"Mark {kind.value} entry {entry_id} as uncollectible?"):
            click.echo("Cancelled.")
            return

        try:
            entry = service.write_off(kind, entry_id)
        except ValueError as e:
            handle_domain_error(ctx, e)

        click.echo(f"Entry {entry_id} ({entry.person_name}) marked uncollectible")

    @entry_group.command("delete")
    @click.argument("entry_id", type=int)
    @click.pass_context
    def delete_entry(ctx, entry_id: int):
        """Delete an entry. Settlements already recorded are kept."""
        service = DebtService(ctx.obj["db"], ctx.obj["account_id"])

        if not click.confirm(f"Delete {kind.value} entry {entry_id}?"):
            click.echo("Deletion cancelled.")
            return

        try:
            service.delete_entry(kind, entry_id)
        except ValueError as e:
            handle_domain_error(ctx, e)

        click.echo(f"Deleted {kind.value} entry {entry_id}")

    return entry_group


debt_group = make_entry_group(EntryKind.DEBT, "Manage money you owe (ধার নেওয়া).")
receivable_group = make_entry_group(EntryKind.RECEIVABLE, "Manage money owed to you (ধার দেওয়া).")


def register_commands(cli):
    """Register debt and receivable commands with main CLI."""
    cli.add_command(debt_group, name="debt")
    cli.add_command(receivable_group, name="receivable")
