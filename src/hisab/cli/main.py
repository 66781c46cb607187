"""Main CLI entry point."""

import click
from hisab.database.factories import create_database
from hisab.domain.account import AccountService
from hisab.domain.errors import DomainError
from hisab.cli.error_handling import handle_domain_error
from hisab.log import configure_logging

# Import and register all commands at module level
from hisab.cli.commands import (
    wallet,
    add,
    transaction,
    debt,
    category,
    dashboard,
)


@click.group()
@click.option(
    "--db-path",
    type=click.Path(),
    help="Path to SQLite database file (overrides HISAB_DB_PATH environment variable)",
    envvar="HISAB_DB_PATH",
)
@click.option(
    "--database-url",
    help="SQLAlchemy database URL; takes precedence over --db-path",
    envvar="HISAB_DATABASE_URL",
)
@click.option("--verbose", "-v", is_flag=True, help="Log every balance change to stderr")
@click.pass_context
def cli(ctx, db_path: str | None, database_url: str | None, verbose: bool):
    """হিসাব রক্ষক - track wallets, income, expenses, debts and receivables.

    Every command works on the active account, which is created with a set
    of default categories the first time the database is used.
    """
    ctx.ensure_object(dict)
    if verbose:
        configure_logging(verbose=True)

    # Initialize database connection only when actually running a command
    # (not when showing help)
    if ctx.invoked_subcommand is not None:
        db = create_database(database_url=database_url, database_path=db_path)
        db.connect()
        db.initialize_schema()
        ctx.call_on_close(db.disconnect)
        ctx.obj["db"] = db

        try:
            account = AccountService(db).ensure_active_account()
        except DomainError as e:
            handle_domain_error(ctx, e)
        ctx.obj["account_id"] = account.id


# Register all commands
wallet.register_commands(cli)
add.register_commands(cli)
transaction.register_commands(cli)
debt.register_commands(cli)
category.register_commands(cli)
dashboard.register_commands(cli)


def main():
    """Main entry point for CLI."""
    cli()


if __name__ == "__main__":
    main()
