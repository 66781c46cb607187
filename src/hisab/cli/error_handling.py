"""CLI error handling helpers."""

import click

from hisab.domain.errors import ConflictError, DomainError, StorageError
from hisab.log import get_logger

logger = get_logger(__name__)


def handle_domain_error(ctx: click.Context, error: DomainError | ValueError) -> None:
    """Print ``Error: <message>`` to stderr and exit with status 1.

    Storage failures and write conflicts are also logged with the command
    that hit them; plain input errors are only shown to the user.
    """
    if isinstance(error, (StorageError, ConflictError)):
        logger.warning("command_failed", command=ctx.info_name, error=str(error))
    click.echo(f"Error: {error}", err=True)
    ctx.exit(1)
