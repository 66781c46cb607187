"""Category management commands."""

import click
from hisab.cli.error_handling import handle_domain_error
from hisab.cli.labels import KIND_LABELS
from hisab.domain.category import CategoryService
from hisab.domain.entities import TransactionKind


@click.group()
def category_group():
    """Manage income and expense categories."""
    pass


@category_group.command("list")
@click.option("--kind", type=click.Choice([k.value for k in TransactionKind]), help="Only this kind")
@click.pass_context
def list_categories(ctx, kind: str | None):
    """List categories."""
    service = CategoryService(ctx.obj["db"], ctx.obj["account_id"])

    categories = service.list_categories(kind=kind)
    if not categories:
        click.echo("No categories found.")
        return

    for cat in categories:
        click.echo(f"ID: {cat.id:3d} | {cat.icon or ' '} {cat.name} ({KIND_LABELS[cat.kind]})")


@category_group.command("create")
@click.argument("name")
@click.option(
    "--kind",
    type=click.Choice([k.value for k in TransactionKind]),
    required=True,
    help="Whether the category is for income or expense",
)
@click.option("--icon", help="Display icon, e.g. an emoji")
@click.pass_context
def create_category(ctx, name: str, kind: str, icon: str | None):
    """Create a category.

    Examples:
        hisab category create "ইন্টারনেট" --kind expense --icon 🌐
    """
    service = CategoryService(ctx.obj["db"], ctx.obj["account_id"])

    try:
        category_id = service.create_category(name=name, kind=kind, icon=icon)
    except ValueError as e:
        handle_domain_error(ctx, e)

    click.echo(f"Created category '{name.strip()}' (ID: {category_id})")


def register_commands(cli):
    """Register category commands with main CLI."""
    cli.add_command(category_group, name="category")
