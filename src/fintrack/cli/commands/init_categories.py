"""Initialize default categories."""

import click
from fintrack.cli.error_handling import handle_domain_error
from fintrack.domain.category import DEFAULT_CATEGORIES, CategoryService
from fintrack.domain.errors import DomainError


@click.command("init-categories")
@click.pass_context
def init_categories(ctx):
    """Create the default income and expense categories."""
    db = ctx.obj["db"]
    service = CategoryService(db)

    try:
        if service.list_categories():
            click.echo("Categories already exist. Missing defaults will be added.")
        created = service.create_default_categories()
    except DomainError as e:
        handle_domain_error(ctx, e)
        return

    skipped = len(DEFAULT_CATEGORIES) - created
    if skipped:
        click.echo(f"Created {created} categories ({skipped} already present).")
    else:
        click.echo(f"Successfully created {created} categories.")


def register_commands(cli):
    """Register init-categories command with main CLI."""
    cli.add_command(init_categories)
