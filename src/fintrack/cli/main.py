"""Main CLI entry point."""

import logging
import sys

import click
from fintrack.cli.error_handling import handle_domain_error
from fintrack.database.factories import create_sqlite_database
from fintrack.domain.errors import DomainError
from fintrack.domain.profile import ProfileService

# Import and register all commands at module level
from fintrack.cli.commands import (
    add,
    analytics,
    budget,
    category,
    dashboard,
    init_categories,
    profile,
    reminder,
    transaction,
)

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(verbose: bool) -> None:
    """Send log output to stderr, at DEBUG when verbose."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format=LOG_FORMAT,
        stream=sys.stderr,
    )


@click.group()
@click.option(
    "--db-path",
    type=click.Path(),
    help="Path to database file (overrides FINTRACK_DB_PATH environment variable)",
    envvar="FINTRACK_DB_PATH",
)
@click.option(
    "--user",
    "owner_id",
    help="Owner whose records are used (overrides FINTRACK_USER environment variable)",
    envvar="FINTRACK_USER",
)
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
@click.pass_context
def cli(ctx, db_path: str | None, owner_id: str | None, verbose: bool):
    """Fintrack - Personal finance tracking.

    Record income and expenses, plan monthly budgets per category and keep
    track of recurring bills.
    """
    ctx.ensure_object(dict)
    configure_logging(verbose)

    # Initialize database connection only when actually running a command
    # (not when showing help)
    if ctx.invoked_subcommand is not None:
        try:
            db = create_sqlite_database(database_path=db_path, owner_id=owner_id)
            ctx.call_on_close(db.disconnect)
            db.connect()
            db.initialize_schema()
            preferences = ProfileService(db).load_preferences()
        except DomainError as e:
            handle_domain_error(ctx, e)
        ctx.obj["db"] = db
        ctx.obj["preferences"] = preferences


# Register all commands
profile.register_commands(cli)
category.register_commands(cli)
init_categories.register_commands(cli)
add.register_commands(cli)
transaction.register_commands(cli)
budget.register_commands(cli)
reminder.register_commands(cli)
dashboard.register_commands(cli)
analytics.register_commands(cli)


def main():
    """Main entry point for CLI."""
    cli()


if __name__ == "__main__":
    main()
