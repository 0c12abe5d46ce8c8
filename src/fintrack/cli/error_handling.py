"""CLI error handling helpers."""

import click

from fintrack.domain.errors import DomainError
from fintrack.domain.results import FetchResult


def handle_domain_error(ctx: click.Context, error: DomainError | ValueError) -> None:
    """Render a domain error and exit with failure."""
    click.echo(f"Error: {error}", err=True)
    ctx.exit(1)


def report_fetch(result: FetchResult, what: str, empty_message: str) -> bool:
    """Print a notice for failed or empty reads.

    Returns:
        True when the result holds data worth rendering
    """
    if result.failed:
        click.echo(f"Could not load {what}: {result.error}", err=True)
        return False
    if result.empty:
        click.echo(empty_message)
        return False
    return True
