"""Add transaction command."""

import click
from fintrack.cli.error_handling import handle_domain_error
from fintrack.domain.category import CategoryService
from fintrack.domain.errors import DomainError
from fintrack.domain.transaction import TransactionService
from fintrack.utils.amount_parser import parse_amount
from fintrack.utils.date_parser import parse_date
from fintrack.utils.formatting import format_currency


@click.command("add")
@click.option(
    "--type",
    "kind",
    type=click.Choice(["income", "expense"], case_sensitive=False),
    required=True,
    help="Income or expense",
)
@click.option("--amount", required=True, help="Amount (e.g., 123.45)")
@click.option("--category", required=True, help="Category name or ID")
@click.option(
    "--date",
    "date_str",
    default="today",
    help="Transaction date (YYYY-MM-DD or relative like 'today', 'yesterday')",
)
@click.option("--note", default="", help="Note")
@click.pass_context
def add_transaction(ctx, kind: str, amount: str, category: str, date_str: str, note: str):
    """Add an income or expense transaction.

    Examples:
        fintrack add --type expense --amount 42.50 --category Food --note "Groceries"
        fintrack add --type income --amount 3000 --category Salary --date 2024-03-01
    """
    db = ctx.obj["db"]
    transaction_service = TransactionService(db)
    category_service = CategoryService(db)

    # Input is validated before anything reaches the store
    try:
        txn_amount = parse_amount(amount)
    except ValueError as e:
        click.echo(f"Error: Invalid amount format: {e}", err=True)
        ctx.exit(1)

    try:
        txn_date = parse_date(date_str)
    except ValueError as e:
        click.echo(f"Error: Invalid date format: {e}", err=True)
        ctx.exit(1)

    try:
        category_obj = category_service.resolve_category(category)
        transaction_id = transaction_service.create_transaction(
            amount=txn_amount,
            kind=kind,
            category_id=category_obj.id,
            occurred_on=txn_date,
            note=note,
        )
    except DomainError as e:
        handle_domain_error(ctx, e)
        return

    click.echo(f"Created transaction {transaction_id}")
    click.echo(f"  Type: {kind.lower()}")
    click.echo(f"  Date: {txn_date}")
    click.echo(f"  Amount: {format_currency(txn_amount)}")
    click.echo(f"  Category: {category_obj.name}")
    if note:
        click.echo(f"  Note: {note}")


def register_commands(cli):
    """Register add command with main CLI."""
    cli.add_command(add_transaction)
