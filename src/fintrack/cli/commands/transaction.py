"""Transaction management commands."""

import click
from fintrack.cli.date_filters import flags_from_kwargs, period_options, resolve_cli_date_range
from fintrack.cli.error_handling import handle_domain_error, report_fetch
from fintrack.cli.rendering import heading, record_line
from fintrack.domain.category import CategoryService
from fintrack.domain.errors import DomainError
from fintrack.domain.results import fetch
from fintrack.domain.transaction import TransactionService
from fintrack.utils.amount_parser import parse_amount
from fintrack.utils.date_parser import parse_date


@click.group()
def transaction_group():
    """Manage transactions."""
    pass


@transaction_group.command("list")
@click.option(
    "--type",
    "kind",
    type=click.Choice(["all", "income", "expense"], case_sensitive=False),
    default="all",
    help="Filter by type (default: all)",
)
@click.option("--search", help="Search text matched against notes and category names")
@period_options
@click.pass_context
def list_transactions(ctx, kind: str, search: str | None, start_date, end_date, **period_kwargs):
    """List transactions, newest first."""
    db = ctx.obj["db"]
    preferences = ctx.obj["preferences"]
    service = TransactionService(db)

    start, end = resolve_cli_date_range(
        ctx,
        start_date=start_date,
        end_date=end_date,
        period_flags=flags_from_kwargs(period_kwargs),
    )

    try:
        categories = CategoryService(db).categories_by_id()
    except DomainError as e:
        handle_domain_error(ctx, e)
        return

    result = fetch(
        lambda: service.list_transactions(
            start_date=start,
            end_date=end,
            kind=None if kind.lower() == "all" else kind,
            search=search,
            categories=categories,
        )
    )
    if not report_fetch(result, "transactions", "No transactions found."):
        return

    heading(f"Transactions ({len(result.value)}):", preferences)
    for record in result.value:
        click.echo(record_line(record, categories, preferences))


@transaction_group.command("edit")
@click.argument("transaction_id", type=int)
@click.option("--type", "kind", type=click.Choice(["income", "expense"], case_sensitive=False), help="New type")
@click.option("--amount", help="New amount")
@click.option("--category", help="New category name or ID")
@click.option("--date", "date_str", help="New date")
@click.option("--note", help="New note")
@click.pass_context
def edit_transaction(
    ctx,
    transaction_id: int,
    kind: str | None,
    amount: str | None,
    category: str | None,
    date_str: str | None,
    note: str | None,
):
    """Edit a transaction. Omitted fields keep their current value.

    The transaction is saved as a whole, so the combined type and category
    must still agree.
    """
    db = ctx.obj["db"]
    service = TransactionService(db)
    category_service = CategoryService(db)

    try:
        current = service.require_transaction(transaction_id)
        new_amount = parse_amount(amount) if amount is not None else current.amount
        new_date = current.occurred_on
        if date_str is not None:
            try:
                new_date = parse_date(date_str)
            except ValueError as e:
                click.echo(f"Error: Invalid date format: {e}", err=True)
                ctx.exit(1)
        new_category_id = (
            category_service.resolve_category(category).id
            if category is not None
            else current.category_id
        )
        service.replace_transaction(
            transaction_id,
            amount=new_amount,
            kind=kind if kind is not None else current.kind,
            category_id=new_category_id,
            occurred_on=new_date,
            note=note if note is not None else current.note,
        )
    except DomainError as e:
        handle_domain_error(ctx, e)
        return

    click.echo(f"Updated transaction {transaction_id}")


@transaction_group.command("note")
@click.argument("transaction_id", type=int)
@click.argument("note")
@click.pass_context
def set_note(ctx, transaction_id: int, note: str):
    """Replace the note of a transaction."""
    db = ctx.obj["db"]
    service = TransactionService(db)

    try:
        service.update_note(transaction_id, note)
    except DomainError as e:
        handle_domain_error(ctx, e)
        return
    click.echo(f"Updated note for transaction {transaction_id}")


@transaction_group.command("delete")
@click.argument("transaction_id", type=int)
@click.confirmation_option(prompt="Are you sure you want to delete this transaction?")
@click.pass_context
def delete_transaction(ctx, transaction_id: int):
    """Delete a transaction."""
    db = ctx.obj["db"]
    service = TransactionService(db)

    try:
        service.delete_transaction(transaction_id)
    except DomainError as e:
        handle_domain_error(ctx, e)
        return
    click.echo(f"Deleted transaction {transaction_id}")


def register_commands(cli):
    """Register transaction commands with main CLI."""
    cli.add_command(transaction_group, name="transaction")
