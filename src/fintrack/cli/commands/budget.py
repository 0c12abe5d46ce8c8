"""Budget commands."""

import calendar
from datetime import date

import click
from fintrack.cli.error_handling import handle_domain_error, report_fetch
from fintrack.cli.rendering import BUDGET_COLORS, heading, progress_bar, styled
from fintrack.domain.budget import BudgetService
from fintrack.domain.category import CategoryService
from fintrack.domain.errors import DomainError
from fintrack.domain.results import fetch
from fintrack.utils.amount_parser import parse_amount
from fintrack.utils.formatting import format_currency, format_percentage

STATE_LABELS = {
    "on_track": "On track",
    "warning": "Warning",
    "exceeded": "Exceeded",
}


def _month_option(command):
    command = click.option("--year", type=int, help="Year (default: current year)")(command)
    command = click.option(
        "--month", type=click.IntRange(1, 12), help="Month number 1-12 (default: current month)"
    )(command)
    return command


def _resolve_month(month: int | None, year: int | None) -> tuple[int, int]:
    today = date.today()
    return (month or today.month, year or today.year)


@click.group()
def budget_group():
    """Plan monthly budgets per category."""
    pass


@budget_group.command("set")
@click.option("--category", required=True, help="Expense category name or ID")
@click.option("--amount", required=True, help="Monthly limit (e.g., 500)")
@_month_option
@click.pass_context
def set_budget(ctx, category: str, amount: str, month: int | None, year: int | None):
    """Set a category's limit for a month, replacing any existing limit."""
    db = ctx.obj["db"]
    service = BudgetService(db)
    month, year = _resolve_month(month, year)

    try:
        limit = parse_amount(amount)
    except ValueError as e:
        click.echo(f"Error: Invalid amount format: {e}", err=True)
        ctx.exit(1)

    try:
        category_obj = CategoryService(db).resolve_category(category)
        budget_id = service.set_budget(category_obj.id, limit, month, year)
    except DomainError as e:
        handle_domain_error(ctx, e)
        return

    click.echo(
        f"Budget {budget_id}: {category_obj.name} limited to {format_currency(limit)} "
        f"for {calendar.month_name[month]} {year}"
    )


@budget_group.command("list")
@_month_option
@click.pass_context
def list_budgets(ctx, month: int | None, year: int | None):
    """Show budgets for a month with spending progress."""
    db = ctx.obj["db"]
    preferences = ctx.obj["preferences"]
    service = BudgetService(db)
    month, year = _resolve_month(month, year)

    try:
        result = fetch(
            lambda: service.month_overview(month, year),
            is_empty=lambda overview: not overview.statuses,
        )
    except DomainError as e:
        handle_domain_error(ctx, e)
        return

    title = f"{calendar.month_name[month]} {year}"
    if not report_fetch(result, "budgets", f"No budgets set for {title}."):
        return

    overview = result.value
    try:
        categories = CategoryService(db).categories_by_id()
    except DomainError as e:
        handle_domain_error(ctx, e)
        return

    heading(f"Budgets for {title}:", preferences)
    click.echo(
        f"Total: {format_currency(overview.total_spent)} of "
        f"{format_currency(overview.total_budget)} "
        f"({format_percentage(overview.total_percentage)} of budget used)"
    )
    click.echo()

    for status in overview.statuses:
        category = categories.get(status.limit.category_id)
        name = category.name if category else "Unknown"
        role = BUDGET_COLORS[status.state]
        label = styled(STATE_LABELS[status.state.value], role, preferences)
        remaining_text = (
            f"{format_currency(status.remaining)} left"
            if status.remaining >= 0
            else f"{format_currency(-status.remaining)} over"
        )
        click.echo(
            f"{status.limit.id:>5}  {name:<18.18} "
            f"{format_currency(status.spent):>12} / {format_currency(status.limit.amount):<12} "
            f"{progress_bar(status.percentage)} {format_percentage(status.percentage):>7}  "
            f"{label}  {styled(remaining_text, role, preferences)}"
        )


@budget_group.command("delete")
@click.argument("budget_id", type=int)
@click.pass_context
def delete_budget(ctx, budget_id: int):
    """Delete a budget."""
    db = ctx.obj["db"]
    service = BudgetService(db)

    try:
        service.delete_budget(budget_id)
    except DomainError as e:
        handle_domain_error(ctx, e)
        return
    click.echo(f"Deleted budget {budget_id}")


def register_commands(cli):
    """Register budget commands with main CLI."""
    cli.add_command(budget_group, name="budget")
