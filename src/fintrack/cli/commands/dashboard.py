"""Dashboard command."""

import click
from fintrack.cli.error_handling import report_fetch
from fintrack.cli.rendering import heading, money, record_line, styled
from fintrack.domain.summary import SummaryService
from fintrack.utils.formatting import format_currency, format_percentage


@click.command("dashboard")
@click.pass_context
def dashboard(ctx):
    """Show this month's totals, recent transactions and upcoming bills."""
    db = ctx.obj["db"]
    preferences = ctx.obj["preferences"]
    view = SummaryService(db).dashboard()

    greeting = f"Welcome back, {preferences.full_name}" if preferences.full_name else "Dashboard"
    heading(greeting, preferences)
    click.echo(f"{view.period_start:%B %Y}")

    if view.upcoming_bills.ok:
        count = view.upcoming_bills.value
        click.echo(
            styled(
                f"{count} bill{'s' if count != 1 else ''} due in the next 7 days",
                "warning",
                preferences,
            )
        )
    elif view.upcoming_bills.failed:
        click.echo(f"Could not load reminders: {view.upcoming_bills.error}", err=True)
    if view.categories.failed:
        click.echo(f"Could not load categories: {view.categories.error}", err=True)

    heading("This month:", preferences)
    summary_result = view.summary
    if report_fetch(summary_result, "summary", "No transactions this month yet."):
        summary = summary_result.value
        click.echo(f"  Income:    {money(summary.total_income, preferences, 'income')}")
        click.echo(f"  Expenses:  {money(summary.total_expenses, preferences, 'expense')}")
        click.echo(f"  Savings:   {money(summary.net_savings, preferences)}")
        if summary.total_income > 0:
            click.echo(f"  {format_percentage(summary.savings_rate)} saved")

    heading("Recent transactions:", preferences)
    if report_fetch(view.recent, "recent transactions", "No transactions yet."):
        for record in view.recent.value:
            click.echo(record_line(record, view.categories.value or {}, preferences))

    if summary_result.ok and summary_result.value.by_category:
        top = summary_result.value.by_category[0]
        click.echo()
        click.echo(
            f"Top spending: {top.name} {format_currency(top.amount)} "
            f"({format_percentage(top.percentage)})"
        )


def register_commands(cli):
    """Register dashboard command with main CLI."""
    cli.add_command(dashboard)
