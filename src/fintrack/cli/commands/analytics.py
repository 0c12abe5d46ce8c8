"""Analytics command."""

import click
from fintrack.cli.date_filters import flags_from_kwargs, period_options, resolve_cli_date_range
from fintrack.cli.error_handling import handle_domain_error, report_fetch
from fintrack.cli.rendering import heading, money, progress_bar
from fintrack.domain.errors import DomainError
from fintrack.domain.summary import DEFAULT_SERIES_MONTHS, SummaryService
from fintrack.utils.formatting import format_currency, format_percentage


@click.command("analytics")
@click.option(
    "--months",
    type=click.IntRange(1, 60),
    default=DEFAULT_SERIES_MONTHS,
    show_default=True,
    help="Number of months in the trend",
)
@period_options
@click.pass_context
def analytics(ctx, months: int, start_date, end_date, **period_kwargs):
    """Show spending by category and the monthly income/expense trend.

    The category breakdown covers the current month unless a period is
    given; the trend ends at the period's last month.
    """
    db = ctx.obj["db"]
    preferences = ctx.obj["preferences"]

    start, end = resolve_cli_date_range(
        ctx,
        start_date=start_date,
        end_date=end_date,
        period_flags=flags_from_kwargs(period_kwargs),
    )
    try:
        view = SummaryService(db).analytics(
            period_start=start, period_end=end, month_count=months
        )
    except DomainError as e:
        handle_domain_error(ctx, e)

    heading("Spending by category:", preferences)
    if report_fetch(view.summary, "spending", "No transactions in this period."):
        summary = view.summary.value
        click.echo(
            f"{summary.period_start} to {summary.period_end}: "
            f"{format_currency(summary.total_expenses)} spent"
        )
        if not summary.by_category:
            click.echo("No expenses in this period.")
        for entry in summary.by_category:
            click.echo(
                f"  {entry.name:<18.18} {format_currency(entry.amount):>12} "
                f"{progress_bar(entry.percentage)} {format_percentage(entry.percentage):>7}"
            )

    heading(f"Last {months} month{'s' if months != 1 else ''}:", preferences)
    if report_fetch(view.series, "monthly trend", "No transactions in these months."):
        click.echo(f"  {'Month':<9} {'Income':>12} {'Expenses':>12} {'Savings':>12}")
        for month in view.series.value:
            click.echo(
                f"  {month.label} {month.year} {format_currency(month.income):>12} "
                f"{format_currency(month.expenses):>12} {money(month.savings, preferences):>12}"
            )
        avg_income, avg_expenses, avg_savings = view.averages
        click.echo()
        click.echo(f"  Avg. monthly income:   {format_currency(avg_income)}")
        click.echo(f"  Avg. monthly expenses: {format_currency(avg_expenses)}")
        click.echo(f"  Avg. monthly savings:  {money(avg_savings, preferences)}")


def register_commands(cli):
    """Register analytics command with main CLI."""
    cli.add_command(analytics)
