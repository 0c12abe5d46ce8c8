"""Bill reminder commands."""

import click
from fintrack.cli.error_handling import handle_domain_error, report_fetch
from fintrack.cli.rendering import URGENCY_COLORS, heading, styled
from fintrack.domain.category import CategoryService
from fintrack.domain.entities import Urgency
from fintrack.domain.errors import DomainError
from fintrack.domain.reminder import ReminderService
from fintrack.domain.results import fetch
from fintrack.utils.amount_parser import parse_amount
from fintrack.utils.formatting import format_currency, ordinal_suffix

DUE_SOON = (Urgency.DUE_TODAY, Urgency.IMMINENT, Urgency.UPCOMING)


@click.group()
def reminder_group():
    """Manage bill reminders."""
    pass


@reminder_group.command("add")
@click.option("--title", required=True, help="Bill name")
@click.option("--amount", required=True, help="Bill amount")
@click.option("--due-day", required=True, type=int, help="Day of month the bill is due (1-31)")
@click.option("--category", help="Category name or ID")
@click.option("--one-time", is_flag=True, help="Bill does not repeat monthly")
@click.pass_context
def add_reminder(
    ctx, title: str, amount: str, due_day: int, category: str | None, one_time: bool
):
    """Add a bill reminder."""
    db = ctx.obj["db"]
    service = ReminderService(db)

    try:
        bill_amount = parse_amount(amount)
    except ValueError as e:
        click.echo(f"Error: Invalid amount format: {e}", err=True)
        ctx.exit(1)

    try:
        category_id = None
        if category:
            category_id = CategoryService(db).resolve_category(category).id
        reminder_id = service.create_reminder(
            title=title,
            amount=bill_amount,
            due_day=due_day,
            category_id=category_id,
            is_recurring=not one_time,
        )
    except DomainError as e:
        handle_domain_error(ctx, e)
        return

    click.echo(
        f"Created reminder {reminder_id}: {title} ({format_currency(bill_amount)}) "
        f"due on the {due_day}{ordinal_suffix(due_day)}"
    )


@reminder_group.command("list")
@click.option("--upcoming", is_flag=True, help="Only show active bills due within a week")
@click.pass_context
def list_reminders(ctx, upcoming: bool):
    """List bill reminders with their due status."""
    db = ctx.obj["db"]
    preferences = ctx.obj["preferences"]
    service = ReminderService(db)

    loader = service.upcoming if upcoming else service.schedule
    result = fetch(loader)
    empty_message = "No bills due this week." if upcoming else "No reminders set up yet."
    if not report_fetch(result, "reminders", empty_message):
        return

    due_soon = sum(1 for s in result.value if s.urgency in DUE_SOON)
    if due_soon:
        click.echo(
            styled(
                f"You have {due_soon} bill{'s' if due_soon > 1 else ''} due in the next 7 days",
                "warning",
                preferences,
            )
        )

    try:
        categories = CategoryService(db).categories_by_id()
    except DomainError as e:
        handle_domain_error(ctx, e)
        return

    heading("Bill reminders:", preferences)
    for schedule in result.value:
        bill = schedule.bill
        category = categories.get(bill.category_id) if bill.category_id else None
        badge = styled(schedule.label, URGENCY_COLORS[schedule.urgency], preferences)
        recurring = "monthly" if bill.is_recurring else "one-time"
        click.echo(
            f"{bill.id:>5}  {bill.title:<20.20} {format_currency(bill.amount):>12}  "
            f"{(category.name if category else '-'):<14.14} {recurring:<9} {badge}"
        )


@reminder_group.command("toggle")
@click.argument("reminder_id", type=int)
@click.pass_context
def toggle_reminder(ctx, reminder_id: int):
    """Activate or deactivate a reminder."""
    db = ctx.obj["db"]
    service = ReminderService(db)

    try:
        is_active = service.toggle_active(reminder_id)
    except DomainError as e:
        handle_domain_error(ctx, e)
        return
    click.echo(f"Reminder {reminder_id} is now {'active' if is_active else 'inactive'}")


@reminder_group.command("delete")
@click.argument("reminder_id", type=int)
@click.confirmation_option(prompt="Are you sure you want to delete this reminder?")
@click.pass_context
def delete_reminder(ctx, reminder_id: int):
    """Delete a reminder."""
    db = ctx.obj["db"]
    service = ReminderService(db)

    try:
        service.delete_reminder(reminder_id)
    except DomainError as e:
        handle_domain_error(ctx, e)
        return
    click.echo(f"Deleted reminder {reminder_id}")


def register_commands(cli):
    """Register reminder commands with main CLI."""
    cli.add_command(reminder_group, name="reminder")
