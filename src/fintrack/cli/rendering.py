"""Terminal rendering helpers.

Every helper takes the session's Preferences explicitly; there is no
module-level theme state.
"""

from decimal import Decimal

import click

from fintrack.domain.entities import (
    BudgetState,
    Category,
    MoneyKind,
    MoneyRecord,
    Preferences,
    Urgency,
)
from fintrack.utils.formatting import format_currency

LIGHT_PALETTE = {
    "income": "green",
    "expense": "red",
    "warning": "yellow",
    "info": "blue",
    "muted": "white",
    "heading": "black",
}

DARK_PALETTE = {
    "income": "bright_green",
    "expense": "bright_red",
    "warning": "bright_yellow",
    "info": "bright_cyan",
    "muted": "bright_black",
    "heading": "bright_white",
}

BUDGET_COLORS = {
    BudgetState.ON_TRACK: "income",
    BudgetState.WARNING: "warning",
    BudgetState.EXCEEDED: "expense",
}

URGENCY_COLORS = {
    Urgency.INACTIVE: "muted",
    Urgency.DUE_TODAY: "expense",
    Urgency.IMMINENT: "warning",
    Urgency.UPCOMING: "info",
    Urgency.SCHEDULED: "income",
}


def palette(preferences: Preferences) -> dict[str, str]:
    """Return the color palette for the session's theme."""
    return DARK_PALETTE if preferences.dark_mode else LIGHT_PALETTE


def styled(text: str, role: str, preferences: Preferences, bold: bool = False) -> str:
    """Style text with the palette color for a role."""
    return click.style(text, fg=palette(preferences)[role], bold=bold)


def heading(text: str, preferences: Preferences) -> None:
    """Print a section heading."""
    click.echo()
    click.echo(styled(text, "heading", preferences, bold=True))


def signed_amount(record: MoneyRecord, preferences: Preferences) -> str:
    """Render a record's amount with a +/- sign in its kind's color."""
    if record.kind == MoneyKind.INCOME:
        return styled(f"+{format_currency(record.amount)}", "income", preferences)
    return styled(f"-{format_currency(record.amount)}", "expense", preferences)


def money(amount: Decimal, preferences: Preferences, role: str | None = None) -> str:
    """Render an amount, colored by sign unless a role is given."""
    if role is None:
        role = "expense" if amount < 0 else "income"
    return styled(format_currency(amount), role, preferences)


def record_line(
    record: MoneyRecord, categories: dict[int, Category], preferences: Preferences
) -> str:
    """Render one transaction as a table row."""
    category = categories.get(record.category_id)
    category_name = category.name if category else "Uncategorized"
    note = record.note or ""
    return (
        f"{record.id:>5}  {record.occurred_on.isoformat()}  "
        f"{category_name:<18.18} {note:<30.30} {signed_amount(record, preferences):>14}"
    )


def progress_bar(percentage: Decimal, width: int = 20) -> str:
    """Render a percentage as a fixed-width bar, capped at 100%."""
    filled = int(min(percentage, Decimal("100")) / Decimal("100") * width)
    return "[" + "#" * filled + "-" * (width - filled) + "]"
