"""Display formatting helpers."""

from decimal import Decimal


def format_currency(amount: Decimal | int | float) -> str:
    """Format an amount using the fixed en-US dollar convention."""
    amount = Decimal(amount)
    if amount < 0:
        return f"-${-amount:,.2f}"
    return f"${amount:,.2f}"


def format_percentage(value: Decimal | int | float) -> str:
    """Format a percentage with one decimal place."""
    return f"{Decimal(value):.1f}%"


def ordinal_suffix(day: int) -> str:
    """Return the English ordinal suffix for a day of month."""
    if 11 <= day <= 13:
        return "th"
    return {1: "st", 2: "nd", 3: "rd"}.get(day % 10, "th")
