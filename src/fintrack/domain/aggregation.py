"""Period aggregation over money records.

Everything here is a pure function over records the caller already
fetched: nothing touches the database and inputs are never mutated.
"""

from collections.abc import Iterable, Mapping, Sequence
from datetime import date
from decimal import Decimal
from typing import Optional

from fintrack.domain.entities import (
    DEFAULT_CATEGORY_COLOR,
    Category,
    CategoryBreakdown,
    MoneyKind,
    MoneyRecord,
    MonthTotals,
    PeriodSummary,
)
from fintrack.utils.date_parser import MONTH_LABELS, month_bounds, shift_month

ZERO = Decimal("0")
HUNDRED = Decimal("100")
UNKNOWN_CATEGORY_NAME = "Other"


def records_in_period(
    records: Iterable[MoneyRecord], period_start: date, period_end: date
) -> list[MoneyRecord]:
    """Return records dated within [period_start, period_end] inclusive."""
    return [r for r in records if period_start <= r.occurred_on <= period_end]


def sum_by_kind(records: Iterable[MoneyRecord]) -> tuple[Decimal, Decimal]:
    """Return (income, expenses) totals for records."""
    income = ZERO
    expenses = ZERO
    for record in records:
        if record.kind == MoneyKind.INCOME:
            income += record.amount
        else:
            expenses += record.amount
    return income, expenses


def percentage_of(part: Decimal, whole: Decimal) -> Decimal:
    """Return part / whole * 100, or 0 when whole is 0."""
    if whole == 0:
        return ZERO
    return part / whole * HUNDRED


def category_breakdown(
    records: Iterable[MoneyRecord],
    categories: Optional[Mapping[int, Category]] = None,
) -> tuple[CategoryBreakdown, ...]:
    """Group expense records by category name.

    Entries are sorted by amount, highest first. Python's sort is stable
    and dicts keep insertion order, so equal amounts stay in the order the
    category was first seen.
    """
    categories = categories or {}
    totals: dict[str, Decimal] = {}
    colors: dict[str, str] = {}

    for record in records:
        if record.kind != MoneyKind.EXPENSE:
            continue
        category = categories.get(record.category_id)
        name = category.name if category else UNKNOWN_CATEGORY_NAME
        if name not in totals:
            totals[name] = ZERO
            colors[name] = category.color if category else DEFAULT_CATEGORY_COLOR
        totals[name] += record.amount

    total_expenses = sum(totals.values(), ZERO)
    entries = [
        CategoryBreakdown(
            name=name,
            amount=amount,
            color=colors[name],
            percentage=percentage_of(amount, total_expenses),
        )
        for name, amount in totals.items()
    ]
    entries.sort(key=lambda entry: entry.amount, reverse=True)
    return tuple(entries)


def aggregate(
    records: Iterable[MoneyRecord],
    period_start: date,
    period_end: date,
    categories: Optional[Mapping[int, Category]] = None,
) -> PeriodSummary:
    """Summarize records for a period.

    Args:
        records: Money records; those outside the period are ignored
        period_start: First day of the period (inclusive)
        period_end: Last day of the period (inclusive)
        categories: Optional mapping of category ID to Category used for
            names and colors in the breakdown

    Returns:
        PeriodSummary with totals, savings rate and expense breakdown
    """
    in_period = records_in_period(records, period_start, period_end)
    total_income, total_expenses = sum_by_kind(in_period)
    net_savings = total_income - total_expenses

    return PeriodSummary(
        period_start=period_start,
        period_end=period_end,
        total_income=total_income,
        total_expenses=total_expenses,
        net_savings=net_savings,
        savings_rate=percentage_of(net_savings, total_income),
        by_category=category_breakdown(in_period, categories),
        record_count=len(in_period),
    )


def monthly_series(
    records: Sequence[MoneyRecord], month_count: int, anchor_date: date
) -> tuple[MonthTotals, ...]:
    """Compute income/expense/savings for the last ``month_count`` months.

    The series ends at ``anchor_date``'s month and is ordered oldest first.
    """
    series = []
    for offset in range(month_count - 1, -1, -1):
        year, month = shift_month(anchor_date.year, anchor_date.month, -offset)
        first_day, last_day = month_bounds(year, month)
        income, expenses = sum_by_kind(
            records_in_period(records, first_day, last_day)
        )
        series.append(
            MonthTotals(
                year=year,
                month=month,
                label=MONTH_LABELS[month - 1],
                income=income,
                expenses=expenses,
                savings=income - expenses,
            )
        )
    return tuple(series)


def series_averages(
    series: Sequence[MonthTotals],
) -> tuple[Decimal, Decimal, Decimal]:
    """Return the mean (income, expenses, savings) across a monthly series."""
    if not series:
        return ZERO, ZERO, ZERO
    count = Decimal(len(series))
    income = sum((m.income for m in series), ZERO) / count
    expenses = sum((m.expenses for m in series), ZERO) / count
    savings = sum((m.savings for m in series), ZERO) / count
    return income, expenses, savings
