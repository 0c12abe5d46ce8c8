"""Summary domain service backing the dashboard and analytics views."""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Optional

from fintrack.database.base import Database
from fintrack.domain import errors
from fintrack.domain.aggregation import aggregate, monthly_series, series_averages
from fintrack.domain.entities import (
    Category,
    MoneyRecord,
    MonthTotals,
    PeriodSummary,
)
from fintrack.domain.reminder import upcoming_count
from fintrack.domain.results import FetchResult, fetch
from fintrack.utils.date_parser import month_bounds, shift_month

RECENT_LIMIT = 5
DEFAULT_SERIES_MONTHS = 6


@dataclass(frozen=True)
class DashboardView:
    """Current-month figures. Each part is loaded independently."""

    period_start: date
    period_end: date
    summary: FetchResult[PeriodSummary]
    recent: FetchResult[list[MoneyRecord]]
    upcoming_bills: FetchResult[int]
    categories: FetchResult[dict[int, Category]]


@dataclass(frozen=True)
class AnalyticsView:
    """Category breakdown for a period plus a monthly trend series."""

    summary: FetchResult[PeriodSummary]
    series: FetchResult[tuple[MonthTotals, ...]]
    averages: tuple[Decimal, Decimal, Decimal]


class SummaryService:
    """Service for building summary views."""

    def __init__(self, db: Database):
        """Initialize summary service.

        Args:
            db: Database instance
        """
        self.db = db

    def _category_lookup(self) -> dict[int, Category]:
        return {c.id: c for c in self.db.list_categories()}

    def period_summary(
        self,
        period_start: date,
        period_end: date,
        categories: Optional[dict[int, Category]] = None,
    ) -> FetchResult[PeriodSummary]:
        """Load a period's records and aggregate them.

        The result is EMPTY when the period holds no records and ERROR when
        the store could not be read, including the category lookup.
        """

        def load() -> PeriodSummary:
            lookup = categories if categories is not None else self._category_lookup()
            records = self.db.list_records(start_date=period_start, end_date=period_end)
            return aggregate(records, period_start, period_end, lookup)

        return fetch(load, is_empty=lambda summary: summary.record_count == 0)

    def monthly_trend(
        self, month_count: int = DEFAULT_SERIES_MONTHS, anchor_date: Optional[date] = None
    ) -> FetchResult[tuple[MonthTotals, ...]]:
        """Load records covering the last ``month_count`` months and build the series."""
        anchor_date = anchor_date or date.today()
        first_year, first_month = shift_month(
            anchor_date.year, anchor_date.month, -(month_count - 1)
        )
        series_start, _ = month_bounds(first_year, first_month)
        _, series_end = month_bounds(anchor_date.year, anchor_date.month)

        def load() -> tuple[MonthTotals, ...]:
            records = self.db.list_records(start_date=series_start, end_date=series_end)
            return monthly_series(records, month_count, anchor_date)

        return fetch(
            load,
            is_empty=lambda series: all(m.income == 0 and m.expenses == 0 for m in series),
        )

    def dashboard(self, today: Optional[date] = None) -> DashboardView:
        """Build the current-month dashboard."""
        today = today or date.today()
        period_start, period_end = month_bounds(today.year, today.month)
        categories = fetch(self._category_lookup)

        # Recent records render as "Uncategorized" without the lookup.
        if categories.failed:
            summary = FetchResult.failure(categories.error)
        else:
            summary = self.period_summary(period_start, period_end, categories.value or {})

        return DashboardView(
            period_start=period_start,
            period_end=period_end,
            summary=summary,
            recent=fetch(
                lambda: self.db.list_records(
                    start_date=period_start, end_date=period_end, limit=RECENT_LIMIT
                )
            ),
            upcoming_bills=fetch(
                lambda: upcoming_count(self.db.list_reminders(active_only=True), today),
                is_empty=lambda count: count == 0,
            ),
            categories=categories,
        )

    def analytics(
        self,
        period_start: Optional[date] = None,
        period_end: Optional[date] = None,
        month_count: int = DEFAULT_SERIES_MONTHS,
        today: Optional[date] = None,
    ) -> AnalyticsView:
        """Build the analytics view.

        Args:
            period_start: Start of the breakdown period. Defaults to the
                first day of ``period_end``'s month, or of the current month
                when neither bound is given
            period_end: End of the breakdown period. Defaults to the last
                day of ``period_start``'s month, or of the current month
                when neither bound is given
            month_count: Number of months in the trend series
            today: Reference date for defaults

        Raises:
            ValidationError: If the period starts after it ends
        """
        if period_start is None and period_end is None:
            today = today or date.today()
            period_start, period_end = month_bounds(today.year, today.month)
        elif period_start is None:
            period_start, _ = month_bounds(period_end.year, period_end.month)
        elif period_end is None:
            _, period_end = month_bounds(period_start.year, period_start.month)

        if period_start > period_end:
            raise errors.ValidationError(
                f"Start date {period_start} is after end date {period_end}"
            )

        series = self.monthly_trend(month_count, anchor_date=period_end)
        return AnalyticsView(
            summary=self.period_summary(period_start, period_end),
            series=series,
            averages=series_averages(series.value or ()),
        )
