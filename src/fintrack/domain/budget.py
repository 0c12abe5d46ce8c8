"""Budget evaluation and budget domain service."""

from collections.abc import Iterable
from datetime import date
from decimal import Decimal
from typing import Optional

from fintrack.database.base import Database
from fintrack.domain import errors
from fintrack.domain.aggregation import ZERO, percentage_of, records_in_period
from fintrack.domain.entities import (
    BudgetLimit,
    BudgetOverview,
    BudgetState,
    BudgetStatus,
    MoneyKind,
    MoneyRecord,
)
from fintrack.utils.date_parser import month_bounds

WARNING_THRESHOLD = Decimal("80")
EXCEEDED_THRESHOLD = Decimal("100")


def classify_budget(percentage: Decimal) -> BudgetState:
    """Classify a spent percentage. The first matching threshold wins."""
    if percentage >= EXCEEDED_THRESHOLD:
        return BudgetState.EXCEEDED
    if percentage >= WARNING_THRESHOLD:
        return BudgetState.WARNING
    return BudgetState.ON_TRACK


def evaluate_budget(limit: BudgetLimit, spent: Decimal) -> BudgetStatus:
    """Compare actual spend against a budget limit.

    A zero-amount limit has no meaningful percentage; it reports 0% and is
    exceeded as soon as anything is spent.
    """
    remaining = limit.amount - spent
    if limit.amount == 0:
        state = BudgetState.EXCEEDED if spent > 0 else BudgetState.ON_TRACK
        return BudgetStatus(
            limit=limit, spent=spent, percentage=ZERO, remaining=remaining, state=state
        )

    percentage = spent / limit.amount * Decimal("100")
    return BudgetStatus(
        limit=limit,
        spent=spent,
        percentage=percentage,
        remaining=remaining,
        state=classify_budget(percentage),
    )


def spent_by_category(
    records: Iterable[MoneyRecord], period_start: date, period_end: date
) -> dict[int, Decimal]:
    """Sum expense records per category ID within a period."""
    spent: dict[int, Decimal] = {}
    for record in records_in_period(records, period_start, period_end):
        if record.kind != MoneyKind.EXPENSE:
            continue
        spent[record.category_id] = spent.get(record.category_id, ZERO) + record.amount
    return spent


def build_overview(
    limits: Iterable[BudgetLimit], records: Iterable[MoneyRecord], month: int, year: int
) -> BudgetOverview:
    """Evaluate every limit of one month against that month's records."""
    first_day, last_day = month_bounds(year, month)
    spent = spent_by_category(records, first_day, last_day)

    statuses = tuple(
        evaluate_budget(limit, spent.get(limit.category_id, ZERO)) for limit in limits
    )
    total_budget = sum((s.limit.amount for s in statuses), ZERO)
    total_spent = sum((s.spent for s in statuses), ZERO)
    return BudgetOverview(
        month=month,
        year=year,
        statuses=statuses,
        total_budget=total_budget,
        total_spent=total_spent,
        total_percentage=percentage_of(total_spent, total_budget),
    )


def validate_month_year(month: int, year: int) -> tuple[int, int]:
    """Check a budget's calendar month and year."""
    if not 1 <= month <= 12:
        raise errors.ValidationError(f"Month must be between 1 and 12, got {month}")
    if year < 2000:
        raise errors.ValidationError(f"Year must be 2000 or later, got {year}")
    return month, year


class BudgetService:
    """Service for managing monthly budget limits."""

    def __init__(self, db: Database):
        """Initialize budget service.

        Args:
            db: Database instance
        """
        self.db = db

    def set_budget(
        self, category_id: int, amount: Decimal, month: int, year: int
    ) -> int:
        """Set the limit for a category in one month, replacing any existing one.

        Raises:
            ValidationError: If amount, month or year is out of range, or the
                category is not an expense category
            NotFoundError: If the category doesn't exist
        """
        validate_month_year(month, year)
        if amount < 0:
            raise errors.ValidationError(f"Amount must not be negative: {amount}")

        category = self.db.get_category(category_id)
        if category is None:
            raise errors.NotFoundError(errors.category_not_found(category_id))
        if category.kind != MoneyKind.EXPENSE:
            raise errors.ValidationError(
                f"Budgets apply to expense categories; '{category.name}' is income"
            )

        return self.db.upsert_budget(category_id, amount, month, year)

    def get_budget(self, budget_id: int) -> Optional[BudgetLimit]:
        """Get budget limit by ID."""
        return self.db.get_budget(budget_id)

    def list_budgets(self, month: int, year: int) -> list[BudgetLimit]:
        """List budget limits for one month."""
        validate_month_year(month, year)
        return self.db.list_budgets(month, year)

    def delete_budget(self, budget_id: int) -> None:
        """Delete a budget limit."""
        self.db.delete_budget(budget_id)

    def month_overview(self, month: int, year: int) -> BudgetOverview:
        """Evaluate all limits of a month against that month's expenses."""
        validate_month_year(month, year)
        limits = self.db.list_budgets(month, year)
        first_day, last_day = month_bounds(year, month)
        records = self.db.list_records(
            start_date=first_day, end_date=last_day, kind=MoneyKind.EXPENSE
        )
        return build_overview(limits, records, month, year)
