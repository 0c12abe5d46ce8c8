"""Domain model entities for fintrack.

These are pure data classes representing business concepts, independent of
database schema. Derived values such as budget status or bill urgency live
in the result types below and are never persisted.
"""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from enum import Enum
from typing import Optional


DEFAULT_CATEGORY_COLOR = "#6366f1"
DEFAULT_CATEGORY_ICON = "circle"
DEFAULT_CURRENCY = "USD"


class MoneyKind(str, Enum):
    """Direction of a money record or category."""

    INCOME = "income"
    EXPENSE = "expense"


class BudgetState(str, Enum):
    """Budget status classification."""

    ON_TRACK = "on_track"
    WARNING = "warning"
    EXCEEDED = "exceeded"


class Urgency(str, Enum):
    """Due-date proximity classification for a recurring bill."""

    INACTIVE = "inactive"
    DUE_TODAY = "due_today"
    IMMINENT = "imminent"
    UPCOMING = "upcoming"
    SCHEDULED = "scheduled"


@dataclass(frozen=True)
class Profile:
    """Owner profile entity."""

    id: str
    full_name: str = ""
    currency: str = DEFAULT_CURRENCY
    dark_mode: bool = False


@dataclass(frozen=True)
class Category:
    """Category domain entity."""

    id: int
    name: str
    kind: MoneyKind
    color: str = DEFAULT_CATEGORY_COLOR
    icon: str = DEFAULT_CATEGORY_ICON


@dataclass(frozen=True)
class MoneyRecord:
    """Income or expense entry."""

    id: int
    amount: Decimal
    kind: MoneyKind
    category_id: int
    occurred_on: date
    note: str = ""


@dataclass(frozen=True)
class BudgetLimit:
    """Per-category spending cap for one calendar month."""

    id: int
    category_id: int
    amount: Decimal
    month: int
    year: int


@dataclass(frozen=True)
class RecurringBill:
    """Bill reminder with a monthly due day."""

    id: int
    title: str
    amount: Decimal
    due_day: int
    category_id: Optional[int] = None
    is_recurring: bool = True
    is_active: bool = True


@dataclass(frozen=True)
class CategoryBreakdown:
    """Expense total for one category within a period."""

    name: str
    amount: Decimal
    color: str
    percentage: Decimal


@dataclass(frozen=True)
class PeriodSummary:
    """Aggregated totals and category breakdown for a date range."""

    period_start: date
    period_end: date
    total_income: Decimal
    total_expenses: Decimal
    net_savings: Decimal
    savings_rate: Decimal
    by_category: tuple[CategoryBreakdown, ...] = ()
    record_count: int = 0

    def category(self, name: str) -> Optional[CategoryBreakdown]:
        """Return the breakdown entry for a category name, if present."""
        for entry in self.by_category:
            if entry.name == name:
                return entry
        return None


@dataclass(frozen=True)
class MonthTotals:
    """Income and expense totals for one calendar month."""

    year: int
    month: int
    label: str
    income: Decimal
    expenses: Decimal
    savings: Decimal


@dataclass(frozen=True)
class BudgetStatus:
    """Evaluated state of a budget limit against actual spend."""

    limit: BudgetLimit
    spent: Decimal
    percentage: Decimal
    remaining: Decimal
    state: BudgetState


@dataclass(frozen=True)
class BudgetOverview:
    """All budget statuses for one month plus totals."""

    month: int
    year: int
    statuses: tuple[BudgetStatus, ...] = ()
    total_budget: Decimal = Decimal("0")
    total_spent: Decimal = Decimal("0")
    total_percentage: Decimal = Decimal("0")


@dataclass(frozen=True)
class BillSchedule:
    """A recurring bill with its derived due-date state."""

    bill: RecurringBill
    days_until_due: int
    urgency: Urgency
    label: str


@dataclass(frozen=True)
class Preferences:
    """Per-session display preferences loaded from the owner's profile."""

    full_name: str = ""
    currency: str = DEFAULT_CURRENCY
    dark_mode: bool = False
