"""Abstract database interface.

Every implementation is bound to a single owner: reads only ever see that
owner's rows and writes are always stamped with that owner.
"""

from abc import ABC, abstractmethod
from typing import Optional
from datetime import date
from decimal import Decimal

from fintrack.domain.entities import (
    BudgetLimit,
    Category,
    MoneyKind,
    MoneyRecord,
    Profile,
    RecurringBill,
)


class Database(ABC):
    """Abstract owner-scoped database interface for fintrack."""

    owner_id: str

    @abstractmethod
    def connect(self) -> None:
        """Connect to the database."""
        pass

    @abstractmethod
    def disconnect(self) -> None:
        """Disconnect from the database."""
        pass

    @abstractmethod
    def initialize_schema(self) -> None:
        """Initialize database schema and the owner's profile row."""
        pass

    # Profile operations
    @abstractmethod
    def get_profile(self) -> Profile:
        """Get the owner's profile."""
        pass

    @abstractmethod
    def update_profile(
        self,
        full_name: Optional[str] = None,
        currency: Optional[str] = None,
        dark_mode: Optional[bool] = None,
    ) -> Profile:
        """Update profile fields that are not None. Returns the new profile."""
        pass

    # Category operations
    @abstractmethod
    def create_category(
        self, name: str, kind: MoneyKind, color: str, icon: str
    ) -> int:
        """Create a category. Returns category ID."""
        pass

    @abstractmethod
    def get_category(self, category_id: int) -> Optional[Category]:
        """Get category by ID."""
        pass

    @abstractmethod
    def get_category_by_name(self, name: str) -> Optional[Category]:
        """Get category by name (case-insensitive)."""
        pass

    @abstractmethod
    def list_categories(self, kind: Optional[MoneyKind] = None) -> list[Category]:
        """List categories ordered by name, optionally filtered by kind."""
        pass

    @abstractmethod
    def update_category(
        self, category_id: int, name: str, kind: MoneyKind, color: str, icon: str
    ) -> None:
        """Replace a category's fields."""
        pass

    @abstractmethod
    def delete_category(self, category_id: int) -> None:
        """Delete a category.

        Fails with DependencyError while money records reference it. Bill
        reminders referencing it lose the reference; budgets for it are
        deleted.
        """
        pass

    @abstractmethod
    def count_category_records(self, category_id: int) -> int:
        """Count money records filed under a category."""
        pass

    # Money record operations
    @abstractmethod
    def create_record(
        self,
        amount: Decimal,
        kind: MoneyKind,
        category_id: int,
        occurred_on: date,
        note: str = "",
    ) -> int:
        """Create a money record. Returns record ID."""
        pass

    @abstractmethod
    def get_record(self, record_id: int) -> Optional[MoneyRecord]:
        """Get money record by ID."""
        pass

    @abstractmethod
    def update_record(
        self,
        record_id: int,
        amount: Decimal,
        kind: MoneyKind,
        category_id: int,
        occurred_on: date,
        note: str,
    ) -> None:
        """Replace all fields of a money record."""
        pass

    @abstractmethod
    def update_record_note(self, record_id: int, note: str) -> None:
        """Update the note of a money record."""
        pass

    @abstractmethod
    def delete_record(self, record_id: int) -> None:
        """Delete a money record."""
        pass

    @abstractmethod
    def list_records(
        self,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
        kind: Optional[MoneyKind] = None,
        category_id: Optional[int] = None,
        limit: Optional[int] = None,
    ) -> list[MoneyRecord]:
        """List money records, newest first, with optional filters.

        Args:
            start_date: Optional start date filter (inclusive)
            end_date: Optional end date filter (inclusive)
            kind: Optional income/expense filter
            category_id: Optional category ID filter
            limit: Optional maximum number of records
        """
        pass

    # Budget operations
    @abstractmethod
    def upsert_budget(
        self, category_id: int, amount: Decimal, month: int, year: int
    ) -> int:
        """Create or replace the budget for (category, month, year). Returns budget ID."""
        pass

    @abstractmethod
    def get_budget(self, budget_id: int) -> Optional[BudgetLimit]:
        """Get budget limit by ID."""
        pass

    @abstractmethod
    def list_budgets(self, month: int, year: int) -> list[BudgetLimit]:
        """List budget limits for one month."""
        pass

    @abstractmethod
    def delete_budget(self, budget_id: int) -> None:
        """Delete a budget limit."""
        pass

    # Bill reminder operations
    @abstractmethod
    def create_reminder(
        self,
        title: str,
        amount: Decimal,
        due_day: int,
        category_id: Optional[int] = None,
        is_recurring: bool = True,
    ) -> int:
        """Create an active bill reminder. Returns reminder ID."""
        pass

    @abstractmethod
    def get_reminder(self, reminder_id: int) -> Optional[RecurringBill]:
        """Get bill reminder by ID."""
        pass

    @abstractmethod
    def list_reminders(self, active_only: bool = False) -> list[RecurringBill]:
        """List bill reminders ordered by due day."""
        pass

    @abstractmethod
    def set_reminder_active(self, reminder_id: int, is_active: bool) -> None:
        """Set the active flag of a bill reminder."""
        pass

    @abstractmethod
    def delete_reminder(self, reminder_id: int) -> None:
        """Delete a bill reminder."""
        pass
