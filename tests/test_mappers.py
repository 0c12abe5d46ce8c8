"""Tests for database mappers."""

from datetime import date
from decimal import Decimal

from fintrack.database.models import (
    BillReminder as ORMBillReminder,
    BudgetLimit as ORMBudgetLimit,
    Category as ORMCategory,
    MoneyRecord as ORMMoneyRecord,
    Profile as ORMProfile,
)
from fintrack.database.mappers import (
    budget_to_domain,
    category_to_domain,
    profile_to_domain,
    record_to_domain,
    reminder_to_domain,
)
from fintrack.domain.entities import (
    BudgetLimit,
    Category,
    MoneyKind,
    MoneyRecord,
    Profile,
    RecurringBill,
)


class TestProfileMapper:
    def test_profile_to_domain(self):
        orm_profile = ORMProfile(id="local", full_name="Sam", currency="EUR", dark_mode=1)

        profile = profile_to_domain(orm_profile)

        assert isinstance(profile, Profile)
        assert profile.id == "local"
        assert profile.currency == "EUR"
        assert profile.dark_mode is True


class TestCategoryMapper:
    def test_kind_becomes_enum(self):
        orm_category = ORMCategory(
            id=3, owner_id="local", name="Food", kind="expense", color="#f59e0b", icon="utensils"
        )

        category = category_to_domain(orm_category)

        assert isinstance(category, Category)
        assert category.kind is MoneyKind.EXPENSE
        assert category.color == "#f59e0b"


class TestRecordMapper:
    def test_amount_becomes_decimal(self):
        orm_record = ORMMoneyRecord(
            id=7,
            owner_id="local",
            category_id=3,
            amount="12.50",
            kind="income",
            note=None,
            occurred_on=date(2024, 3, 5),
        )

        record = record_to_domain(orm_record)

        assert isinstance(record, MoneyRecord)
        assert record.amount == Decimal("12.50")
        assert record.kind is MoneyKind.INCOME
        assert record.note == ""


class TestBudgetMapper:
    def test_budget_to_domain(self):
        orm_budget = ORMBudgetLimit(
            id=2, owner_id="local", category_id=3, amount=Decimal("400"), month=3, year=2024
        )

        budget = budget_to_domain(orm_budget)

        assert isinstance(budget, BudgetLimit)
        assert (budget.month, budget.year) == (3, 2024)
        assert budget.amount == Decimal("400")


class TestReminderMapper:
    def test_reminder_without_category(self):
        orm_reminder = ORMBillReminder(
            id=4,
            owner_id="local",
            category_id=None,
            title="Rent",
            amount=Decimal("1200"),
            due_day=1,
            is_recurring=True,
            is_active=False,
        )

        reminder = reminder_to_domain(orm_reminder)

        assert isinstance(reminder, RecurringBill)
        assert reminder.category_id is None
        assert reminder.is_active is False
        assert reminder.is_recurring is True
