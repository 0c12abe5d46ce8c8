"""Mapper functions to convert between domain models and SQLAlchemy models.

This layer isolates the conversion logic, so string columns become enums
and numeric columns become Decimals before anything leaves the store.
"""

from decimal import Decimal

from fintrack.domain import entities as domain
from fintrack.database.models import (
    Profile as ORMProfile,
    Category as ORMCategory,
    MoneyRecord as ORMMoneyRecord,
    BudgetLimit as ORMBudgetLimit,
    BillReminder as ORMBillReminder,
)


def profile_to_domain(orm_profile: ORMProfile) -> domain.Profile:
    """Convert SQLAlchemy Profile model to domain Profile entity."""
    return domain.Profile(
        id=orm_profile.id,
        full_name=orm_profile.full_name,
        currency=orm_profile.currency,
        dark_mode=bool(orm_profile.dark_mode),
    )


def category_to_domain(orm_category: ORMCategory) -> domain.Category:
    """Convert SQLAlchemy Category model to domain Category entity."""
    return domain.Category(
        id=orm_category.id,
        name=orm_category.name,
        kind=domain.MoneyKind(orm_category.kind),
        color=orm_category.color,
        icon=orm_category.icon,
    )


def record_to_domain(orm_record: ORMMoneyRecord) -> domain.MoneyRecord:
    """Convert SQLAlchemy MoneyRecord model to domain MoneyRecord entity."""
    return domain.MoneyRecord(
        id=orm_record.id,
        amount=Decimal(orm_record.amount),
        kind=domain.MoneyKind(orm_record.kind),
        category_id=orm_record.category_id,
        occurred_on=orm_record.occurred_on,
        note=orm_record.note or "",
    )


def budget_to_domain(orm_budget: ORMBudgetLimit) -> domain.BudgetLimit:
    """Convert SQLAlchemy BudgetLimit model to domain BudgetLimit entity."""
    return domain.BudgetLimit(
        id=orm_budget.id,
        category_id=orm_budget.category_id,
        amount=Decimal(orm_budget.amount),
        month=orm_budget.month,
        year=orm_budget.year,
    )


def reminder_to_domain(orm_reminder: ORMBillReminder) -> domain.RecurringBill:
    """Convert SQLAlchemy BillReminder model to domain RecurringBill entity."""
    return domain.RecurringBill(
        id=orm_reminder.id,
        title=orm_reminder.title,
        amount=Decimal(orm_reminder.amount),
        due_day=orm_reminder.due_day,
        category_id=orm_reminder.category_id,
        is_recurring=bool(orm_reminder.is_recurring),
        is_active=bool(orm_reminder.is_active),
    )
