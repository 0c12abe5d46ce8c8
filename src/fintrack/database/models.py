"""SQLAlchemy models for fintrack database."""

from datetime import datetime, date, UTC
from sqlalchemy import (
    Column,
    Integer,
    String,
    ForeignKey,
    DateTime,
    Date,
    Numeric,
    Boolean,
    CheckConstraint,
    Index,
    UniqueConstraint,
    create_engine,
    event,
)
from sqlalchemy.orm import declarative_base, sessionmaker, Session

Base = declarative_base()

KIND_CHECK = "kind IN ('income', 'expense')"


class Profile(Base):
    """Owner profile model. Every other row belongs to exactly one profile."""

    __tablename__ = "profiles"

    id = Column(String, primary_key=True)
    full_name = Column(String, nullable=False, default="")
    currency = Column(String, nullable=False, default="USD")
    dark_mode = Column(Boolean, nullable=False, default=False)
    created_at = Column(DateTime, default=lambda: datetime.now(UTC), nullable=False)
    updated_at = Column(DateTime, default=lambda: datetime.now(UTC), nullable=False)


class Category(Base):
    """Income or expense category model."""

    __tablename__ = "categories"

    id = Column(Integer, primary_key=True)
    owner_id = Column(String, ForeignKey("profiles.id", ondelete="CASCADE"), nullable=False)
    name = Column(String, nullable=False)
    kind = Column(String, nullable=False)
    icon = Column(String, nullable=False, default="circle")
    color = Column(String, nullable=False, default="#6366f1")
    created_at = Column(DateTime, default=lambda: datetime.now(UTC), nullable=False)

    __table_args__ = (
        CheckConstraint(KIND_CHECK, name="ck_categories_kind"),
        UniqueConstraint("owner_id", "name", name="uq_categories_owner_name"),
        Index("idx_categories_owner_id", "owner_id"),
    )


class MoneyRecord(Base):
    """Income or expense transaction model."""

    __tablename__ = "transactions"

    id = Column(Integer, primary_key=True)
    owner_id = Column(String, ForeignKey("profiles.id", ondelete="CASCADE"), nullable=False)
    category_id = Column(
        Integer, ForeignKey("categories.id", ondelete="RESTRICT"), nullable=False
    )
    amount = Column(Numeric(12, 2), nullable=False)
    kind = Column(String, nullable=False)
    note = Column(String, nullable=False, default="")
    occurred_on = Column(Date, nullable=False, default=date.today)
    created_at = Column(DateTime, default=lambda: datetime.now(UTC), nullable=False)

    __table_args__ = (
        CheckConstraint("amount >= 0", name="ck_transactions_amount"),
        CheckConstraint(KIND_CHECK, name="ck_transactions_kind"),
        Index("idx_transactions_owner_id", "owner_id"),
        Index("idx_transactions_occurred_on", "occurred_on"),
        Index("idx_transactions_category_id", "category_id"),
    )


class BudgetLimit(Base):
    """Monthly per-category budget model."""

    __tablename__ = "budgets"

    id = Column(Integer, primary_key=True)
    owner_id = Column(String, ForeignKey("profiles.id", ondelete="CASCADE"), nullable=False)
    category_id = Column(
        Integer, ForeignKey("categories.id", ondelete="CASCADE"), nullable=False
    )
    amount = Column(Numeric(12, 2), nullable=False)
    month = Column(Integer, nullable=False)
    year = Column(Integer, nullable=False)
    created_at = Column(DateTime, default=lambda: datetime.now(UTC), nullable=False)

    __table_args__ = (
        CheckConstraint("amount >= 0", name="ck_budgets_amount"),
        CheckConstraint("month >= 1 AND month <= 12", name="ck_budgets_month"),
        CheckConstraint("year >= 2000", name="ck_budgets_year"),
        UniqueConstraint(
            "owner_id", "category_id", "month", "year", name="uq_budgets_owner_category_period"
        ),
        Index("idx_budgets_owner_id", "owner_id"),
        Index("idx_budgets_month_year", "month", "year"),
    )


class BillReminder(Base):
    """Recurring bill reminder model."""

    __tablename__ = "bill_reminders"

    id = Column(Integer, primary_key=True)
    owner_id = Column(String, ForeignKey("profiles.id", ondelete="CASCADE"), nullable=False)
    category_id = Column(
        Integer, ForeignKey("categories.id", ondelete="SET NULL"), nullable=True
    )
    title = Column(String, nullable=False)
    amount = Column(Numeric(12, 2), nullable=False)
    due_day = Column(Integer, nullable=False)
    is_recurring = Column(Boolean, nullable=False, default=True)
    is_active = Column(Boolean, nullable=False, default=True)
    created_at = Column(DateTime, default=lambda: datetime.now(UTC), nullable=False)

    __table_args__ = (
        CheckConstraint("amount >= 0", name="ck_bill_reminders_amount"),
        CheckConstraint("due_day >= 1 AND due_day <= 31", name="ck_bill_reminders_due_day"),
        Index("idx_bill_reminders_owner_id", "owner_id"),
    )


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record) -> None:
    """Turn on foreign key enforcement, which SQLite leaves off by default."""
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def create_session_factory(database_url: str) -> sessionmaker[Session]:
    """Create a SQLAlchemy session factory."""
    engine = create_engine(database_url, echo=False)
    if engine.dialect.name == "sqlite":
        event.listen(engine, "connect", _enable_sqlite_foreign_keys)
    Base.metadata.create_all(engine)
    return sessionmaker(bind=engine)
