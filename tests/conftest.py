"""Shared pytest fixtures for fintrack tests."""

import tempfile
import os
from datetime import date
from decimal import Decimal

import pytest

from fintrack.database.factories import create_sqlite_database
from fintrack.domain.budget import BudgetService
from fintrack.domain.category import CategoryService
from fintrack.domain.entities import Category, MoneyKind, MoneyRecord
from fintrack.domain.profile import ProfileService
from fintrack.domain.reminder import ReminderService
from fintrack.domain.summary import SummaryService
from fintrack.domain.transaction import TransactionService

TEST_OWNER = "test-user"


@pytest.fixture
def temp_db():
    """Create a temporary database for testing."""
    fd, db_path = tempfile.mkstemp(suffix=".db")
    os.close(fd)

    db = create_sqlite_database(database_path=db_path, owner_id=TEST_OWNER)
    # Store the path for tests that need it
    db.database_path = db_path
    db.connect()
    db.initialize_schema()

    yield db

    db.disconnect()
    if os.path.exists(db_path):
        os.unlink(db_path)


@pytest.fixture
def open_db(temp_db):
    """Open another connection to the temporary database, optionally as another owner."""
    opened = []

    def _open(owner_id: str = TEST_OWNER):
        db = create_sqlite_database(database_path=temp_db.database_path, owner_id=owner_id)
        db.connect()
        db.initialize_schema()
        opened.append(db)
        return db

    yield _open

    for db in opened:
        db.disconnect()


@pytest.fixture
def category_service(temp_db):
    """Create a CategoryService with a temporary database."""
    return CategoryService(temp_db)


@pytest.fixture
def transaction_service(temp_db):
    """Create a TransactionService with a temporary database."""
    return TransactionService(temp_db)


@pytest.fixture
def budget_service(temp_db):
    """Create a BudgetService with a temporary database."""
    return BudgetService(temp_db)


@pytest.fixture
def reminder_service(temp_db):
    """Create a ReminderService with a temporary database."""
    return ReminderService(temp_db)


@pytest.fixture
def summary_service(temp_db):
    """Create a SummaryService with a temporary database."""
    return SummaryService(temp_db)


@pytest.fixture
def profile_service(temp_db):
    """Create a ProfileService with a temporary database."""
    return ProfileService(temp_db)


@pytest.fixture
def sample_categories(category_service):
    """Create the default categories and return their IDs by name."""
    category_service.create_default_categories()
    return {c.name: c.id for c in category_service.list_categories()}


@pytest.fixture
def cli_runner():
    """Create a Click CLI test runner."""
    from click.testing import CliRunner

    return CliRunner()


@pytest.fixture
def run_cli(cli_runner, temp_db):
    """Invoke the CLI against the temporary database as the test owner."""
    from fintrack.cli.main import cli

    def _run(*args, owner_id: str = TEST_OWNER, input: str | None = None):
        return cli_runner.invoke(
            cli,
            ["--db-path", temp_db.database_path, "--user", owner_id, *args],
            input=input,
        )

    return _run


def make_record(
    record_id: int,
    amount: str,
    kind: MoneyKind,
    occurred_on: date,
    category_id: int = 1,
    note: str = "",
) -> MoneyRecord:
    """Build an in-memory money record."""
    return MoneyRecord(
        id=record_id,
        amount=Decimal(amount),
        kind=kind,
        category_id=category_id,
        occurred_on=occurred_on,
        note=note,
    )


def make_category(
    category_id: int, name: str, kind: MoneyKind = MoneyKind.EXPENSE, color: str = "#f59e0b"
) -> Category:
    """Build an in-memory category."""
    return Category(id=category_id, name=name, kind=kind, color=color)
