"""Tests for bill reminder scheduling and the reminder service."""

from datetime import date
from decimal import Decimal

import pytest

from fintrack.domain.entities import RecurringBill, Urgency
from fintrack.domain.errors import NotFoundError, ValidationError
from fintrack.domain.reminder import (
    classify_urgency,
    days_until_due,
    schedule_bill,
    upcoming_count,
    urgency_label,
)


def _bill(due_day: int, is_active: bool = True, bill_id: int = 1) -> RecurringBill:
    return RecurringBill(
        id=bill_id, title="Rent", amount=Decimal("1200"), due_day=due_day, is_active=is_active
    )


@pytest.mark.parametrize(
    "due_day,today,expected",
    [
        (15, date(2024, 3, 10), 5),
        (10, date(2024, 3, 10), 0),
        # 30-day month wraps to the 5th of next month
        (5, date(2024, 4, 30), 5),
        (2, date(2023, 2, 28), 2),
        (2, date(2024, 2, 28), 3),
        (1, date(2024, 12, 31), 1),
        (31, date(2024, 3, 1), 30),
    ],
)
def test_days_until_due(due_day, today, expected):
    assert days_until_due(due_day, today) == expected


def test_days_until_due_stays_within_a_month():
    today = date(2024, 1, 31)
    for due_day in range(1, 32):
        assert 0 <= days_until_due(due_day, today) < 31


@pytest.mark.parametrize(
    "days,active,expected",
    [
        (0, True, Urgency.DUE_TODAY),
        (1, True, Urgency.IMMINENT),
        (3, True, Urgency.IMMINENT),
        (4, True, Urgency.UPCOMING),
        (7, True, Urgency.UPCOMING),
        (8, True, Urgency.SCHEDULED),
        (0, False, Urgency.INACTIVE),
        (5, False, Urgency.INACTIVE),
    ],
)
def test_classify_urgency(days, active, expected):
    assert classify_urgency(days, active) == expected


def test_urgency_labels():
    assert urgency_label(Urgency.INACTIVE, 2, 5) == "Inactive"
    assert urgency_label(Urgency.DUE_TODAY, 0, 5) == "Due Today"
    assert urgency_label(Urgency.IMMINENT, 1, 5) == "Due in 1 day"
    assert urgency_label(Urgency.UPCOMING, 6, 5) == "Due in 6 days"
    assert urgency_label(Urgency.SCHEDULED, 20, 5) == "Due on 5th"
    assert urgency_label(Urgency.SCHEDULED, 20, 22) == "Due on 22nd"


def test_schedule_bill_in_february():
    schedule = schedule_bill(_bill(2), date(2023, 2, 28))

    assert schedule.days_until_due == 2
    assert schedule.urgency == Urgency.IMMINENT
    assert schedule.label == "Due in 2 days"


def test_inactive_bill_still_reports_days():
    schedule = schedule_bill(_bill(15, is_active=False), date(2024, 3, 10))

    assert schedule.days_until_due == 5
    assert schedule.urgency == Urgency.INACTIVE


def test_upcoming_count_skips_inactive_and_distant_bills():
    today = date(2024, 3, 10)
    bills = [
        _bill(10, bill_id=1),
        _bill(17, bill_id=2),
        _bill(18, bill_id=3),
        _bill(12, is_active=False, bill_id=4),
    ]

    assert upcoming_count(bills, today) == 2


class TestReminderService:
    def test_create_and_get(self, reminder_service, sample_categories):
        reminder_id = reminder_service.create_reminder(
            "  Internet  ", Decimal("49.99"), 12, category_id=sample_categories["Bills"]
        )

        reminder = reminder_service.get_reminder(reminder_id)
        assert reminder.title == "Internet"
        assert reminder.amount == Decimal("49.99")
        assert reminder.due_day == 12
        assert reminder.category_id == sample_categories["Bills"]
        assert reminder.is_active is True
        assert reminder.is_recurring is True

    @pytest.mark.parametrize("due_day", [0, 32, -1])
    def test_rejects_due_day_out_of_range(self, reminder_service, due_day):
        with pytest.raises(ValidationError, match="Due day"):
            reminder_service.create_reminder("Rent", Decimal("10"), due_day)

    def test_rejects_empty_title(self, reminder_service):
        with pytest.raises(ValidationError):
            reminder_service.create_reminder("   ", Decimal("10"), 5)

    def test_rejects_negative_amount(self, reminder_service):
        with pytest.raises(ValidationError):
            reminder_service.create_reminder("Rent", Decimal("-10"), 5)

    def test_rejects_unknown_category(self, reminder_service):
        with pytest.raises(NotFoundError):
            reminder_service.create_reminder("Rent", Decimal("10"), 5, category_id=999)

    def test_toggle_active(self, reminder_service):
        reminder_id = reminder_service.create_reminder("Rent", Decimal("1200"), 1)

        assert reminder_service.toggle_active(reminder_id) is False
        assert reminder_service.get_reminder(reminder_id).is_active is False
        assert reminder_service.toggle_active(reminder_id) is True

    def test_toggle_missing_reminder(self, reminder_service):
        with pytest.raises(NotFoundError):
            reminder_service.toggle_active(999)

    def test_list_is_ordered_by_due_day(self, reminder_service):
        reminder_service.create_reminder("Gym", Decimal("30"), 20)
        reminder_service.create_reminder("Rent", Decimal("1200"), 1)
        reminder_service.create_reminder("Phone", Decimal("25"), 9)

        titles = [r.title for r in reminder_service.list_reminders()]
        assert titles == ["Rent", "Phone", "Gym"]

    def test_upcoming_is_sorted_and_filtered(self, reminder_service):
        today = date(2024, 3, 10)
        reminder_service.create_reminder("Gym", Decimal("30"), 16)
        reminder_service.create_reminder("Rent", Decimal("1200"), 1)
        reminder_service.create_reminder("Phone", Decimal("25"), 11)
        paused = reminder_service.create_reminder("Paused", Decimal("5"), 12)
        reminder_service.toggle_active(paused)

        upcoming = reminder_service.upcoming(today)

        assert [s.bill.title for s in upcoming] == ["Phone", "Gym"]
        assert reminder_service.upcoming_count(today) == 2

    def test_schedule_includes_inactive(self, reminder_service):
        reminder_id = reminder_service.create_reminder("Rent", Decimal("1200"), 1)
        reminder_service.toggle_active(reminder_id)

        schedules = reminder_service.schedule(date(2024, 3, 10))

        assert len(schedules) == 1
        assert schedules[0].urgency == Urgency.INACTIVE
        assert schedules[0].label == "Inactive"

    def test_delete(self, reminder_service):
        reminder_id = reminder_service.create_reminder("Rent", Decimal("1200"), 1)

        reminder_service.delete_reminder(reminder_id)

        assert reminder_service.get_reminder(reminder_id) is None
        with pytest.raises(NotFoundError):
            reminder_service.delete_reminder(reminder_id)


def test_reminder_add_cli(run_cli, sample_categories):
    result = run_cli(
        "reminder", "add", "--title", "Internet", "--amount", "49.99",
        "--due-day", "22", "--category", "Bills",
    )

    assert result.exit_code == 0
    assert "Internet ($49.99) due on the 22nd" in result.output


def test_reminder_add_cli_invalid_day(run_cli):
    result = run_cli("reminder", "add", "--title", "Rent", "--amount", "1200", "--due-day", "32")

    assert result.exit_code == 1
    assert "Due day must be between 1 and 31" in result.output


def test_reminder_list_cli(run_cli, reminder_service, sample_categories):
    today = date.today()
    reminder_service.create_reminder("Phone", Decimal("25"), today.day, sample_categories["Bills"])
    paused = reminder_service.create_reminder("Gym", Decimal("30"), today.day)
    reminder_service.toggle_active(paused)

    result = run_cli("reminder", "list")

    assert result.exit_code == 0
    assert "You have 1 bill due in the next 7 days" in result.output
    assert "Bill reminders:" in result.output
    assert "Due Today" in result.output
    assert "Inactive" in result.output
    assert "Bills" in result.output


def test_reminder_list_cli_upcoming_only(run_cli, reminder_service):
    today = date.today()
    paused = reminder_service.create_reminder("Gym", Decimal("30"), today.day)
    reminder_service.toggle_active(paused)

    result = run_cli("reminder", "list", "--upcoming")

    assert result.exit_code == 0
    assert "No bills due this week." in result.output


def test_reminder_list_cli_empty(run_cli):
    result = run_cli("reminder", "list")

    assert result.exit_code == 0
    assert "No reminders set up yet." in result.output


def test_reminder_toggle_cli(run_cli, reminder_service):
    reminder_id = reminder_service.create_reminder("Rent", Decimal("1200"), 1)

    result = run_cli("reminder", "toggle", str(reminder_id))

    assert result.exit_code == 0
    assert f"Reminder {reminder_id} is now inactive" in result.output


def test_reminder_delete_cli(run_cli, reminder_service, open_db):
    reminder_id = reminder_service.create_reminder("Rent", Decimal("1200"), 1)

    result = run_cli("reminder", "delete", str(reminder_id), "--yes")

    assert result.exit_code == 0
    assert open_db().get_reminder(reminder_id) is None
