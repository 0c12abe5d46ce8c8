"""Bill reminder scheduling and reminder domain service."""

from collections.abc import Iterable
from datetime import date
from decimal import Decimal
from typing import Optional

from fintrack.database.base import Database
from fintrack.domain import errors
from fintrack.domain.entities import BillSchedule, RecurringBill, Urgency
from fintrack.utils.date_parser import days_in_month
from fintrack.utils.formatting import ordinal_suffix

IMMINENT_DAYS = 3
UPCOMING_DAYS = 7


def days_until_due(due_day: int, today: date) -> int:
    """Return days from today until the bill's next due day.

    When the due day has already passed this month, the distance runs to
    the same day next month.
    """
    if due_day >= today.day:
        return due_day - today.day
    return (days_in_month(today.year, today.month) - today.day) + due_day


def classify_urgency(days_until: int, is_active: bool) -> Urgency:
    """Classify how close a bill is to being due."""
    if not is_active:
        return Urgency.INACTIVE
    if days_until == 0:
        return Urgency.DUE_TODAY
    if days_until <= IMMINENT_DAYS:
        return Urgency.IMMINENT
    if days_until <= UPCOMING_DAYS:
        return Urgency.UPCOMING
    return Urgency.SCHEDULED


def urgency_label(urgency: Urgency, days_until: int, due_day: int) -> str:
    """Render the badge text for a bill."""
    if urgency == Urgency.INACTIVE:
        return "Inactive"
    if urgency == Urgency.DUE_TODAY:
        return "Due Today"
    if urgency in (Urgency.IMMINENT, Urgency.UPCOMING):
        return f"Due in {days_until} day{'s' if days_until != 1 else ''}"
    return f"Due on {due_day}{ordinal_suffix(due_day)}"


def schedule_bill(bill: RecurringBill, today: date) -> BillSchedule:
    """Derive the due-date state of one bill."""
    days = days_until_due(bill.due_day, today)
    urgency = classify_urgency(days, bill.is_active)
    return BillSchedule(
        bill=bill,
        days_until_due=days,
        urgency=urgency,
        label=urgency_label(urgency, days, bill.due_day),
    )


def upcoming_count(bills: Iterable[RecurringBill], today: date) -> int:
    """Count active bills due within the next week."""
    return sum(
        1
        for bill in bills
        if bill.is_active and days_until_due(bill.due_day, today) <= UPCOMING_DAYS
    )


def validate_due_day(due_day: int) -> int:
    """Check a bill's day-of-month due date."""
    if not 1 <= due_day <= 31:
        raise errors.ValidationError(f"Due day must be between 1 and 31, got {due_day}")
    return due_day


class ReminderService:
    """Service for managing bill reminders."""

    def __init__(self, db: Database):
        """Initialize reminder service.

        Args:
            db: Database instance
        """
        self.db = db

    def create_reminder(
        self,
        title: str,
        amount: Decimal,
        due_day: int,
        category_id: Optional[int] = None,
        is_recurring: bool = True,
    ) -> int:
        """Create an active bill reminder.

        Args:
            title: Bill name
            amount: Non-negative bill amount
            due_day: Day of month the bill is due (1-31)
            category_id: Optional category ID
            is_recurring: Whether the bill repeats monthly

        Returns:
            Reminder ID

        Raises:
            ValidationError: If title, amount or due day is invalid
            NotFoundError: If the category doesn't exist
        """
        title = title.strip()
        if not title:
            raise errors.ValidationError("Reminder title must not be empty")
        if amount < 0:
            raise errors.ValidationError(f"Amount must not be negative: {amount}")
        validate_due_day(due_day)
        if category_id is not None and self.db.get_category(category_id) is None:
            raise errors.NotFoundError(errors.category_not_found(category_id))

        return self.db.create_reminder(
            title=title,
            amount=amount,
            due_day=due_day,
            category_id=category_id,
            is_recurring=is_recurring,
        )

    def get_reminder(self, reminder_id: int) -> Optional[RecurringBill]:
        """Get reminder by ID."""
        return self.db.get_reminder(reminder_id)

    def list_reminders(self, active_only: bool = False) -> list[RecurringBill]:
        """List reminders ordered by due day."""
        return self.db.list_reminders(active_only=active_only)

    def toggle_active(self, reminder_id: int) -> bool:
        """Flip a reminder's active flag. Returns the new state."""
        reminder = self.db.get_reminder(reminder_id)
        if reminder is None:
            raise errors.NotFoundError(errors.reminder_not_found(reminder_id))
        self.db.set_reminder_active(reminder_id, not reminder.is_active)
        return not reminder.is_active

    def delete_reminder(self, reminder_id: int) -> None:
        """Delete a reminder."""
        self.db.delete_reminder(reminder_id)

    def schedule(self, today: Optional[date] = None) -> list[BillSchedule]:
        """Return every reminder with its derived due-date state."""
        today = today or date.today()
        return [schedule_bill(bill, today) for bill in self.db.list_reminders()]

    def upcoming(self, today: Optional[date] = None) -> list[BillSchedule]:
        """Return active reminders due within the next week, soonest first."""
        today = today or date.today()
        schedules = [
            schedule_bill(bill, today) for bill in self.db.list_reminders(active_only=True)
        ]
        due_soon = [s for s in schedules if s.days_until_due <= UPCOMING_DAYS]
        return sorted(due_soon, key=lambda s: s.days_until_due)

    def upcoming_count(self, today: Optional[date] = None) -> int:
        """Count active reminders due within the next week."""
        return upcoming_count(self.db.list_reminders(active_only=True), today or date.today())
