"""Transaction domain service."""

from typing import Optional
from datetime import date
from decimal import Decimal

from fintrack.database.base import Database
from fintrack.domain import errors
from fintrack.domain.category import parse_kind
from fintrack.domain.entities import Category, MoneyKind, MoneyRecord


class TransactionService:
    """Service for managing income and expense records."""

    def __init__(self, db: Database):
        """Initialize transaction service.

        Args:
            db: Database instance
        """
        self.db = db

    def _check_record(
        self, amount: Decimal, kind: MoneyKind, category_id: int
    ) -> Category:
        """Validate amount and the kind/category pairing."""
        if amount < 0:
            raise errors.ValidationError(f"Amount must not be negative: {amount}")

        category = self.db.get_category(category_id)
        if category is None:
            raise errors.NotFoundError(errors.category_not_found(category_id))

        if category.kind != kind:
            raise errors.ValidationError(
                errors.kind_mismatch(kind.value, category.name, category.kind.value)
            )
        return category

    def create_transaction(
        self,
        amount: Decimal,
        kind: str | MoneyKind,
        category_id: int,
        occurred_on: Optional[date] = None,
        note: str = "",
    ) -> int:
        """Create an income or expense record.

        Args:
            amount: Non-negative amount
            kind: "income" or "expense"
            category_id: Category ID; its kind must match ``kind``
            occurred_on: Date of the record, defaults to today
            note: Optional free-text note

        Returns:
            Transaction ID

        Raises:
            ValidationError: If the amount is negative or the kind doesn't
                match the category
            NotFoundError: If the category doesn't exist
        """
        kind = parse_kind(kind)
        self._check_record(amount, kind, category_id)
        return self.db.create_record(
            amount=amount,
            kind=kind,
            category_id=category_id,
            occurred_on=occurred_on or date.today(),
            note=note or "",
        )

    def get_transaction(self, record_id: int) -> Optional[MoneyRecord]:
        """Get transaction by ID."""
        return self.db.get_record(record_id)

    def require_transaction(self, record_id: int) -> MoneyRecord:
        """Get transaction by ID or raise NotFoundError."""
        record = self.db.get_record(record_id)
        if record is None:
            raise errors.NotFoundError(errors.record_not_found(record_id))
        return record

    def replace_transaction(
        self,
        record_id: int,
        amount: Decimal,
        kind: str | MoneyKind,
        category_id: int,
        occurred_on: date,
        note: str = "",
    ) -> None:
        """Replace every field of a transaction.

        Edits are full replacements; there is no partial merge.

        Raises:
            NotFoundError: If the transaction or category doesn't exist
            ValidationError: If the new values are invalid
        """
        self.require_transaction(record_id)
        kind = parse_kind(kind)
        self._check_record(amount, kind, category_id)
        self.db.update_record(
            record_id,
            amount=amount,
            kind=kind,
            category_id=category_id,
            occurred_on=occurred_on,
            note=note or "",
        )

    def update_note(self, record_id: int, note: str) -> None:
        """Update the note of a transaction."""
        self.require_transaction(record_id)
        self.db.update_record_note(record_id, note)

    def delete_transaction(self, record_id: int) -> None:
        """Delete a transaction."""
        self.db.delete_record(record_id)

    def list_transactions(
        self,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
        kind: Optional[str | MoneyKind] = None,
        search: Optional[str] = None,
        categories: Optional[dict[int, Category]] = None,
    ) -> list[MoneyRecord]:
        """List transactions newest first.

        Args:
            start_date: Optional start date filter
            end_date: Optional end date filter
            kind: Optional "income" or "expense" filter
            search: Optional case-insensitive text matched against the note
                and the category name
            categories: Category lookup used for the search, loaded when
                omitted and a search is given
        """
        records = self.db.list_records(
            start_date=start_date,
            end_date=end_date,
            kind=parse_kind(kind) if kind is not None else None,
        )
        if not search:
            return records

        if categories is None:
            categories = {c.id: c for c in self.db.list_categories()}
        needle = search.lower()

        def matches(record: MoneyRecord) -> bool:
            category = categories.get(record.category_id)
            category_name = category.name.lower() if category else ""
            return needle in record.note.lower() or needle in category_name

        return [record for record in records if matches(record)]

    def recent_transactions(
        self,
        limit: int = 5,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
    ) -> list[MoneyRecord]:
        """Return the most recent transactions."""
        return self.db.list_records(start_date=start_date, end_date=end_date, limit=limit)
