"""Category domain service."""

import logging
import re
from typing import Optional

from fintrack.database.base import Database
from fintrack.domain import errors
from fintrack.domain.entities import (
    DEFAULT_CATEGORY_COLOR,
    DEFAULT_CATEGORY_ICON,
    Category,
    MoneyKind,
)

logger = logging.getLogger(__name__)

# (name, kind, icon, color)
DEFAULT_CATEGORIES = [
    ("Salary", MoneyKind.INCOME, "briefcase", "#10b981"),
    ("Freelance", MoneyKind.INCOME, "laptop", "#3b82f6"),
    ("Food", MoneyKind.EXPENSE, "utensils", "#f59e0b"),
    ("Transport", MoneyKind.EXPENSE, "car", "#8b5cf6"),
    ("Shopping", MoneyKind.EXPENSE, "shopping-bag", "#ec4899"),
    ("Entertainment", MoneyKind.EXPENSE, "film", "#06b6d4"),
    ("Bills", MoneyKind.EXPENSE, "file-text", "#ef4444"),
    ("Health", MoneyKind.EXPENSE, "heart", "#14b8a6"),
]

_COLOR_PATTERN = re.compile(r"^#[0-9a-fA-F]{6}$")


def parse_kind(value: str | MoneyKind) -> MoneyKind:
    """Parse an income/expense kind.

    Raises:
        ValidationError: If value is neither income nor expense
    """
    if isinstance(value, MoneyKind):
        return value
    try:
        return MoneyKind(str(value).strip().lower())
    except ValueError:
        raise errors.ValidationError(
            f"Unknown kind '{value}': expected 'income' or 'expense'"
        )


class CategoryService:
    """Service for managing categories."""

    def __init__(self, db: Database):
        """Initialize category service.

        Args:
            db: Database instance
        """
        self.db = db

    def _validate(self, name: str, color: str) -> str:
        name = name.strip()
        if not name:
            raise errors.ValidationError("Category name must not be empty")
        if not _COLOR_PATTERN.match(color):
            raise errors.ValidationError(
                f"Invalid color '{color}': expected a hex code like #6366f1"
            )
        return name

    def create_category(
        self,
        name: str,
        kind: str | MoneyKind,
        color: Optional[str] = None,
        icon: Optional[str] = None,
    ) -> int:
        """Create a category.

        Args:
            name: Category name, unique per owner
            kind: "income" or "expense"
            color: Optional hex display color
            icon: Optional icon identifier

        Returns:
            Category ID

        Raises:
            ValidationError: If name, kind or color is invalid
            ConflictError: If a category with this name already exists
        """
        color = color or DEFAULT_CATEGORY_COLOR
        name = self._validate(name, color)
        return self.db.create_category(
            name=name,
            kind=parse_kind(kind),
            color=color,
            icon=icon or DEFAULT_CATEGORY_ICON,
        )

    def get_category(self, category_id: int) -> Optional[Category]:
        """Get category by ID."""
        return self.db.get_category(category_id)

    def require_category(self, category_id: int) -> Category:
        """Get category by ID or raise NotFoundError."""
        category = self.db.get_category(category_id)
        if category is None:
            raise errors.NotFoundError(errors.category_not_found(category_id))
        return category

    def require_category_by_name(self, name: str) -> Category:
        """Get category by name or raise NotFoundError."""
        category = self.db.get_category_by_name(name)
        if category is None:
            raise errors.NotFoundError(errors.category_name_not_found(name))
        return category

    def resolve_category(self, identifier: str) -> Category:
        """Resolve a category from an ID or a name."""
        if identifier.strip().isdigit():
            category = self.db.get_category(int(identifier))
            if category is not None:
                return category
        return self.require_category_by_name(identifier)

    def list_categories(self, kind: Optional[str | MoneyKind] = None) -> list[Category]:
        """List categories, optionally only one kind."""
        return self.db.list_categories(kind=parse_kind(kind) if kind is not None else None)

    def categories_by_id(self) -> dict[int, Category]:
        """Return all categories keyed by ID."""
        return {category.id: category for category in self.db.list_categories()}

    def update_category(
        self,
        category_id: int,
        name: str,
        kind: str | MoneyKind,
        color: str,
        icon: str,
    ) -> None:
        """Replace a category's fields.

        Raises:
            NotFoundError: If the category doesn't exist
            DependencyError: If the kind changes while records are filed under it
        """
        current = self.require_category(category_id)
        name = self._validate(name, color)
        new_kind = parse_kind(kind)

        if new_kind != current.kind:
            record_count = self.db.count_category_records(category_id)
            if record_count > 0:
                raise errors.DependencyError(
                    f"Cannot change category {category_id} to {new_kind.value}: "
                    f"{record_count} {current.kind.value} "
                    f"transaction{'s' if record_count != 1 else ''} use it"
                )

        self.db.update_category(
            category_id, name=name, kind=new_kind, color=color, icon=icon
        )

    def delete_category(self, category_id: int) -> None:
        """Delete a category.

        Raises:
            NotFoundError: If the category doesn't exist
            DependencyError: If transactions are filed under it
        """
        self.db.delete_category(category_id)

    def create_default_categories(self) -> int:
        """Create the starter category set, skipping names already present.

        Returns:
            Number of categories created
        """
        created = 0
        for name, kind, icon, color in DEFAULT_CATEGORIES:
            if self.db.get_category_by_name(name) is not None:
                continue
            self.db.create_category(name=name, kind=kind, color=color, icon=icon)
            created += 1
        logger.info("Created %d default categories", created)
        return created
