"""Shared domain error messages and error types."""


class DomainError(ValueError):
    """Base class for domain-level errors.

    Subclasses provide semantic categories while preserving ValueError
    compatibility for existing error handling.
    """


class ValidationError(DomainError):
    """Invalid input or failed validation in domain logic."""


class NotFoundError(DomainError):
    """Requested domain entity does not exist for the current owner."""


class ConflictError(DomainError):
    """Domain conflict, such as uniqueness or constraint violations."""


class DependencyError(DomainError):
    """Operation blocked due to dependent domain data."""


class StoreUnavailableError(DomainError):
    """The backing store could not be reached or failed to answer."""


def category_not_found(category_id: int) -> str:
    """Return message for missing category by ID."""
    return f"Category {category_id} not found"


def category_name_not_found(name: str) -> str:
    """Return message for missing category by name."""
    return f"Category '{name}' not found"


def record_not_found(record_id: int) -> str:
    """Return message for missing money record."""
    return f"Transaction {record_id} not found"


def budget_not_found(budget_id: int) -> str:
    """Return message for missing budget limit."""
    return f"Budget {budget_id} not found"


def reminder_not_found(reminder_id: int) -> str:
    """Return message for missing bill reminder."""
    return f"Reminder {reminder_id} not found"


def duplicate_category_name(name: str) -> str:
    """Return message for duplicate category names."""
    return f"Category with name '{name}' already exists"


def kind_mismatch(kind: str, category_name: str, category_kind: str) -> str:
    """Return message when a record's kind disagrees with its category."""
    return (
        f"Cannot file {kind} under '{category_name}': "
        f"it is an {category_kind} category"
    )


def category_delete_blocked(category_id: int, record_count: int) -> str:
    """Return message when a category still has money records."""
    return (
        f"Cannot delete category {category_id}: it has {record_count} "
        f"transaction{'s' if record_count != 1 else ''}. "
        "Please reassign or delete them first."
    )
