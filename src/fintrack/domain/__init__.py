"""Domain layer for fintrack application."""

# Services import the database layer, which imports entities from this
# package, so services are resolved lazily.
_SERVICES = {
    "CategoryService": "fintrack.domain.category",
    "TransactionService": "fintrack.domain.transaction",
    "BudgetService": "fintrack.domain.budget",
    "ReminderService": "fintrack.domain.reminder",
    "SummaryService": "fintrack.domain.summary",
    "ProfileService": "fintrack.domain.profile",
}

__all__ = list(_SERVICES)


def __getattr__(name):
    if name in _SERVICES:
        import importlib

        return getattr(importlib.import_module(_SERVICES[name]), name)
    raise AttributeError(f"module '{__name__}' has no attribute '{name}'")
