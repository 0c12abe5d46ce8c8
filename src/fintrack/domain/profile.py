"""Profile domain service."""

from typing import Optional

from fintrack.database.base import Database
from fintrack.domain import errors
from fintrack.domain.entities import Preferences, Profile


class ProfileService:
    """Service for the owner's profile and display preferences."""

    def __init__(self, db: Database):
        """Initialize profile service.

        Args:
            db: Database instance
        """
        self.db = db

    def get_profile(self) -> Profile:
        """Get the owner's profile."""
        return self.db.get_profile()

    def load_preferences(self) -> Preferences:
        """Load display preferences for the session."""
        profile = self.db.get_profile()
        return Preferences(
            full_name=profile.full_name,
            currency=profile.currency,
            dark_mode=profile.dark_mode,
        )

    def update_profile(
        self,
        full_name: Optional[str] = None,
        currency: Optional[str] = None,
        dark_mode: Optional[bool] = None,
    ) -> Profile:
        """Update the profile fields that were given.

        The currency is a display label only; stored amounts are unaffected.

        Raises:
            ValidationError: If the currency label is not a three-letter code
        """
        if currency is not None:
            currency = currency.strip().upper()
            if len(currency) != 3 or not currency.isalpha():
                raise errors.ValidationError(
                    f"Invalid currency '{currency}': expected a code like USD"
                )
        if full_name is not None:
            full_name = full_name.strip()
        return self.db.update_profile(
            full_name=full_name, currency=currency, dark_mode=dark_mode
        )

    def toggle_dark_mode(self) -> bool:
        """Flip the dark mode preference. Returns the new value."""
        profile = self.db.get_profile()
        self.db.update_profile(dark_mode=not profile.dark_mode)
        return not profile.dark_mode
