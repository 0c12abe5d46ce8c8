"""Amount parsing utilities."""

from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
import re

from fintrack.domain.errors import ValidationError

CENT = Decimal("0.01")
# Largest value a NUMERIC(12, 2) amount column holds.
MAX_AMOUNT = Decimal("9999999999.99")


def parse_amount(amount_str: str) -> Decimal:
    """Parse a non-negative money amount string into a Decimal.

    Handles various formats:
    - "123.45"
    - "$123.45"
    - "1,234.56"

    Amounts are stored unsigned; the income/expense direction is carried
    by the record kind, so negative input is rejected. Amounts are rounded
    half-up to whole cents, the precision they are stored with.

    Args:
        amount_str: Amount string

    Returns:
        Decimal amount with two decimal places

    Raises:
        ValidationError: If the string is empty, not numeric, negative or
            too large to store
    """
    if not amount_str or not amount_str.strip():
        raise ValidationError("Empty amount string")

    cleaned = amount_str.strip()
    cleaned = re.sub(r"[$€£¥]", "", cleaned)
    cleaned = cleaned.replace(",", "").strip()

    try:
        amount = Decimal(cleaned)
    except InvalidOperation:
        raise ValidationError(f"Could not parse amount '{amount_str}'")

    if not amount.is_finite():
        raise ValidationError(f"Could not parse amount '{amount_str}'")
    if amount < 0:
        raise ValidationError(f"Amount must not be negative: {amount_str}")
    if amount > MAX_AMOUNT:
        raise ValidationError(f"Amount is too large: {amount_str}")
    return amount.quantize(CENT, rounding=ROUND_HALF_UP)
