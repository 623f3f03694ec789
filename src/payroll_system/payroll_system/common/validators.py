from __future__ import annotations

from decimal import Decimal, InvalidOperation
from typing import Any, Optional

from ..core.constants import AMOUNT_DECIMAL_PLACES
from ..core.exceptions import ValidationError


def require_non_empty(value: str, field_name: str) -> str:
    if not value or not str(value).strip():
        raise ValidationError(f"{field_name} is required")
    return str(value).strip()


def require_positive_int(value: Any, field_name: str) -> int:
    try:
        number = int(value)
    except (TypeError, ValueError):
        raise ValidationError(f"{field_name} must be an integer")
    if number <= 0:
        raise ValidationError(f"{field_name} must be a positive integer")
    return number


def require_amount(
    value: Any,
    field_name: str,
    *,
    allow_zero: bool = False,
    maximum: Optional[float] = None,
) -> float:
    """Validate a money amount: numeric, in range, at most two decimal places."""

    if isinstance(value, bool) or value is None or value == "":
        raise ValidationError(f"{field_name} is required")
    try:
        amount = Decimal(str(value))
    except InvalidOperation:
        raise ValidationError(f"{field_name} must be a number")
    if not amount.is_finite():
        raise ValidationError(f"{field_name} must be a number")

    if allow_zero and amount < 0:
        raise ValidationError(f"{field_name} cannot be negative")
    if not allow_zero and amount <= 0:
        raise ValidationError(f"{field_name} must be greater than 0")
    if maximum is not None and amount > Decimal(str(maximum)):
        raise ValidationError(f"{field_name} seems unrealistically high (max {maximum:,})")
    if amount.as_tuple().exponent < -AMOUNT_DECIMAL_PLACES:
        raise ValidationError(f"{field_name} must have at most {AMOUNT_DECIMAL_PLACES} decimal places")

    return float(amount)
