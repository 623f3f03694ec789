from __future__ import annotations

import calendar
from datetime import date, datetime

from ..core.exceptions import ValidationError

# English names regardless of process locale (calendar.month_name follows the locale).
MONTH_NAMES = (
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
)
_MONTHS = {name.lower(): i for i, name in enumerate(MONTH_NAMES, start=1)}
_MONTHS.update({name[:3].lower(): i for i, name in enumerate(MONTH_NAMES, start=1)})


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, "%Y-%m-%d").date()


def parse_month_label(label: str) -> tuple[date, date]:
    """Parse a "MonthName-YYYY" label into its first and last calendar day.

    Month names are English, full or abbreviated, case-insensitive.
    """
    parts = (label or "").strip().split("-")
    if len(parts) != 2:
        raise ValidationError(f"Invalid month label: {label!r} (expected MonthName-YYYY)")

    name, year_text = parts[0].strip().lower(), parts[1].strip()
    month = _MONTHS.get(name)
    if month is None or len(year_text) != 4 or not year_text.isdigit():
        raise ValidationError(f"Invalid month label: {label!r} (expected MonthName-YYYY)")

    year = int(year_text)
    last_day = calendar.monthrange(year, month)[1]
    return date(year, month, 1), date(year, month, last_day)


def month_label(value: date) -> str:
    """Inverse of parse_month_label, e.g. date(2025, 8, 1) -> "August-2025"."""
    return f"{MONTH_NAMES[value.month - 1]}-{value.year:04d}"

