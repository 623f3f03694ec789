from datetime import date

import pytest

from payroll_system.common.datetime_utils import month_label, parse_iso_date, parse_month_label
from payroll_system.core.exceptions import ValidationError


@pytest.mark.parametrize(
    "label,expected",
    [
        ("August-2025", (date(2025, 8, 1), date(2025, 8, 31))),
        ("february-2024", (date(2024, 2, 1), date(2024, 2, 29))),
        ("Feb-2025", (date(2025, 2, 1), date(2025, 2, 28))),
        (" December-2025 ", (date(2025, 12, 1), date(2025, 12, 31))),
    ],
)
def test_parse_month_label(label, expected):
    assert parse_month_label(label) == expected


@pytest.mark.parametrize("label", ["", None, "2025-08", "Augustus-2025", "August-25", "August 2025", "August-2025-01"])
def test_parse_month_label_rejects_malformed(label):
    with pytest.raises(ValidationError):
        parse_month_label(label)


def test_month_label_round_trip():
    assert month_label(date(2025, 8, 14)) == "August-2025"
    assert parse_month_label(month_label(date(2024, 2, 1)))[1] == date(2024, 2, 29)


def test_parse_iso_date():
    assert parse_iso_date("2025-08-14") == date(2025, 8, 14)
