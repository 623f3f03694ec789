import pytest

from payroll_system.common.validators import require_amount, require_non_empty, require_positive_int
from payroll_system.core.exceptions import ValidationError


def test_require_amount_accepts_strings_and_numbers():
    assert require_amount("1500.50", "basic_salary") == 1500.5
    assert require_amount(0, "allowances", allow_zero=True) == 0
    assert require_amount(10_000_000, "basic_salary", maximum=10_000_000) == 10_000_000


@pytest.mark.parametrize("value", [True, "", "NaN", "inf", 0, 1.005])
def test_require_amount_rejects(value):
    with pytest.raises(ValidationError):
        require_amount(value, "basic_salary")


def test_require_positive_int():
    assert require_positive_int("7", "employee_id") == 7
    with pytest.raises(ValidationError):
        require_positive_int("x", "employee_id")
    with pytest.raises(ValidationError):
        require_positive_int(0, "employee_id")


def test_require_non_empty_strips():
    assert require_non_empty("  August-2025 ", "month") == "August-2025"
    with pytest.raises(ValidationError):
        require_non_empty("   ", "month")
