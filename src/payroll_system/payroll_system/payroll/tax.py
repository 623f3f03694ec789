from __future__ import annotations

from .policy import DEFAULT_POLICY, PayrollPolicy


def calculate_tax(gross_monthly: float, policy: PayrollPolicy = DEFAULT_POLICY) -> float:
    """Monthly PAYE approximation for a monthly gross salary.

    The gross is annualized, the tax-free threshold removed, the remainder
    taxed bracket by bracket, and the annual tax divided back by 12.
    No rounding is applied; format at presentation time.
    """

    annual = gross_monthly * 12
    if annual <= policy.annual_tax_free_threshold:
        return 0.0

    remaining = annual - policy.annual_tax_free_threshold
    tax = 0.0
    for bracket in policy.tax_brackets:
        if bracket.width is None or remaining <= bracket.width:
            tax += remaining * bracket.rate
            break
        tax += bracket.width * bracket.rate
        remaining -= bracket.width

    return tax / 12
