from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional


@dataclass(frozen=True)
class TaxBracket:
    """A slice of annual taxable income taxed at a flat rate.

    ``width=None`` marks the open-ended top bracket.
    """

    width: Optional[float]
    rate: float


@dataclass(frozen=True)
class PayrollPolicy:
    """Every rate and threshold the payroll calculator uses.

    Defaults follow the current PAYE/EPF/ETF rules; pass a different policy to
    the calculator instead of editing the arithmetic.
    """

    hours_per_day: float = 8
    working_days_per_month: float = 28

    normal_ot_multiplier: float = 1.0
    holiday_ot_multiplier: float = 1.5

    epf_employee_rate: float = 0.08
    epf_company_rate: float = 0.12
    etf_company_rate: float = 0.03

    annual_tax_free_threshold: float = 150_000
    tax_brackets: tuple[TaxBracket, ...] = field(
        default_factory=lambda: (
            TaxBracket(width=83_333, rate=0.06),
            TaxBracket(width=41_667, rate=0.18),
            TaxBracket(width=None, rate=0.24),
        )
    )

    @property
    def monthly_hours(self) -> float:
        return self.hours_per_day * self.working_days_per_month


DEFAULT_POLICY = PayrollPolicy()
