from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Optional

from ..core.enums import PaymentStatus


@dataclass(frozen=True)
class SalaryFigures:
    """Everything the calculator derives for one employee-month."""

    ot_hours_normal: float
    ot_hours_holiday: float
    ot_amount_normal: float
    ot_amount_holiday: float
    short_hours_deduction: float
    loan_deduction: float
    tax_deduction: float
    epf_employee: float
    epf_company: float
    etf_company: float
    gross_salary: float
    net_salary: float

    @property
    def total_deductions(self) -> float:
        """Employee-side deductions; employer EPF/ETF shares are not included."""
        return self.epf_employee + self.loan_deduction + self.tax_deduction + self.short_hours_deduction


@dataclass(frozen=True)
class SalaryRecord:
    """Stored salary record: the submitted inputs, the derived figures and the payment state."""

    salary_id: int
    employee_id: int
    month: str
    basic_salary: float
    allowances: float
    figures: SalaryFigures
    payment_status: PaymentStatus = PaymentStatus.PENDING
    employee_name: Optional[str] = None

    @property
    def is_payable(self) -> bool:
        return self.payment_status == PaymentStatus.PENDING

    def to_dict(self) -> dict:
        f = self.figures
        return {
            "salary_id": self.salary_id,
            "employee_id": self.employee_id,
            "employee_name": self.employee_name,
            "month": self.month,
            "basic_salary": self.basic_salary,
            "allowances": self.allowances,
            "OT_hours_normal": f.ot_hours_normal,
            "OT_hours_holiday": f.ot_hours_holiday,
            "OT_amount_normal": f.ot_amount_normal,
            "OT_amount_holiday": f.ot_amount_holiday,
            "short_hours_deduction": f.short_hours_deduction,
            "loan_deduction": f.loan_deduction,
            "tax_deduction": f.tax_deduction,
            "EPF_employee": f.epf_employee,
            "EPF_company": f.epf_company,
            "ETF_company": f.etf_company,
            "gross_salary": f.gross_salary,
            "net_salary": f.net_salary,
            "payment_status": self.payment_status.value,
            "is_payable": self.is_payable,
        }


@dataclass(frozen=True)
class PayablesSummary:
    total_paid: float
    total_pending: float
    pending_count: int

    def to_dict(self) -> dict:
        return asdict(self)
