from __future__ import annotations

from dataclasses import dataclass
from datetime import date

from ..core.enums import LoanStatus


@dataclass(frozen=True)
class LoanRecord:
    """Domain entity: an employee loan repaid by fixed monthly installments."""

    loan_id: int
    employee_id: int
    principal: float
    installment_amount: float
    remaining: float
    start_date: date
    end_date: date
    status: LoanStatus = LoanStatus.ACTIVE

    def to_dict(self) -> dict:
        return {
            "loan_id": self.loan_id,
            "employee_id": self.employee_id,
            "principal": self.principal,
            "installment_amount": self.installment_amount,
            "remaining": self.remaining,
            "start_date": self.start_date.isoformat(),
            "end_date": self.end_date.isoformat(),
            "status": self.status.value,
        }
