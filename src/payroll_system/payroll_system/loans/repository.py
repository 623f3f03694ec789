from __future__ import annotations

from datetime import date
from typing import Optional, Protocol, Sequence

from ..core.enums import LoanStatus
from .model import LoanRecord


class LoanRepository(Protocol):
    def get_by_id(self, loan_id: int) -> Optional[LoanRecord]:
        raise NotImplementedError

    def get_active_for_employee(self, employee_id: int) -> Optional[LoanRecord]:
        """At most one active loan is considered; the most recently started wins."""

        raise NotImplementedError

    def list_loans(self, *, employee_id: Optional[int] = None) -> Sequence[LoanRecord]:
        raise NotImplementedError

    def create_loan(
        self,
        *,
        employee_id: int,
        principal: float,
        installment_amount: float,
        remaining: float,
        start_date: date,
        end_date: date,
        status: LoanStatus,
    ) -> int:
        raise NotImplementedError

    def update_loan(self, loan: LoanRecord) -> None:
        raise NotImplementedError

    def delete_by_id(self, loan_id: int) -> bool:
        raise NotImplementedError
