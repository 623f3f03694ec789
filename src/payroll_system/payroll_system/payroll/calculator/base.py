from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional, Sequence

from ...attendance.model import AttendanceRecord
from ...loans.model import LoanRecord
from ..model import SalaryFigures


class PayrollCalculator(ABC):
    """Calculator interface (Strategy Pattern for payroll)."""

    @abstractmethod
    def calculate(
        self,
        *,
        basic_salary: float,
        allowances: float,
        attendance: Sequence[AttendanceRecord],
        loan: Optional[LoanRecord],
    ) -> SalaryFigures:
        raise NotImplementedError
