from __future__ import annotations

import logging
from dataclasses import replace
from typing import Any, Optional, Sequence

from ..attendance.repository import AttendanceRepository
from ..common.datetime_utils import month_label, parse_month_label
from ..common.validators import require_amount, require_non_empty, require_positive_int
from ..core.constants import MAX_ALLOWANCES, MAX_BASIC_SALARY
from ..core.enums import PaymentStatus
from ..core.exceptions import NotFoundError, ValidationError
from ..employees.repository import EmployeeRepository
from ..loans.repository import LoanRepository
from .calculator.base import PayrollCalculator
from .calculator.standard_calculator import StandardPayrollCalculator
from .model import PayablesSummary, SalaryFigures, SalaryRecord
from .repository import SalaryRecordRepository

logger = logging.getLogger(__name__)


def _as_payment_status(value: Any) -> PaymentStatus:
    try:
        return PaymentStatus(value)
    except ValueError:
        allowed = ", ".join(s.value for s in PaymentStatus)
        raise ValidationError(f"payment_status must be one of: {allowed}")


def _canonical_month(value: Any) -> str:
    """Normalise a month label, so aug-2025 and AUGUST-2025 both become August-2025."""
    start, _ = parse_month_label(require_non_empty(value, "month"))
    return month_label(start)


class SalaryService:
    """Salary record lifecycle.

    All I/O for a payroll run happens here: attendance and loan lookups before
    the calculator, persistence after it. Any failure aborts the whole run, so
    no partial record is written.
    """

    def __init__(
        self,
        salaries: SalaryRecordRepository,
        employees: EmployeeRepository,
        attendance: AttendanceRepository,
        loans: LoanRepository,
        *,
        calculator: Optional[PayrollCalculator] = None,
    ):
        self._salaries = salaries
        self._employees = employees
        self._attendance = attendance
        self._loans = loans
        self._calculator = calculator or StandardPayrollCalculator()

    def _compute(self, *, employee_id: int, month: str, basic_salary: float, allowances: float) -> SalaryFigures:
        start, end = parse_month_label(month)
        if not self._employees.get_by_id(employee_id):
            raise NotFoundError(f"Employee {employee_id} not found")

        attendance = self._attendance.get_for_period(employee_id, start, end)
        loan = self._loans.get_active_for_employee(employee_id)
        logger.debug(
            "Payroll inputs employee=%s month=%s attendance_days=%d active_loan=%s",
            employee_id,
            month,
            len(attendance),
            loan.loan_id if loan else None,
        )

        return self._calculator.calculate(
            basic_salary=basic_salary,
            allowances=allowances,
            attendance=attendance,
            loan=loan,
        )

    def get_salary_record(self, salary_id: int) -> SalaryRecord:
        record = self._salaries.get_by_id(int(salary_id))
        if not record:
            raise NotFoundError(f"Salary record {salary_id} not found")
        return record

    def list_salary_records(
        self,
        *,
        employee_id: Optional[int] = None,
        month: Optional[str] = None,
    ) -> Sequence[SalaryRecord]:
        if month:
            month = _canonical_month(month)
        return self._salaries.list_records(employee_id=employee_id, month=month or None)

    def create_salary_record(
        self,
        *,
        employee_id: Any,
        month: Any,
        basic_salary: Any,
        allowances: Any = 0,
    ) -> SalaryRecord:
        employee_id = require_positive_int(employee_id, "employee_id")
        month = _canonical_month(month)
        basic_salary = require_amount(basic_salary, "basic_salary", maximum=MAX_BASIC_SALARY)
        allowances = require_amount(
            0 if allowances is None else allowances, "allowances", allow_zero=True, maximum=MAX_ALLOWANCES
        )

        figures = self._compute(employee_id=employee_id, month=month, basic_salary=basic_salary, allowances=allowances)
        salary_id = self._salaries.create_record(
            employee_id=employee_id,
            month=month,
            basic_salary=basic_salary,
            allowances=allowances,
            figures=figures,
            payment_status=PaymentStatus.PENDING,
        )
        logger.info(
            "Created salary record %s employee=%s month=%s net=%.2f",
            salary_id,
            employee_id,
            month,
            figures.net_salary,
        )
        return self.get_salary_record(salary_id)

    def update_salary_record(
        self,
        salary_id: int,
        *,
        employee_id: Any = None,
        month: Any = None,
        basic_salary: Any = None,
        allowances: Any = None,
        payment_status: Any = None,
    ) -> SalaryRecord:
        """Any change to employee_id, month, basic_salary or allowances re-derives every
        figure, falling back to the stored value for the inputs not supplied. A
        status-only update leaves the amounts untouched.
        """

        current = self.get_salary_record(salary_id)
        updated = current

        if employee_id is not None:
            updated = replace(updated, employee_id=require_positive_int(employee_id, "employee_id"))
        if month is not None:
            updated = replace(updated, month=_canonical_month(month))
        if allowances is not None:
            updated = replace(
                updated,
                allowances=require_amount(allowances, "allowances", allow_zero=True, maximum=MAX_ALLOWANCES),
            )
        if basic_salary is not None:
            updated = replace(
                updated, basic_salary=require_amount(basic_salary, "basic_salary", maximum=MAX_BASIC_SALARY)
            )

        recompute = any(v is not None for v in (employee_id, month, basic_salary, allowances))
        if recompute:
            figures = self._compute(
                employee_id=updated.employee_id,
                month=updated.month,
                basic_salary=updated.basic_salary,
                allowances=updated.allowances,
            )
            updated = replace(updated, figures=figures)

        if payment_status is not None:
            updated = replace(updated, payment_status=_as_payment_status(payment_status))

        self._salaries.update_record(updated)
        logger.info(
            "Updated salary record %s recomputed=%s status=%s",
            salary_id,
            recompute,
            updated.payment_status.value,
        )
        return self.get_salary_record(salary_id)

    def delete_salary_record(self, salary_id: int) -> None:
        if not self._salaries.delete_by_id(int(salary_id)):
            raise NotFoundError(f"Salary record {salary_id} not found")
        logger.info("Deleted salary record %s", salary_id)

    def payables_summary(self) -> PayablesSummary:
        totals = self._salaries.sum_net_by_status()
        paid_total, _ = totals.get(PaymentStatus.PAID, (0.0, 0))
        pending_total, pending_count = totals.get(PaymentStatus.PENDING, (0.0, 0))
        return PayablesSummary(total_paid=paid_total, total_pending=pending_total, pending_count=pending_count)
