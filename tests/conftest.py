from __future__ import annotations

from dataclasses import replace
from datetime import date, datetime
from typing import Optional

import pytest

from payroll_system.attendance.model import AttendanceRecord
from payroll_system.core.enums import LoanStatus, PaymentStatus
from payroll_system.employees.model import Employee
from payroll_system.loans.model import LoanRecord
from payroll_system.loans.service import LoanService
from payroll_system.payroll.model import SalaryFigures, SalaryRecord
from payroll_system.payroll.service import SalaryService


class InMemoryEmployees:
    def __init__(self, employees: dict[int, Employee]):
        self._employees = employees

    def get_by_id(self, employee_id: int) -> Optional[Employee]:
        return self._employees.get(employee_id)


class InMemoryAttendance:
    def __init__(self, records: Optional[list[AttendanceRecord]] = None):
        self.records = list(records or [])
        self.calls: list[tuple[int, date, date]] = []

    def add_day(self, employee_id: int, check_in: datetime, check_out: Optional[datetime], *, is_holiday=False):
        self.records.append(
            AttendanceRecord(
                attendance_id=len(self.records) + 1,
                employee_id=employee_id,
                check_in=check_in,
                check_out=check_out,
                is_holiday=is_holiday,
            )
        )

    def get_for_period(self, employee_id: int, start_date: date, end_date: date):
        self.calls.append((employee_id, start_date, end_date))
        return [
            r for r in self.records if r.employee_id == employee_id and start_date <= r.check_in.date() <= end_date
        ]


class InMemoryLoans:
    def __init__(self):
        self._loans: dict[int, LoanRecord] = {}
        self._id = 0

    def get_by_id(self, loan_id: int) -> Optional[LoanRecord]:
        return self._loans.get(loan_id)

    def get_active_for_employee(self, employee_id: int) -> Optional[LoanRecord]:
        active = [l for l in self._loans.values() if l.employee_id == employee_id and l.status == LoanStatus.ACTIVE]
        active.sort(key=lambda l: (l.start_date, l.loan_id), reverse=True)
        return active[0] if active else None

    def list_loans(self, *, employee_id: Optional[int] = None):
        items = [l for l in self._loans.values() if employee_id is None or l.employee_id == employee_id]
        return sorted(items, key=lambda l: l.loan_id, reverse=True)

    def create_loan(self, **fields) -> int:
        self._id += 1
        self._loans[self._id] = LoanRecord(loan_id=self._id, **fields)
        return self._id

    def update_loan(self, loan: LoanRecord) -> None:
        self._loans[loan.loan_id] = loan

    def delete_by_id(self, loan_id: int) -> bool:
        return self._loans.pop(loan_id, None) is not None


class InMemorySalaries:
    def __init__(self):
        self._records: dict[int, SalaryRecord] = {}
        self._id = 0

    def get_by_id(self, salary_id: int) -> Optional[SalaryRecord]:
        return self._records.get(salary_id)

    def list_records(self, *, employee_id: Optional[int] = None, month: Optional[str] = None):
        items = [
            r
            for r in self._records.values()
            if (employee_id is None or r.employee_id == employee_id) and (month is None or r.month == month)
        ]
        return sorted(items, key=lambda r: r.salary_id, reverse=True)

    def create_record(
        self,
        *,
        employee_id: int,
        month: str,
        basic_salary: float,
        allowances: float,
        figures: SalaryFigures,
        payment_status: PaymentStatus,
    ) -> int:
        self._id += 1
        self._records[self._id] = SalaryRecord(
            salary_id=self._id,
            employee_id=employee_id,
            month=month,
            basic_salary=basic_salary,
            allowances=allowances,
            figures=figures,
            payment_status=payment_status,
        )
        return self._id

    def update_record(self, record: SalaryRecord) -> None:
        self._records[record.salary_id] = replace(record)

    def delete_by_id(self, salary_id: int) -> bool:
        return self._records.pop(salary_id, None) is not None

    def sum_net_by_status(self):
        totals: dict[PaymentStatus, tuple[float, int]] = {}
        for r in self._records.values():
            total, count = totals.get(r.payment_status, (0.0, 0))
            totals[r.payment_status] = (total + r.figures.net_salary, count + 1)
        return totals


@pytest.fixture
def employees() -> InMemoryEmployees:
    return InMemoryEmployees(
        {
            1: Employee(employee_id=1, full_name="Nimal Perera", email="nimal@example.com", designation="Tailor"),
            2: Employee(employee_id=2, full_name="Kamala Silva", email=None, designation=None),
        }
    )


@pytest.fixture
def attendance() -> InMemoryAttendance:
    return InMemoryAttendance()


@pytest.fixture
def loans() -> InMemoryLoans:
    return InMemoryLoans()


@pytest.fixture
def salaries() -> InMemorySalaries:
    return InMemorySalaries()


@pytest.fixture
def salary_service(salaries, employees, attendance, loans) -> SalaryService:
    return SalaryService(salaries, employees, attendance, loans)


@pytest.fixture
def loan_service(loans, employees) -> LoanService:
    return LoanService(loans, employees)
