from __future__ import annotations

from dataclasses import dataclass

from .attendance.mysql_attendance_repository import MySQLAttendanceRepository
from .database.connection import DBConfig, DatabaseConnection
from .employees.mysql_employee_repository import MySQLEmployeeRepository
from .loans.mysql_loan_repository import MySQLLoanRepository
from .loans.service import LoanService
from .payroll.calculator.standard_calculator import StandardPayrollCalculator
from .payroll.mysql_salary_repository import MySQLSalaryRecordRepository
from .payroll.policy import DEFAULT_POLICY, PayrollPolicy
from .payroll.service import SalaryService


@dataclass(frozen=True)
class Container:
    conn: DatabaseConnection

    employees_repo: MySQLEmployeeRepository
    attendance_repo: MySQLAttendanceRepository
    loans_repo: MySQLLoanRepository
    salaries_repo: MySQLSalaryRecordRepository

    loan_service: LoanService
    salary_service: SalaryService


def build_container(*, db_config: dict, policy: PayrollPolicy = DEFAULT_POLICY) -> Container:
    conn = DatabaseConnection(DBConfig.from_mapping(db_config))

    employees_repo = MySQLEmployeeRepository(conn)
    attendance_repo = MySQLAttendanceRepository(conn)
    loans_repo = MySQLLoanRepository(conn)
    salaries_repo = MySQLSalaryRecordRepository(conn)

    loan_service = LoanService(loans_repo, employees_repo)
    salary_service = SalaryService(
        salaries_repo,
        employees_repo,
        attendance_repo,
        loans_repo,
        calculator=StandardPayrollCalculator(policy),
    )

    return Container(
        conn=conn,
        employees_repo=employees_repo,
        attendance_repo=attendance_repo,
        loans_repo=loans_repo,
        salaries_repo=salaries_repo,
        loan_service=loan_service,
        salary_service=salary_service,
    )
