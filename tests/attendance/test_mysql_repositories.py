from __future__ import annotations

from datetime import date, datetime
from decimal import Decimal

import pytest

from payroll_system.attendance.mysql_attendance_repository import MySQLAttendanceRepository
from payroll_system.core.enums import LoanStatus, PaymentStatus
from payroll_system.loans.mysql_loan_repository import MySQLLoanRepository
from payroll_system.payroll.mysql_salary_repository import MySQLSalaryRecordRepository


class FakeCursor:
    def __init__(self, rows):
        self._rows = rows
        self.executed = []
        self.closed = False

    def execute(self, sql, params=()):
        self.executed.append((" ".join(sql.split()), params))

    def fetchone(self):
        return self._rows[0] if self._rows else None

    def fetchall(self):
        return list(self._rows)

    def close(self):
        self.closed = True


class FakeConnection:
    def __init__(self, cursor, *, fail_on_execute=False):
        self._cursor = cursor
        self.committed = False
        self.rolled_back = False
        self.closed = False
        if fail_on_execute:
            def boom(sql, params=()):
                raise RuntimeError("lost connection")

            cursor.execute = boom

    def cursor(self, dictionary=True):
        return self._cursor

    def commit(self):
        self.committed = True

    def rollback(self):
        self.rolled_back = True

    def close(self):
        self.closed = True


class FakeConnFactory:
    def __init__(self, conn):
        self.conn = conn

    def connect(self):
        return self.conn


def test_attendance_query_covers_whole_last_day():
    cur = FakeCursor(
        [
            {
                "attendance_id": 3,
                "employee_id": 1,
                "check_in": datetime(2025, 8, 31, 20, 0),
                "check_out": datetime(2025, 9, 1, 6, 0),
                "is_holiday": 1,
            }
        ]
    )
    conn = FakeConnection(cur)
    repo = MySQLAttendanceRepository(FakeConnFactory(conn))

    records = repo.get_for_period(1, date(2025, 8, 1), date(2025, 8, 31))

    _, params = cur.executed[0]
    assert params == (1, datetime(2025, 8, 1), datetime(2025, 9, 1))
    assert records[0].is_holiday is True
    assert records[0].hours_worked == pytest.approx(10)
    assert conn.committed and conn.closed and cur.closed


def test_loan_row_decimals_become_floats():
    cur = FakeCursor(
        [
            {
                "loan_id": 5,
                "employee_id": 1,
                "principal": Decimal("36000.00"),
                "installment_amount": Decimal("3000.00"),
                "remaining": Decimal("33000.00"),
                "start_date": date(2025, 1, 1),
                "end_date": date(2025, 12, 31),
                "status": "active",
            }
        ]
    )
    repo = MySQLLoanRepository(FakeConnFactory(FakeConnection(cur)))

    loan = repo.get_active_for_employee(1)

    assert loan.installment_amount == 3000.0
    assert isinstance(loan.installment_amount, float)
    assert loan.status == LoanStatus.ACTIVE
    assert cur.executed[0][1] == (1, "active")


def test_salary_summary_groups_by_status():
    cur = FakeCursor(
        [
            {"payment_status": "paid", "total": Decimal("9200.5"), "n": 2},
            {"payment_status": "pending", "total": 0, "n": 0},
        ]
    )
    repo = MySQLSalaryRecordRepository(FakeConnFactory(FakeConnection(cur)))

    assert repo.sum_net_by_status() == {
        PaymentStatus.PAID: (9200.5, 2),
        PaymentStatus.PENDING: (0.0, 0),
    }


def test_failed_query_rolls_back_and_closes():
    cur = FakeCursor([])
    conn = FakeConnection(cur, fail_on_execute=True)
    repo = MySQLSalaryRecordRepository(FakeConnFactory(conn))

    with pytest.raises(RuntimeError):
        repo.delete_by_id(1)

    assert conn.rolled_back and conn.closed and not conn.committed
