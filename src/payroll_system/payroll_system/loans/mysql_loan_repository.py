from __future__ import annotations

from datetime import date
from typing import Optional, Sequence

from ..core.enums import LoanStatus
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone, to_float
from .model import LoanRecord
from .repository import LoanRepository

_COLUMNS = "loan_id, employee_id, principal, installment_amount, remaining, start_date, end_date, status"


def _to_loan(r: dict) -> LoanRecord:
    return LoanRecord(
        loan_id=int(r["loan_id"]),
        employee_id=int(r["employee_id"]),
        principal=to_float(r["principal"]),
        installment_amount=to_float(r["installment_amount"]),
        remaining=to_float(r["remaining"]),
        start_date=r["start_date"],
        end_date=r["end_date"],
        status=LoanStatus(r["status"]),
    )


class MySQLLoanRepository(LoanRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_id(self, loan_id: int) -> Optional[LoanRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM loans WHERE loan_id=%s", (int(loan_id),))
            r = fetchone(cur)
            return _to_loan(r) if r else None

    def get_active_for_employee(self, employee_id: int) -> Optional[LoanRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_COLUMNS}
                FROM loans
                WHERE employee_id=%s AND status=%s
                ORDER BY start_date DESC, loan_id DESC
                LIMIT 1
                """,
                (int(employee_id), LoanStatus.ACTIVE.value),
            )
            r = fetchone(cur)
            return _to_loan(r) if r else None

    def list_loans(self, *, employee_id: Optional[int] = None) -> Sequence[LoanRecord]:
        where = ""
        params: list[object] = []
        if employee_id is not None:
            where = "WHERE employee_id=%s"
            params.append(int(employee_id))

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM loans {where} ORDER BY created_at DESC, loan_id DESC", tuple(params))
            return [_to_loan(r) for r in fetchall(cur)]

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
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO loans(employee_id, principal, installment_amount, remaining, start_date, end_date, status)
                VALUES(%s,%s,%s,%s,%s,%s,%s)
                """,
                (int(employee_id), principal, installment_amount, remaining, start_date, end_date, status.value),
            )
            return int(cur.lastrowid)

    def update_loan(self, loan: LoanRecord) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                UPDATE loans
                SET employee_id=%s, principal=%s, installment_amount=%s, remaining=%s,
                    start_date=%s, end_date=%s, status=%s
                WHERE loan_id=%s
                """,
                (
                    loan.employee_id,
                    loan.principal,
                    loan.installment_amount,
                    loan.remaining,
                    loan.start_date,
                    loan.end_date,
                    loan.status.value,
                    loan.loan_id,
                ),
            )

    def delete_by_id(self, loan_id: int) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM loans WHERE loan_id=%s", (int(loan_id),))
            return cur.rowcount > 0
