from __future__ import annotations

from typing import Optional, Sequence

from ..core.enums import PaymentStatus
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone, to_float
from .model import SalaryFigures, SalaryRecord
from .repository import SalaryRecordRepository

_FIGURE_COLUMNS = (
    "ot_hours_normal",
    "ot_hours_holiday",
    "ot_amount_normal",
    "ot_amount_holiday",
    "short_hours_deduction",
    "loan_deduction",
    "tax_deduction",
    "epf_employee",
    "epf_company",
    "etf_company",
    "gross_salary",
    "net_salary",
)

_SELECT = f"""
    SELECT
        sr.salary_id, sr.employee_id, e.full_name, sr.month, sr.basic_salary, sr.allowances,
        {", ".join("sr." + c for c in _FIGURE_COLUMNS)},
        sr.payment_status
    FROM salary_records sr
    LEFT JOIN employees e ON e.employee_id = sr.employee_id
"""


def _to_record(r: dict) -> SalaryRecord:
    return SalaryRecord(
        salary_id=int(r["salary_id"]),
        employee_id=int(r["employee_id"]),
        month=r["month"],
        basic_salary=to_float(r["basic_salary"]),
        allowances=to_float(r["allowances"]),
        figures=SalaryFigures(**{c: to_float(r.get(c)) for c in _FIGURE_COLUMNS}),
        payment_status=PaymentStatus(r["payment_status"]),
        employee_name=r.get("full_name"),
    )


def _figure_values(figures: SalaryFigures) -> tuple:
    return tuple(getattr(figures, c) for c in _FIGURE_COLUMNS)


class MySQLSalaryRecordRepository(SalaryRecordRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_id(self, salary_id: int) -> Optional[SalaryRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(_SELECT + " WHERE sr.salary_id=%s", (int(salary_id),))
            r = fetchone(cur)
            return _to_record(r) if r else None

    def list_records(
        self,
        *,
        employee_id: Optional[int] = None,
        month: Optional[str] = None,
    ) -> Sequence[SalaryRecord]:
        clauses: list[str] = []
        params: list[object] = []

        if employee_id is not None:
            clauses.append("sr.employee_id=%s")
            params.append(int(employee_id))
        if month:
            clauses.append("sr.month=%s")
            params.append(month)

        where = f"WHERE {' AND '.join(clauses)}" if clauses else ""

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"{_SELECT} {where} ORDER BY sr.created_at DESC, sr.salary_id DESC", tuple(params))
            return [_to_record(r) for r in fetchall(cur)]

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
        columns = ("employee_id", "month", "basic_salary", "allowances", *_FIGURE_COLUMNS, "payment_status", "is_payable")
        placeholders = ",".join(["%s"] * len(columns))
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"INSERT INTO salary_records({', '.join(columns)}) VALUES({placeholders})",
                (
                    int(employee_id),
                    month,
                    basic_salary,
                    allowances,
                    *_figure_values(figures),
                    payment_status.value,
                    payment_status == PaymentStatus.PENDING,
                ),
            )
            return int(cur.lastrowid)

    def update_record(self, record: SalaryRecord) -> None:
        assignments = ", ".join(f"{c}=%s" for c in _FIGURE_COLUMNS)
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                UPDATE salary_records
                SET employee_id=%s, month=%s, basic_salary=%s, allowances=%s,
                    {assignments},
                    payment_status=%s, is_payable=%s
                WHERE salary_id=%s
                """,
                (
                    record.employee_id,
                    record.month,
                    record.basic_salary,
                    record.allowances,
                    *_figure_values(record.figures),
                    record.payment_status.value,
                    record.is_payable,
                    record.salary_id,
                ),
            )

    def delete_by_id(self, salary_id: int) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM salary_records WHERE salary_id=%s", (int(salary_id),))
            return cur.rowcount > 0

    def sum_net_by_status(self) -> dict[PaymentStatus, tuple[float, int]]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT payment_status, COALESCE(SUM(net_salary), 0) AS total, COUNT(*) AS n
                FROM salary_records
                GROUP BY payment_status
                """
            )
            return {PaymentStatus(r["payment_status"]): (to_float(r["total"]), int(r["n"])) for r in fetchall(cur)}
