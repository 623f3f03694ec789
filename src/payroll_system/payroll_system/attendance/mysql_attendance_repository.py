from __future__ import annotations

from datetime import date, datetime, time, timedelta
from typing import Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall
from .model import AttendanceRecord
from .repository import AttendanceRepository


class MySQLAttendanceRepository(AttendanceRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_for_period(self, employee_id: int, start_date: date, end_date: date) -> Sequence[AttendanceRecord]:
        # Half-open upper bound so check-ins late on the last day are included.
        lower = datetime.combine(start_date, time.min)
        upper = datetime.combine(end_date + timedelta(days=1), time.min)

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT attendance_id, employee_id, check_in, check_out, is_holiday
                FROM attendance_records
                WHERE employee_id=%s AND check_in >= %s AND check_in < %s
                ORDER BY check_in ASC
                """,
                (int(employee_id), lower, upper),
            )
            rows = fetchall(cur)
            return [
                AttendanceRecord(
                    attendance_id=int(r["attendance_id"]),
                    employee_id=int(r["employee_id"]),
                    check_in=r["check_in"],
                    check_out=r.get("check_out"),
                    is_holiday=bool(r.get("is_holiday")),
                )
                for r in rows
            ]
