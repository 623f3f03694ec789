from __future__ import annotations

from datetime import date
from typing import Protocol, Sequence

from .model import AttendanceRecord


class AttendanceRepository(Protocol):
    def get_for_period(self, employee_id: int, start_date: date, end_date: date) -> Sequence[AttendanceRecord]:
        """Records whose check-in falls on a day within [start_date, end_date] inclusive."""

        raise NotImplementedError
