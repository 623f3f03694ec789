from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass(frozen=True)
class AttendanceRecord:
    """Domain entity: one day's check-in/check-out for an employee.

    Owned by the attendance subsystem; payroll only reads it.
    """

    attendance_id: int
    employee_id: int
    check_in: datetime
    check_out: Optional[datetime]
    is_holiday: bool = False

    @property
    def hours_worked(self) -> float:
        """Elapsed hours between check-in and check-out; 0 while the day is still open."""
        if self.check_out is None:
            return 0.0
        return (self.check_out - self.check_in).total_seconds() / 3600
