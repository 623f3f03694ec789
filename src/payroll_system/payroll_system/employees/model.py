from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Employee:
    """Domain entity: an employee on the payroll.

    Plain data object, no DB access code.
    """

    employee_id: int
    full_name: str
    email: Optional[str] = None
    designation: Optional[str] = None
