from __future__ import annotations

from typing import Optional, Protocol, Sequence

from ..core.enums import PaymentStatus
from .model import SalaryFigures, SalaryRecord


class SalaryRecordRepository(Protocol):
    def get_by_id(self, salary_id: int) -> Optional[SalaryRecord]:
        raise NotImplementedError

    def list_records(
        self,
        *,
        employee_id: Optional[int] = None,
        month: Optional[str] = None,
    ) -> Sequence[SalaryRecord]:
        """Newest first."""

        raise NotImplementedError

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
        raise NotImplementedError

    def update_record(self, record: SalaryRecord) -> None:
        raise NotImplementedError

    def delete_by_id(self, salary_id: int) -> bool:
        raise NotImplementedError

    def sum_net_by_status(self) -> dict[PaymentStatus, tuple[float, int]]:
        """Total net salary and record count per payment status."""

        raise NotImplementedError
