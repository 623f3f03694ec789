from __future__ import annotations

import logging
from dataclasses import replace
from datetime import date
from typing import Any, Optional, Sequence

from ..common.datetime_utils import parse_iso_date
from ..common.validators import require_amount, require_positive_int
from ..core.constants import MAX_LOAN_PRINCIPAL
from ..core.enums import LoanStatus
from ..core.exceptions import NotFoundError, ValidationError
from ..employees.repository import EmployeeRepository
from .model import LoanRecord
from .repository import LoanRepository

logger = logging.getLogger(__name__)


def _as_date(value: Any, field_name: str) -> date:
    if isinstance(value, date):
        return value
    try:
        return parse_iso_date(str(value or "").strip())
    except ValueError:
        raise ValidationError(f"{field_name} must be a date (YYYY-MM-DD)")


def _as_status(value: Any) -> LoanStatus:
    try:
        return LoanStatus(value)
    except ValueError:
        allowed = ", ".join(s.value for s in LoanStatus)
        raise ValidationError(f"status must be one of: {allowed}")


def check_loan_invariants(loan: LoanRecord) -> None:
    """Cross-field rules checked on every write."""

    if loan.installment_amount > loan.principal:
        raise ValidationError("Installment amount cannot be greater than the principal amount")
    if loan.end_date <= loan.start_date:
        raise ValidationError("End date must be after the start date")


class LoanService:
    def __init__(self, loans: LoanRepository, employees: EmployeeRepository):
        self._loans = loans
        self._employees = employees

    def _require_employee(self, employee_id: Any) -> int:
        employee_id = require_positive_int(employee_id, "employee_id")
        if not self._employees.get_by_id(employee_id):
            raise NotFoundError(f"Employee {employee_id} not found")
        return employee_id

    def get_loan(self, loan_id: int) -> LoanRecord:
        loan = self._loans.get_by_id(int(loan_id))
        if not loan:
            raise NotFoundError(f"Loan {loan_id} not found")
        return loan

    def get_active_loan(self, employee_id: int) -> Optional[LoanRecord]:
        return self._loans.get_active_for_employee(int(employee_id))

    def list_loans(self, *, employee_id: Optional[int] = None) -> Sequence[LoanRecord]:
        return self._loans.list_loans(employee_id=employee_id)

    def create_loan(
        self,
        *,
        employee_id: Any,
        principal: Any,
        installment_amount: Any,
        start_date: Any,
        end_date: Any,
        remaining: Any = None,
        status: Any = LoanStatus.ACTIVE,
    ) -> LoanRecord:
        principal = require_amount(principal, "principal", maximum=MAX_LOAN_PRINCIPAL)
        draft = LoanRecord(
            loan_id=0,
            employee_id=self._require_employee(employee_id),
            principal=principal,
            installment_amount=require_amount(installment_amount, "installment_amount"),
            remaining=principal if remaining is None else require_amount(remaining, "remaining", allow_zero=True),
            start_date=_as_date(start_date, "start_date"),
            end_date=_as_date(end_date, "end_date"),
            status=_as_status(status),
        )
        check_loan_invariants(draft)

        loan_id = self._loans.create_loan(
            employee_id=draft.employee_id,
            principal=draft.principal,
            installment_amount=draft.installment_amount,
            remaining=draft.remaining,
            start_date=draft.start_date,
            end_date=draft.end_date,
            status=draft.status,
        )
        logger.info("Created loan %s for employee %s (principal=%.2f)", loan_id, draft.employee_id, draft.principal)
        return replace(draft, loan_id=loan_id)

    def update_loan(self, loan_id: int, **changes: Any) -> LoanRecord:
        """Apply a partial update; None values are ignored, invariants are rechecked on the merged loan."""

        current = self.get_loan(loan_id)
        changes = {k: v for k, v in changes.items() if v is not None}

        parsers = {
            "employee_id": self._require_employee,
            "principal": lambda v: require_amount(v, "principal", maximum=MAX_LOAN_PRINCIPAL),
            "installment_amount": lambda v: require_amount(v, "installment_amount"),
            "remaining": lambda v: require_amount(v, "remaining", allow_zero=True),
            "start_date": lambda v: _as_date(v, "start_date"),
            "end_date": lambda v: _as_date(v, "end_date"),
            "status": _as_status,
        }
        unknown = set(changes) - set(parsers)
        if unknown:
            raise ValidationError(f"Unknown loan fields: {', '.join(sorted(unknown))}")

        updated = replace(current, **{k: parsers[k](v) for k, v in changes.items()})
        check_loan_invariants(updated)

        self._loans.update_loan(updated)
        logger.info("Updated loan %s (%s)", loan_id, ", ".join(sorted(changes)) or "no changes")
        return updated

    def delete_loan(self, loan_id: int) -> None:
        if not self._loans.delete_by_id(int(loan_id)):
            raise NotFoundError(f"Loan {loan_id} not found")
        logger.info("Deleted loan %s", loan_id)
