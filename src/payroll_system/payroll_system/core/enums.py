from __future__ import annotations

from enum import Enum


class PaymentStatus(str, Enum):
    """Payment state of a salary record."""

    PENDING = "pending"
    PAID = "paid"


class LoanStatus(str, Enum):
    """Repayment state of an employee loan."""

    ACTIVE = "active"
    COMPLETE = "complete"
