from __future__ import annotations

import io
from typing import Sequence

import pandas as pd

from .model import SalaryRecord

REGISTER_COLUMNS = {
    "salary_id": "Salary ID",
    "employee_id": "Employee ID",
    "employee_name": "Employee",
    "month": "Month",
    "basic_salary": "Basic Salary",
    "allowances": "Allowances",
    "OT_amount_normal": "OT (Normal)",
    "OT_amount_holiday": "OT (Holiday)",
    "gross_salary": "Gross Salary",
    "EPF_employee": "EPF (Employee 8%)",
    "tax_deduction": "PAYE",
    "loan_deduction": "Loan Repayment",
    "short_hours_deduction": "Short Hours",
    "net_salary": "Net Salary",
    "EPF_company": "EPF (Company 12%)",
    "ETF_company": "ETF (Company 3%)",
    "payment_status": "Status",
}


def salary_register_frame(records: Sequence[SalaryRecord]) -> pd.DataFrame:
    """One row per salary record, money columns rounded to 2 decimals."""

    df = pd.DataFrame([r.to_dict() for r in records], columns=list(REGISTER_COLUMNS))
    money = [c for c in REGISTER_COLUMNS if c not in ("salary_id", "employee_id", "employee_name", "month", "payment_status")]
    df[money] = df[money].astype(float).round(2)
    return df.rename(columns=REGISTER_COLUMNS)


def salary_register_xlsx(records: Sequence[SalaryRecord]) -> io.BytesIO:
    # Written in memory, never to disk.
    output = io.BytesIO()
    with pd.ExcelWriter(output, engine="openpyxl") as writer:
        salary_register_frame(records).to_excel(writer, index=False, sheet_name="Salaries")
    output.seek(0)
    return output
