from __future__ import annotations

from datetime import datetime

import pandas as pd
import pytest

from payroll_system.payroll.export import salary_register_frame, salary_register_xlsx


def test_register_frame_rounds_money_columns(salary_service, attendance):
    attendance.add_day(1, datetime(2025, 8, 4, 8, 0), datetime(2025, 8, 4, 17, 0))
    record = salary_service.create_salary_record(
        employee_id=1, month="August-2025", basic_salary=60_000, allowances=5_000
    )

    df = salary_register_frame([record])

    assert list(df.columns)[:4] == ["Salary ID", "Employee ID", "Employee", "Month"]
    row = df.iloc[0]
    assert row["OT (Normal)"] == pytest.approx(267.86)
    assert row["Gross Salary"] == pytest.approx(65_267.86)
    assert row["Net Salary"] == pytest.approx(record.figures.net_salary, abs=0.005)
    assert row["Status"] == "pending"


def test_register_xlsx_reads_back(salary_service):
    salary_service.create_salary_record(employee_id=1, month="July-2025", basic_salary=50_000)
    salary_service.create_salary_record(employee_id=2, month="July-2025", basic_salary=40_000)

    out = salary_register_xlsx(salary_service.list_salary_records())
    df = pd.read_excel(out, sheet_name="Salaries", engine="openpyxl")

    assert len(df) == 2
    assert df["Basic Salary"].tolist() == [40_000, 50_000]


def test_register_frame_empty():
    df = salary_register_frame([])

    assert df.empty
    assert "Net Salary" in df.columns
