from __future__ import annotations

from typing import Optional, Sequence

from .base import PayrollCalculator
from ..model import SalaryFigures
from ..policy import DEFAULT_POLICY, PayrollPolicy
from ..tax import calculate_tax
from ...attendance.model import AttendanceRecord
from ...loans.model import LoanRecord


class StandardPayrollCalculator(PayrollCalculator):
    """Standard rule: overtime beyond the normal day, shortfall per short non-holiday day,
    loan installment, PAYE, EPF/ETF.

    Pure: the caller supplies the month's attendance and the active loan.
    """

    def __init__(self, policy: PayrollPolicy = DEFAULT_POLICY):
        self._policy = policy

    def hourly_rate(self, basic_salary: float) -> float:
        return basic_salary / self._policy.monthly_hours

    def calculate(
        self,
        *,
        basic_salary: float,
        allowances: float,
        attendance: Sequence[AttendanceRecord],
        loan: Optional[LoanRecord],
    ) -> SalaryFigures:
        p = self._policy
        day = p.hours_per_day

        ot_hours_normal = 0.0
        ot_hours_holiday = 0.0
        short_hours_deduction = 0.0

        for record in attendance:
            if record.check_out is None:
                continue
            hours = record.hours_worked
            if record.is_holiday:
                if hours > day:
                    ot_hours_holiday += hours - day
            elif hours > day:
                ot_hours_normal += hours - day
            elif hours < day:
                # Charged against the full basic salary for each short day.
                short_hours_deduction += ((day - hours) / day) * basic_salary

        rate = self.hourly_rate(basic_salary)
        ot_amount_normal = rate * ot_hours_normal * p.normal_ot_multiplier
        ot_amount_holiday = rate * ot_hours_holiday * p.holiday_ot_multiplier
        loan_deduction = loan.installment_amount if loan else 0.0

        gross_salary = basic_salary + allowances + ot_amount_normal + ot_amount_holiday
        tax_deduction = calculate_tax(gross_salary, p)
        epf_employee = basic_salary * p.epf_employee_rate

        net_salary = gross_salary - (epf_employee + loan_deduction + tax_deduction + short_hours_deduction)

        return SalaryFigures(
            ot_hours_normal=ot_hours_normal,
            ot_hours_holiday=ot_hours_holiday,
            ot_amount_normal=ot_amount_normal,
            ot_amount_holiday=ot_amount_holiday,
            short_hours_deduction=short_hours_deduction,
            loan_deduction=loan_deduction,
            tax_deduction=tax_deduction,
            epf_employee=epf_employee,
            epf_company=basic_salary * p.epf_company_rate,
            etf_company=basic_salary * p.etf_company_rate,
            gross_salary=gross_salary,
            net_salary=net_salary,
        )
