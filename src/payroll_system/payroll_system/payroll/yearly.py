from __future__ import annotations

import logging
from fractions import Fraction
from typing import Optional, Sequence

from ..attendance.model import AttendanceRecord
from ..core.exceptions import MissingEmployeeError
from ..employees.model import EmployeeSnapshot
from ..payments.model import Payment
from .calculator.base import PayrollCalculator
from .calculator.monthly_calculator import MonthlyPayrollCalculator
from .model import YearlyPayrollResult
from .period_calendar import month_period

logger = logging.getLogger(__name__)


class YearlyPayrollAggregator:
    """Run the monthly calculator for January..December and sum pending balances."""

    def __init__(self, calculator: Optional[PayrollCalculator] = None):
        self._calculator = calculator or MonthlyPayrollCalculator()

    def compute_year(
        self,
        employee: Optional[EmployeeSnapshot],
        attendance_records: Sequence[AttendanceRecord],
        payments: Sequence[Payment],
        year: int,
    ) -> YearlyPayrollResult:
        if employee is None:
            raise MissingEmployeeError("Employee snapshot is required to compute payroll")

        months = []
        yearly_pending_total = Fraction(0)
        for month in range(1, 13):
            period = month_period(year, month)
            month_records = [r for r in attendance_records if period.contains(r.work_date)]
            month_payments = [p for p in payments if p.month == month and p.year == year]

            result = self._calculator.compute(employee, month_records, month_payments, month, year)
            months.append(result)
            yearly_pending_total += result.pending_balance

        logger.debug(
            "Yearly payroll employee=%s year=%s pending_total=%s",
            employee.employee_id,
            year,
            yearly_pending_total,
        )
        return YearlyPayrollResult(year=year, months=tuple(months), yearly_pending_total=yearly_pending_total)
