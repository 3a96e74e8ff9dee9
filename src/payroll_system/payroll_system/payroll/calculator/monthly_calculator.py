from __future__ import annotations

import logging
from fractions import Fraction
from typing import Optional, Sequence

from ...attendance.model import AttendanceRecord
from ...common.money import exact
from ...common.validators import coerce_bonus, require_non_negative
from ...core.exceptions import MissingEmployeeError
from ...employees.model import EmployeeSnapshot
from ...payments.model import Payment
from ..accumulator import PayrollAccumulator
from ..model import MonthlyPayrollResult
from ..period_calendar import month_period
from ..policies.base import WorkingDayPolicy
from ..policies.calendar_days_policy import CalendarDaysPolicy
from ..reconciler import PaymentReconciler
from ..wage_resolver import DailyWageResolver
from .base import PayrollCalculator

logger = logging.getLogger(__name__)


class MonthlyPayrollCalculator(PayrollCalculator):
    """Canonical monthly payroll: prorated salary, deductions, reconciliation.

    per_day = monthly_salary / working_days, where working_days comes from the
    policy (every calendar day by default). Each attendance record inside the
    month contributes its earned and deducted amounts; bonus is added on top
    and payments tagged to the month are subtracted to give the pending balance.

    Money stays exact from the per-day rate to the pending balance; nothing
    is rounded here.
    """

    def __init__(
        self,
        *,
        policy: Optional[WorkingDayPolicy] = None,
        resolver: Optional[DailyWageResolver] = None,
        reconciler: Optional[PaymentReconciler] = None,
    ):
        self._policy = policy or CalendarDaysPolicy()
        self._resolver = resolver or DailyWageResolver()
        self._reconciler = reconciler or PaymentReconciler()

    @property
    def policy(self) -> WorkingDayPolicy:
        return self._policy

    def compute(
        self,
        employee: Optional[EmployeeSnapshot],
        attendance_records: Sequence[AttendanceRecord],
        payments: Sequence[Payment],
        month: int,
        year: int,
    ) -> MonthlyPayrollResult:
        if employee is None:
            raise MissingEmployeeError("Employee snapshot is required to compute payroll")

        period = month_period(year, month)
        monthly_salary = require_non_negative(employee.monthly_salary, "monthly salary")
        bonus_amount = exact(coerce_bonus(employee.bonus))

        working_days = self._policy.working_days(period)
        per_day = exact(monthly_salary) / working_days if working_days else Fraction(0)

        acc = PayrollAccumulator()
        skipped = 0
        for r in attendance_records:
            if r.employee_id != employee.employee_id or not period.contains(r.work_date):
                skipped += 1
                continue
            acc.add(r.status, self._resolver.resolve(r.status, per_day))
        if skipped:
            logger.debug(
                "Ignored %d attendance record(s) outside employee=%s %04d-%02d",
                skipped,
                employee.employee_id,
                year,
                month,
            )

        totals = acc.totals()
        total_earnings = totals.earned_salary + bonus_amount
        total_deductions = totals.total_deductions
        net_salary = total_earnings - total_deductions

        total_paid, pending_balance = self._reconciler.reconcile(
            net_salary,
            payments,
            employee_id=employee.employee_id,
            month=month,
            year=year,
        )

        return MonthlyPayrollResult(
            year=year,
            month=month,
            total_days_in_month=period.total_days,
            working_days=working_days,
            present_days=totals.present_days,
            absent_days=totals.absent_days,
            half_days=totals.half_days,
            paid_leave_days=totals.paid_leave_days,
            effective_working_days=totals.effective_working_days,
            per_day_salary=per_day,
            earned_salary=totals.earned_salary,
            bonus_amount=bonus_amount,
            total_earnings=total_earnings,
            absent_deduction=totals.absent_deduction,
            half_day_deduction=totals.half_day_deduction,
            total_deductions=total_deductions,
            net_salary=net_salary,
            total_paid=total_paid,
            pending_balance=pending_balance,
        )
