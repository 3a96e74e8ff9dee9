from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from fractions import Fraction

from ..core.constants import HALF_DAY_FACTOR


@dataclass(frozen=True)
class DailyWage:
    earned: Fraction
    deduction: Fraction


@dataclass(frozen=True)
class AttendanceTotals:
    """Folded attendance for one period, money as exact rationals."""

    present_days: int
    absent_days: int
    half_days: int
    paid_leave_days: int
    earned_salary: Fraction
    absent_deduction: Fraction
    half_day_deduction: Fraction

    @property
    def effective_working_days(self) -> Decimal:
        return Decimal(self.present_days + self.paid_leave_days) + HALF_DAY_FACTOR * self.half_days

    @property
    def total_deductions(self) -> Fraction:
        return self.absent_deduction + self.half_day_deduction


@dataclass(frozen=True)
class MonthlyPayrollResult:
    """Read-model returned by the monthly calculator.

    Money fields are exact ``Fraction`` values, so sums across months stay
    exact too; rounding is the presenter's job. They compare equal to the
    matching ``Decimal`` (``Fraction(61, 2) == Decimal("30.5")``).
    """

    year: int
    month: int
    total_days_in_month: int
    working_days: int
    present_days: int
    absent_days: int
    half_days: int
    paid_leave_days: int
    effective_working_days: Decimal
    per_day_salary: Fraction
    earned_salary: Fraction
    bonus_amount: Fraction
    total_earnings: Fraction
    absent_deduction: Fraction
    half_day_deduction: Fraction
    total_deductions: Fraction
    net_salary: Fraction
    total_paid: Fraction
    pending_balance: Fraction


@dataclass(frozen=True)
class YearlyPayrollResult:
    year: int
    months: tuple[MonthlyPayrollResult, ...]
    yearly_pending_total: Fraction
