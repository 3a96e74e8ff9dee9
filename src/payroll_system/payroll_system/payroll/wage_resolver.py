from __future__ import annotations

from fractions import Fraction

from ..core.constants import HALF_DAY_RATE
from ..core.enums import AttendanceStatus
from .model import DailyWage


class DailyWageResolver:
    """Map one attendance status and the per-day rate to earned/deduction amounts.

    Earned and deducted amounts are kept apart because payslips show gross
    earnings and gross deductions as separate lines. A half day shows up on
    both sides: half the rate earned, half the rate deducted.
    """

    def resolve(self, status: AttendanceStatus, per_day_salary: Fraction) -> DailyWage:
        status = AttendanceStatus(status)
        if status in (AttendanceStatus.PRESENT, AttendanceStatus.PAID_LEAVE):
            return DailyWage(earned=per_day_salary, deduction=Fraction(0))
        if status == AttendanceStatus.HALF_DAY:
            half = per_day_salary * HALF_DAY_RATE
            return DailyWage(earned=half, deduction=half)
        return DailyWage(earned=Fraction(0), deduction=per_day_salary)
