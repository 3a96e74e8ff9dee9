from __future__ import annotations

from fractions import Fraction

from ..core.enums import AttendanceStatus
from .model import AttendanceTotals, DailyWage


class PayrollAccumulator:
    """Running totals over the per-day wages of one period.

    Sums stay exact rationals all the way through.
    """

    def __init__(self) -> None:
        self._counts: dict[AttendanceStatus, int] = {status: 0 for status in AttendanceStatus}
        self._earned = Fraction(0)
        self._absent_deduction = Fraction(0)
        self._half_day_deduction = Fraction(0)

    def add(self, status: AttendanceStatus, wage: DailyWage) -> None:
        status = AttendanceStatus(status)
        self._counts[status] += 1
        self._earned += wage.earned
        if status == AttendanceStatus.ABSENT:
            self._absent_deduction += wage.deduction
        elif status == AttendanceStatus.HALF_DAY:
            self._half_day_deduction += wage.deduction

    def totals(self) -> AttendanceTotals:
        return AttendanceTotals(
            present_days=self._counts[AttendanceStatus.PRESENT],
            absent_days=self._counts[AttendanceStatus.ABSENT],
            half_days=self._counts[AttendanceStatus.HALF_DAY],
            paid_leave_days=self._counts[AttendanceStatus.PAID_LEAVE],
            earned_salary=self._earned,
            absent_deduction=self._absent_deduction,
            half_day_deduction=self._half_day_deduction,
        )
