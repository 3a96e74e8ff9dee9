from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Iterable, Optional, Sequence

from ..core.constants import HALF_DAY_FACTOR, ZERO
from ..core.enums import AttendanceStatus
from .model import AttendanceRecord


@dataclass(frozen=True)
class AttendanceSummary:
    total: int
    present: int
    absent: int
    half_day: int
    paid_leave: int

    @property
    def effective_days(self) -> Decimal:
        return Decimal(self.present + self.paid_leave) + HALF_DAY_FACTOR * self.half_day

    @property
    def presence_percentage(self) -> Decimal:
        """Effective days over marked days; 0 when nothing was marked."""
        if not self.total:
            return ZERO
        return self.effective_days * 100 / Decimal(self.total)


def summarize_attendance(records: Iterable[AttendanceRecord]) -> AttendanceSummary:
    counts = {status: 0 for status in AttendanceStatus}
    total = 0
    for r in records:
        counts[AttendanceStatus(r.status)] += 1
        total += 1
    return AttendanceSummary(
        total=total,
        present=counts[AttendanceStatus.PRESENT],
        absent=counts[AttendanceStatus.ABSENT],
        half_day=counts[AttendanceStatus.HALF_DAY],
        paid_leave=counts[AttendanceStatus.PAID_LEAVE],
    )


@dataclass(frozen=True)
class DailyAttendance:
    work_date: date
    summary: AttendanceSummary


@dataclass(frozen=True)
class AttendanceAnalytics:
    """Organisation-wide view: overall counts, active headcount, per-day counts."""

    start_date: Optional[date]
    end_date: Optional[date]
    summary: AttendanceSummary
    active_employees: int
    daily: Sequence[DailyAttendance]


def daily_breakdown(records: Iterable[AttendanceRecord]) -> list[DailyAttendance]:
    """Group records by work date, oldest first, with a summary per day."""
    by_date: dict[date, list[AttendanceRecord]] = {}
    for r in records:
        by_date.setdefault(r.work_date, []).append(r)
    return [DailyAttendance(work_date=d, summary=summarize_attendance(by_date[d])) for d in sorted(by_date)]
