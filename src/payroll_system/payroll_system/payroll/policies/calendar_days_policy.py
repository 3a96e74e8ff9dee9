from __future__ import annotations

from ...core.enums import WorkingDayPolicyName
from ..period_calendar import MonthPeriod
from .base import WorkingDayPolicy


class CalendarDaysPolicy(WorkingDayPolicy):
    """Every calendar day is a working day, weekends and holidays included."""

    name = WorkingDayPolicyName.CALENDAR.value

    def working_days(self, period: MonthPeriod) -> int:
        return period.total_days
