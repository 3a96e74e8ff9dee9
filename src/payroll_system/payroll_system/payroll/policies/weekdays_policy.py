from __future__ import annotations

from datetime import date
from typing import Iterable

from ...core.enums import WorkingDayPolicyName
from ..period_calendar import MonthPeriod
from .base import WorkingDayPolicy


class WeekdaysPolicy(WorkingDayPolicy):
    """Monday to Friday, minus listed holidays."""

    name = WorkingDayPolicyName.WEEKDAYS.value

    def __init__(self, holidays: Iterable[date] = ()):
        self._holidays = frozenset(holidays)

    def working_days(self, period: MonthPeriod) -> int:
        return sum(1 for d in period.days() if d.weekday() < 5 and d not in self._holidays)
