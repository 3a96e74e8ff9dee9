from __future__ import annotations

from abc import ABC, abstractmethod

from ..period_calendar import MonthPeriod


class WorkingDayPolicy(ABC):
    """Strategy Pattern: decide how many days of a month are paid working days."""

    name: str = ""

    @abstractmethod
    def working_days(self, period: MonthPeriod) -> int:
        raise NotImplementedError
