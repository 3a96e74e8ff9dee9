from __future__ import annotations

import calendar
from dataclasses import dataclass
from datetime import date

from ..common.validators import require_valid_month
from ..core.exceptions import InvalidPeriodError


@dataclass(frozen=True)
class MonthPeriod:
    year: int
    month: int
    total_days: int
    start_date: date
    end_date: date

    def contains(self, day: date) -> bool:
        return self.start_date <= day <= self.end_date

    def days(self):
        for d in range(1, self.total_days + 1):
            yield date(self.year, self.month, d)


def month_period(year: int, month: int) -> MonthPeriod:
    """Calendar facts for a Gregorian month; leap years included."""
    require_valid_month(month)
    if not isinstance(year, int) or not date.min.year <= year <= date.max.year:
        raise InvalidPeriodError(f"year is not a calendar year: {year!r}")
    total_days = calendar.monthrange(year, month)[1]
    return MonthPeriod(
        year=year,
        month=month,
        total_days=total_days,
        start_date=date(year, month, 1),
        end_date=date(year, month, total_days),
    )
