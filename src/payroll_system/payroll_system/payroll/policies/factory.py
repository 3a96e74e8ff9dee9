from __future__ import annotations

from datetime import date
from typing import Iterable

from ...core.enums import WorkingDayPolicyName
from ...core.exceptions import ValidationError
from .base import WorkingDayPolicy
from .calendar_days_policy import CalendarDaysPolicy
from .weekdays_policy import WeekdaysPolicy


def working_day_policy_for(name: str, *, holidays: Iterable[date] = ()) -> WorkingDayPolicy:
    """Factory Pattern: build the policy named by the WORKING_DAY_POLICY setting."""
    try:
        key = WorkingDayPolicyName((name or WorkingDayPolicyName.CALENDAR.value).strip().lower())
    except ValueError:
        raise ValidationError(f"Unknown working day policy: {name!r}")

    if key == WorkingDayPolicyName.WEEKDAYS:
        return WeekdaysPolicy(holidays)
    return CalendarDaysPolicy()
