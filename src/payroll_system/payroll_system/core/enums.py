from __future__ import annotations

from enum import Enum


class AttendanceStatus(str, Enum):
    """Daily attendance states as stored by the attendance sheet."""

    PRESENT = "present"
    ABSENT = "absent"
    HALF_DAY = "half-day"
    PAID_LEAVE = "paid-leave"


class WorkingDayPolicyName(str, Enum):
    """Names accepted by the WORKING_DAY_POLICY setting."""

    CALENDAR = "calendar"
    WEEKDAYS = "weekdays"
