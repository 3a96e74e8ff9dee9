from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional

from ..core.enums import AttendanceStatus


@dataclass(frozen=True)
class AttendanceRecord:
    """Domain entity: one employee's attendance mark for one day."""

    employee_id: int
    work_date: date
    status: AttendanceStatus
    note: Optional[str] = None
