from __future__ import annotations

from datetime import date
from typing import Iterable, Optional, Sequence

from .model import AttendanceRecord
from .repository import AttendanceRepository


class InMemoryAttendanceRepository(AttendanceRepository):
    def __init__(self, records: Iterable[AttendanceRecord] = ()):
        self._records: list[AttendanceRecord] = list(records)

    def add(self, record: AttendanceRecord) -> None:
        self._records.append(record)

    def get_between(
        self,
        *,
        start_date: date,
        end_date: date,
        employee_id: Optional[int] = None,
    ) -> Sequence[AttendanceRecord]:
        items = [
            r
            for r in self._records
            if start_date <= r.work_date <= end_date and (employee_id is None or r.employee_id == int(employee_id))
        ]
        items.sort(key=lambda r: (r.work_date, r.employee_id))
        return items
