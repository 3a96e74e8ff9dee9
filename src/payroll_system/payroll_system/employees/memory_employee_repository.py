from __future__ import annotations

from typing import Iterable, Optional, Sequence

from .model import EmployeeSnapshot
from .repository import EmployeeRepository


class InMemoryEmployeeRepository(EmployeeRepository):
    def __init__(self, employees: Iterable[EmployeeSnapshot] = ()):
        self._by_id: dict[int, EmployeeSnapshot] = {}
        for employee in employees:
            self.add(employee)

    def add(self, employee: EmployeeSnapshot) -> None:
        self._by_id[int(employee.employee_id)] = employee

    def get_by_id(self, employee_id: int) -> Optional[EmployeeSnapshot]:
        return self._by_id.get(int(employee_id))

    def list_by_ids(self, employee_ids: Sequence[int]) -> Sequence[EmployeeSnapshot]:
        return [self._by_id[int(i)] for i in employee_ids if int(i) in self._by_id]

    def count_active(self) -> int:
        return sum(1 for e in self._by_id.values() if e.is_active)
