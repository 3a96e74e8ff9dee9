from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import EmployeeSnapshot


class EmployeeRepository(Protocol):
    def get_by_id(self, employee_id: int) -> Optional[EmployeeSnapshot]:
        raise NotImplementedError

    def list_by_ids(self, employee_ids: Sequence[int]) -> Sequence[EmployeeSnapshot]:
        """Known employees among ``employee_ids``; unknown ids are left out."""

        raise NotImplementedError

    def count_active(self) -> int:
        raise NotImplementedError
