from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional, Sequence

from ...attendance.model import AttendanceRecord
from ...employees.model import EmployeeSnapshot
from ...payments.model import Payment
from ..model import MonthlyPayrollResult


class PayrollCalculator(ABC):
    """Calculator interface (Strategy Pattern for payroll)."""

    @abstractmethod
    def compute(
        self,
        employee: Optional[EmployeeSnapshot],
        attendance_records: Sequence[AttendanceRecord],
        payments: Sequence[Payment],
        month: int,
        year: int,
    ) -> MonthlyPayrollResult:
        raise NotImplementedError
