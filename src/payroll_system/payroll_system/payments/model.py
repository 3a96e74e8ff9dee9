from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Optional


@dataclass(frozen=True)
class Payment:
    """Domain entity: money disbursed to an employee.

    ``month``/``year`` tag the payroll bucket the payment settles; they may
    differ from ``payment_date`` (advances).
    """

    payment_id: int
    employee_id: int
    amount: Decimal
    payment_date: date
    month: int
    year: int
    remarks: Optional[str] = None

    def belongs_to(self, *, employee_id: int, month: int, year: int) -> bool:
        return self.employee_id == employee_id and self.month == month and self.year == year
