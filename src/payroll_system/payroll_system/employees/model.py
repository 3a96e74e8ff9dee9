from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Optional


@dataclass(frozen=True)
class EmployeeSnapshot:
    """Domain entity: the employee fields payroll needs.

    Note: ``bonus`` stays raw here (it may be None or blank); the calculator
    applies the defaulting rule.
    """

    employee_id: int
    monthly_salary: Decimal
    bonus: Optional[Decimal] = None
    code: str = ""
    full_name: str = ""
    designation: str = ""
    is_active: bool = True
