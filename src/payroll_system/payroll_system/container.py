from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional

from .attendance.memory_attendance_repository import InMemoryAttendanceRepository
from .attendance.repository import AttendanceRepository
from .common.datetime_utils import parse_iso_date
from .core.constants import DEFAULT_MAX_YEAR, DEFAULT_MIN_YEAR
from .core.exceptions import ValidationError
from .employees.memory_employee_repository import InMemoryEmployeeRepository
from .employees.repository import EmployeeRepository
from .payments.memory_payment_repository import InMemoryPaymentRepository
from .payments.repository import PaymentRepository
from .payroll.calculator.monthly_calculator import MonthlyPayrollCalculator
from .payroll.policies.base import WorkingDayPolicy
from .payroll.policies.factory import working_day_policy_for
from .payroll.service import PayrollService
from .payroll.yearly import YearlyPayrollAggregator


def _parse_holidays(raw) -> list[date]:
    holidays = []
    for value in raw:
        try:
            holidays.append(value if isinstance(value, date) else parse_iso_date(str(value).strip()))
        except ValueError:
            raise ValidationError(f"Invalid holiday date: {value!r} (expected YYYY-MM-DD)")
    return holidays


@dataclass(frozen=True)
class Container:
    employees_repo: EmployeeRepository
    attendance_repo: AttendanceRepository
    payments_repo: PaymentRepository

    working_day_policy: WorkingDayPolicy
    calculator: MonthlyPayrollCalculator
    yearly_aggregator: YearlyPayrollAggregator
    payroll_service: PayrollService


def build_container(
    *,
    payroll_config: dict,
    employees_repo: Optional[EmployeeRepository] = None,
    attendance_repo: Optional[AttendanceRepository] = None,
    payments_repo: Optional[PaymentRepository] = None,
) -> Container:
    employees_repo = employees_repo or InMemoryEmployeeRepository()
    attendance_repo = attendance_repo or InMemoryAttendanceRepository()
    payments_repo = payments_repo or InMemoryPaymentRepository()

    holidays = _parse_holidays(payroll_config.get("holidays", ()))
    policy = working_day_policy_for(str(payroll_config.get("working_day_policy", "calendar")), holidays=holidays)

    calculator = MonthlyPayrollCalculator(policy=policy)
    yearly_aggregator = YearlyPayrollAggregator(calculator)
    payroll_service = PayrollService(
        employees_repo,
        attendance_repo,
        payments_repo,
        calculator=calculator,
        aggregator=yearly_aggregator,
        min_year=int(payroll_config.get("min_year", DEFAULT_MIN_YEAR)),
        max_year=int(payroll_config.get("max_year", DEFAULT_MAX_YEAR)),
    )

    return Container(
        employees_repo=employees_repo,
        attendance_repo=attendance_repo,
        payments_repo=payments_repo,
        working_day_policy=policy,
        calculator=calculator,
        yearly_aggregator=yearly_aggregator,
        payroll_service=payroll_service,
    )
