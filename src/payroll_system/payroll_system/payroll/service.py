from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from fractions import Fraction
from typing import Optional, Sequence

from ..attendance.model import AttendanceRecord
from ..attendance.repository import AttendanceRepository
from ..attendance.summary import AttendanceAnalytics, AttendanceSummary, daily_breakdown, summarize_attendance
from ..common.datetime_utils import iter_months
from ..common.validators import (
    coerce_bonus,
    require_date_range,
    require_non_negative,
    require_valid_period,
    require_valid_year,
)
from ..core.constants import DEFAULT_MAX_YEAR, DEFAULT_MIN_YEAR
from ..core.enums import AttendanceStatus
from ..core.exceptions import DomainError, MissingEmployeeError
from ..employees.model import EmployeeSnapshot
from ..employees.repository import EmployeeRepository
from ..payments.model import Payment
from ..payments.repository import PaymentRepository
from .calculator.base import PayrollCalculator
from .calculator.monthly_calculator import MonthlyPayrollCalculator
from .model import MonthlyPayrollResult, YearlyPayrollResult
from .period_calendar import month_period
from .reconciler import PaymentReconciler
from .wage_resolver import DailyWageResolver
from .yearly import YearlyPayrollAggregator

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Payslip:
    employee: EmployeeSnapshot
    result: MonthlyPayrollResult
    payments: Sequence[Payment]


@dataclass(frozen=True)
class YearlyPayslip:
    employee: EmployeeSnapshot
    result: YearlyPayrollResult


@dataclass(frozen=True)
class SalaryReportLine:
    work_date: date
    status: str
    daily_salary: Fraction
    deduction: Fraction
    note: Optional[str] = None


@dataclass(frozen=True)
class SalaryReportEntry:
    employee: EmployeeSnapshot
    lines: Sequence[SalaryReportLine]
    months: Sequence[MonthlyPayrollResult]
    payments: Sequence[Payment]

    @property
    def total_salary(self) -> Fraction:
        return sum((m.net_salary for m in self.months), Fraction(0))

    @property
    def total_paid(self) -> Fraction:
        return sum((m.total_paid for m in self.months), Fraction(0))

    @property
    def pending_balance(self) -> Fraction:
        return sum((m.pending_balance for m in self.months), Fraction(0))


@dataclass(frozen=True)
class PaymentSummary:
    employee_id: int
    month: int
    year: int
    payments: Sequence[Payment]
    total_paid: Decimal

    @property
    def payment_count(self) -> int:
        return len(self.payments)


class PayrollService:
    """Use cases around the payroll engine.

    Fetches employee/attendance/payment rows, rejects invalid input before the
    engine runs, then hands everything to the calculator.
    """

    def __init__(
        self,
        employees: EmployeeRepository,
        attendance: AttendanceRepository,
        payments: PaymentRepository,
        *,
        calculator: Optional[PayrollCalculator] = None,
        aggregator: Optional[YearlyPayrollAggregator] = None,
        min_year: int = DEFAULT_MIN_YEAR,
        max_year: int = DEFAULT_MAX_YEAR,
    ):
        self._employees = employees
        self._attendance = attendance
        self._payments = payments
        self._calculator = calculator or MonthlyPayrollCalculator()
        self._aggregator = aggregator or YearlyPayrollAggregator(self._calculator)
        self._resolver = DailyWageResolver()
        self._reconciler = PaymentReconciler()
        self._min_year = min_year
        self._max_year = max_year

    def _require_employee(self, employee_id: int) -> EmployeeSnapshot:
        employee = self._employees.get_by_id(int(employee_id))
        if not employee:
            logger.warning("Payroll rejected: employee %s not found", employee_id)
            raise MissingEmployeeError(f"Employee {employee_id} not found")
        return self._check_employee(employee)

    def _require_employees(self, employee_ids: Sequence[int]) -> list[EmployeeSnapshot]:
        found = {e.employee_id: e for e in self._employees.list_by_ids(employee_ids)}
        for employee_id in employee_ids:
            if employee_id not in found:
                logger.warning("Payroll rejected: employee %s not found", employee_id)
                raise MissingEmployeeError(f"Employee {employee_id} not found")
        return [self._check_employee(found[i]) for i in employee_ids]

    def _check_employee(self, employee: EmployeeSnapshot) -> EmployeeSnapshot:
        try:
            require_non_negative(employee.monthly_salary, "monthly salary")
            coerce_bonus(employee.bonus)
        except DomainError as exc:
            logger.warning("Payroll rejected for employee %s: %s", employee.employee_id, exc)
            raise
        return employee

    def _require_payments(self, payments: Sequence[Payment]) -> Sequence[Payment]:
        for p in payments:
            try:
                require_non_negative(p.amount, "payment amount")
            except DomainError as exc:
                logger.warning("Payroll rejected: payment %s: %s", p.payment_id, exc)
                raise
        return payments

    def _check_period(self, month: int, year: int) -> None:
        try:
            require_valid_period(month, year, min_year=self._min_year, max_year=self._max_year)
        except DomainError as exc:
            logger.warning("Payroll rejected: %s", exc)
            raise

    def monthly_payslip(self, *, employee_id: int, month: int, year: int) -> Payslip:
        self._check_period(month, year)
        employee = self._require_employee(employee_id)

        period = month_period(year, month)
        records = self._attendance.get_between(
            start_date=period.start_date,
            end_date=period.end_date,
            employee_id=employee.employee_id,
        )
        payments = self._require_payments(
            self._payments.list_for_period(employee_id=employee.employee_id, year=year, month=month)
        )

        result = self._calculator.compute(employee, records, payments, month, year)
        logger.info(
            "Payslip employee=%s %04d-%02d net=%s pending=%s",
            employee.employee_id,
            year,
            month,
            result.net_salary,
            result.pending_balance,
        )
        return Payslip(employee=employee, result=result, payments=list(payments))

    def yearly_payslip(self, *, employee_id: int, year: int) -> YearlyPayslip:
        try:
            require_valid_year(year, min_year=self._min_year, max_year=self._max_year)
        except DomainError as exc:
            logger.warning("Payroll rejected: %s", exc)
            raise
        employee = self._require_employee(employee_id)

        records = self._attendance.get_between(
            start_date=date(year, 1, 1),
            end_date=date(year, 12, 31),
            employee_id=employee.employee_id,
        )
        payments = self._require_payments(self._payments.list_for_period(employee_id=employee.employee_id, year=year))

        result = self._aggregator.compute_year(employee, records, payments, year)
        logger.info(
            "Yearly payslip employee=%s year=%s pending_total=%s",
            employee.employee_id,
            year,
            result.yearly_pending_total,
        )
        return YearlyPayslip(employee=employee, result=result)

    def salary_report(
        self,
        *,
        start: date,
        end: date,
        employee_id: Optional[int] = None,
    ) -> list[SalaryReportEntry]:
        """Per-employee salary over an arbitrary date range.

        Each month the range touches is run through the monthly calculator with
        only the in-range records, so a partial month still gets its bonus and
        its tagged payments.
        """
        try:
            require_date_range(start, end)
            require_valid_year(start.year, min_year=self._min_year, max_year=self._max_year)
            require_valid_year(end.year, min_year=self._min_year, max_year=self._max_year)
        except DomainError as exc:
            logger.warning("Salary report rejected: %s", exc)
            raise

        if employee_id is not None:
            employees = [self._require_employee(employee_id)]
            records = self._attendance.get_between(start_date=start, end_date=end, employee_id=int(employee_id))
        else:
            records = self._attendance.get_between(start_date=start, end_date=end)
            employees = self._require_employees(sorted({r.employee_id for r in records}))

        by_employee: dict[int, list[AttendanceRecord]] = {}
        for r in records:
            by_employee.setdefault(r.employee_id, []).append(r)

        entries: list[SalaryReportEntry] = []
        for employee in employees:
            emp_records = by_employee.get(employee.employee_id, [])
            if not emp_records:
                continue
            entries.append(self._salary_entry(employee, emp_records, start, end))
        return entries

    def _salary_entry(
        self,
        employee: EmployeeSnapshot,
        records: Sequence[AttendanceRecord],
        start: date,
        end: date,
    ) -> SalaryReportEntry:
        months: list[MonthlyPayrollResult] = []
        payments: list[Payment] = []
        lines: list[SalaryReportLine] = []
        for year, month in iter_months(start, end):
            period = month_period(year, month)
            month_records = [r for r in records if period.contains(r.work_date)]
            month_payments = self._require_payments(
                self._payments.list_for_period(employee_id=employee.employee_id, year=year, month=month)
            )
            result = self._calculator.compute(employee, month_records, month_payments, month, year)
            months.append(result)
            payments.extend(month_payments)

            for r in month_records:
                wage = self._resolver.resolve(r.status, result.per_day_salary)
                lines.append(
                    SalaryReportLine(
                        work_date=r.work_date,
                        status=AttendanceStatus(r.status).value,
                        daily_salary=wage.earned,
                        deduction=wage.deduction,
                        note=r.note,
                    )
                )
        return SalaryReportEntry(employee=employee, lines=lines, months=months, payments=payments)

    def payment_summary(self, *, employee_id: int, month: int, year: int) -> PaymentSummary:
        self._check_period(month, year)
        employee = self._require_employee(employee_id)
        payments = self._require_payments(
            self._payments.list_for_period(employee_id=employee.employee_id, year=year, month=month)
        )
        total = self._reconciler.total_paid(payments, employee_id=employee.employee_id, month=month, year=year)
        return PaymentSummary(
            employee_id=employee.employee_id,
            month=month,
            year=year,
            payments=list(payments),
            total_paid=total,
        )

    def attendance_summary(self, *, employee_id: int, start: date, end: date) -> AttendanceSummary:
        require_date_range(start, end)
        employee = self._require_employee(employee_id)
        records = self._attendance.get_between(start_date=start, end_date=end, employee_id=employee.employee_id)
        return summarize_attendance(records)

    def attendance_analytics(self, *, start: Optional[date] = None, end: Optional[date] = None) -> AttendanceAnalytics:
        """Attendance across all employees, with a per-day breakdown.

        Either bound may be left open; with neither, every record counts.
        """
        if start is not None and end is not None:
            try:
                require_date_range(start, end)
            except DomainError as exc:
                logger.warning("Attendance analytics rejected: %s", exc)
                raise

        records = self._attendance.get_between(start_date=start or date.min, end_date=end or date.max)
        analytics = AttendanceAnalytics(
            start_date=start,
            end_date=end,
            summary=summarize_attendance(records),
            active_employees=self._employees.count_active(),
            daily=daily_breakdown(records),
        )
        logger.info(
            "Attendance analytics %s..%s records=%d days=%d",
            start or "*",
            end or "*",
            analytics.summary.total,
            len(analytics.daily),
        )
        return analytics
