from __future__ import annotations

from datetime import date, timedelta
from decimal import Decimal

import pytest

from src.payroll_system.payroll_system.attendance.memory_attendance_repository import InMemoryAttendanceRepository
from src.payroll_system.payroll_system.attendance.model import AttendanceRecord
from src.payroll_system.payroll_system.core.enums import AttendanceStatus
from src.payroll_system.payroll_system.core.exceptions import (
    InvalidPeriodError,
    MissingEmployeeError,
    NegativeMonetaryInputError,
)
from src.payroll_system.payroll_system.employees.memory_employee_repository import InMemoryEmployeeRepository
from src.payroll_system.payroll_system.employees.model import EmployeeSnapshot
from src.payroll_system.payroll_system.payments.memory_payment_repository import InMemoryPaymentRepository
from src.payroll_system.payroll_system.payments.model import Payment
from src.payroll_system.payroll_system.payroll.service import PayrollService


class FakeAttendanceRepo:
    def __init__(self, rows):
        self._rows = rows
        self.last_args = None

    def get_between(self, *, start_date: date, end_date: date, employee_id=None):
        self.last_args = {"start_date": start_date, "end_date": end_date, "employee_id": employee_id}
        return self._rows


class FakePaymentRepo:
    def __init__(self, rows):
        self._rows = rows
        self.last_args = None

    def list_for_period(self, *, employee_id, year, month=None):
        self.last_args = {"employee_id": employee_id, "year": year, "month": month}
        return self._rows


def _payment(pid, amount, month, year, employee_id=1, paid_on=None):
    return Payment(
        payment_id=pid,
        employee_id=employee_id,
        amount=Decimal(amount),
        payment_date=paid_on or date(year, month, 5),
        month=month,
        year=year,
    )


def _service(employees=None, records=(), payments=()):
    employees = employees or [EmployeeSnapshot(employee_id=1, monthly_salary=Decimal("31000"), full_name="A")]
    return PayrollService(
        InMemoryEmployeeRepository(employees),
        InMemoryAttendanceRepository(records),
        InMemoryPaymentRepository(payments),
    )


def test_monthly_payslip_queries_month_bounds_and_payment_bucket():
    attendance = FakeAttendanceRepo([])
    payments = FakePaymentRepo([])
    svc = PayrollService(
        InMemoryEmployeeRepository([EmployeeSnapshot(employee_id=7, monthly_salary=Decimal("1000"))]),
        attendance,
        payments,
    )

    svc.monthly_payslip(employee_id=7, month=2, year=2024)

    assert attendance.last_args == {"start_date": date(2024, 2, 1), "end_date": date(2024, 2, 29), "employee_id": 7}
    assert payments.last_args == {"employee_id": 7, "year": 2024, "month": 2}


def test_monthly_payslip_reconciles_tagged_payments():
    records = [
        AttendanceRecord(employee_id=1, work_date=date(2025, 1, 1) + timedelta(days=i), status=AttendanceStatus.PRESENT)
        for i in range(31)
    ]
    payments = [
        _payment(1, "5000", 1, 2025, paid_on=date(2024, 12, 28)),
        _payment(2, "3000", 2, 2025, paid_on=date(2025, 1, 30)),
    ]

    payslip = _service(records=records, payments=payments).monthly_payslip(employee_id=1, month=1, year=2025)

    assert payslip.result.net_salary == Decimal("31000")
    assert payslip.result.total_paid == Decimal("5000")
    assert payslip.result.pending_balance == Decimal("26000")
    assert [p.payment_id for p in payslip.payments] == [1]


def test_unknown_employee_is_rejected():
    with pytest.raises(MissingEmployeeError):
        _service().monthly_payslip(employee_id=99, month=1, year=2025)


@pytest.mark.parametrize("month,year", [(0, 2025), (13, 2025), (1, 1999), (1, 2101)])
def test_invalid_period_is_rejected(month, year):
    with pytest.raises(InvalidPeriodError):
        _service().monthly_payslip(employee_id=1, month=month, year=year)


def test_negative_salary_is_rejected_before_computing():
    svc = _service(employees=[EmployeeSnapshot(employee_id=1, monthly_salary=Decimal("-5"))])

    with pytest.raises(NegativeMonetaryInputError):
        svc.monthly_payslip(employee_id=1, month=1, year=2025)


def test_negative_payment_is_rejected():
    svc = _service(payments=[_payment(1, "-100", 1, 2025)])

    with pytest.raises(NegativeMonetaryInputError):
        svc.monthly_payslip(employee_id=1, month=1, year=2025)


def test_yearly_payslip_rolls_up_pending_balances():
    svc = _service(
        employees=[EmployeeSnapshot(employee_id=1, monthly_salary=Decimal("0"), bonus=Decimal("50"))],
        payments=[_payment(1, "20", 3, 2025), _payment(2, "80", 4, 2025)],
    )

    payslip = svc.yearly_payslip(employee_id=1, year=2025)

    assert len(payslip.result.months) == 12
    assert payslip.result.months[2].pending_balance == Decimal("30")
    assert payslip.result.months[3].pending_balance == Decimal("-30")
    assert payslip.result.yearly_pending_total == Decimal("500")


def test_yearly_payslip_rejects_out_of_range_year():
    with pytest.raises(InvalidPeriodError):
        _service().yearly_payslip(employee_id=1, year=1850)


def test_salary_report_spans_months():
    records = [
        AttendanceRecord(employee_id=1, work_date=date(2025, 1, 30), status=AttendanceStatus.PRESENT),
        AttendanceRecord(employee_id=1, work_date=date(2025, 1, 31), status=AttendanceStatus.HALF_DAY),
        AttendanceRecord(employee_id=1, work_date=date(2025, 2, 1), status=AttendanceStatus.ABSENT),
        AttendanceRecord(employee_id=1, work_date=date(2025, 2, 2), status=AttendanceStatus.PRESENT),
        AttendanceRecord(employee_id=1, work_date=date(2025, 2, 10), status=AttendanceStatus.PRESENT),
    ]
    payments = [_payment(1, "300", 1, 2025), _payment(2, "400", 3, 2025)]
    svc = _service(records=records, payments=payments)

    entries = svc.salary_report(start=date(2025, 1, 30), end=date(2025, 2, 2), employee_id=1)

    assert len(entries) == 1
    entry = entries[0]
    assert [line.work_date for line in entry.lines] == [r.work_date for r in records[:4]]
    assert entry.lines[0].daily_salary == Decimal("1000")
    assert entry.lines[1].daily_salary == Decimal("500")
    assert entry.lines[1].deduction == Decimal("500")
    assert entry.lines[2].daily_salary == 0
    assert [m.month for m in entry.months] == [1, 2]
    assert entry.total_salary == Decimal("1000")
    assert entry.total_paid == Decimal("300")
    assert entry.pending_balance == Decimal("700")
    assert [p.payment_id for p in entry.payments] == [1]


def test_salary_report_groups_all_employees():
    employees = [
        EmployeeSnapshot(employee_id=1, monthly_salary=Decimal("3100")),
        EmployeeSnapshot(employee_id=2, monthly_salary=Decimal("6200")),
        EmployeeSnapshot(employee_id=3, monthly_salary=Decimal("9300")),
    ]
    records = [
        AttendanceRecord(employee_id=2, work_date=date(2025, 3, 3), status=AttendanceStatus.PRESENT),
        AttendanceRecord(employee_id=1, work_date=date(2025, 3, 3), status=AttendanceStatus.PAID_LEAVE),
    ]

    entries = _service(employees=employees, records=records).salary_report(start=date(2025, 3, 1), end=date(2025, 3, 31))

    assert [e.employee.employee_id for e in entries] == [1, 2]
    assert [e.total_salary for e in entries] == [Decimal("100"), Decimal("200")]


def test_salary_report_rejects_reversed_range():
    with pytest.raises(InvalidPeriodError):
        _service().salary_report(start=date(2025, 2, 1), end=date(2025, 1, 1))


def test_payment_summary_totals_bucket():
    svc = _service(payments=[_payment(1, "100.25", 5, 2025), _payment(2, "50", 5, 2025), _payment(3, "9", 6, 2025)])

    summary = svc.payment_summary(employee_id=1, month=5, year=2025)

    assert summary.total_paid == Decimal("150.25")
    assert summary.payment_count == 2


def test_attendance_summary_for_range():
    records = [
        AttendanceRecord(employee_id=1, work_date=date(2025, 1, 1), status=AttendanceStatus.PRESENT),
        AttendanceRecord(employee_id=1, work_date=date(2025, 1, 2), status=AttendanceStatus.HALF_DAY),
        AttendanceRecord(employee_id=1, work_date=date(2025, 1, 3), status=AttendanceStatus.ABSENT),
        AttendanceRecord(employee_id=1, work_date=date(2025, 1, 4), status=AttendanceStatus.PAID_LEAVE),
    ]

    summary = _service(records=records).attendance_summary(employee_id=1, start=date(2025, 1, 1), end=date(2025, 1, 3))

    assert summary.total == 3
    assert summary.paid_leave == 0
    assert summary.presence_percentage == Decimal("50")


def _analytics_service():
    employees = [
        EmployeeSnapshot(employee_id=1, monthly_salary=Decimal("3100")),
        EmployeeSnapshot(employee_id=2, monthly_salary=Decimal("3100")),
        EmployeeSnapshot(employee_id=3, monthly_salary=Decimal("3100"), is_active=False),
    ]
    records = [
        AttendanceRecord(employee_id=1, work_date=date(2025, 1, 2), status=AttendanceStatus.PRESENT),
        AttendanceRecord(employee_id=2, work_date=date(2025, 1, 2), status=AttendanceStatus.ABSENT),
        AttendanceRecord(employee_id=1, work_date=date(2025, 1, 1), status=AttendanceStatus.HALF_DAY),
        AttendanceRecord(employee_id=2, work_date=date(2025, 1, 1), status=AttendanceStatus.PAID_LEAVE),
        AttendanceRecord(employee_id=1, work_date=date(2025, 1, 5), status=AttendanceStatus.PRESENT),
    ]
    return _service(employees=employees, records=records)


def test_attendance_analytics_covers_all_employees_with_daily_breakdown():
    analytics = _analytics_service().attendance_analytics(start=date(2025, 1, 1), end=date(2025, 1, 3))

    assert (analytics.summary.total, analytics.summary.present, analytics.summary.absent) == (4, 1, 1)
    assert (analytics.summary.half_day, analytics.summary.paid_leave) == (1, 1)
    assert analytics.summary.presence_percentage == Decimal("62.5")
    assert analytics.active_employees == 2
    assert [d.work_date for d in analytics.daily] == [date(2025, 1, 1), date(2025, 1, 2)]
    assert (analytics.daily[0].summary.half_day, analytics.daily[0].summary.paid_leave) == (1, 1)
    assert (analytics.daily[1].summary.present, analytics.daily[1].summary.absent) == (1, 1)


def test_attendance_analytics_for_empty_range():
    analytics = _analytics_service().attendance_analytics(start=date(2025, 6, 1), end=date(2025, 6, 30))

    assert analytics.summary.total == 0
    assert analytics.summary.presence_percentage == 0
    assert analytics.daily == []
    assert analytics.active_employees == 2


def test_attendance_analytics_accepts_open_bounds():
    attendance = FakeAttendanceRepo([])
    svc = PayrollService(InMemoryEmployeeRepository(), attendance, FakePaymentRepo([]))

    svc.attendance_analytics(start=date(2025, 1, 3))
    assert attendance.last_args == {"start_date": date(2025, 1, 3), "end_date": date.max, "employee_id": None}

    svc.attendance_analytics(end=date(2025, 1, 3))
    assert attendance.last_args == {"start_date": date.min, "end_date": date(2025, 1, 3), "employee_id": None}

    assert _analytics_service().attendance_analytics().summary.total == 5


def test_attendance_analytics_rejects_reversed_range():
    with pytest.raises(InvalidPeriodError):
        _service().attendance_analytics(start=date(2025, 2, 1), end=date(2025, 1, 1))


def test_salary_report_for_all_employees_rejects_unknown_employee():
    records = [
        AttendanceRecord(employee_id=1, work_date=date(2025, 3, 3), status=AttendanceStatus.PRESENT),
        AttendanceRecord(employee_id=9, work_date=date(2025, 3, 3), status=AttendanceStatus.PRESENT),
    ]

    with pytest.raises(MissingEmployeeError):
        _service(records=records).salary_report(start=date(2025, 3, 1), end=date(2025, 3, 31))
