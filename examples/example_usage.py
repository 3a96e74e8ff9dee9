"""Example: compute a payslip through the service layer with in-memory data.

Controllers/exporters stay thin; every number below comes from PayrollService.
"""

import json
from datetime import date, timedelta
from decimal import Decimal

from src.payroll_system.payroll_system.attendance.memory_attendance_repository import InMemoryAttendanceRepository
from src.payroll_system.payroll_system.attendance.model import AttendanceRecord
from src.payroll_system.payroll_system.core.enums import AttendanceStatus
from src.payroll_system.payroll_system.employees.memory_employee_repository import InMemoryEmployeeRepository
from src.payroll_system.payroll_system.employees.model import EmployeeSnapshot
from src.payroll_system.payroll_system.main import create_container
from src.payroll_system.payroll_system.payments.memory_payment_repository import InMemoryPaymentRepository
from src.payroll_system.payroll_system.payments.model import Payment
from src.payroll_system.payroll_system.payroll.presenter import (
    attendance_analytics_to_dict,
    payslip_to_dict,
    yearly_payslip_to_dict,
)


def main():
    employees = InMemoryEmployeeRepository(
        [EmployeeSnapshot(employee_id=1, monthly_salary=Decimal("30000"), code="EMP001", full_name="Demo")]
    )
    attendance = InMemoryAttendanceRepository()
    day = date(2025, 2, 1)
    while day.month == 2:
        status = AttendanceStatus.ABSENT if day.weekday() == 6 else AttendanceStatus.PRESENT
        attendance.add(AttendanceRecord(employee_id=1, work_date=day, status=status))
        day += timedelta(days=1)
    payments = InMemoryPaymentRepository(
        [Payment(payment_id=1, employee_id=1, amount=Decimal("5000"), payment_date=date(2025, 2, 15), month=2, year=2025)]
    )

    container = create_container(employees_repo=employees, attendance_repo=attendance, payments_repo=payments)
    service = container.payroll_service
    print(json.dumps(payslip_to_dict(service.monthly_payslip(employee_id=1, month=2, year=2025)), indent=2))
    print(json.dumps(yearly_payslip_to_dict(service.yearly_payslip(employee_id=1, year=2025)), indent=2))
    print(json.dumps(attendance_analytics_to_dict(service.attendance_analytics(start=date(2025, 2, 1))), indent=2))


if __name__ == "__main__":
    main()
