"""Dict views of payroll results for JSON responses and exporters.

This is the only place money is rounded: 2 places, half-up, formatted as
strings so the numbers survive JSON unchanged.
"""

from __future__ import annotations

from ..attendance.summary import AttendanceAnalytics, AttendanceSummary
from ..common.datetime_utils import month_name
from ..common.money import format_money
from ..employees.model import EmployeeSnapshot
from ..payments.model import Payment
from .model import MonthlyPayrollResult
from .service import PaymentSummary, Payslip, SalaryReportEntry, YearlyPayslip


def employee_to_dict(employee: EmployeeSnapshot) -> dict:
    return {
        "id": employee.employee_id,
        "employeeId": employee.code,
        "name": employee.full_name,
        "type": employee.designation,
    }


def payment_to_dict(payment: Payment) -> dict:
    return {
        "id": payment.payment_id,
        "amount": format_money(payment.amount),
        "date": payment.payment_date.isoformat(),
        "month": payment.month,
        "year": payment.year,
        "remarks": payment.remarks,
    }


def monthly_result_to_dict(result: MonthlyPayrollResult) -> dict:
    return {
        "period": {
            "month": month_name(result.month),
            "monthNumber": result.month,
            "year": result.year,
            "totalDays": result.total_days_in_month,
            "workingDays": result.working_days,
        },
        "attendance": {
            "present": result.present_days,
            "halfDay": result.half_days,
            "absent": result.absent_days,
            "paidLeave": result.paid_leave_days,
            "effectiveWorkingDays": f"{result.effective_working_days:.2f}",
        },
        "salary": {
            "perDay": format_money(result.per_day_salary),
            "earned": format_money(result.earned_salary),
            "bonus": format_money(result.bonus_amount),
            "totalEarnings": format_money(result.total_earnings),
        },
        "deductions": {
            "absent": format_money(result.absent_deduction),
            "halfDay": format_money(result.half_day_deduction),
            "total": format_money(result.total_deductions),
        },
        "netSalary": format_money(result.net_salary),
        "totalPaid": format_money(result.total_paid),
        "pendingBalance": format_money(result.pending_balance),
    }


def payslip_to_dict(payslip: Payslip) -> dict:
    data = monthly_result_to_dict(payslip.result)
    data["employee"] = employee_to_dict(payslip.employee)
    data["salary"]["basic"] = format_money(payslip.employee.monthly_salary)
    data["payments"] = [payment_to_dict(p) for p in payslip.payments]
    return data


def yearly_payslip_to_dict(payslip: YearlyPayslip) -> dict:
    result = payslip.result
    return {
        "employee": employee_to_dict(payslip.employee),
        "year": result.year,
        "monthlyData": [
            {
                "month": month_name(m.month),
                "present": m.present_days,
                "absent": m.absent_days,
                "halfDay": m.half_days,
                "paidLeave": m.paid_leave_days,
                "netSalary": format_money(m.net_salary),
                "totalPaid": format_money(m.total_paid),
                "pendingBalance": format_money(m.pending_balance),
            }
            for m in result.months
        ],
        "yearlyTotal": format_money(result.yearly_pending_total),
    }


def salary_report_to_dict(entries: list[SalaryReportEntry]) -> list[dict]:
    out = []
    for e in entries:
        out.append(
            {
                "employee": employee_to_dict(e.employee),
                "records": [
                    {
                        "date": line.work_date.isoformat(),
                        "status": line.status,
                        "dailySalary": format_money(line.daily_salary),
                        "deduction": format_money(line.deduction),
                        "note": line.note,
                    }
                    for line in e.lines
                ],
                "totalSalary": format_money(e.total_salary),
                "payments": [payment_to_dict(p) for p in e.payments],
                "totalPaid": format_money(e.total_paid),
                "pendingBalance": format_money(e.pending_balance),
            }
        )
    return out


def payment_summary_to_dict(summary: PaymentSummary) -> dict:
    return {
        "payments": [payment_to_dict(p) for p in summary.payments],
        "totalPaid": format_money(summary.total_paid),
        "paymentCount": summary.payment_count,
    }


def attendance_summary_to_dict(summary: AttendanceSummary) -> dict:
    return {
        "total": summary.total,
        "present": summary.present,
        "absent": summary.absent,
        "halfDay": summary.half_day,
        "paidLeave": summary.paid_leave,
        "presentPercentage": format_money(summary.presence_percentage),
    }


def attendance_analytics_to_dict(analytics: AttendanceAnalytics) -> dict:
    overview = attendance_summary_to_dict(analytics.summary)
    overview["totalRecords"] = overview.pop("total")
    overview["totalEmployees"] = analytics.active_employees
    return {
        "startDate": analytics.start_date.isoformat() if analytics.start_date else None,
        "endDate": analytics.end_date.isoformat() if analytics.end_date else None,
        "overview": overview,
        "dailyBreakdown": [
            {
                "date": day.work_date.isoformat(),
                "present": day.summary.present,
                "absent": day.summary.absent,
                "halfDay": day.summary.half_day,
                "paidLeave": day.summary.paid_leave,
            }
            for day in analytics.daily
        ],
    }
