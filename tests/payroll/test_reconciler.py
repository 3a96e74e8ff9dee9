from datetime import date
from decimal import Decimal

import pytest

from src.payroll_system.payroll_system.core.exceptions import NegativeMonetaryInputError
from src.payroll_system.payroll_system.payments.model import Payment
from src.payroll_system.payroll_system.payroll.reconciler import PaymentReconciler


def _payment(pid, amount, *, month=1, year=2025, employee_id=1, paid_on=None):
    return Payment(
        payment_id=pid,
        employee_id=employee_id,
        amount=Decimal(amount),
        payment_date=paid_on or date(year, month, 10),
        month=month,
        year=year,
    )


def test_pending_balance_is_net_minus_paid():
    payments = [_payment(1, "1000"), _payment(2, "250.50")]

    paid, pending = PaymentReconciler().reconcile(Decimal("5000"), payments, employee_id=1, month=1, year=2025)

    assert paid == Decimal("1250.50")
    assert pending == Decimal("3749.50")


def test_overpayment_gives_negative_balance():
    paid, pending = PaymentReconciler().reconcile(
        Decimal("1000"), [_payment(1, "1500")], employee_id=1, month=1, year=2025
    )

    assert paid == Decimal("1500")
    assert pending == Decimal("-500")


def test_bucket_follows_tag_not_payment_date():
    advance = _payment(1, "2000", month=1, year=2025, paid_on=date(2024, 12, 20))
    other_month = _payment(2, "700", month=2, year=2025, paid_on=date(2025, 1, 31))
    other_employee = _payment(3, "900", employee_id=2)

    total = PaymentReconciler().total_paid(
        [advance, other_month, other_employee], employee_id=1, month=1, year=2025
    )

    assert total == Decimal("2000")


def test_no_payments_leaves_full_balance():
    paid, pending = PaymentReconciler().reconcile(Decimal("42.10"), [], employee_id=1, month=3, year=2025)

    assert paid == 0
    assert pending == Decimal("42.10")


def test_negative_payment_is_rejected():
    with pytest.raises(NegativeMonetaryInputError):
        PaymentReconciler().total_paid([_payment(1, "-5")], employee_id=1, month=1, year=2025)
