from __future__ import annotations

from decimal import Decimal
from fractions import Fraction
from typing import Iterable

from ..common.money import Amount, exact
from ..common.validators import require_non_negative
from ..core.constants import ZERO
from ..payments.model import Payment


class PaymentReconciler:
    """Match disbursed payments against a computed net salary.

    Payments are bucketed by their (employee, month, year) tag only; the
    payment date is ignored so advances land in the period they settle.
    """

    def total_paid(self, payments: Iterable[Payment], *, employee_id: int, month: int, year: int) -> Decimal:
        total = ZERO
        for p in payments:
            if p.belongs_to(employee_id=employee_id, month=month, year=year):
                total += require_non_negative(p.amount, "payment amount")
        return total

    def reconcile(
        self,
        net_salary: Amount,
        payments: Iterable[Payment],
        *,
        employee_id: int,
        month: int,
        year: int,
    ) -> tuple[Fraction, Fraction]:
        """Return (total_paid, pending_balance); a negative balance means overpaid."""
        paid = exact(self.total_paid(payments, employee_id=employee_id, month=month, year=year))
        return paid, exact(net_salary) - paid
