from __future__ import annotations

from typing import Iterable, Optional, Sequence

from .model import Payment
from .repository import PaymentRepository


class InMemoryPaymentRepository(PaymentRepository):
    def __init__(self, payments: Iterable[Payment] = ()):
        self._payments: list[Payment] = list(payments)

    def add(self, payment: Payment) -> None:
        self._payments.append(payment)

    def list_for_period(
        self,
        *,
        employee_id: int,
        year: int,
        month: Optional[int] = None,
    ) -> Sequence[Payment]:
        items = [
            p
            for p in self._payments
            if p.employee_id == int(employee_id) and p.year == int(year) and (month is None or p.month == int(month))
        ]
        items.sort(key=lambda p: (p.payment_date, p.payment_id))
        return items
