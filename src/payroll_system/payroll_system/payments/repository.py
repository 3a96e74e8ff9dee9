from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Payment


class PaymentRepository(Protocol):
    def list_for_period(
        self,
        *,
        employee_id: int,
        year: int,
        month: Optional[int] = None,
    ) -> Sequence[Payment]:
        """Payments tagged to the year (and month, when given), by payment date."""

        raise NotImplementedError
