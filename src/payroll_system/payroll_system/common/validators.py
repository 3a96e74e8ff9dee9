from __future__ import annotations

from datetime import date
from decimal import Decimal
from typing import Optional

from ..core.constants import DEFAULT_MAX_YEAR, DEFAULT_MIN_YEAR, ZERO
from ..core.exceptions import InvalidPeriodError, NegativeMonetaryInputError
from .money import MoneyLike, to_decimal


def require_valid_month(month: int) -> int:
    if not isinstance(month, int) or isinstance(month, bool) or not 1 <= month <= 12:
        raise InvalidPeriodError(f"month must be between 1 and 12, got {month!r}")
    return month


def require_valid_year(year: int, *, min_year: int = DEFAULT_MIN_YEAR, max_year: int = DEFAULT_MAX_YEAR) -> int:
    if not isinstance(year, int) or isinstance(year, bool) or not min_year <= year <= max_year:
        raise InvalidPeriodError(f"year must be between {min_year} and {max_year}, got {year!r}")
    return year


def require_valid_period(
    month: int,
    year: int,
    *,
    min_year: int = DEFAULT_MIN_YEAR,
    max_year: int = DEFAULT_MAX_YEAR,
) -> tuple[int, int]:
    return require_valid_month(month), require_valid_year(year, min_year=min_year, max_year=max_year)


def require_date_range(start: date, end: date) -> tuple[date, date]:
    if start > end:
        raise InvalidPeriodError(f"start date {start.isoformat()} is after end date {end.isoformat()}")
    return start, end


def require_non_negative(value: MoneyLike, field_name: str) -> Decimal:
    amount = to_decimal(value, field_name)
    if amount < ZERO:
        raise NegativeMonetaryInputError(f"{field_name} must not be negative, got {amount}")
    return amount


def coerce_bonus(value: Optional[MoneyLike]) -> Decimal:
    """Blank or missing bonus means no bonus; a negative one is rejected."""
    if value is None:
        return ZERO
    if isinstance(value, str) and not value.strip():
        return ZERO
    return require_non_negative(value, "bonus")
