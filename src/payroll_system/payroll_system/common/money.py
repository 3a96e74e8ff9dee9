from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from fractions import Fraction
from typing import Union

from ..core.constants import MONEY_PLACES
from ..core.exceptions import ValidationError

MoneyLike = Union[Decimal, int, float, str]
Amount = Union[Decimal, Fraction]


def to_decimal(value: MoneyLike, field_name: str = "amount") -> Decimal:
    """Convert a raw monetary value into Decimal.

    Floats go through ``str`` so 0.1 becomes Decimal("0.1") and not its
    binary expansion.
    """
    if isinstance(value, Decimal):
        return value
    if isinstance(value, bool):
        raise ValidationError(f"{field_name} is not a number")
    if isinstance(value, float):
        value = str(value)
    try:
        result = Decimal(str(value).strip()) if isinstance(value, str) else Decimal(value)
    except (InvalidOperation, TypeError, ValueError):
        raise ValidationError(f"{field_name} is not a number: {value!r}")
    if not result.is_finite():
        raise ValidationError(f"{field_name} is not a finite number: {value!r}")
    return result


def exact(value: Amount) -> Fraction:
    return Fraction(value)


def round_money(value: Amount) -> Decimal:
    """Round half-up (away from zero) to 2 places. Only the presenter should call this.

    Exact rationals are rounded directly, so a value sitting on a half cent
    never drifts to the wrong side through an intermediate Decimal.
    """
    if isinstance(value, Fraction):
        cents = int(abs(value) * 100 + Fraction(1, 2))
        rounded = Decimal(cents).scaleb(-2)
        return -rounded if value < 0 else rounded
    return value.quantize(MONEY_PLACES, rounding=ROUND_HALF_UP)


def format_money(value: Union[MoneyLike, Fraction]) -> str:
    if not isinstance(value, Fraction):
        value = to_decimal(value)
    return f"{round_money(value):.2f}"
