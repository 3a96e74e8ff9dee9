"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

from decimal import Decimal
from fractions import Fraction

DEFAULT_MIN_YEAR = 2000
DEFAULT_MAX_YEAR = 2100

HALF_DAY_FACTOR = Decimal("0.5")
MONEY_PLACES = Decimal("0.01")
ZERO = Decimal("0")
HALF_DAY_RATE = Fraction(1, 2)
