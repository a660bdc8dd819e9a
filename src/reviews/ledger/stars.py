"""Star arithmetic shared by the aggregate rating and every review card.

Rounding is pinned to ROUND_HALF_UP on the decimal representation of the
ratings, so ``3.95`` shows as ``4.0`` and ``4.5`` lights five stars.
"""

from decimal import ROUND_HALF_UP, Decimal
from enum import Enum

MAX_STARS = 5

_ONE_DECIMAL = Decimal("0.1")
_WHOLE = Decimal("1")


class StarSlot(Enum):
    FILLED = "filled"
    EMPTY = "empty"


def _as_decimal(value) -> Decimal:
    # str() keeps 3.4 as Decimal("3.4") instead of its binary expansion
    return Decimal(str(value))


def round_half_up(value, places: int = 0) -> Decimal:
    """Round ``value`` to ``places`` decimals, halves away from zero."""
    exponent = _WHOLE if places == 0 else Decimal(1).scaleb(-places)
    return _as_decimal(value).quantize(exponent, rounding=ROUND_HALF_UP)


def average_of(ratings) -> float:
    """Mean of ``ratings`` rounded to one decimal place; 0.0 when there are none."""
    values = [_as_decimal(r) for r in ratings]
    if not values:
        return 0.0
    mean = sum(values) / len(values)
    return float(mean.quantize(_ONE_DECIMAL, rounding=ROUND_HALF_UP))


def filled_count(value) -> int:
    filled = int(round_half_up(value))
    return max(0, min(MAX_STARS, filled))


def star_display(value) -> tuple[StarSlot, ...]:
    """Five slots, the first ``round(value)`` of them filled."""
    filled = filled_count(value)
    return tuple(StarSlot.FILLED if slot < filled else StarSlot.EMPTY for slot in range(MAX_STARS))
