"""Half-up rounding for portion sizes and displayed nutrient amounts.

Python's ``round`` and format specs round exact midpoints to even
(``12.25`` becomes ``12.2``); portion sizes and explanation text round them
up instead (``12.3``).
"""

import math
from decimal import ROUND_HALF_UP, Decimal


def round_half_up(value: float, digits: int = 0) -> float:
    """Round to ``digits`` decimals with midpoints rounded up."""
    scale = 10**digits
    return math.floor(value * scale + 0.5) / scale


def format_half_up(value: float, digits: int = 0) -> str:
    """Format a number with ``digits`` decimals, rounding midpoints away from zero."""
    quantum = Decimal(1).scaleb(-digits)
    return str(Decimal(repr(value)).quantize(quantum, rounding=ROUND_HALF_UP))
