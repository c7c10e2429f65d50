"""
Numeric helpers for the training transcript.
"""

import math
from decimal import ROUND_DOWN, Decimal, localcontext

# Kept decimal digits -> quantization step; other digit counts keep the integer part
_TRIM_STEPS = {
    0: Decimal(1),
    1: Decimal("0.1"),
    2: Decimal("0.01"),
    3: Decimal("0.001"),
    4: Decimal("0.0001"),
}

# Enough digits for any finite double plus four decimals
_TRIM_PRECISION = 400


def trim(value: float, digits: int) -> float:
    """
    Truncate a value toward zero at a fixed number of decimal digits.

    Works on the shortest decimal form of the value, so inputs such as 1.13
    keep their last digit instead of losing it to binary scaling.

    Args:
        value: Value to truncate
        digits: Number of decimal digits to keep (0-4, anything else keeps 0)

    Returns:
        Truncated value, e.g. trim(3.14159, 2) == 3.14
    """
    if not math.isfinite(value):
        return value

    step = _TRIM_STEPS.get(digits, Decimal(1))
    with localcontext() as ctx:
        ctx.prec = _TRIM_PRECISION
        truncated = Decimal(repr(float(value))).quantize(step, rounding=ROUND_DOWN)
    return float(truncated)


def output10(value: float) -> str:
    """Format a value with three decimals, right aligned in 10 characters."""
    return f"{value:10.3f}"
