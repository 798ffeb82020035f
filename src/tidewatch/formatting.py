"""Numeric rounding and rendering for display values.

Pure functions with no external dependencies.
"""

from __future__ import annotations

import math
from decimal import Decimal

#: Values with at least this many decimal digits get rounded.
ROUND_THRESHOLD_DIGITS = 3


def _decimal_places(value: float) -> int:
    """Digits after the decimal point in the shortest repr of ``value``."""
    exponent = Decimal(repr(value)).as_tuple().exponent
    return max(0, -exponent) if isinstance(exponent, int) else 0


def round_value(value: str | float) -> float:
    """
    Round a magnitude to two decimal places when it carries three or more.

    Text is parsed to a float first. Integral values and values with fewer
    than three decimal digits come back unchanged. Otherwise the value is
    scaled by 100, rounded half away from zero and scaled back, so
    ``19.6401 -> 19.64`` and ``-0.4123 -> -0.41``.

    Unparseable input yields ``nan``; check with :func:`math.isnan` before
    rendering.
    """
    try:
        number = float(value)
    except (TypeError, ValueError):
        return math.nan

    if not math.isfinite(number) or number.is_integer():
        return number
    if _decimal_places(number) < ROUND_THRESHOLD_DIGITS:
        return number

    scaled = number * 100
    rounded = math.copysign(math.floor(abs(scaled) + 0.5), scaled) / 100
    # Collapse -0.0 so it never renders with a sign
    return rounded if rounded != 0 else 0.0


def display_number(value: float) -> str:
    """Render a number without float noise: ``5.0 -> "5"``, ``-0.41 -> "-0.41"``."""
    if math.isfinite(value) and value.is_integer():
        return str(int(value))
    return repr(value)
