"""Rounding helpers.

Results are rounded half-up (2.5 -> 3, 24.25 -> 24.3) rather than with
Python's banker's rounding.
"""

import math


def round_half_up(value: float, ndigits: int = 0) -> float:
    """Round ``value`` to ``ndigits`` decimals, ties toward +infinity.

    Non-finite values are returned unchanged.

    Example:
        >>> round_half_up(1617.5)
        1618.0
        >>> round_half_up(24.25, 1)
        24.3
    """
    if not math.isfinite(value):
        return value
    factor = 10**ndigits
    return math.floor(value * factor + 0.5) / factor


def round_to_int(value: float) -> int:
    """Round half-up to the nearest integer."""
    return int(round_half_up(value))
