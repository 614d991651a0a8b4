"""Half-up rounding.

Python's ``round`` uses banker's rounding (``round(13.5) == 14`` but
``round(12.5) == 12``).  Plan distances and paces round halves up so a
12.5 km week is scheduled as 13 km.
"""

from __future__ import annotations

import math


def round_half_up(value: float, ndigits: int = 0) -> float:
    """Round *value* to *ndigits* decimals, halves away from -inf."""
    scale = 10 ** ndigits
    return math.floor(value * scale + 0.5) / scale


def round_int(value: float) -> int:
    """Round *value* half-up to the nearest integer."""
    return math.floor(value + 0.5)
