"""
Display rounding for reported numbers.

Every score, gain and probability a caller sees is rounded to one decimal
with halves rounded up (45.25 -> 45.3, -2.25 -> -2.2). Comparisons and tier
decisions always use full-precision values.
"""

import math


def round_display(value: float) -> float:
    return math.floor(value * 10 + 0.5) / 10
