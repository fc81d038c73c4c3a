"""Small numeric helpers shared by the engine."""

import math


def round_half_up(value: float, ndigits: int = 0) -> float:
    """
    Round half up (2.5 -> 3, 0.25 -> 0.3).

    The built-in ``round`` rounds half to even.
    """
    factor = 10 ** ndigits
    return math.floor(value * factor + 0.5) / factor


def round_int(value: float) -> int:
    """Round half-up to an integer."""
    return int(math.floor(value + 0.5))
