"""Rounding that matches the dashboard's JavaScript ``Math.round``.

Python's ``round`` uses banker's rounding (``round(12.5) == 12``), while the
web client rounds halves up (``Math.round(12.5) == 13``). Persisted and
displayed scores must agree with the client.
"""

import math


def round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def round_to_tenth(value: float) -> float:
    """Round to one decimal place, halves up (``Math.round(v * 10) / 10``)."""
    return math.floor(value * 10 + 0.5) / 10
