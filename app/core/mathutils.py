"""Numeric helpers shared by scoring and aggregation code."""

import math


def round_half_up(value: float, ndigits: int = 0) -> float:
    """Round with ties going towards +infinity (``floor(x + 0.5)``).

    Python's :func:`round` uses banker's rounding, which would turn an
    average of 72.5 into 72 instead of 73.
    """
    factor = 10 ** ndigits
    return math.floor(value * factor + 0.5) / factor


def round_int(value: float) -> int:
    return int(math.floor(value + 0.5))


def mean(values: list[float]) -> float:
    return sum(values) / len(values)
