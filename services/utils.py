"""Small numeric helpers shared by the analyzers."""
import math


def clamp(value: float, low: float = 0.0, high: float = 1.0) -> float:
    return max(low, min(high, value))


def to_percent(value: float) -> int:
    """Scale a [0, 1] score to an integer in [0, 100], rounding halves up."""
    return int(math.floor(clamp(value) * 100.0 + 0.5))
