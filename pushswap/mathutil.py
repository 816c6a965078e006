"""Small numeric helpers: interpolation, clamping, integer extrema and primes."""

from __future__ import annotations

import math

__all__ = [
    "lerp",
    "imax",
    "imin",
    "normalize",
    "clamp01",
    "clamp",
    "is_prime",
    "next_prime",
]


def lerp(a: float, b: float, t: float) -> float:
    """Linearly interpolate between ``a`` and ``b`` by ``t``."""
    return (1.0 - t) * a + t * b


def imax(a: int, b: int) -> int:
    """Return the larger of two integers."""
    return a if a > b else b


def imin(a: int, b: int) -> int:
    """Return the smaller of two integers."""
    return b if a > b else a


def clamp(value: float, lo: float, hi: float) -> float:
    """Limit ``value`` to the closed range ``[lo, hi]``."""
    if value <= lo:
        return lo
    if value >= hi:
        return hi
    return value


def clamp01(value: float) -> float:
    """Limit ``value`` to the range ``[0.0, 1.0]``."""
    return clamp(value, 0.0, 1.0)


def normalize(value: float, lo: float, hi: float) -> float:
    """Map ``value`` from ``[lo, hi]`` onto ``[0, 1]``, clamping the result.

    A degenerate range follows floating-point division semantics: values
    above the range map to 1.0, below it to 0.0, and on it to NaN.
    """
    numerator = value - lo
    denominator = hi - lo
    if denominator == 0:
        if numerator == 0 or math.isnan(numerator):
            return math.nan
        ratio = math.copysign(math.inf, numerator) * math.copysign(1.0, denominator)
    else:
        ratio = numerator / denominator
    return clamp01(ratio)


def is_prime(num: int) -> bool:
    """Tell whether ``num`` is a prime number."""
    if num == 2:
        return True
    if num < 2 or num % 2 == 0:
        return False
    divisor = 3
    while divisor * divisor <= num:
        if num % divisor == 0:
            return False
        divisor += 2
    return True


def next_prime(start: int) -> int:
    """Return the smallest prime greater than or equal to ``start``."""
    candidate = start
    while not is_prime(candidate):
        candidate += 1
    return candidate