"""Generic numeric helpers."""

import math

from .constants import YEAR_SECONDS


def clamp(value: float, low: float, high: float) -> float:
    """Limit value to the closed interval [low, high]."""
    return max(low, min(high, value))


def lerp(start: float, end: float, factor: float) -> float:
    """Linear interpolation between start and end."""
    return start + (end - start) * factor


def map_range(
    value: float, from_min: float, from_max: float, to_min: float, to_max: float
) -> float:
    """Map value from one range onto another.

    Examples:
        >>> map_range(5, 0, 10, 0, 100)
        50.0
    """
    return to_min + (to_max - to_min) * ((value - from_min) / (from_max - from_min))


def seeded_random(seed: float) -> float:
    """Deterministic pseudo-random float in [0, 1) derived from seed.

    Cheap sine hash used for stable per-object noise (e.g. star twinkle or
    placement jitter) where carrying a full RNG would be overkill.
    """
    x = math.sin(seed) * 10000
    return x - math.floor(x)


def years_to_seconds(years: float) -> float:
    return years * YEAR_SECONDS


def seconds_to_years(seconds: float) -> float:
    return seconds / YEAR_SECONDS


def to_roman(number: int) -> str:
    """Convert a positive integer to a Roman numeral.

    Examples:
        >>> to_roman(4)
        'IV'
        >>> to_roman(14)
        'XIV'
    """
    if number <= 0:
        raise ValueError(f"Invalid number: {number} (must be > 0)")

    numerals = [
        (1000, "M"),
        (900, "CM"),
        (500, "D"),
        (400, "CD"),
        (100, "C"),
        (90, "XC"),
        (50, "L"),
        (40, "XL"),
        (10, "X"),
        (9, "IX"),
        (5, "V"),
        (4, "IV"),
        (1, "I"),
    ]
    result = []
    for value, symbol in numerals:
        count, number = divmod(number, value)
        result.append(symbol * count)
    return "".join(result)
