"""Compact number formatting."""

import math

UNITS = ("K", "M", "B", "T")


def abbreviate(value: float, mode: str = "floor") -> str:
    """Format a number with a K/M/B/T suffix, e.g. 7_000_000 -> "7M".
    
    Values below 1000 (including all negative values) are printed without
    a suffix. Anything past trillions stays in T units.
    """
    if mode not in ("floor", "round"):
        raise ValueError(f"Unknown rounding mode: {mode!r}")
    
    unit_index = -1
    n = value
    while n >= 1000 and unit_index < len(UNITS) - 1:
        n /= 1000
        unit_index += 1
    
    rounded = round(n) if mode == "round" else math.floor(n)
    
    if unit_index < 0:
        return f"{rounded}"
    return f"{rounded}{UNITS[unit_index]}"
