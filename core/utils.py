import math
from typing import Iterable, List


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves going up.

    Sub-scores are always non-negative, so this is the same as rounding half
    away from zero. It operates on the float product as computed, e.g.
    ``5 * 0.7`` is ``3.4999999999999996`` and rounds to 3.

    Args:
        value: Non-negative score value

    Returns:
        Rounded integer
    """
    return int(math.floor(value + 0.5))


def lower_all(values: Iterable[str]) -> List[str]:
    """Lowercase every string in an iterable, skipping None entries."""
    return [v.lower() for v in values if v is not None]


def contains_either_way(a: str, b: str) -> bool:
    """True if either string is a substring of the other."""
    return a in b or b in a
