from __future__ import annotations

import math
import re


def clamp_score(value: float, min_value: int = 0, max_value: int = 100) -> int:
    return int(max(min_value, min(int(value), max_value)))


def round_half_up(value: float) -> int:
    """Round to the nearest integer with .5 going up (2.5 -> 3, not 2)."""
    return int(math.floor(value + 0.5))


def words(text: str) -> list[str]:
    return (text or "").split()


def integer_mean(values: list[int]) -> int:
    if not values:
        return 0
    return round_half_up(sum(values) / len(values))


_DIGIT_RE = re.compile(r"[0-9]")


def has_digit(text: str) -> bool:
    return bool(_DIGIT_RE.search(text or ""))
