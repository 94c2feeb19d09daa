"""Experience points earned from categorized foreground time."""

from __future__ import annotations

import math
from fractions import Fraction
from typing import Iterable

from .categorizer import categorize
from .models import Category, Score, TimeInterval
from .normalization import valid_intervals

# Per-minute multipliers, as exact fractions.
CATEGORY_WEIGHTS: dict[Category, Fraction] = {
    Category.CODE: Fraction(3),
    Category.PRODUCTIVITY: Fraction(2),
    Category.MEETINGS: Fraction(3, 2),
    Category.EXPLORE: Fraction(1),
    Category.OTHER: Fraction(1, 10),
}


def compute_xp(intervals: Iterable[TimeInterval]) -> int:
    """Sum weighted minutes over every interval given.

    No window filtering happens here; callers pass the scope they want scored
    (typically today's intervals).
    """
    total = Fraction(0)
    for interval in valid_intervals(intervals):
        minutes = Fraction(interval.duration_seconds, 60)
        total += minutes * CATEGORY_WEIGHTS[categorize(interval.app_name)]
    return math.floor(total)


def compute_score(intervals: Iterable[TimeInterval]) -> Score:
    return Score.from_xp(compute_xp(intervals))
