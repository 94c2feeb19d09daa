"""Windowed usage totals per application and per category."""

from __future__ import annotations

from collections import defaultdict
from datetime import date, datetime, tzinfo
from typing import Iterable, Optional

from .categorizer import categorize
from .models import AppUsage, Category, CategoryUsage, TimeInterval
from .normalization import valid_intervals

SECONDS_PER_DAY = 86400


def day_window(day: date, tz: Optional[tzinfo] = None) -> tuple[int, int]:
    """Return ``[midnight, midnight + 1 day)`` for ``day`` as Unix seconds."""
    if isinstance(day, datetime):
        tz = tz or day.tzinfo
    midnight = datetime(day.year, day.month, day.day, tzinfo=tz)
    start = int(midnight.timestamp())
    return start, start + SECONDS_PER_DAY


def filter_window(
    intervals: Iterable[TimeInterval], window_start: int, window_end: int
) -> list[TimeInterval]:
    """Keep valid intervals that start inside ``[window_start, window_end)``."""
    return [
        interval
        for interval in valid_intervals(intervals)
        if window_start <= interval.start_time < window_end
    ]


def aggregate_by_app(
    intervals: Iterable[TimeInterval], window_start: int, window_end: int
) -> list[AppUsage]:
    totals: defaultdict[str, int] = defaultdict(int)
    for interval in filter_window(intervals, window_start, window_end):
        totals[interval.app_name] += interval.duration_seconds
    return [
        AppUsage(name=name, total_duration_seconds=seconds)
        for name, seconds in sorted(totals.items(), key=lambda item: (-item[1], item[0]))
    ]


def aggregate_by_category(
    intervals: Iterable[TimeInterval], window_start: int, window_end: int
) -> list[CategoryUsage]:
    totals: defaultdict[Category, int] = defaultdict(int)
    for interval in filter_window(intervals, window_start, window_end):
        totals[categorize(interval.app_name)] += interval.duration_seconds
    ordered = sorted(totals.items(), key=lambda item: (-item[1], item[0].value))
    return [
        CategoryUsage(category=category, total_duration_seconds=seconds)
        for category, seconds in ordered
    ]
