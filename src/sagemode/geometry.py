"""Vertical pixel geometry of the day timeline."""

from __future__ import annotations

import math
from dataclasses import dataclass
from datetime import datetime, tzinfo
from typing import Iterable, Optional

from .models import TimeInterval
from .normalization import valid_intervals

HOUR_HEIGHT = 80.0
MIN_DURATION_DISPLAY = 300
MIN_ENTRY_HEIGHT = 30.0
MIN_DISPLAY_HOURS = 24


@dataclass(frozen=True, slots=True)
class TimelineGeometry:
    """Maps timestamps to pixel offsets on a timeline of ``hour_height`` px/hour.

    Short intervals are floored to ``min_duration_display`` seconds and
    ``min_entry_height`` pixels so they stay visible and clickable.
    """

    hour_height: float = HOUR_HEIGHT
    min_duration_display: int = MIN_DURATION_DISPLAY
    min_entry_height: float = MIN_ENTRY_HEIGHT

    def time_position(self, timestamp: int, tz: Optional[tzinfo] = None) -> float:
        return _hour_of_day(datetime.fromtimestamp(timestamp, tz)) * self.hour_height

    def entry_height(self, start: int, end: int) -> float:
        shown_seconds = max(end - start, self.min_duration_display)
        return max(shown_seconds / 3600 * self.hour_height, self.min_entry_height)

    def timeline_extent(
        self, intervals: Iterable[TimeInterval], tz: Optional[tzinfo] = None
    ) -> float:
        """Height covering every interval plus an hour of padding, at least a day."""
        entries = valid_intervals(intervals)
        if not entries:
            return MIN_DISPLAY_HOURS * self.hour_height

        earliest = datetime.fromtimestamp(min(item.start_time for item in entries), tz)
        midnight = earliest.replace(hour=0, minute=0, second=0, microsecond=0)
        latest_end = max(item.end_time for item in entries)

        first_hour = earliest.hour
        last_hour = math.floor((latest_end - midnight.timestamp()) / 3600)
        span_hours = last_hour - first_hour + 1
        return max(span_hours, MIN_DISPLAY_HOURS) * self.hour_height


def _hour_of_day(value: datetime) -> float:
    return value.hour + value.minute / 60 + value.second / 3600
