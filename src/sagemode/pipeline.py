"""One refresh pass: raw intervals in, everything the dashboard shows out."""

from __future__ import annotations

import logging
from datetime import datetime, tzinfo
from typing import Iterable, Optional

from .aggregation import aggregate_by_app, aggregate_by_category, day_window, filter_window
from .categorizer import categorize
from .config import DashboardSettings
from .layout import layout_intervals
from .models import DashboardSnapshot, TimeInterval, TimelineEntry
from .normalization import is_excluded
from .scoring import compute_score

logger = logging.getLogger(__name__)


def build_timeline(
    intervals: Iterable[TimeInterval],
    settings: DashboardSettings,
    tz: Optional[tzinfo] = None,
) -> tuple[list[TimelineEntry], float]:
    """Lay out ``intervals`` and attach pixel geometry to each entry."""
    geometry = settings.geometry()
    visible = [
        interval
        for interval in intervals
        if not is_excluded(interval.app_name, settings.excluded_apps)
    ]
    entries = [
        TimelineEntry(
            interval=placed,
            category=categorize(placed.app_name),
            top_px=geometry.time_position(placed.start_time, tz),
            height_px=geometry.entry_height(placed.start_time, placed.end_time),
        )
        for placed in layout_intervals(visible, margin_pct=settings.margin_pct)
    ]
    return entries, geometry.timeline_extent(visible, tz)


def build_snapshot(
    intervals: Iterable[TimeInterval],
    *,
    now: datetime,
    settings: Optional[DashboardSettings] = None,
    tz: Optional[tzinfo] = None,
) -> DashboardSnapshot:
    """Compute layout, usage and score for the day containing ``now``."""
    settings = settings or DashboardSettings()
    raw = list(intervals)
    window_start, window_end = day_window(now, tz)
    today = filter_window(raw, window_start, window_end)

    timeline, height = build_timeline(today, settings, tz)
    snapshot = DashboardSnapshot(
        generated_at=now,
        window_start=window_start,
        window_end=window_end,
        timeline=tuple(timeline),
        timeline_height_px=height,
        app_usage=tuple(aggregate_by_app(raw, window_start, window_end)),
        category_usage=tuple(aggregate_by_category(raw, window_start, window_end)),
        score=compute_score(today),
    )
    logger.debug(
        "Snapshot built: %d of %d intervals today, %d timeline entries, xp=%d",
        len(today),
        len(raw),
        len(timeline),
        snapshot.score.xp,
    )
    return snapshot
