"""Simple reporting utilities for CLI output."""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from .config import DashboardSettings
from .pipeline import build_snapshot
from .sources import IntervalSource


class SummaryPrinter:
    """Render human-readable summaries in the console."""

    def __init__(
        self, source: IntervalSource, settings: Optional[DashboardSettings] = None
    ) -> None:
        self.source = source
        self.settings = settings or DashboardSettings()

    def print_daily_summary(self, day: datetime) -> None:
        snapshot = build_snapshot(self.source.fetch(), now=day, settings=self.settings)
        if not snapshot.app_usage:
            print("No activity recorded for the selected day.")
            return

        total = sum(usage.total_duration_seconds for usage in snapshot.app_usage)
        score = snapshot.score

        print(f"Summary for {day.strftime('%Y-%m-%d')}")
        print("-" * 40)
        print(f"Tracked time: {format_duration(total)}")
        print(f"Sage level:   {score.level} ({score.progress}/100 chakra, {score.xp} xp)")
        print()

        print("Top apps:")
        for usage in snapshot.app_usage[:5]:
            print(f"  {usage.name:<30} {format_duration(usage.total_duration_seconds)}")

        print()
        print("Categories:")
        for usage in snapshot.category_usage:
            print(
                f"  {usage.category.value:<30} {format_duration(usage.total_duration_seconds)}"
            )

    def print_timeline(self, day: datetime) -> None:
        snapshot = build_snapshot(self.source.fetch(), now=day, settings=self.settings)
        if not snapshot.timeline:
            print("No timeline entries for the selected day.")
            return

        print(f"Timeline for {day.strftime('%Y-%m-%d')}")
        print("-" * 60)
        for entry in snapshot.timeline:
            placed = entry.interval
            start = datetime.fromtimestamp(placed.start_time).strftime("%H:%M:%S")
            end = datetime.fromtimestamp(placed.end_time).strftime("%H:%M:%S")
            lane = f"{placed.column + 1}/{placed.max_columns}"
            print(f"  {start}-{end}  lane {lane:<5} {placed.app_name[:30]:<30} {entry.category.value}")


def format_duration(seconds: float) -> str:
    total_seconds = int(round(seconds))
    hours, remainder = divmod(total_seconds, 3600)
    minutes, secs = divmod(remainder, 60)
    return f"{hours:02d}:{minutes:02d}:{secs:02d}"
