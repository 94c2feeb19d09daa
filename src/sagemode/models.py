"""Domain models for foreground-app intervals and the values derived from them."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum


@dataclass(frozen=True, slots=True)
class TimeInterval:
    """A contiguous block of time during which one application held focus."""

    app_name: str
    start_time: int
    end_time: int

    @property
    def duration_seconds(self) -> int:
        return self.end_time - self.start_time

    @property
    def is_valid(self) -> bool:
        return self.end_time >= self.start_time


@dataclass(frozen=True, slots=True)
class LayoutInterval:
    """A time interval placed in a horizontal lane of the timeline."""

    app_name: str
    start_time: int
    end_time: int
    column: int
    max_columns: int
    width_pct: float
    left_pct: float

    @property
    def duration_seconds(self) -> int:
        return self.end_time - self.start_time


class Category(str, Enum):
    CODE = "Code"
    MEETINGS = "Meetings"
    EXPLORE = "Explore"
    PRODUCTIVITY = "Productivity"
    OTHER = "Other"


@dataclass(frozen=True, slots=True)
class AppUsage:
    name: str
    total_duration_seconds: int


@dataclass(frozen=True, slots=True)
class CategoryUsage:
    category: Category
    total_duration_seconds: int


@dataclass(frozen=True, slots=True)
class Score:
    """Gamification score: experience points and the level they unlock."""

    xp: int
    level: int
    progress: int

    @classmethod
    def from_xp(cls, xp: int) -> "Score":
        level, progress = divmod(xp, 100)
        return cls(xp=xp, level=level, progress=progress)


@dataclass(frozen=True, slots=True)
class SystemMetrics:
    cpu_percent: float
    memory_percent: float


@dataclass(frozen=True, slots=True)
class TimelineEntry:
    """A laid-out interval with the pixel geometry the timeline view needs."""

    interval: LayoutInterval
    category: Category
    top_px: float
    height_px: float


@dataclass(frozen=True, slots=True)
class DashboardSnapshot:
    """Everything computed in a single refresh pass."""

    generated_at: datetime
    window_start: int
    window_end: int
    timeline: tuple[TimelineEntry, ...]
    timeline_height_px: float
    app_usage: tuple[AppUsage, ...]
    category_usage: tuple[CategoryUsage, ...]
    score: Score
