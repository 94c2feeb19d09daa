"""Configuration models and helpers for the dashboard."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import timedelta
from typing import Iterable

from .geometry import HOUR_HEIGHT, MIN_DURATION_DISPLAY, MIN_ENTRY_HEIGHT, TimelineGeometry
from .layout import DEFAULT_MARGIN_PCT


@dataclass(slots=True)
class DashboardSettings:
    """Runtime configuration for the refresh loop and timeline presentation."""

    hour_height: float = HOUR_HEIGHT
    min_duration_display: int = MIN_DURATION_DISPLAY
    min_entry_height: float = MIN_ENTRY_HEIGHT
    margin_pct: float = DEFAULT_MARGIN_PCT
    refresh_interval: timedelta = timedelta(seconds=1)
    excluded_apps: tuple[str, ...] = ("sagemode",)

    @classmethod
    def from_options(
        cls,
        refresh_seconds: float,
        excluded_apps: Iterable[str] | None = None,
        hour_height: float | None = None,
        margin_pct: float | None = None,
    ) -> "DashboardSettings":
        settings = cls(refresh_interval=timedelta(seconds=refresh_seconds))
        if excluded_apps:
            settings.excluded_apps = tuple(
                name.strip() for name in excluded_apps if name.strip()
            )
        if hour_height is not None:
            settings.hour_height = hour_height
        if margin_pct is not None:
            settings.margin_pct = margin_pct
        return settings

    def geometry(self) -> TimelineGeometry:
        return TimelineGeometry(
            hour_height=self.hour_height,
            min_duration_display=self.min_duration_display,
            min_entry_height=self.min_entry_height,
        )
