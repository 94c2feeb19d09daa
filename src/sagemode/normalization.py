"""Utilities to clean app names and reject malformed interval records."""

from __future__ import annotations

import re
from typing import Iterable, Optional

from .models import TimeInterval

_EXECUTABLE_SUFFIXES: tuple[str, ...] = (".exe", ".app", ".appimage")

_WHITESPACE_PATTERN = re.compile(r"\s{2,}")


def normalize_app_name(app_name: Optional[str]) -> str:
    """Strip executable suffixes and redundant whitespace from a process name."""
    if not app_name:
        return "Unknown"
    normalized = app_name.strip()
    lowered = normalized.lower()
    for suffix in _EXECUTABLE_SUFFIXES:
        if lowered.endswith(suffix) and len(normalized) > len(suffix):
            normalized = normalized[: -len(suffix)]
            break
    normalized = _WHITESPACE_PATTERN.sub(" ", normalized).strip()
    return normalized or "Unknown"


def valid_intervals(intervals: Iterable[TimeInterval]) -> list[TimeInterval]:
    """Return only intervals that satisfy ``end_time >= start_time``."""
    return [interval for interval in intervals if interval.is_valid]


def is_excluded(app_name: str, excluded_apps: Iterable[str]) -> bool:
    name = app_name.casefold()
    return any(name == excluded.casefold() for excluded in excluded_apps)
