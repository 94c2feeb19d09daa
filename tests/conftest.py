"""Shared fixtures for the SageMode test suite."""

from __future__ import annotations

import json
from datetime import datetime
from pathlib import Path

import pytest

from sagemode.models import SystemMetrics, TimeInterval
from sagemode.sources import IntervalSourceError

DAY = datetime(2026, 1, 15)


def at(hour: int, minute: int = 0, second: int = 0, day: datetime = DAY) -> int:
    """Local Unix timestamp for a wall-clock time on ``day``."""
    return int(day.replace(hour=hour, minute=minute, second=second).timestamp())


class StaticSource:
    def __init__(self, intervals: list[TimeInterval]) -> None:
        self.intervals = list(intervals)
        self.fail = False
        self.calls = 0

    def describe(self) -> str:
        return "static"

    def fetch(self) -> list[TimeInterval]:
        self.calls += 1
        if self.fail:
            raise IntervalSourceError("tracker offline")
        return list(self.intervals)


class FixedProbe:
    def read(self) -> SystemMetrics:
        return SystemMetrics(cpu_percent=12.5, memory_percent=48.0)


@pytest.fixture
def day_intervals() -> list[TimeInterval]:
    """A morning of work: coding, a call over it, then browsing."""
    return [
        TimeInterval("Visual Studio Code", at(9), at(10)),
        TimeInterval("zoom.us", at(9, 30), at(10, 15)),
        TimeInterval("Google Chrome", at(10, 15), at(10, 45)),
        TimeInterval("sagemode", at(10, 45), at(10, 50)),
        TimeInterval("Visual Studio Code", at(11), at(11, 30)),
    ]


@pytest.fixture
def static_source(day_intervals: list[TimeInterval]) -> StaticSource:
    return StaticSource(day_intervals)


@pytest.fixture
def intervals_file(tmp_path: Path, day_intervals: list[TimeInterval]) -> Path:
    path = tmp_path / "intervals.jsonl"
    lines = [
        json.dumps(
            {
                "app_name": interval.app_name,
                "start_time": interval.start_time,
                "end_time": interval.end_time,
            }
        )
        for interval in day_intervals
    ]
    path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return path
