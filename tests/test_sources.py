"""Tests for the interval reader and metrics probe."""

from __future__ import annotations

import logging
from pathlib import Path
from types import SimpleNamespace

import pytest
from pydantic import ValidationError

from sagemode import sources
from sagemode.models import TimeInterval
from sagemode.sources import (
    IntervalRecord,
    IntervalSourceError,
    JsonLinesIntervalSource,
    SystemMetricsProbe,
    list_active_processes,
)


def test_reads_every_line(intervals_file: Path, day_intervals: list[TimeInterval]) -> None:
    assert JsonLinesIntervalSource(intervals_file).fetch() == day_intervals


def test_skips_malformed_lines(tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
    path = tmp_path / "intervals.jsonl"
    path.write_text(
        "\n".join(
            [
                '{"app_name": "Code.exe", "start_time": 0, "end_time": 60}',
                "",
                '{"app_name": "reversed", "start_time": 60, "end_time": 0}',
                "not json",
                '{"app_name": "extra", "start_time": 0, "end_time": 1, "pid": 4}',
                '{"app_name": "Slack", "start_time": 100, "end_time": 160}',
            ]
        ),
        encoding="utf-8",
    )
    with caplog.at_level(logging.WARNING, logger="sagemode.sources"):
        intervals = JsonLinesIntervalSource(path).fetch()

    assert intervals == [TimeInterval("Code", 0, 60), TimeInterval("Slack", 100, 160)]
    assert len([r for r in caplog.records if "Skipping malformed" in r.getMessage()]) == 3


def test_missing_file_raises(tmp_path: Path) -> None:
    source = JsonLinesIntervalSource(tmp_path / "absent.jsonl")
    with pytest.raises(IntervalSourceError):
        source.fetch()


def test_record_rejects_reversed_range() -> None:
    with pytest.raises(ValidationError):
        IntervalRecord(app_name="x", start_time=10, end_time=5)


def test_probe_averages_cores(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(sources.psutil, "cpu_percent", lambda interval, percpu: [10.0, 30.0])
    monkeypatch.setattr(
        sources.psutil, "virtual_memory", lambda: SimpleNamespace(used=25, total=100)
    )
    metrics = SystemMetricsProbe().read()
    assert metrics.cpu_percent == pytest.approx(20.0)
    assert metrics.memory_percent == pytest.approx(25.0)


def test_active_processes_are_distinct_and_sorted(monkeypatch: pytest.MonkeyPatch) -> None:
    fake = [SimpleNamespace(info={"name": name}) for name in ["zsh", "Code.exe", "zsh", None]]
    monkeypatch.setattr(sources.psutil, "process_iter", lambda attrs: iter(fake))
    assert list_active_processes() == ["Code", "zsh"]
