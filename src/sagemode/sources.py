"""Boundary readers for the tracking service's intervals and host metrics."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Protocol

import psutil
from pydantic import BaseModel, ConfigDict, ValidationError, model_validator

from .models import SystemMetrics, TimeInterval
from .normalization import normalize_app_name

logger = logging.getLogger(__name__)


class IntervalSourceError(RuntimeError):
    """Raised when the interval snapshot cannot be obtained."""


class IntervalRecord(BaseModel):
    """One foreground session as emitted by the tracking service."""

    app_name: str
    start_time: int
    end_time: int

    model_config = ConfigDict(extra="forbid")

    @model_validator(mode="after")
    def _check_order(self) -> "IntervalRecord":
        if self.end_time < self.start_time:
            raise ValueError("end_time must not be before start_time")
        return self

    def to_interval(self) -> TimeInterval:
        return TimeInterval(
            app_name=normalize_app_name(self.app_name),
            start_time=self.start_time,
            end_time=self.end_time,
        )


class IntervalSource(Protocol):
    def fetch(self) -> list[TimeInterval]: ...

    def describe(self) -> str: ...


class JsonLinesIntervalSource:
    """Reads ``{"app_name", "start_time", "end_time"}`` objects, one per line."""

    def __init__(self, path: Path) -> None:
        self.path = Path(path)

    def describe(self) -> str:
        return str(self.path)

    def fetch(self) -> list[TimeInterval]:
        try:
            text = self.path.read_text(encoding="utf-8")
        except OSError as exc:
            raise IntervalSourceError(f"Cannot read intervals from {self.path}: {exc}") from exc

        intervals: list[TimeInterval] = []
        skipped = 0
        for line_number, line in enumerate(text.splitlines(), start=1):
            if not line.strip():
                continue
            try:
                record = IntervalRecord.model_validate_json(line)
            except ValidationError as exc:
                skipped += 1
                logger.warning(
                    "Skipping malformed interval on line %d of %s: %s",
                    line_number,
                    self.path,
                    exc.errors()[0]["msg"],
                )
                continue
            intervals.append(record.to_interval())
        logger.debug("Read %d intervals (%d skipped) from %s", len(intervals), skipped, self.path)
        return intervals


class SystemMetricsProbe:
    """Samples CPU and memory utilization via psutil."""

    def __init__(self, cpu_sample_seconds: float = 0.1) -> None:
        self._cpu_sample_seconds = cpu_sample_seconds

    def read(self) -> SystemMetrics:
        per_cpu = psutil.cpu_percent(interval=self._cpu_sample_seconds, percpu=True)
        cpu = sum(per_cpu) / len(per_cpu) if per_cpu else 0.0
        memory = psutil.virtual_memory()
        memory_percent = memory.used / memory.total * 100 if memory.total else 0.0
        return SystemMetrics(cpu_percent=float(cpu), memory_percent=float(memory_percent))


def list_active_processes() -> list[str]:
    """Return the distinct names of running processes, sorted case-insensitively."""
    names: set[str] = set()
    for process in psutil.process_iter(["name"]):
        name = process.info.get("name")
        if name:
            names.add(normalize_app_name(name))
    return sorted(names, key=str.casefold)
