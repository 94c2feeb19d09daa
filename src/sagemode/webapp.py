"""FastAPI application that serves the dashboard's computed data as JSON."""

from __future__ import annotations

import logging
import threading
from datetime import datetime
from typing import Any, Callable, Dict, Optional

from fastapi import FastAPI, HTTPException, Query, Request
from fastapi.middleware.cors import CORSMiddleware

from .config import DashboardSettings
from .models import (
    AppUsage,
    CategoryUsage,
    DashboardSnapshot,
    Score,
    TimeInterval,
    TimelineEntry,
)
from .pipeline import build_snapshot
from .sources import IntervalSource, IntervalSourceError, SystemMetricsProbe, list_active_processes

logger = logging.getLogger(__name__)


class SnapshotRunner:
    """Refresh the dashboard snapshot from the interval source in a background thread."""

    def __init__(
        self,
        source: IntervalSource,
        settings: DashboardSettings,
        clock: Callable[[], datetime] = datetime.now,
    ) -> None:
        self._source = source
        self._settings = settings
        self._clock = clock
        self._lock = threading.Lock()
        self._thread: Optional[threading.Thread] = None
        self._stop_event: Optional[threading.Event] = None
        self._intervals: Optional[tuple[TimeInterval, ...]] = None
        self._snapshot: Optional[DashboardSnapshot] = None

    def start(self) -> None:
        with self._lock:
            if self._thread and self._thread.is_alive():
                return
        self._refresh_logged()
        with self._lock:
            stop_event = threading.Event()
            thread = threading.Thread(
                target=self._run_loop,
                args=(stop_event,),
                daemon=True,
            )
            self._thread = thread
            self._stop_event = stop_event
            thread.start()
            logger.info("Snapshot refresh thread started.")

    def stop(self) -> None:
        thread: Optional[threading.Thread] = None
        with self._lock:
            if not self._thread or not self._thread.is_alive() or not self._stop_event:
                return
            self._stop_event.set()
            thread = self._thread
            self._thread = None
            self._stop_event = None
        if thread:
            thread.join(timeout=10)
            logger.info("Snapshot refresh thread stopped.")

    def is_running(self) -> bool:
        with self._lock:
            return bool(self._thread and self._thread.is_alive())

    @property
    def snapshot(self) -> Optional[DashboardSnapshot]:
        with self._lock:
            return self._snapshot

    @property
    def intervals(self) -> Optional[tuple[TimeInterval, ...]]:
        with self._lock:
            return self._intervals

    def refresh_once(self) -> bool:
        """Fetch and recompute; keep the previous snapshot if the source fails."""
        try:
            intervals = tuple(self._source.fetch())
        except (IntervalSourceError, OSError):
            logger.exception(
                "Interval source %s unavailable; keeping last snapshot.",
                self._source.describe(),
            )
            return False
        snapshot = build_snapshot(intervals, now=self._clock(), settings=self._settings)
        with self._lock:
            self._intervals = intervals
            self._snapshot = snapshot
        return True

    def _refresh_logged(self) -> None:
        try:
            self.refresh_once()
        except Exception:
            logger.exception("Snapshot refresh failed; keeping last snapshot.")

    def _run_loop(self, stop_event: threading.Event) -> None:
        interval = self._settings.refresh_interval.total_seconds()
        while not stop_event.wait(interval):
            self._refresh_logged()


def create_app(
    *,
    source: IntervalSource,
    settings: Optional[DashboardSettings] = None,
    metrics_probe: Optional[SystemMetricsProbe] = None,
    clock: Callable[[], datetime] = datetime.now,
) -> FastAPI:
    """Instantiate the FastAPI application."""
    resolved_settings = settings or DashboardSettings()
    runner = SnapshotRunner(source, resolved_settings, clock=clock)
    probe = metrics_probe or SystemMetricsProbe()

    app = FastAPI(title="SageMode", version="0.1.0")
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.state.snapshot_runner = runner

    @app.on_event("startup")
    async def _startup() -> None:
        logging.basicConfig(
            level=logging.INFO,
            format="%(asctime)s %(levelname)s %(name)s %(message)s",
        )
        runner.start()

    @app.on_event("shutdown")
    async def _shutdown() -> None:
        runner.stop()

    @app.get("/api/status")
    def status(request: Request) -> Dict[str, Any]:
        current = request.app.state.snapshot_runner.snapshot
        return {
            "refresh_running": request.app.state.snapshot_runner.is_running(),
            "interval_source": source.describe(),
            "refresh_seconds": resolved_settings.refresh_interval.total_seconds(),
            "last_refreshed": current.generated_at.isoformat() if current else None,
        }

    @app.get("/api/metrics")
    def metrics() -> Dict[str, Any]:
        reading = probe.read()
        return {
            "cpu_percent": reading.cpu_percent,
            "memory_percent": reading.memory_percent,
        }

    @app.get("/api/processes")
    def processes() -> Dict[str, Any]:
        return {"processes": list_active_processes()}

    @app.get("/api/dashboard")
    def dashboard(
        request: Request,
        date: Optional[str] = Query(
            default=None,
            description="Target date in YYYY-MM-DD format. Defaults to today.",
        ),
    ) -> Dict[str, Any]:
        snapshot = _resolve_snapshot(request, date, resolved_settings)
        return {
            "date": _window_date(snapshot),
            "timeline": _timeline_payload(snapshot),
            "app_usage": [_app_usage_payload(usage) for usage in snapshot.app_usage],
            "category_usage": [
                _category_usage_payload(usage) for usage in snapshot.category_usage
            ],
            "score": _score_payload(snapshot.score),
        }

    @app.get("/api/timeline")
    def timeline(
        request: Request,
        date: Optional[str] = Query(
            default=None,
            description="Target date in YYYY-MM-DD format. Defaults to today.",
        ),
    ) -> Dict[str, Any]:
        snapshot = _resolve_snapshot(request, date, resolved_settings)
        return {"date": _window_date(snapshot), **_timeline_payload(snapshot)}

    @app.get("/api/usage/apps")
    def app_usage(
        request: Request,
        date: Optional[str] = Query(default=None, description="YYYY-MM-DD"),
    ) -> Dict[str, Any]:
        snapshot = _resolve_snapshot(request, date, resolved_settings)
        return {
            "date": _window_date(snapshot),
            "apps": [_app_usage_payload(usage) for usage in snapshot.app_usage],
        }

    @app.get("/api/usage/categories")
    def category_usage(
        request: Request,
        date: Optional[str] = Query(default=None, description="YYYY-MM-DD"),
    ) -> Dict[str, Any]:
        snapshot = _resolve_snapshot(request, date, resolved_settings)
        return {
            "date": _window_date(snapshot),
            "categories": [
                _category_usage_payload(usage) for usage in snapshot.category_usage
            ],
        }

    @app.get("/api/score")
    def score(request: Request) -> Dict[str, Any]:
        snapshot = _resolve_snapshot(request, None, resolved_settings)
        return _score_payload(snapshot.score)

    return app


def _resolve_snapshot(
    request: Request, date: Optional[str], settings: DashboardSettings
) -> DashboardSnapshot:
    runner: SnapshotRunner = request.app.state.snapshot_runner
    if date is None:
        current = runner.snapshot
        if current is None:
            raise HTTPException(status_code=503, detail="No snapshot available yet")
        return current

    target_day = _parse_date(date)
    intervals = runner.intervals
    if intervals is None:
        raise HTTPException(status_code=503, detail="No snapshot available yet")
    return build_snapshot(intervals, now=target_day, settings=settings)


def _parse_date(value: str) -> datetime:
    try:
        parsed = datetime.strptime(value, "%Y-%m-%d")
    except ValueError as exc:
        raise HTTPException(status_code=400, detail="Invalid date format") from exc
    return parsed


def _window_date(snapshot: DashboardSnapshot) -> str:
    return datetime.fromtimestamp(snapshot.window_start).strftime("%Y-%m-%d")


def _timeline_payload(snapshot: DashboardSnapshot) -> Dict[str, Any]:
    return {
        "height_px": snapshot.timeline_height_px,
        "entries": [_entry_payload(entry) for entry in snapshot.timeline],
    }


def _entry_payload(entry: TimelineEntry) -> Dict[str, Any]:
    placed = entry.interval
    return {
        "app_name": placed.app_name,
        "category": entry.category.value,
        "start_time": placed.start_time,
        "end_time": placed.end_time,
        "duration_seconds": placed.duration_seconds,
        "column": placed.column,
        "max_columns": placed.max_columns,
        "width_pct": placed.width_pct,
        "left_pct": placed.left_pct,
        "top_px": entry.top_px,
        "height_px": entry.height_px,
    }


def _app_usage_payload(usage: AppUsage) -> Dict[str, Any]:
    return {"name": usage.name, "seconds": usage.total_duration_seconds}


def _category_usage_payload(usage: CategoryUsage) -> Dict[str, Any]:
    return {"category": usage.category.value, "seconds": usage.total_duration_seconds}


def _score_payload(score: Score) -> Dict[str, Any]:
    return {"xp": score.xp, "level": score.level, "progress": score.progress}
