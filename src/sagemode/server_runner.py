"""Serve the SageMode JSON API over uvicorn."""

from __future__ import annotations

import logging
import threading
import time
import webbrowser
from pathlib import Path
from typing import Optional

import uvicorn

from .config import DashboardSettings
from .paths import get_intervals_path
from .sources import JsonLinesIntervalSource
from .webapp import create_app

logger = logging.getLogger(__name__)


def run_dashboard(
    *,
    host: str = "127.0.0.1",
    port: int = 8765,
    intervals_path: Optional[Path] = None,
    settings: Optional[DashboardSettings] = None,
    open_browser: bool = False,
    log_level: str = "info",
) -> None:
    """Read intervals from ``intervals_path`` and serve snapshots until interrupted.

    The refresh thread starts with the app; ``open_browser`` opens the
    interactive API docs once the server has had a moment to bind.
    """
    source = JsonLinesIntervalSource(intervals_path or get_intervals_path())
    app = create_app(source=source, settings=settings or DashboardSettings())
    logger.info("Serving SageMode on http://%s:%d from %s", host, port, source.describe())

    if open_browser:
        threading.Thread(
            target=_open_docs_after_delay, args=(f"http://{host}:{port}/docs",), daemon=True
        ).start()

    logging.getLogger("uvicorn.error").setLevel(log_level.upper())
    uvicorn.run(app, host=host, port=port, log_level=log_level)


def _open_docs_after_delay(url: str, delay_seconds: float = 1.0) -> None:
    time.sleep(delay_seconds)
    try:
        webbrowser.open(url)
    except webbrowser.Error:
        logger.exception("Failed to launch browser for %s", url)
