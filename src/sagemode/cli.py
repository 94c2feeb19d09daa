"""Command-line interface for SageMode."""

from __future__ import annotations

import logging
from datetime import datetime
from pathlib import Path
from typing import List, Optional

import typer

from .config import DashboardSettings
from .paths import get_intervals_path
from .server_runner import run_dashboard
from .sources import IntervalSourceError, JsonLinesIntervalSource

app = typer.Typer(help="Foreground-app timeline and usage dashboard.")


@app.callback(no_args_is_help=True)
def main(verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable verbose logs.")) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )


def _parse_day(date: Optional[str]) -> datetime:
    if not date:
        return datetime.now()
    try:
        return datetime.strptime(date, "%Y-%m-%d")
    except ValueError as exc:
        raise typer.BadParameter("expected YYYY-MM-DD", param_hint="--date") from exc


@app.command()
def summary(
    date: Optional[str] = typer.Option(
        None,
        "--date",
        help="Date (YYYY-MM-DD) to summarize. Defaults to today.",
    ),
    intervals_path: Optional[Path] = typer.Option(
        None,
        "--intervals",
        path_type=Path,
        help="JSON Lines file written by the tracking service.",
    ),
) -> None:
    """Print app usage, category totals and sage level for a day."""
    from .reporting import SummaryPrinter

    target = _parse_day(date)
    printer = SummaryPrinter(JsonLinesIntervalSource(intervals_path or get_intervals_path()))
    try:
        printer.print_daily_summary(target)
    except IntervalSourceError as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(code=1) from exc


@app.command()
def timeline(
    date: Optional[str] = typer.Option(
        None,
        "--date",
        help="Date (YYYY-MM-DD) to lay out. Defaults to today.",
    ),
    intervals_path: Optional[Path] = typer.Option(
        None,
        "--intervals",
        path_type=Path,
        help="JSON Lines file written by the tracking service.",
    ),
    exclude: Optional[List[str]] = typer.Option(
        None,
        "--exclude",
        help="App name to hide from the timeline (repeatable).",
    ),
) -> None:
    """Print the timeline lanes assigned to each interval of a day."""
    from .reporting import SummaryPrinter

    target = _parse_day(date)
    settings = DashboardSettings.from_options(refresh_seconds=1.0, excluded_apps=exclude)
    printer = SummaryPrinter(
        JsonLinesIntervalSource(intervals_path or get_intervals_path()), settings
    )
    try:
        printer.print_timeline(target)
    except IntervalSourceError as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(code=1) from exc


@app.command()
def web(
    host: str = typer.Option("127.0.0.1", "--host", help="Interface to bind the dashboard."),
    port: int = typer.Option(
        8765, "--port", min=1, max=65535, help="TCP port for the dashboard."
    ),
    intervals_path: Optional[Path] = typer.Option(
        None,
        "--intervals",
        path_type=Path,
        help="JSON Lines file written by the tracking service.",
    ),
    refresh_seconds: float = typer.Option(
        1.0,
        "--refresh-interval",
        min=0.1,
        help="Seconds between snapshot refreshes.",
    ),
    exclude: Optional[List[str]] = typer.Option(
        None,
        "--exclude",
        help="App name to hide from the timeline (repeatable).",
    ),
    margin_pct: float = typer.Option(
        1.0,
        "--margin",
        min=0.0,
        max=50.0,
        help="Horizontal gap between timeline lanes, in percent.",
    ),
    open_browser: bool = typer.Option(
        False,
        "--open-browser/--no-open-browser",
        help="Open the API docs in your default browser.",
    ),
) -> None:
    """Serve the dashboard API with a background refresh loop."""
    settings = DashboardSettings.from_options(
        refresh_seconds=refresh_seconds,
        excluded_apps=exclude,
        margin_pct=margin_pct,
    )
    run_dashboard(
        host=host,
        port=port,
        intervals_path=intervals_path or get_intervals_path(),
        settings=settings,
        open_browser=open_browser,
    )
