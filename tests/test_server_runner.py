from __future__ import annotations

from pathlib import Path

import pytest

from sagemode import server_runner
from sagemode.config import DashboardSettings


def test_run_dashboard_serves_the_interval_file(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    served = {}

    def fake_run(app, host, port, log_level):
        served.update(app=app, host=host, port=port, log_level=log_level)

    monkeypatch.setattr(server_runner.uvicorn, "run", fake_run)
    intervals = tmp_path / "intervals.jsonl"
    server_runner.run_dashboard(
        port=9000, intervals_path=intervals, settings=DashboardSettings()
    )

    assert served["port"] == 9000
    assert served["host"] == "127.0.0.1"
    runner = served["app"].state.snapshot_runner
    assert runner.is_running() is False
