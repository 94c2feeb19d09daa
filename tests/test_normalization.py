from __future__ import annotations

from sagemode.models import TimeInterval
from sagemode.normalization import is_excluded, normalize_app_name, valid_intervals


def test_strips_executable_suffix() -> None:
    assert normalize_app_name("Code.exe") == "Code"
    assert normalize_app_name("Slack.app") == "Slack"


def test_collapses_whitespace() -> None:
    assert normalize_app_name("  Google   Chrome ") == "Google Chrome"


def test_missing_name_becomes_unknown() -> None:
    assert normalize_app_name(None) == "Unknown"
    assert normalize_app_name("   ") == "Unknown"


def test_valid_intervals_drops_reversed_records() -> None:
    kept = valid_intervals(
        [TimeInterval("a", 0, 10), TimeInterval("b", 10, 5), TimeInterval("c", 7, 7)]
    )
    assert [item.app_name for item in kept] == ["a", "c"]


def test_exclusion_is_case_insensitive() -> None:
    assert is_excluded("SageMode", ["sagemode"])
    assert not is_excluded("sagemode-helper", ["sagemode"])
