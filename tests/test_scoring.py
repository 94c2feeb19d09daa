"""Tests for XP and sage level computation."""

from __future__ import annotations

import pytest

from sagemode.models import Score, TimeInterval
from sagemode.scoring import compute_score, compute_xp


def test_ten_minutes_of_code() -> None:
    score = compute_score([TimeInterval("Visual Studio Code", 0, 600)])
    assert score == Score(xp=30, level=0, progress=30)


@pytest.mark.parametrize(
    ("app_name", "expected_xp"),
    [
        ("Visual Studio Code", 180),
        ("Notion", 120),
        ("zoom.us", 90),
        ("Firefox", 60),
        ("unknownapp", 6),
    ],
)
def test_category_weights_per_hour(app_name: str, expected_xp: int) -> None:
    assert compute_xp([TimeInterval(app_name, 0, 3600)]) == expected_xp


def test_fractional_xp_is_floored() -> None:
    assert compute_xp([TimeInterval("unknownapp", 0, 599)]) == 0
    assert compute_xp([TimeInterval("Visual Studio Code", 0, 30)]) == 1


def test_many_short_sessions_add_up_exactly() -> None:
    ten_other_minutes = [TimeInterval("unknownapp", i * 100, i * 100 + 60) for i in range(10)]
    assert compute_xp(ten_other_minutes) == 1

    hundred_other_minutes = [
        TimeInterval("unknownapp", i * 100, i * 100 + 60) for i in range(100)
    ]
    assert compute_xp(hundred_other_minutes) == 10

    # 30 x 20s of meetings is 10 minutes at 1.5 per minute.
    calls = [TimeInterval("zoom.us", i * 100, i * 100 + 20) for i in range(30)]
    assert compute_xp(calls) == 15


def test_empty_input_scores_zero() -> None:
    assert compute_score([]) == Score(xp=0, level=0, progress=0)


def test_malformed_interval_does_not_subtract() -> None:
    intervals = [TimeInterval("Visual Studio Code", 0, 600), TimeInterval("Notion", 600, 0)]
    assert compute_xp(intervals) == 30


def test_adding_intervals_never_lowers_xp() -> None:
    intervals: list[TimeInterval] = []
    previous = 0
    for index, app in enumerate(["unknownapp", "Chrome", "Slack", "Excel", "vim"] * 4):
        intervals.append(TimeInterval(app, index * 100, index * 100 + 37 * (index + 1)))
        current = compute_xp(intervals)
        assert current >= previous
        previous = current


def test_level_and_progress_from_xp() -> None:
    assert Score.from_xp(250) == Score(xp=250, level=2, progress=50)
    assert Score.from_xp(100) == Score(xp=100, level=1, progress=0)
