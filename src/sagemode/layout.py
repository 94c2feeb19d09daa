"""Column packing for overlapping timeline intervals.

Intervals whose time ranges overlap are placed side by side. Each interval
gets a column index via greedy first-fit in start-time order, and every
interval in the same overlap cluster (the transitive closure of pairwise
overlap) reports the same column count so the cluster renders with uniform
widths.
"""

from __future__ import annotations

from typing import Iterable, Sequence

from .models import LayoutInterval, TimeInterval
from .normalization import valid_intervals

DEFAULT_MARGIN_PCT = 1.0


def intervals_overlap(a: TimeInterval, b: TimeInterval) -> bool:
    """Open-interval overlap; touching or zero-length intervals never overlap."""
    if a.start_time == a.end_time or b.start_time == b.end_time:
        return False
    return not (a.end_time <= b.start_time or a.start_time >= b.end_time)


def sort_intervals(intervals: Iterable[TimeInterval]) -> list[TimeInterval]:
    return sorted(
        intervals,
        key=lambda item: (item.start_time, item.end_time, item.app_name),
    )


class _DisjointSet:
    def __init__(self, size: int) -> None:
        self._parent = list(range(size))

    def find(self, index: int) -> int:
        root = index
        while self._parent[root] != root:
            root = self._parent[root]
        while self._parent[index] != root:
            self._parent[index], index = root, self._parent[index]
        return root

    def union(self, a: int, b: int) -> None:
        root_a, root_b = self.find(a), self.find(b)
        if root_a != root_b:
            self._parent[max(root_a, root_b)] = min(root_a, root_b)


def assign_columns(ordered: Sequence[TimeInterval]) -> tuple[list[int], list[int]]:
    """Return ``(columns, max_columns)`` for intervals already in sorted order."""
    columns: list[int] = []
    max_columns: list[int] = []
    neighbours: list[list[int]] = [[] for _ in ordered]

    for index, interval in enumerate(ordered):
        placed = [
            other
            for other in range(index)
            if intervals_overlap(ordered[other], interval)
        ]
        used = {columns[other] for other in placed}
        column = 0
        while column in used:
            column += 1
        columns.append(column)

        required = 1 + max([column, *(columns[other] for other in placed)])
        max_columns.append(required)
        for other in placed:
            if max_columns[other] < required:
                max_columns[other] = required
            neighbours[other].append(index)
        neighbours[index].extend(placed)

    clusters = _DisjointSet(len(ordered))
    for index, linked in enumerate(neighbours):
        for other in linked:
            clusters.union(index, other)

    cluster_max: dict[int, int] = {}
    for index, value in enumerate(max_columns):
        root = clusters.find(index)
        cluster_max[root] = max(cluster_max.get(root, 1), value)
    shared = [cluster_max[clusters.find(index)] for index in range(len(ordered))]
    return columns, shared


def lane_width(max_columns: int, margin_pct: float) -> float:
    """Width of one lane in percent; the margin takes at most half of it."""
    share = 100 / max_columns
    return max(share - margin_pct, share / 2)


def layout_intervals(
    intervals: Iterable[TimeInterval],
    *,
    margin_pct: float = DEFAULT_MARGIN_PCT,
) -> list[LayoutInterval]:
    """Place intervals into non-colliding columns, in start-time order."""
    ordered = sort_intervals(valid_intervals(intervals))
    columns, max_columns = assign_columns(ordered)

    result: list[LayoutInterval] = []
    for interval, column, count in zip(ordered, columns, max_columns):
        result.append(
            LayoutInterval(
                app_name=interval.app_name,
                start_time=interval.start_time,
                end_time=interval.end_time,
                column=column,
                max_columns=count,
                width_pct=lane_width(count, margin_pct),
                left_pct=column * 100 / count,
            )
        )
    return result
