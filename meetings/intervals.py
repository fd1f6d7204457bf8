"""Pure operations on ``TimeRange`` values shared by both scheduling passes."""
from __future__ import annotations

from typing import Dict, Iterable

from meetings.time_range import TimeRange


def overlaps(a: TimeRange, b: TimeRange) -> bool:
    return a.overlaps(b)


def intersect(a: TimeRange, b: TimeRange) -> TimeRange:
    if not overlaps(a, b):
        raise ValueError(f"Cannot intersect non-overlapping ranges {a} and {b}")
    return TimeRange(max(a.start, b.start), min(a.end, b.end))


def subtract(main: TimeRange, minor: TimeRange, min_duration: int) -> list[TimeRange]:
    """Return the parts of ``main`` left uncovered by ``minor``.

    Remainders are ordered left to right and dropped when empty or shorter
    than ``min_duration``. When the ranges do not overlap at all ``main`` is
    returned as is, without checking it against ``min_duration``.
    """
    if not overlaps(main, minor):
        return [main]

    remainders: list[TimeRange] = []
    left = TimeRange(main.start, max(main.start, minor.start))
    if left.duration > 0 and left.duration >= min_duration:
        remainders.append(left)
    right = TimeRange(min(main.end, minor.end), main.end)
    if right.duration > 0 and right.duration >= min_duration:
        remainders.append(right)
    return remainders


def merge_busy(ranges: Iterable[TimeRange]) -> list[TimeRange]:
    """Collapse busy ranges into a sorted cover of disjoint ranges.

    Ranges sharing a start keep the longest end. Overlapping and touching
    ranges are merged. Empty ranges block nothing and are ignored.
    """
    busy_by_start: Dict[int, int] = {}
    for busy in ranges:
        if busy.duration == 0:
            continue
        previous_end = busy_by_start.get(busy.start, busy.end)
        busy_by_start[busy.start] = max(previous_end, busy.end)

    merged: list[list[int]] = []
    for busy_start in sorted(busy_by_start):
        busy_end = busy_by_start[busy_start]
        if merged and busy_start <= merged[-1][1]:
            merged[-1][1] = max(merged[-1][1], busy_end)
        else:
            merged.append([busy_start, busy_end])
    return [TimeRange(busy_start, busy_end) for busy_start, busy_end in merged]
