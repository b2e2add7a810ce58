from __future__ import annotations
from typing import Any, Sequence

from .timewindow import TimeWindow


def _sorted_by_start(assignments: Sequence[Any]) -> list[Any]:
    return sorted(assignments, key=lambda a: a.start_time)


def conflicting_pairs(assignments: Sequence[Any]) -> list[tuple[Any, Any]]:
    """
    Adjacent (by start time) assignments whose windows overlap.

    Callers pass the assignments of one cleaner on one date. A job ends at
    start + duration_hours on a 24h clock; a job ending exactly when the next
    one starts is not a conflict.
    """
    if len(assignments) < 2:
        return []
    ordered = _sorted_by_start(assignments)
    pairs = []
    for a, b in zip(ordered, ordered[1:]):
        if TimeWindow.starting_at(a.start_time, a.duration_hours).end > b.start_time:
            pairs.append((a, b))
    return pairs


def has_conflict(assignments: Sequence[Any]) -> bool:
    return bool(conflicting_pairs(assignments))
