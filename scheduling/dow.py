"""
Day-of-week conventions.

Calendar views lay a week out Monday-first (grid index 0=Mon .. 6=Sun), while
stored weekly availability and company work schedules use a Sunday-first
code (0=Sun .. 6=Sat). Every conversion between the two goes through here.
"""
from __future__ import annotations
from datetime import date, timedelta

SUNDAY = 0
SATURDAY = 6


def _check_range(value: int, name: str) -> None:
    if not 0 <= value <= 6:
        raise ValueError(f"{name} must be between 0 and 6, got {value}")


def grid_index_to_dow(idx: int) -> int:
    """Monday-first grid column -> Sunday-first day code."""
    _check_range(idx, "grid index")
    return 0 if idx == 6 else idx + 1


def dow_to_grid_index(dow: int) -> int:
    """Sunday-first day code -> Monday-first grid column."""
    _check_range(dow, "day of week")
    return 6 if dow == 0 else dow - 1


def date_to_dow(d: date) -> int:
    # date.weekday() is Monday-first, same as the grid
    return grid_index_to_dow(d.weekday())


def is_weekday_dow(dow: int) -> bool:
    return 1 <= dow <= 5


def week_start(d: date) -> date:
    """The Monday on or before d."""
    return d - timedelta(days=d.weekday())


def week_dates(d: date) -> list[date]:
    monday = week_start(d)
    return [monday + timedelta(days=i) for i in range(7)]
