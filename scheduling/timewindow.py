from __future__ import annotations
from datetime import datetime, date, time, timedelta

from pydantic import BaseModel, ConfigDict

_ANCHOR = date(2000, 1, 1)


def add_hours(t: time, hours: float) -> time:
    """Time-of-day plus a duration, wrapping at midnight."""
    return (datetime.combine(_ANCHOR, t) + timedelta(hours=hours)).time()


class TimeWindow(BaseModel):
    """Half-open time-of-day interval [start, end)."""
    start: time
    end: time

    model_config = ConfigDict(frozen=True)

    @classmethod
    def starting_at(cls, start: time, hours: float) -> "TimeWindow":
        return cls(start=start, end=add_hours(start, hours))

    @property
    def is_valid(self) -> bool:
        return self.start < self.end

    def overlaps(self, other: "TimeWindow") -> bool:
        # touching windows (a.end == b.start) are back-to-back, not overlapping
        return self.start < other.end and other.start < self.end

    def contains(self, other: "TimeWindow") -> bool:
        return self.start <= other.start and other.end <= self.end

    def __str__(self) -> str:
        return f"{self.start:%H:%M}-{self.end:%H:%M}"
