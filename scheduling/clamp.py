from __future__ import annotations
from datetime import time
from typing import Optional

from pydantic import BaseModel, ConfigDict


class OverrideWindow(BaseModel):
    start_time: time
    end_time: time
    is_available: bool

    model_config = ConfigDict(frozen=True)


class CompanyBounds(BaseModel):
    start_time: time
    end_time: time
    is_work_day: bool

    model_config = ConfigDict(frozen=True)


def clamp(candidate: OverrideWindow, bounds: Optional[CompanyBounds]) -> OverrideWindow:
    """
    Fit an override into the company's working hours for that date.

    Unavailable overrides and dates without a company working window pass
    through untouched. When clamping leaves an empty window the full company
    window is used instead, so the result is always a valid interval.
    """
    if bounds is None or not bounds.is_work_day or not candidate.is_available:
        return candidate

    start = max(candidate.start_time, bounds.start_time)
    end = min(candidate.end_time, bounds.end_time)
    if start >= end:
        start, end = bounds.start_time, bounds.end_time

    return OverrideWindow(start_time=start, end_time=end, is_available=True)
