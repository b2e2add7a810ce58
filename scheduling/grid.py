"""
Week grid for calendar views: one row per cleaner, seven Monday-first cells.

All lookups are served from dictionaries built once per call, keyed by
(cleaner_id, date) or (cleaner_id, day_of_week), so the grid costs one pass
over each input collection regardless of roster size.
"""
from __future__ import annotations
import logging
from collections import defaultdict
import datetime as dt
from datetime import date, time
from typing import Any, Iterable, Optional

from pydantic import BaseModel, ConfigDict

from .conflict import has_conflict
from .dow import grid_index_to_dow, week_dates
from .resolver import EffectiveAvailability, resolve_from_sources

logger = logging.getLogger(__name__)


class AssignmentSlot(BaseModel):
    id: int
    cleaner_id: Optional[int] = None
    scheduled_date: date
    start_time: time
    duration_hours: float
    status: str
    reference_code: Optional[str] = None

    model_config = ConfigDict(from_attributes=True, frozen=True)


class ScheduleCell(BaseModel):
    date: dt.date
    grid_index: int
    day_of_week: int
    availability: EffectiveAvailability
    assignments: list[AssignmentSlot] = []
    has_conflict: bool = False


class ScheduleRow(BaseModel):
    cleaner_id: int
    full_name: str
    cells: list[ScheduleCell]


class ScheduleGrid(BaseModel):
    week_start: date
    week_end: date
    dates: list[date]
    rows: list[ScheduleRow]


def build_grid(
    week_of: date,
    cleaners: Iterable[Any],
    weekly_slots: Iterable[Any],
    company_schedule: Iterable[Any],
    overrides: Iterable[Any],
    assignments: Iterable[Any],
) -> ScheduleGrid:
    """
    Build the grid for the Monday-first week containing `week_of`.

    `company_schedule` is the schedule of the roster's company. Overrides and
    assignments may span more than the week; rows outside it are never looked
    up.
    """
    dates = week_dates(week_of)

    override_index = {(o.cleaner_id, o.date): o for o in overrides}
    weekly_index = {(s.cleaner_id, s.day_of_week): s for s in weekly_slots}
    company_index = {s.day_of_week: s for s in company_schedule}

    assignment_index: dict[tuple[int, date], list[AssignmentSlot]] = defaultdict(list)
    for a in assignments:
        if a.cleaner_id is None:
            continue
        slot = AssignmentSlot.model_validate(a)
        assignment_index[(slot.cleaner_id, slot.scheduled_date)].append(slot)

    rows: list[ScheduleRow] = []
    for c in cleaners:
        cells = []
        for gi, d in enumerate(dates):
            dow = grid_index_to_dow(gi)
            availability = resolve_from_sources(
                dow,
                override_index.get((c.id, d)),
                weekly_index.get((c.id, dow)),
                company_index.get(dow),
            )
            booked = sorted(assignment_index.get((c.id, d), []), key=lambda s: s.start_time)
            cells.append(ScheduleCell(
                date=d,
                grid_index=gi,
                day_of_week=dow,
                availability=availability,
                assignments=booked,
                has_conflict=has_conflict(booked),
            ))
        rows.append(ScheduleRow(cleaner_id=c.id, full_name=c.full_name, cells=cells))

    logger.debug("built schedule grid for week %s with %d rows", dates[0], len(rows))
    return ScheduleGrid(week_start=dates[0], week_end=dates[-1], dates=dates, rows=rows)
