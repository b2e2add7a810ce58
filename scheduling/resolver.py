"""
Effective availability of one cleaner on one calendar date.

Four sources are consulted in strict priority order and the first one that
has data wins outright; fields are never mixed between sources:

    1. date override      (cleaner_id, date)
    2. weekly slot        (cleaner_id, day_of_week)
    3. company schedule   (day_of_week)
    4. built-in default   08:00-17:00, available Mon-Fri

Rows are read by attribute, so ORM rows and pydantic schemas are both
accepted.
"""
from __future__ import annotations
from datetime import date, time
from typing import Any, Iterable, Literal, Optional

from pydantic import BaseModel, ConfigDict

from .dow import date_to_dow, is_weekday_dow

Source = Literal["override", "weekly", "company", "default"]

DEFAULT_START = time(8, 0)
DEFAULT_END = time(17, 0)


class EffectiveAvailability(BaseModel):
    start_time: time
    end_time: time
    is_available: bool
    source: Source

    model_config = ConfigDict(frozen=True)


def resolve_from_sources(
    dow: int,
    override: Optional[Any] = None,
    weekly_slot: Optional[Any] = None,
    company_slot: Optional[Any] = None,
) -> EffectiveAvailability:
    """Apply the priority rule to rows that were already looked up."""
    # An override wins even on a company off-day.
    if override is not None:
        return EffectiveAvailability(
            start_time=override.start_time,
            end_time=override.end_time,
            is_available=override.is_available,
            source="override",
        )
    if weekly_slot is not None:
        return EffectiveAvailability(
            start_time=weekly_slot.start_time,
            end_time=weekly_slot.end_time,
            is_available=weekly_slot.is_available,
            source="weekly",
        )
    if company_slot is not None:
        return EffectiveAvailability(
            start_time=company_slot.start_time,
            end_time=company_slot.end_time,
            is_available=company_slot.is_work_day,
            source="company",
        )
    return EffectiveAvailability(
        start_time=DEFAULT_START,
        end_time=DEFAULT_END,
        is_available=is_weekday_dow(dow),
        source="default",
    )


def _first(rows: Iterable[Any], pred) -> Optional[Any]:
    for row in rows:
        if pred(row):
            return row
    return None


def resolve(
    cleaner_id: int,
    day: date,
    weekly_slots: Iterable[Any],
    company_schedule: Iterable[Any],
    overrides: Iterable[Any],
) -> EffectiveAvailability:
    """
    Resolve availability for (cleaner_id, day).

    `company_schedule` holds the slots of the cleaner's own company. Rows in
    `weekly_slots` and `overrides` that belong to other cleaners are ignored.
    """
    dow = date_to_dow(day)
    override = _first(overrides, lambda o: o.cleaner_id == cleaner_id and o.date == day)
    weekly = _first(weekly_slots, lambda s: s.cleaner_id == cleaner_id and s.day_of_week == dow)
    company = _first(company_schedule, lambda s: s.day_of_week == dow)
    return resolve_from_sources(dow, override, weekly, company)
