from __future__ import annotations
import logging
from typing import Iterable

from fastapi import HTTPException
from sqlalchemy import delete, select
from sqlalchemy.orm import Session

from .models import WeeklyAvailabilitySlot
from .schema import AvailabilitySlotPayload

logger = logging.getLogger(__name__)


# ---------- Queries ----------

def get_weekly_availability(db: Session, cleaner_id: int) -> list[WeeklyAvailabilitySlot]:
    stmt = (
        select(WeeklyAvailabilitySlot)
        .where(WeeklyAvailabilitySlot.cleaner_id == cleaner_id)
        .order_by(WeeklyAvailabilitySlot.day_of_week)
    )
    return list(db.scalars(stmt))


def get_weekly_availability_for_cleaners(db: Session, cleaner_ids: Iterable[int]) -> list[WeeklyAvailabilitySlot]:
    ids = list(cleaner_ids)
    if not ids:
        return []
    stmt = (
        select(WeeklyAvailabilitySlot)
        .where(WeeklyAvailabilitySlot.cleaner_id.in_(ids))
        .order_by(WeeklyAvailabilitySlot.cleaner_id, WeeklyAvailabilitySlot.day_of_week)
    )
    return list(db.scalars(stmt))


# ---------- Replace-all upsert (save weekly pattern) ----------

def replace_weekly_availability(
    db: Session,
    *,
    cleaner_id: int,
    slots: list[AvailabilitySlotPayload],
) -> list[WeeklyAvailabilitySlot]:
    seen: set[int] = set()
    for s in slots:
        if s.is_available and s.start_time >= s.end_time:
            raise HTTPException(status_code=422, detail="start time must be before end time")
        if s.day_of_week in seen:
            raise HTTPException(status_code=422, detail="at most one slot per day of week")
        seen.add(s.day_of_week)

    db.execute(delete(WeeklyAvailabilitySlot).where(WeeklyAvailabilitySlot.cleaner_id == cleaner_id))

    rows = [
        WeeklyAvailabilitySlot(
            cleaner_id=cleaner_id,
            day_of_week=s.day_of_week,
            start_time=s.start_time,
            end_time=s.end_time,
            is_available=s.is_available,
        )
        for s in slots
    ]
    db.add_all(rows)
    db.commit()
    for r in rows:
        db.refresh(r)

    logger.info("replaced weekly availability for cleaner %s (%d slots)", cleaner_id, len(rows))
    return sorted(rows, key=lambda r: r.day_of_week)
