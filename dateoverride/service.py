from __future__ import annotations
import logging
from datetime import date, time
from typing import Iterable

from fastapi import HTTPException
from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from authz.deps import ensure_can_edit_cleaner_schedule
from cleaner.service import get_cleaner
from scheduling.clamp import OverrideWindow, clamp
from scheduling.timewindow import TimeWindow
from workschedule.service import get_company_bounds_for_date
from .models import DateOverride

logger = logging.getLogger(__name__)


# -------- queries --------

def get_date_override(db: Session, cleaner_id: int, day: date) -> DateOverride | None:
    stmt = select(DateOverride).where(DateOverride.cleaner_id == cleaner_id, DateOverride.date == day)
    return db.scalars(stmt).first()


def get_date_overrides(db: Session, cleaner_id: int, date_from: date, date_to: date) -> list[DateOverride]:
    stmt = (
        select(DateOverride)
        .where(
            DateOverride.cleaner_id == cleaner_id,
            DateOverride.date >= date_from,
            DateOverride.date <= date_to,
        )
        .order_by(DateOverride.date)
    )
    return list(db.scalars(stmt))


def get_date_overrides_for_cleaners(
    db: Session,
    cleaner_ids: Iterable[int],
    date_from: date,
    date_to: date,
) -> list[DateOverride]:
    """One query for a whole roster."""
    ids = list(cleaner_ids)
    if not ids:
        return []
    stmt = (
        select(DateOverride)
        .where(
            DateOverride.cleaner_id.in_(ids),
            DateOverride.date >= date_from,
            DateOverride.date <= date_to,
        )
        .order_by(DateOverride.cleaner_id, DateOverride.date)
    )
    return list(db.scalars(stmt))


# -------- mutations --------

def set_date_override(
    db: Session,
    *,
    actor,
    cleaner_id: int,
    day: date,
    is_available: bool,
    start_time: time,
    end_time: time,
) -> DateOverride:
    """
    Create or replace the override of a cleaner for one date.

    The window is clamped to the company's working hours for that weekday
    before it is stored, so stored overrides never need re-clamping. Calling
    this twice with the same arguments leaves the same row behind, and of two
    concurrent writes for one date the later commit wins.
    """
    cleaner = get_cleaner(db, cleaner_id)
    if not cleaner:
        raise HTTPException(status_code=404, detail="cleaner not found")
    ensure_can_edit_cleaner_schedule(actor, cleaner)

    if not TimeWindow(start=start_time, end=end_time).is_valid:
        raise HTTPException(status_code=422, detail="start time must be before end time")

    candidate = OverrideWindow(start_time=start_time, end_time=end_time, is_available=is_available)
    bounds = get_company_bounds_for_date(db, cleaner.company_id, day)
    window = clamp(candidate, bounds)
    if window != candidate:
        logger.info(
            "override for cleaner %s on %s clamped from %s-%s to %s-%s",
            cleaner_id, day, start_time, end_time, window.start_time, window.end_time,
        )

    actor_id = actor.id
    row = get_date_override(db, cleaner_id, day)
    if row is None:
        row = DateOverride(cleaner_id=cleaner_id, date=day)
        db.add(row)
    _apply_window(row, window, actor_id)
    try:
        db.commit()
    except IntegrityError:
        # another writer inserted this (cleaner, date) since our read; overwrite it
        db.rollback()
        row = get_date_override(db, cleaner_id, day)
        _apply_window(row, window, actor_id)
        db.commit()

    db.refresh(row)
    logger.info("override saved for cleaner %s on %s by user %s", cleaner_id, day, actor_id)
    return row


def _apply_window(row: DateOverride, window: OverrideWindow, actor_id: int) -> None:
    row.is_available = window.is_available
    row.start_time = window.start_time
    row.end_time = window.end_time
    row.updated_by = actor_id
