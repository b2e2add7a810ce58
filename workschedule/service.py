from __future__ import annotations
import logging
from datetime import date
from typing import Optional

from fastapi import HTTPException
from sqlalchemy import delete, select
from sqlalchemy.orm import Session

from scheduling.clamp import CompanyBounds
from scheduling.dow import date_to_dow
from .models import CompanyScheduleSlot
from .schema import CompanyScheduleSlotPayload

logger = logging.getLogger(__name__)


def get_company_schedule(db: Session, company_id: int) -> list[CompanyScheduleSlot]:
    stmt = (
        select(CompanyScheduleSlot)
        .where(CompanyScheduleSlot.company_id == company_id)
        .order_by(CompanyScheduleSlot.day_of_week)
    )
    return list(db.scalars(stmt))


def get_company_bounds_for_date(db: Session, company_id: int, day: date) -> Optional[CompanyBounds]:
    """Working window of the company on the weekday of `day`, if one is configured."""
    slot = db.scalars(
        select(CompanyScheduleSlot).where(
            CompanyScheduleSlot.company_id == company_id,
            CompanyScheduleSlot.day_of_week == date_to_dow(day),
        )
    ).first()
    if slot is None:
        return None
    return CompanyBounds(start_time=slot.start_time, end_time=slot.end_time, is_work_day=slot.is_work_day)


def replace_company_schedule(
    db: Session,
    *,
    company_id: int,
    slots: list[CompanyScheduleSlotPayload],
) -> list[CompanyScheduleSlot]:
    for s in slots:
        if s.is_work_day and s.start_time >= s.end_time:
            raise HTTPException(status_code=422, detail="start time must be before end time")

    db.execute(delete(CompanyScheduleSlot).where(CompanyScheduleSlot.company_id == company_id))

    rows = [
        CompanyScheduleSlot(
            company_id=company_id,
            day_of_week=s.day_of_week,
            start_time=s.start_time,
            end_time=s.end_time,
            is_work_day=s.is_work_day,
        )
        for s in slots
    ]
    db.add_all(rows)
    db.commit()
    for r in rows:
        db.refresh(r)

    logger.info("replaced work schedule for company %s (%d days)", company_id, len(rows))
    return sorted(rows, key=lambda r: r.day_of_week)
