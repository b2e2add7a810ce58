from __future__ import annotations
from datetime import date

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from core.database import get_db
from core.validators import validate_date_range
from auth.services.auth_service import get_current_active_user
from cleaner.service import get_cleaner_in_scope

from .schema import DateOverrideSchema, DateOverridePayload
from . import service

dateoverride_router = APIRouter(prefix="/cleaners", tags=["Date Overrides"])


# List overrides of one cleaner in a date range
@dateoverride_router.get("/{cleaner_id}/date-overrides", response_model=list[DateOverrideSchema])
def list_date_overrides(
    cleaner_id: int,
    date_from: date = Query(...),
    date_to: date = Query(...),
    db: Session = Depends(get_db),
    user = Depends(get_current_active_user),
):
    validate_date_range(date_from, date_to)
    get_cleaner_in_scope(db, cleaner_id, user)
    return service.get_date_overrides(db, cleaner_id, date_from, date_to)


# Create or replace the override for one date (self or company admin)
@dateoverride_router.put("/{cleaner_id}/date-overrides/{day}", response_model=DateOverrideSchema)
def put_date_override(
    cleaner_id: int,
    day: date,
    payload: DateOverridePayload,
    db: Session = Depends(get_db),
    user = Depends(get_current_active_user),
):
    # the window is checked by the service after the edit-rights check
    return service.set_date_override(
        db,
        actor=user,
        cleaner_id=cleaner_id,
        day=day,
        is_available=payload.is_available,
        start_time=payload.start_time,
        end_time=payload.end_time,
    )
