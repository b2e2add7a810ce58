from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from core.database import get_db
from auth.services.auth_service import get_current_active_user
from authz.deps import ensure_can_edit_cleaner_schedule
from cleaner.service import get_cleaner, get_cleaner_in_scope

from .schema import WeeklyAvailabilitySlotSchema, WeeklyAvailabilityReplacePayload
from . import service

availability_router = APIRouter(prefix="/cleaners", tags=["Availability"])


@availability_router.get("/{cleaner_id}/availability", response_model=list[WeeklyAvailabilitySlotSchema])
def list_weekly_availability(
    cleaner_id: int,
    db: Session = Depends(get_db),
    user = Depends(get_current_active_user),
    ):
    get_cleaner_in_scope(db, cleaner_id, user)
    return service.get_weekly_availability(db, cleaner_id)


@availability_router.put("/{cleaner_id}/availability", response_model=list[WeeklyAvailabilitySlotSchema])
def save_weekly_availability(
    cleaner_id: int,
    payload: WeeklyAvailabilityReplacePayload,
    db: Session = Depends(get_db),
    user = Depends(get_current_active_user),
    ):
    cleaner = get_cleaner(db, cleaner_id)
    if not cleaner:
        raise HTTPException(status_code=404, detail="cleaner not found")
    ensure_can_edit_cleaner_schedule(user, cleaner)
    try:
        return service.replace_weekly_availability(db, cleaner_id=cleaner_id, slots=payload.slots)
    except IntegrityError:
        db.rollback()
        raise HTTPException(status_code=409, detail="weekly availability contains conflicting slots")
