from __future__ import annotations
from datetime import date
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session

from core.database import get_db
from auth.services.auth_service import get_current_active_user
from authz.deps import require_company_admin
from cleaner.service import get_cleaner_by_user, get_cleaner_in_scope
from scheduling.grid import ScheduleGrid
from scheduling.resolver import EffectiveAvailability

from . import service

schedulegrid_router = APIRouter(prefix="/schedule-grid", tags=["Schedule Grid"])


# Whole-roster week view (company admin)
@schedulegrid_router.get("/company", response_model=ScheduleGrid)
def company_week(
    week_of: Optional[date] = Query(None, description="any date inside the week; defaults to today in the company time zone"),
    active_only: bool = Query(False),
    db: Session = Depends(get_db),
    company_id: int = Depends(require_company_admin),
):
    return service.build_company_grid(
        db,
        company_id=company_id,
        week_of=week_of or service.company_today(db, company_id),
        active_only=active_only,
    )


# Cleaner's own week view
@schedulegrid_router.get("/me", response_model=ScheduleGrid)
def my_week(
    week_of: Optional[date] = Query(None, description="any date inside the week; defaults to today in the company time zone"),
    db: Session = Depends(get_db),
    user = Depends(get_current_active_user),
):
    cleaner = get_cleaner_by_user(db, user.id)
    if not cleaner:
        raise HTTPException(status_code=404, detail="cleaner profile not found")
    week_of = week_of or service.company_today(db, cleaner.company_id)
    return service.build_cleaner_grid(db, cleaner=cleaner, week_of=week_of)


# One resolved cell
@schedulegrid_router.get("/cleaners/{cleaner_id}/days/{day}", response_model=EffectiveAvailability)
def cleaner_day(
    cleaner_id: int,
    day: date,
    db: Session = Depends(get_db),
    user = Depends(get_current_active_user),
):
    cleaner = get_cleaner_in_scope(db, cleaner_id, user)
    return service.effective_availability(db, cleaner=cleaner, day=day)
