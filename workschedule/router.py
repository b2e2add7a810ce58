from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from core.database import get_db
from authz.deps import require_company_admin, require_company_member

from .schema import CompanyScheduleSlotSchema, CompanyScheduleReplacePayload
from . import service

workschedule_router = APIRouter(prefix="/companies/me/work-schedule", tags=["Work Schedule"])


@workschedule_router.get("", response_model=list[CompanyScheduleSlotSchema])
def list_work_schedule(
    db: Session = Depends(get_db),
    company_id: int = Depends(require_company_member),
    ):
    return service.get_company_schedule(db, company_id)


@workschedule_router.put("", response_model=list[CompanyScheduleSlotSchema])
def save_work_schedule(
    payload: CompanyScheduleReplacePayload,
    db: Session = Depends(get_db),
    company_id: int = Depends(require_company_admin),
    ):
    try:
        return service.replace_company_schedule(db, company_id=company_id, slots=payload.slots)
    except IntegrityError:
        db.rollback()
        raise HTTPException(status_code=409, detail="work schedule contains conflicting days")
