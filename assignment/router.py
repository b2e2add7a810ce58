from __future__ import annotations
from typing import Optional
from datetime import date

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.orm import Session

from core.database import get_db
from core.validators import validate_date_range
from auth.services.auth_service import get_current_active_user
from authz.deps import require_company_admin, require_company_member
from cleaner.service import get_cleaner_in_scope

from .schema import (
    AssignmentSchema,
    AssignmentCreatePayload,
    AssignmentCreate,
    AssignmentConflictSchema,
    )
from . import service


assignment_router = APIRouter(prefix="/assignments", tags=["Assignments"])

# List assignments in a date range: one cleaner, or the caller's whole company.
@assignment_router.get("", response_model=list[AssignmentSchema])
def list_assignments(
    date_from: date = Query(...),
    date_to: date = Query(...),
    cleaner_id: Optional[int] = Query(None),
    include_cancelled: bool = Query(False),
    db: Session = Depends(get_db),
    user = Depends(get_current_active_user),
    company_id: int = Depends(require_company_member),
    ):
    validate_date_range(date_from, date_to)
    if cleaner_id is not None:
        get_cleaner_in_scope(db, cleaner_id, user)
        return service.get_assignments(
            db, cleaner_id, date_from, date_to, include_cancelled=include_cancelled
        )
    return service.get_company_assignments(
        db, company_id, date_from, date_to, include_cancelled=include_cancelled
    )

# Overlapping jobs for review (company admin only)
@assignment_router.get("/conflicts", response_model=list[AssignmentConflictSchema])
def list_conflicts(
    date_from: date = Query(...),
    date_to: date = Query(...),
    db: Session = Depends(get_db),
    company_id: int = Depends(require_company_admin),
    ):
    validate_date_range(date_from, date_to)
    return service.find_conflicts(db, company_id, date_from, date_to)

# Get single assignment (scoped)
@assignment_router.get("/{assignment_id}", response_model=AssignmentSchema)
def get_assignment(
    assignment_id: int,
    db: Session = Depends(get_db),
    company_id: int = Depends(require_company_member),
    ):
    obj = service.get_assignment(db, assignment_id)
    if not obj or obj.company_id != company_id:
        raise HTTPException(status_code=404, detail="assignment not found")
    return obj

# Assign a job to a cleaner (company admin only)
@assignment_router.post("", response_model=AssignmentSchema, status_code=status.HTTP_201_CREATED)
def create_assignment(
    payload: AssignmentCreatePayload,
    db: Session = Depends(get_db),
    company_id: int = Depends(require_company_admin),
    ):
    dto = AssignmentCreate(company_id=company_id, **payload.model_dump())
    return service.create_assignment(db, dto)
