from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from core.database import get_db
from authz.deps import require_company_admin, require_company_member
from .schema import CleanerSchema, CleanerCreatePayload, CleanerCreate
from . import service

cleaner_router = APIRouter(prefix="/cleaners", tags=["Cleaners"])

# List cleaners of the caller's company
@cleaner_router.get("", response_model=list[CleanerSchema])
def list_cleaners(
    active_only: bool = Query(False),
    db: Session = Depends(get_db),
    company_id: int = Depends(require_company_member),
):
    return service.get_cleaners(db, company_id=company_id, active_only=active_only)

# Get cleaner by id
@cleaner_router.get("/{cleaner_id}", response_model=CleanerSchema)
def cleaner_detail(cleaner_id: int, db: Session = Depends(get_db), company_id: int = Depends(require_company_member)):
    obj = service.get_cleaner_for_company(db, cleaner_id, company_id)
    if not obj:
        raise HTTPException(status_code=404, detail="cleaner not found")
    return obj

# Add a cleaner (company admin only)
@cleaner_router.post("", response_model=CleanerSchema, status_code=status.HTTP_201_CREATED)
def cleaner_post(payload: CleanerCreatePayload, db: Session = Depends(get_db), company_id: int = Depends(require_company_admin)):
    internal = CleanerCreate(company_id=company_id, **payload.model_dump())
    try:
        return service.create_cleaner(db, internal)
    except IntegrityError:
        db.rollback()
        raise HTTPException(status_code=409, detail="user is already linked to a cleaner")
