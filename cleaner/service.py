from typing import Optional, List

from fastapi import HTTPException
from sqlalchemy.orm import Session
from sqlalchemy import select
from .models import Cleaner, CleanerStatus
from .schema import CleanerCreate
from user.models import UserRole

def get_cleaners(db: Session, *, company_id: int, active_only: bool = False) -> List[Cleaner]:
    statement = select(Cleaner).where(Cleaner.company_id == company_id)
    if active_only:
        statement = statement.where(Cleaner.status == CleanerStatus.active)
    statement = statement.order_by(Cleaner.full_name.asc(), Cleaner.id.asc())
    return list(db.scalars(statement))

def get_cleaner(db: Session, cleaner_id: int) -> Optional[Cleaner]:
    return db.get(Cleaner, cleaner_id)

def get_cleaner_for_company(db: Session, cleaner_id: int, company_id: int) -> Optional[Cleaner]:
    statement = select(Cleaner).where(Cleaner.id == cleaner_id, Cleaner.company_id == company_id)
    return db.scalars(statement).first()

def get_cleaner_by_user(db: Session, user_id: int) -> Optional[Cleaner]:
    return db.scalars(select(Cleaner).where(Cleaner.user_id == user_id)).first()

def create_cleaner(db: Session, cleaner: CleanerCreate) -> Cleaner:
    db_cleaner = Cleaner(
        company_id=cleaner.company_id,
        full_name=cleaner.full_name,
        user_id=cleaner.user_id,
        status=cleaner.status,
    )
    db.add(db_cleaner)
    db.commit()
    db.refresh(db_cleaner)
    return db_cleaner


def company_id_for_user(db: Session, user) -> Optional[int]:
    """Company of an admin, or of the cleaner profile linked to the user."""
    if user.company_id is not None:
        return user.company_id
    own = get_cleaner_by_user(db, user.id)
    return own.company_id if own else None


def get_cleaner_in_scope(db: Session, cleaner_id: int, user) -> Cleaner:
    """
    Fetch a cleaner visible to `user`; cleaners of other companies are
    reported as missing.
    """
    cleaner = db.get(Cleaner, cleaner_id)
    if not cleaner:
        raise HTTPException(status_code=404, detail="cleaner not found")
    if user.role == UserRole.global_admin:
        return cleaner
    if cleaner.company_id != company_id_for_user(db, user):
        raise HTTPException(status_code=404, detail="cleaner not found")
    return cleaner
