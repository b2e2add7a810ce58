import logging

from fastapi import Depends, HTTPException
from auth.services.auth_service import get_current_active_user
from user.models import User, UserRole

logger = logging.getLogger(__name__)


def require_company_member(user: User = Depends(get_current_active_user)) -> int:
    company_id = user.company_id
    cleaner = getattr(user, "cleaner", None)
    if company_id is None and cleaner is not None:
        company_id = cleaner.company_id
    if company_id is None:
        raise HTTPException(status_code=403, detail="Company membership required")
    return company_id


def require_company_admin(user: User = Depends(get_current_active_user)) -> int:
    if user.role != UserRole.company_admin or user.company_id is None:
        raise HTTPException(status_code=403, detail="Company admin role required")
    return user.company_id


def can_edit_cleaner_schedule(user, cleaner) -> bool:
    """Self, an admin of the cleaner's company, or a global admin."""
    if user.role == UserRole.global_admin:
        return True
    if cleaner.user_id is not None and cleaner.user_id == user.id:
        return True
    return user.role == UserRole.company_admin and user.company_id == cleaner.company_id


def ensure_can_edit_cleaner_schedule(user, cleaner) -> None:
    if not can_edit_cleaner_schedule(user, cleaner):
        logger.warning("user %s refused schedule edit for cleaner %s", user.id, cleaner.id)
        raise HTTPException(status_code=403, detail="not allowed to edit this cleaner's schedule")
