from __future__ import annotations
import logging
from collections import defaultdict
from datetime import date
from typing import Optional, List

from fastapi import HTTPException
from sqlalchemy import select
from sqlalchemy.orm import Session

from .models import JobAssignment, CANCELLED_STATUSES
from .schema import AssignmentCreate, AssignmentConflictSchema, ConflictPairSchema
from cleaner.models import Cleaner
from scheduling.conflict import conflicting_pairs

logger = logging.getLogger(__name__)


def _in_range(stmt, date_from: date, date_to: date, include_cancelled: bool):
    stmt = stmt.where(
        JobAssignment.scheduled_date >= date_from,
        JobAssignment.scheduled_date <= date_to,
    )
    if not include_cancelled:
        stmt = stmt.where(JobAssignment.status.not_in(CANCELLED_STATUSES))
    return stmt.order_by(JobAssignment.scheduled_date, JobAssignment.start_time, JobAssignment.id)


# LIST (one cleaner)
def get_assignments(
    db: Session,
    cleaner_id: int,
    date_from: date,
    date_to: date,
    *,
    include_cancelled: bool = False,
) -> List[JobAssignment]:
    stmt = select(JobAssignment).where(JobAssignment.cleaner_id == cleaner_id)
    return list(db.scalars(_in_range(stmt, date_from, date_to, include_cancelled)))


# LIST (whole company)
def get_company_assignments(
    db: Session,
    company_id: int,
    date_from: date,
    date_to: date,
    *,
    include_cancelled: bool = False,
) -> List[JobAssignment]:
    stmt = select(JobAssignment).where(JobAssignment.company_id == company_id)
    return list(db.scalars(_in_range(stmt, date_from, date_to, include_cancelled)))


def get_assignment(db: Session, assignment_id: int) -> Optional[JobAssignment]:
    return db.get(JobAssignment, assignment_id)


def create_assignment(db: Session, dto: AssignmentCreate) -> JobAssignment:
    cleaner = db.get(Cleaner, dto.cleaner_id)
    if not cleaner or cleaner.company_id != dto.company_id:
        raise HTTPException(status_code=404, detail="cleaner not found")

    row = JobAssignment(**dto.model_dump())
    db.add(row)
    db.commit()
    db.refresh(row)

    # Overlaps are allowed; they are only surfaced for review.
    same_day = get_assignments(db, dto.cleaner_id, dto.scheduled_date, dto.scheduled_date)
    if conflicting_pairs(same_day):
        logger.warning(
            "assignment %s overlaps another job of cleaner %s on %s",
            row.id, dto.cleaner_id, dto.scheduled_date,
        )
    return row


def find_conflicts(
    db: Session,
    company_id: int,
    date_from: date,
    date_to: date,
) -> List[AssignmentConflictSchema]:
    """Overlapping job pairs per (cleaner, date) for a company."""
    grouped: dict[tuple[int, date], list[JobAssignment]] = defaultdict(list)
    for a in get_company_assignments(db, company_id, date_from, date_to):
        if a.cleaner_id is not None:
            grouped[(a.cleaner_id, a.scheduled_date)].append(a)

    result = []
    for (cleaner_id, day), rows in sorted(grouped.items()):
        pairs = conflicting_pairs(rows)
        if pairs:
            result.append(AssignmentConflictSchema(
                cleaner_id=cleaner_id,
                date=day,
                pairs=[ConflictPairSchema(first_id=a.id, second_id=b.id) for a, b in pairs],
            ))
    return result
