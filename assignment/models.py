from __future__ import annotations
from datetime import date, time
from enum import Enum
from sqlalchemy import Date, Float, ForeignKey, Index, String, Time, Enum as SAEnum
from sqlalchemy.orm import Mapped, mapped_column, relationship
from core.database import Base


class AssignmentStatus(str, Enum):
    pending = "pending"
    assigned = "assigned"
    confirmed = "confirmed"
    in_progress = "in_progress"
    completed = "completed"
    cancelled = "cancelled"
    cancelled_by_client = "cancelled_by_client"
    cancelled_by_company = "cancelled_by_company"
    cancelled_by_admin = "cancelled_by_admin"


# Cancelled jobs no longer occupy the cleaner's day.
CANCELLED_STATUSES = (
    AssignmentStatus.cancelled,
    AssignmentStatus.cancelled_by_client,
    AssignmentStatus.cancelled_by_company,
    AssignmentStatus.cancelled_by_admin,
)


class JobAssignment(Base):
    __tablename__ = "job_assignments"

    id: Mapped[int] = mapped_column(primary_key=True)
    company_id: Mapped[int] = mapped_column(ForeignKey("companies.id", ondelete="CASCADE"), index=True)
    cleaner_id: Mapped[int | None] = mapped_column(
        ForeignKey("cleaners.id", ondelete="SET NULL"), nullable=True
    )

    reference_code: Mapped[str | None] = mapped_column(String(32), nullable=True)
    scheduled_date: Mapped[date] = mapped_column(Date, nullable=False)
    start_time: Mapped[time] = mapped_column(Time(timezone=False), nullable=False)
    duration_hours: Mapped[float] = mapped_column(Float, nullable=False)
    status: Mapped[AssignmentStatus] = mapped_column(
        SAEnum(AssignmentStatus, name="assignment_status"), nullable=False, default=AssignmentStatus.assigned
    )

    # relationships
    cleaner = relationship("Cleaner")

    __table_args__ = (
        Index("ix_job_assignments_cleaner_date", "cleaner_id", "scheduled_date"),
    )
