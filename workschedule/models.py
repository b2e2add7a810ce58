from __future__ import annotations
from datetime import time
from sqlalchemy import Boolean, CheckConstraint, ForeignKey, Integer, Time, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship
from core.database import Base

class CompanyScheduleSlot(Base):
    __tablename__ = "company_work_schedule"

    id: Mapped[int] = mapped_column(primary_key=True)
    company_id: Mapped[int] = mapped_column(
        ForeignKey("companies.id", ondelete="CASCADE"), index=True
    )

    # 0=Sunday .. 6=Saturday
    day_of_week: Mapped[int] = mapped_column(Integer, nullable=False)

    start_time: Mapped[time] = mapped_column(Time(timezone=False), nullable=False)
    end_time:   Mapped[time] = mapped_column(Time(timezone=False), nullable=False)
    is_work_day: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)

    company = relationship("Company", back_populates="work_schedule")

    __table_args__ = (
        CheckConstraint("day_of_week BETWEEN 0 AND 6", name="ck_company_work_schedule_dow"),
        UniqueConstraint("company_id", "day_of_week", name="uq_company_work_schedule_day"),
    )
