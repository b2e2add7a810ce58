from __future__ import annotations
from datetime import time
from sqlalchemy import Boolean, CheckConstraint, ForeignKey, Integer, Time, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column
from core.database import Base

class WeeklyAvailabilitySlot(Base):
    __tablename__ = "cleaner_availability"

    id: Mapped[int] = mapped_column(primary_key=True)
    cleaner_id: Mapped[int] = mapped_column(
        ForeignKey("cleaners.id", ondelete="CASCADE"), index=True
    )

    # 0=Sunday .. 6=Saturday
    day_of_week: Mapped[int] = mapped_column(Integer, nullable=False)

    start_time: Mapped[time] = mapped_column(Time(timezone=False), nullable=False)
    end_time:   Mapped[time] = mapped_column(Time(timezone=False), nullable=False)
    is_available: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)

    __table_args__ = (
        CheckConstraint("day_of_week BETWEEN 0 AND 6", name="ck_cleaner_availability_dow"),
        UniqueConstraint("cleaner_id", "day_of_week", name="uq_cleaner_availability_day"),
    )
