from __future__ import annotations
import datetime as dt
from datetime import datetime, time
from sqlalchemy import Boolean, Date, DateTime, ForeignKey, Time, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.sql import func
from core.database import Base

class DateOverride(Base):
    __tablename__ = "cleaner_date_overrides"

    id: Mapped[int] = mapped_column(primary_key=True)
    cleaner_id: Mapped[int] = mapped_column(
        ForeignKey("cleaners.id", ondelete="CASCADE"), index=True
    )
    date: Mapped[dt.date] = mapped_column(Date, nullable=False)

    is_available: Mapped[bool] = mapped_column(Boolean, nullable=False)
    start_time: Mapped[time] = mapped_column(Time(timezone=False), nullable=False)
    end_time:   Mapped[time] = mapped_column(Time(timezone=False), nullable=False)

    updated_by: Mapped[int | None] = mapped_column(ForeignKey("users.id", ondelete="SET NULL"), nullable=True)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False
    )

    __table_args__ = (
        UniqueConstraint("cleaner_id", "date", name="uq_cleaner_date_override"),
    )
