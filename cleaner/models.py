from __future__ import annotations
from enum import Enum
from sqlalchemy.orm import Mapped, mapped_column, relationship
from sqlalchemy import String, ForeignKey, Enum as SAEnum
from core.database import Base


class CleanerStatus(str, Enum):
    invited = "invited"
    pending = "pending"
    active = "active"
    suspended = "suspended"
    inactive = "inactive"


class Cleaner(Base):
    __tablename__ = "cleaners"

    id: Mapped[int] = mapped_column(primary_key=True)
    company_id: Mapped[int] = mapped_column(ForeignKey("companies.id", ondelete="CASCADE"), index=True)

    full_name: Mapped[str] = mapped_column(String(255), nullable=False)
    status: Mapped[CleanerStatus] = mapped_column(
        SAEnum(CleanerStatus, name="cleaner_status"), nullable=False, default=CleanerStatus.active
    )

    # optional link to login user
    user_id: Mapped[int | None] = mapped_column(ForeignKey("users.id"), nullable=True, unique=True, index=True)

    # relationships
    company = relationship("Company", back_populates="cleaners")
    user = relationship("User", back_populates="cleaner")
