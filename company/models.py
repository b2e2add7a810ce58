from sqlalchemy.orm import Mapped, mapped_column, relationship
from sqlalchemy import String
from core.config_loader import settings
from core.database import Base

class Company(Base):
    __tablename__ = "companies"

    id: Mapped[int] = mapped_column(primary_key=True)
    name: Mapped[str] = mapped_column(String(255), unique=True, nullable=False)
    timezone: Mapped[str] = mapped_column(String(64), nullable=False, default=settings.DEFAULT_TIMEZONE)

    # relationships
    users = relationship("User", back_populates="company")
    cleaners = relationship("Cleaner", back_populates="company", cascade="all, delete-orphan")
    work_schedule = relationship("CompanyScheduleSlot", back_populates="company", cascade="all, delete-orphan")
