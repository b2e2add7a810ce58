from __future__ import annotations
from datetime import date, datetime, timezone
from typing import Optional
from zoneinfo import ZoneInfo

from sqlalchemy.orm import Session

from core.config_loader import settings
from assignment.service import get_assignments, get_company_assignments
from availability.service import get_weekly_availability, get_weekly_availability_for_cleaners
from cleaner.models import Cleaner
from cleaner.service import get_cleaners
from company.models import Company
from dateoverride.service import get_date_overrides, get_date_overrides_for_cleaners
from scheduling.dow import week_dates
from scheduling.grid import ScheduleGrid, build_grid
from scheduling.resolver import EffectiveAvailability, resolve
from workschedule.service import get_company_schedule


def company_today(db: Session, company_id: int, *, now: Optional[datetime] = None) -> date:
    """Current calendar date in the company's own time zone."""
    company = db.get(Company, company_id)
    tz = ZoneInfo(company.timezone if company else settings.DEFAULT_TIMEZONE)
    return (now or datetime.now(timezone.utc)).astimezone(tz).date()


def build_company_grid(
    db: Session,
    *,
    company_id: int,
    week_of: date,
    active_only: bool = False,
) -> ScheduleGrid:
    """Week grid for every cleaner of a company, read with one query per source."""
    dates = week_dates(week_of)
    cleaners = get_cleaners(db, company_id=company_id, active_only=active_only)
    ids = [c.id for c in cleaners]

    return build_grid(
        week_of,
        cleaners,
        get_weekly_availability_for_cleaners(db, ids),
        get_company_schedule(db, company_id),
        get_date_overrides_for_cleaners(db, ids, dates[0], dates[-1]),
        get_company_assignments(db, company_id, dates[0], dates[-1]),
    )


def build_cleaner_grid(db: Session, *, cleaner: Cleaner, week_of: date) -> ScheduleGrid:
    """Single-row grid for a cleaner's own calendar."""
    dates = week_dates(week_of)
    return build_grid(
        week_of,
        [cleaner],
        get_weekly_availability(db, cleaner.id),
        get_company_schedule(db, cleaner.company_id),
        get_date_overrides(db, cleaner.id, dates[0], dates[-1]),
        get_assignments(db, cleaner.id, dates[0], dates[-1]),
    )


def effective_availability(db: Session, *, cleaner: Cleaner, day: date) -> EffectiveAvailability:
    return resolve(
        cleaner.id,
        day,
        get_weekly_availability(db, cleaner.id),
        get_company_schedule(db, cleaner.company_id),
        get_date_overrides(db, cleaner.id, day, day),
    )
