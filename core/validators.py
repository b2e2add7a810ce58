"""Shared validation helpers for query parameters"""
from datetime import date

from fastapi import HTTPException

from core.config_loader import settings


def validate_date_range(date_from: date, date_to: date) -> None:
    """
    Reject inverted ranges and ranges longer than MAX_RANGE_DAYS.

    Raises:
        HTTPException(422): if the range is invalid
    """
    if date_to < date_from:
        raise HTTPException(status_code=422, detail="date_to must be on/after date_from")
    if (date_to - date_from).days + 1 > settings.MAX_RANGE_DAYS:
        raise HTTPException(
            status_code=422,
            detail=f"date range may span at most {settings.MAX_RANGE_DAYS} days",
        )
