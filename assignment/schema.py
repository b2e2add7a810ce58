from __future__ import annotations
import datetime as dt
from datetime import date, time
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field

from .models import AssignmentStatus


class AssignmentSchema(BaseModel):
    id: int
    company_id: int
    cleaner_id: Optional[int] = None
    reference_code: Optional[str] = None
    scheduled_date: date
    start_time: time
    duration_hours: float
    status: AssignmentStatus
    model_config = ConfigDict(from_attributes=True)


# PUBLIC payload from clients
class AssignmentCreatePayload(BaseModel):
    cleaner_id: int
    scheduled_date: date
    start_time: time
    duration_hours: float = Field(gt=0, le=24)
    reference_code: Optional[str] = Field(None, max_length=32)
    status: AssignmentStatus = AssignmentStatus.assigned
    model_config = ConfigDict(extra="forbid")


# INTERNAL DTO for the service
class AssignmentCreate(BaseModel):
    company_id: int
    cleaner_id: int
    scheduled_date: date
    start_time: time
    duration_hours: float
    reference_code: Optional[str] = None
    status: AssignmentStatus = AssignmentStatus.assigned


class ConflictPairSchema(BaseModel):
    first_id: int
    second_id: int


class AssignmentConflictSchema(BaseModel):
    cleaner_id: int
    date: dt.date
    pairs: list[ConflictPairSchema]
