from __future__ import annotations
from datetime import time
from typing import List
from pydantic import BaseModel, ConfigDict, Field, model_validator


class CompanyScheduleSlotSchema(BaseModel):
    id: int
    company_id: int
    day_of_week: int
    start_time: time
    end_time: time
    is_work_day: bool
    model_config = ConfigDict(from_attributes=True)


class CompanyScheduleSlotPayload(BaseModel):
    day_of_week: int = Field(ge=0, le=6, description="0=Sun .. 6=Sat")
    start_time: time
    end_time: time
    is_work_day: bool = True
    model_config = ConfigDict(extra="forbid")

    @model_validator(mode="after")
    def validate_window(self):
        if self.is_work_day and self.start_time >= self.end_time:
            raise ValueError("start time must be before end time")
        return self


class CompanyScheduleReplacePayload(BaseModel):
    slots: List[CompanyScheduleSlotPayload]
    model_config = ConfigDict(extra="forbid")

    @model_validator(mode="after")
    def one_slot_per_day(self):
        days = [s.day_of_week for s in self.slots]
        if len(days) != len(set(days)):
            raise ValueError("at most one slot per day of week")
        return self
