from __future__ import annotations
from datetime import time
from typing import List
from pydantic import BaseModel, ConfigDict, Field, model_validator


# ---------- DB → API (read) ----------
class WeeklyAvailabilitySlotSchema(BaseModel):
    id: int
    cleaner_id: int
    day_of_week: int
    start_time: time
    end_time: time
    is_available: bool
    model_config = ConfigDict(from_attributes=True)


# ---------- Client → API (replace weekly pattern) ----------
class AvailabilitySlotPayload(BaseModel):
    day_of_week: int = Field(ge=0, le=6, description="0=Sun .. 6=Sat")
    start_time: time
    end_time: time
    is_available: bool = True
    model_config = ConfigDict(extra="forbid")

    @model_validator(mode="after")
    def validate_window(self):
        if self.is_available and self.start_time >= self.end_time:
            raise ValueError("start time must be before end time")
        return self


class WeeklyAvailabilityReplacePayload(BaseModel):
    slots: List[AvailabilitySlotPayload]
    model_config = ConfigDict(extra="forbid")

    @model_validator(mode="after")
    def one_slot_per_day(self):
        days = [s.day_of_week for s in self.slots]
        if len(days) != len(set(days)):
            raise ValueError("at most one slot per day of week")
        return self
