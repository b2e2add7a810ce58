from __future__ import annotations
import datetime as dt
from datetime import time
from pydantic import BaseModel, ConfigDict


class DateOverrideSchema(BaseModel):
    id: int
    cleaner_id: int
    date: dt.date
    is_available: bool
    start_time: time
    end_time: time
    model_config = ConfigDict(from_attributes=True)


# PUBLIC payload; the date comes from the path. start < end is enforced by
# the service once the caller's edit rights are known.
class DateOverridePayload(BaseModel):
    is_available: bool
    start_time: time
    end_time: time
    model_config = ConfigDict(extra="forbid")
