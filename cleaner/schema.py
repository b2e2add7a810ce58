from pydantic import BaseModel, ConfigDict
from typing import Optional

from .models import CleanerStatus


class CleanerSchema(BaseModel):
    id: int
    company_id: int
    full_name: str
    status: CleanerStatus
    user_id: Optional[int] = None
    model_config = ConfigDict(from_attributes=True)

# PUBLIC payload, what clients send
class CleanerCreatePayload(BaseModel):
    full_name: str
    user_id: Optional[int] = None
    status: CleanerStatus = CleanerStatus.active
    model_config = ConfigDict(extra="forbid")


# INTERNAL DTO for the service
class CleanerCreate(BaseModel):
    company_id: int
    full_name: str
    user_id: Optional[int] = None
    status: CleanerStatus = CleanerStatus.active
