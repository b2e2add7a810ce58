from typing import Optional
from pydantic import BaseModel, EmailStr, ConfigDict

from user.models import UserRole

class UserSchema(BaseModel):
    id: int
    email: EmailStr
    full_name: str
    role: UserRole
    company_id: Optional[int] = None
    is_active: bool
    model_config = ConfigDict(from_attributes=True)
