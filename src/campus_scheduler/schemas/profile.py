"""Profile schema definitions."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from campus_scheduler.models.enums import UserRole


class ProfileInfo(BaseModel):
    """Profile as returned to clients."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    user_id: str
    name: str
    email: str
    role: UserRole
    department: Optional[str] = None
    phone: Optional[str] = None
    created_at: datetime
    updated_at: datetime


class ProfileCreate(BaseModel):
    name: str = Field(min_length=1)
    email: str
    department: Optional[str] = None
    phone: Optional[str] = None


class ProfileUpdate(BaseModel):
    """Fields a user may change on their own profile.

    The role is not editable here; it is assigned administratively.
    """

    name: Optional[str] = Field(default=None, min_length=1)
    department: Optional[str] = None
    phone: Optional[str] = None
