from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class ClassroomInfo(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    room_name: str
    capacity: int
    equipment: Optional[List[str]] = None
    location: str
    availability_status: Optional[bool] = None
    remarks: Optional[str] = None
    created_at: datetime
    updated_at: datetime


class ClassroomCreate(BaseModel):
    room_name: str = Field(min_length=1)
    # Capacity is checked by the database (capacity > 0)
    capacity: int
    equipment: List[str] = Field(default_factory=list)
    location: str
    availability_status: bool = True
    remarks: Optional[str] = None


class ClassroomUpdate(BaseModel):
    room_name: Optional[str] = Field(default=None, min_length=1)
    capacity: Optional[int] = None
    equipment: Optional[List[str]] = None
    location: Optional[str] = None
    availability_status: Optional[bool] = None
    remarks: Optional[str] = None
