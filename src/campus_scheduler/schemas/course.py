from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class CourseInfo(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    course_code: str
    course_name: str
    department: str
    credits: Optional[int] = None
    description: Optional[str] = None
    created_at: datetime
    updated_at: datetime


class CourseCreate(BaseModel):
    course_code: str = Field(min_length=1)
    course_name: str = Field(min_length=1)
    department: str
    credits: Optional[int] = Field(default=None, description="Defaults to 3.")
    description: Optional[str] = None


class CourseUpdate(BaseModel):
    course_code: Optional[str] = Field(default=None, min_length=1)
    course_name: Optional[str] = Field(default=None, min_length=1)
    department: Optional[str] = None
    credits: Optional[int] = None
    description: Optional[str] = None
