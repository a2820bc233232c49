from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from campus_scheduler.models.enums import FeedbackStatus


class FeedbackInfo(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    user_id: str
    title: str
    message: str
    status: FeedbackStatus
    created_at: datetime
    updated_at: datetime


class FeedbackCreate(BaseModel):
    title: str = Field(min_length=1)
    message: str = Field(min_length=1)


class FeedbackUpdate(BaseModel):
    """Partial update; omitted fields are left alone, null is not a value."""

    title: Optional[str] = Field(default=None, min_length=1)
    message: Optional[str] = Field(default=None, min_length=1)
    status: Optional[FeedbackStatus] = None

    @field_validator("title", "message", "status", mode="before")
    @classmethod
    def reject_null(cls, value):
        if value is None:
            raise ValueError("must not be null")
        return value
