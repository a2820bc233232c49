"""Auth request and response schemas."""

from datetime import datetime
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field

from campus_scheduler.schemas.profile import ProfileInfo


class SignupRequest(BaseModel):
    email: str = Field(min_length=3, description="Login email.")
    password: str = Field(min_length=6, description="Plain text password.")
    name: Optional[str] = Field(
        default=None,
        description="Display name; becomes the profile name. Defaults to the email.",
    )
    metadata: Dict[str, Any] = Field(
        default_factory=dict,
        description="Additional signup metadata stored on the identity.",
    )


class LoginRequest(BaseModel):
    email: str
    password: str


class IdentityInfo(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    email: str
    created_at: datetime
    last_sign_in_at: Optional[datetime] = None


class AuthResponse(BaseModel):
    identity: IdentityInfo
    token: str
    token_type: str = "bearer"


class CurrentIdentityResponse(BaseModel):
    identity: IdentityInfo
    profile: Optional[ProfileInfo] = None
