"""Profile routes."""

from typing import List, Optional

from fastapi import APIRouter, status

from campus_scheduler.api.errors import http_error
from campus_scheduler.core.dependencies import (
    AuthenticatedContextDep,
    ContextDep,
    ProfileManagerDep,
)
from campus_scheduler.core.exceptions import SchedulerError
from campus_scheduler.models.enums import UserRole
from campus_scheduler.schemas.profile import ProfileCreate, ProfileInfo, ProfileUpdate

router = APIRouter(prefix="/api/profiles", tags=["Profile"])


@router.get("", response_model=List[ProfileInfo], summary="List profiles")
def list_profiles(
    ctx: ContextDep,
    profile_manager: ProfileManagerDep,
    role: Optional[UserRole] = None,
    department: Optional[str] = None,
) -> List[ProfileInfo]:
    return profile_manager.list_profiles(ctx, role=role, department=department)


@router.post(
    "",
    response_model=ProfileInfo,
    status_code=status.HTTP_201_CREATED,
    summary="Create own profile",
)
def create_profile(
    req: ProfileCreate,
    ctx: AuthenticatedContextDep,
    profile_manager: ProfileManagerDep,
) -> ProfileInfo:
    """Insert a profile for the caller.

    Signup already creates one, so this only succeeds for an identity whose
    profile was removed; otherwise it answers 409.
    """
    try:
        return profile_manager.create_profile(ctx, user_id=ctx.identity_id, **req.model_dump())
    except SchedulerError as exc:
        raise http_error(exc)


@router.get("/me", response_model=ProfileInfo, summary="Own profile")
def get_own_profile(ctx: AuthenticatedContextDep, profile_manager: ProfileManagerDep) -> ProfileInfo:
    try:
        return profile_manager.get_own_profile(ctx)
    except SchedulerError as exc:
        raise http_error(exc)


@router.get("/{profile_id}", response_model=ProfileInfo, summary="Get profile")
def get_profile(profile_id: str, ctx: ContextDep, profile_manager: ProfileManagerDep) -> ProfileInfo:
    try:
        return profile_manager.get_profile(ctx, profile_id)
    except SchedulerError as exc:
        raise http_error(exc)


@router.patch("/{profile_id}", response_model=ProfileInfo, summary="Update profile")
def update_profile(
    profile_id: str,
    req: ProfileUpdate,
    ctx: ContextDep,
    profile_manager: ProfileManagerDep,
) -> ProfileInfo:
    """Update a profile. Only the owning identity passes the update policy."""
    try:
        return profile_manager.update_profile(ctx, profile_id, **req.model_dump(exclude_unset=True))
    except (SchedulerError, ValueError) as exc:
        raise http_error(exc)
