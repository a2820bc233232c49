"""Dashboard route: the caller's profile plus the first page of the timetable."""

from fastapi import APIRouter

from campus_scheduler.api.errors import http_error
from campus_scheduler.config import TIMETABLE_DEFAULT_LIMIT
from campus_scheduler.core.dependencies import (
    AuthenticatedContextDep,
    ProfileManagerDep,
    TimetableManagerDep,
)
from campus_scheduler.core.exceptions import SchedulerError
from campus_scheduler.schemas.dashboard import DashboardResponse
from campus_scheduler.schemas.profile import ProfileInfo
from campus_scheduler.schemas.timetable import TimetableEntryInfo

router = APIRouter(prefix="/api/dashboard", tags=["Dashboard"])


@router.get("", response_model=DashboardResponse, summary="Dashboard data")
def dashboard(
    ctx: AuthenticatedContextDep,
    profile_manager: ProfileManagerDep,
    timetable_manager: TimetableManagerDep,
) -> DashboardResponse:
    try:
        profile = profile_manager.get_own_profile(ctx)
    except SchedulerError as exc:
        raise http_error(exc)
    entries = timetable_manager.list_entries(ctx, limit=TIMETABLE_DEFAULT_LIMIT)
    return DashboardResponse(
        profile=ProfileInfo.model_validate(profile),
        timetable=[TimetableEntryInfo.model_validate(entry) for entry in entries],
    )
