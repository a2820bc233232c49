"""Timetable routes. Anyone can read; admins and faculty can write."""

from typing import List, Optional

from fastapi import APIRouter, Query, status

from campus_scheduler.api.errors import http_error
from campus_scheduler.config import TIMETABLE_DEFAULT_LIMIT, TIMETABLE_MAX_LIMIT
from campus_scheduler.core.dependencies import ContextDep, TimetableManagerDep
from campus_scheduler.core.exceptions import SchedulerError
from campus_scheduler.models.enums import DayOfWeek
from campus_scheduler.schemas.timetable import (
    TimetableEntryCreate,
    TimetableEntryInfo,
    TimetableEntryUpdate,
)

router = APIRouter(prefix="/api/timetable", tags=["Timetable"])


@router.get("", response_model=List[TimetableEntryInfo], summary="List timetable entries")
def list_entries(
    ctx: ContextDep,
    timetable_manager: TimetableManagerDep,
    limit: int = Query(default=TIMETABLE_DEFAULT_LIMIT, ge=1, le=TIMETABLE_MAX_LIMIT),
    day_of_week: Optional[DayOfWeek] = None,
    faculty_id: Optional[str] = None,
    room_id: Optional[str] = None,
    course_id: Optional[str] = None,
    semester: Optional[str] = None,
) -> List[TimetableEntryInfo]:
    """List entries joined with course, classroom and faculty name."""
    return timetable_manager.list_entries(
        ctx,
        limit=limit,
        day_of_week=day_of_week,
        faculty_id=faculty_id,
        room_id=room_id,
        course_id=course_id,
        semester=semester,
    )


@router.post(
    "",
    response_model=TimetableEntryInfo,
    status_code=status.HTTP_201_CREATED,
    summary="Create timetable entry",
)
def create_entry(
    req: TimetableEntryCreate, ctx: ContextDep, timetable_manager: TimetableManagerDep
) -> TimetableEntryInfo:
    try:
        entry = timetable_manager.create_entry(ctx, **req.model_dump())
        return timetable_manager.get_entry(ctx, entry.id)
    except SchedulerError as exc:
        raise http_error(exc)


@router.get("/{entry_id}", response_model=TimetableEntryInfo, summary="Get timetable entry")
def get_entry(
    entry_id: str, ctx: ContextDep, timetable_manager: TimetableManagerDep
) -> TimetableEntryInfo:
    try:
        return timetable_manager.get_entry(ctx, entry_id)
    except SchedulerError as exc:
        raise http_error(exc)


@router.patch("/{entry_id}", response_model=TimetableEntryInfo, summary="Update timetable entry")
def update_entry(
    entry_id: str,
    req: TimetableEntryUpdate,
    ctx: ContextDep,
    timetable_manager: TimetableManagerDep,
) -> TimetableEntryInfo:
    try:
        timetable_manager.update_entry(ctx, entry_id, **req.model_dump(exclude_unset=True))
        return timetable_manager.get_entry(ctx, entry_id)
    except (SchedulerError, ValueError) as exc:
        raise http_error(exc)


@router.delete(
    "/{entry_id}", status_code=status.HTTP_204_NO_CONTENT, summary="Delete timetable entry"
)
def delete_entry(entry_id: str, ctx: ContextDep, timetable_manager: TimetableManagerDep) -> None:
    try:
        timetable_manager.delete_entry(ctx, entry_id)
    except SchedulerError as exc:
        raise http_error(exc)
