"""Course routes. Anyone can read; only admins can write."""

from typing import List, Optional

from fastapi import APIRouter, status

from campus_scheduler.api.errors import http_error
from campus_scheduler.core.dependencies import ContextDep, CourseManagerDep
from campus_scheduler.core.exceptions import SchedulerError
from campus_scheduler.schemas.course import CourseCreate, CourseInfo, CourseUpdate

router = APIRouter(prefix="/api/courses", tags=["Course"])


@router.get("", response_model=List[CourseInfo], summary="List courses")
def list_courses(
    ctx: ContextDep,
    course_manager: CourseManagerDep,
    department: Optional[str] = None,
) -> List[CourseInfo]:
    return course_manager.list_courses(ctx, department=department)


@router.post(
    "",
    response_model=CourseInfo,
    status_code=status.HTTP_201_CREATED,
    summary="Create course",
)
def create_course(req: CourseCreate, ctx: ContextDep, course_manager: CourseManagerDep) -> CourseInfo:
    try:
        return course_manager.create_course(ctx, **req.model_dump())
    except SchedulerError as exc:
        raise http_error(exc)


@router.get("/{course_id}", response_model=CourseInfo, summary="Get course")
def get_course(course_id: str, ctx: ContextDep, course_manager: CourseManagerDep) -> CourseInfo:
    try:
        return course_manager.get_course(ctx, course_id)
    except SchedulerError as exc:
        raise http_error(exc)


@router.patch("/{course_id}", response_model=CourseInfo, summary="Update course")
def update_course(
    course_id: str,
    req: CourseUpdate,
    ctx: ContextDep,
    course_manager: CourseManagerDep,
) -> CourseInfo:
    try:
        return course_manager.update_course(ctx, course_id, **req.model_dump(exclude_unset=True))
    except (SchedulerError, ValueError) as exc:
        raise http_error(exc)


@router.delete("/{course_id}", status_code=status.HTTP_204_NO_CONTENT, summary="Delete course")
def delete_course(course_id: str, ctx: ContextDep, course_manager: CourseManagerDep) -> None:
    """Delete a course; its timetable entries are removed by cascade."""
    try:
        course_manager.delete_course(ctx, course_id)
    except SchedulerError as exc:
        raise http_error(exc)
