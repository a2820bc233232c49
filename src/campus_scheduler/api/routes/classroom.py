"""Classroom routes. Anyone can read; only admins can write."""

from typing import List

from fastapi import APIRouter, status

from campus_scheduler.api.errors import http_error
from campus_scheduler.core.dependencies import ClassroomManagerDep, ContextDep
from campus_scheduler.core.exceptions import SchedulerError
from campus_scheduler.schemas.classroom import ClassroomCreate, ClassroomInfo, ClassroomUpdate

router = APIRouter(prefix="/api/classrooms", tags=["Classroom"])


@router.get("", response_model=List[ClassroomInfo], summary="List classrooms")
def list_classrooms(
    ctx: ContextDep,
    classroom_manager: ClassroomManagerDep,
    available_only: bool = False,
) -> List[ClassroomInfo]:
    return classroom_manager.list_classrooms(ctx, available_only=available_only)


@router.post(
    "",
    response_model=ClassroomInfo,
    status_code=status.HTTP_201_CREATED,
    summary="Create classroom",
)
def create_classroom(
    req: ClassroomCreate, ctx: ContextDep, classroom_manager: ClassroomManagerDep
) -> ClassroomInfo:
    try:
        return classroom_manager.create_classroom(ctx, **req.model_dump())
    except SchedulerError as exc:
        raise http_error(exc)


@router.get("/{classroom_id}", response_model=ClassroomInfo, summary="Get classroom")
def get_classroom(
    classroom_id: str, ctx: ContextDep, classroom_manager: ClassroomManagerDep
) -> ClassroomInfo:
    try:
        return classroom_manager.get_classroom(ctx, classroom_id)
    except SchedulerError as exc:
        raise http_error(exc)


@router.patch("/{classroom_id}", response_model=ClassroomInfo, summary="Update classroom")
def update_classroom(
    classroom_id: str,
    req: ClassroomUpdate,
    ctx: ContextDep,
    classroom_manager: ClassroomManagerDep,
) -> ClassroomInfo:
    try:
        return classroom_manager.update_classroom(
            ctx, classroom_id, **req.model_dump(exclude_unset=True)
        )
    except (SchedulerError, ValueError) as exc:
        raise http_error(exc)


@router.delete(
    "/{classroom_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete classroom",
)
def delete_classroom(
    classroom_id: str, ctx: ContextDep, classroom_manager: ClassroomManagerDep
) -> None:
    """Delete a classroom; its timetable entries are removed by cascade."""
    try:
        classroom_manager.delete_classroom(ctx, classroom_id)
    except SchedulerError as exc:
        raise http_error(exc)
