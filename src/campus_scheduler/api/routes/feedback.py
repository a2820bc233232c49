"""Feedback routes."""

from typing import List, Optional

from fastapi import APIRouter, status

from campus_scheduler.api.errors import http_error
from campus_scheduler.core.dependencies import (
    AuthenticatedContextDep,
    ContextDep,
    FeedbackManagerDep,
)
from campus_scheduler.core.exceptions import SchedulerError
from campus_scheduler.models.enums import FeedbackStatus
from campus_scheduler.schemas.feedback import FeedbackCreate, FeedbackInfo, FeedbackUpdate

router = APIRouter(prefix="/api/feedback", tags=["Feedback"])


@router.get("", response_model=List[FeedbackInfo], summary="List visible feedback")
def list_feedback(
    ctx: ContextDep,
    feedback_manager: FeedbackManagerDep,
    status: Optional[FeedbackStatus] = None,
) -> List[FeedbackInfo]:
    """Own feedback for regular users, all feedback for admins."""
    return feedback_manager.list_feedback(ctx, status=status)


@router.post(
    "",
    response_model=FeedbackInfo,
    status_code=status.HTTP_201_CREATED,
    summary="Submit feedback",
)
def submit_feedback(
    req: FeedbackCreate, ctx: AuthenticatedContextDep, feedback_manager: FeedbackManagerDep
) -> FeedbackInfo:
    try:
        return feedback_manager.submit_feedback(ctx, req.title, req.message)
    except SchedulerError as exc:
        raise http_error(exc)


@router.get("/{feedback_id}", response_model=FeedbackInfo, summary="Get feedback")
def get_feedback(
    feedback_id: str, ctx: ContextDep, feedback_manager: FeedbackManagerDep
) -> FeedbackInfo:
    try:
        return feedback_manager.get_feedback(ctx, feedback_id)
    except SchedulerError as exc:
        raise http_error(exc)


@router.patch("/{feedback_id}", response_model=FeedbackInfo, summary="Update feedback")
def update_feedback(
    feedback_id: str,
    req: FeedbackUpdate,
    ctx: ContextDep,
    feedback_manager: FeedbackManagerDep,
) -> FeedbackInfo:
    try:
        return feedback_manager.update_feedback(
            ctx, feedback_id, **req.model_dump(exclude_unset=True)
        )
    except (SchedulerError, ValueError) as exc:
        raise http_error(exc)
