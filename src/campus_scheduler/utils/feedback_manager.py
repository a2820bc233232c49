"""Feedback management utilities.

Feedback is visible to its author and to admins. Authors submit and edit
the title and message of their own notes; only admins move a note through
pending, reviewed and resolved.
"""

import logging
from typing import List, Optional

from campus_scheduler.core.context import RequestContext
from campus_scheduler.core.exceptions import PolicyViolationError
from campus_scheduler.core.policies import Command, HasProfileRole
from campus_scheduler.models import FeedbackModel, FeedbackStatus, UserRole
from campus_scheduler.utils.record_manager import RecordManager

logger = logging.getLogger(__name__)

# Status changes are a review action
REVIEWER = HasProfileRole(UserRole.ADMIN)


class FeedbackManager(RecordManager):
    """Manages feedback operations using SQLAlchemy."""

    model = FeedbackModel
    updatable_fields = ("title", "message", "status")

    def list_feedback(
        self, ctx: RequestContext, status: Optional[FeedbackStatus] = None
    ) -> List[FeedbackModel]:
        """List the feedback ``ctx`` may see, newest first."""
        query = self.visible(ctx)
        if status is not None:
            query = query.filter(FeedbackModel.status == FeedbackStatus(status).value)
        return query.order_by(FeedbackModel.created_at.desc()).all()

    def get_feedback(self, ctx: RequestContext, feedback_id: str) -> FeedbackModel:
        return self.get(ctx, feedback_id)

    def submit_feedback(self, ctx: RequestContext, title: str, message: str) -> FeedbackModel:
        """Record a note owned by the acting identity."""
        return self.create(ctx, user_id=ctx.identity_id, title=title, message=message)

    def update_feedback(self, ctx: RequestContext, feedback_id: str, **changes) -> FeedbackModel:
        """Edit a note.

        Raises:
            RecordNotFoundError: If the note is missing or not visible.
            PolicyViolationError: If a non-admin changes the status, or the
                UPDATE policies deny the edit.
        """
        if "status" in changes:
            note = self.get(ctx, feedback_id)
            if not REVIEWER.holds(self.db, ctx, note):
                logger.warning(
                    "Denied status change on feedback %s for identity %s",
                    feedback_id,
                    ctx.identity_id or "<anonymous>",
                )
                raise PolicyViolationError(self.table, Command.UPDATE.value)
            changes["status"] = FeedbackStatus(changes["status"]).value
        return self.update(ctx, feedback_id, **changes)
