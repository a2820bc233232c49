from sqlalchemy import CheckConstraint, Column, DateTime, ForeignKey, Index, String, Text

from .base import Base, new_uuid, utcnow
from .enums import FeedbackStatus, sql_in_list


class FeedbackModel(Base):
    __tablename__ = "feedback"
    __table_args__ = (
        CheckConstraint(
            f"status IN ({sql_in_list(FeedbackStatus)})", name="feedback_status_check"
        ),
        Index("idx_feedback_user_id", "user_id"),
    )

    id = Column(String(36), primary_key=True, default=new_uuid)
    user_id = Column(
        String(36), ForeignKey("identities.id", ondelete="CASCADE"), nullable=False
    )
    title = Column(String, nullable=False)
    message = Column(Text, nullable=False)
    status = Column(String, nullable=False, default=FeedbackStatus.PENDING.value)
    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)
    updated_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)
