"""Profile database model.

This module defines the Profile database model using SQLAlchemy. Exactly one
profile exists per identity.
"""

from sqlalchemy import CheckConstraint, Column, DateTime, ForeignKey, Index, String
from sqlalchemy.orm import relationship

from .base import Base, new_uuid, utcnow
from .enums import UserRole, sql_in_list


class ProfileModel(Base):
    """Profile database model."""

    __tablename__ = "profiles"
    __table_args__ = (
        CheckConstraint(f"role IN ({sql_in_list(UserRole)})", name="profiles_role_check"),
        Index("idx_profiles_user_id", "user_id"),
        Index("idx_profiles_role", "role"),
    )

    id = Column(String(36), primary_key=True, default=new_uuid)
    user_id = Column(
        String(36),
        ForeignKey("identities.id", ondelete="CASCADE"),
        unique=True,
        nullable=False,
    )
    name = Column(String, nullable=False)
    email = Column(String, nullable=False)
    role = Column(String, nullable=False, default=UserRole.STUDENT.value)
    department = Column(String, nullable=True)
    phone = Column(String, nullable=True)
    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)
    updated_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)

    teaching_slots = relationship(
        "TimetableModel",
        back_populates="faculty",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )
