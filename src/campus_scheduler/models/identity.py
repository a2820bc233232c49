"""Identity database model.

An identity is the authenticated principal. Creating one fires the
on-identity-created trigger, which materializes the matching profile.
"""

from sqlalchemy import JSON, Column, DateTime, String

from .base import Base, new_uuid, utcnow


class IdentityModel(Base):
    """Identity database model."""

    __tablename__ = "identities"

    id = Column(String(36), primary_key=True, default=new_uuid)
    email = Column(String, unique=True, index=True, nullable=False)
    password_hash = Column(String, nullable=False)
    # Free-form signup metadata, e.g. {"name": "Dr. Lee"}
    user_metadata = Column(JSON, nullable=False, default=dict)
    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)
    last_sign_in_at = Column(DateTime(timezone=True), nullable=True)
