from sqlalchemy import JSON, Boolean, CheckConstraint, Column, DateTime, Integer, String, Text
from sqlalchemy.orm import relationship

from .base import Base, new_uuid, utcnow


class ClassroomModel(Base):
    __tablename__ = "classrooms"
    __table_args__ = (
        CheckConstraint("capacity > 0", name="classrooms_capacity_check"),
    )

    id = Column(String(36), primary_key=True, default=new_uuid)
    room_name = Column(String, unique=True, nullable=False)
    capacity = Column(Integer, nullable=False)
    # e.g. ["projector", "smart_board", "audio_system"]
    equipment = Column(JSON, nullable=True, default=list)
    location = Column(String, nullable=False)
    availability_status = Column(Boolean, nullable=True, default=True)
    remarks = Column(Text, nullable=True)
    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)
    updated_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)

    timetable_entries = relationship(
        "TimetableModel",
        back_populates="room",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )
