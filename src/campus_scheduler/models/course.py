from sqlalchemy import CheckConstraint, Column, DateTime, Integer, String, Text
from sqlalchemy.orm import relationship

from .base import Base, new_uuid, utcnow


class CourseModel(Base):
    __tablename__ = "courses"
    __table_args__ = (
        CheckConstraint("credits > 0", name="courses_credits_check"),
    )

    id = Column(String(36), primary_key=True, default=new_uuid)
    course_code = Column(String, unique=True, nullable=False)
    course_name = Column(String, nullable=False)
    department = Column(String, nullable=False)
    credits = Column(Integer, nullable=True, default=3)
    description = Column(Text, nullable=True)
    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)
    updated_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)

    timetable_entries = relationship(
        "TimetableModel",
        back_populates="course",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )
