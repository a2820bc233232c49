"""Timetable entry database model.

A timetable entry is one scheduled class session. Deleting the referenced
course, faculty profile or classroom deletes the entry (ON DELETE CASCADE).
"""

from sqlalchemy import CheckConstraint, Column, DateTime, ForeignKey, Index, String, Time
from sqlalchemy.orm import relationship

from .base import Base, new_uuid, utcnow
from .enums import DayOfWeek, sql_in_list


class TimetableModel(Base):
    """Timetable entry database model."""

    __tablename__ = "timetable"
    __table_args__ = (
        CheckConstraint(
            f"day_of_week IN ({sql_in_list(DayOfWeek)})",
            name="timetable_day_of_week_check",
        ),
        CheckConstraint("end_time > start_time", name="valid_time_range"),
        Index("idx_timetable_faculty_id", "faculty_id"),
        Index("idx_timetable_room_id", "room_id"),
        Index("idx_timetable_course_id", "course_id"),
        Index("idx_timetable_day_time", "day_of_week", "start_time", "end_time"),
    )

    id = Column(String(36), primary_key=True, default=new_uuid)
    course_id = Column(
        String(36), ForeignKey("courses.id", ondelete="CASCADE"), nullable=False
    )
    faculty_id = Column(
        String(36), ForeignKey("profiles.id", ondelete="CASCADE"), nullable=False
    )
    room_id = Column(
        String(36), ForeignKey("classrooms.id", ondelete="CASCADE"), nullable=False
    )
    day_of_week = Column(String, nullable=False)
    start_time = Column(Time, nullable=False)
    end_time = Column(Time, nullable=False)
    semester = Column(String, nullable=False)
    academic_year = Column(String, nullable=False)
    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)
    updated_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)

    course = relationship("CourseModel", back_populates="timetable_entries")
    faculty = relationship("ProfileModel", back_populates="teaching_slots")
    room = relationship("ClassroomModel", back_populates="timetable_entries")
