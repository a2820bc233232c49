"""Timetable schema definitions.

The listing shape mirrors what the dashboard renders: the entry's day and
times plus the course code and name, the classroom name and location, and
the faculty member's name.
"""

from datetime import datetime, time
from typing import Optional

from pydantic import BaseModel, ConfigDict

from campus_scheduler.models.enums import DayOfWeek


class CourseSummary(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    course_code: str
    course_name: str


class ClassroomSummary(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    room_name: str
    location: str


class FacultySummary(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    name: str


class TimetableEntryInfo(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    course_id: str
    faculty_id: str
    room_id: str
    day_of_week: DayOfWeek
    start_time: time
    end_time: time
    semester: str
    academic_year: str
    created_at: datetime
    updated_at: datetime
    course: Optional[CourseSummary] = None
    room: Optional[ClassroomSummary] = None
    faculty: Optional[FacultySummary] = None


class TimetableEntryCreate(BaseModel):
    course_id: str
    faculty_id: str
    room_id: str
    day_of_week: DayOfWeek
    # end_time > start_time is enforced by the valid_time_range constraint
    start_time: time
    end_time: time
    semester: str
    academic_year: str


class TimetableEntryUpdate(BaseModel):
    course_id: Optional[str] = None
    faculty_id: Optional[str] = None
    room_id: Optional[str] = None
    day_of_week: Optional[DayOfWeek] = None
    start_time: Optional[time] = None
    end_time: Optional[time] = None
    semester: Optional[str] = None
    academic_year: Optional[str] = None
