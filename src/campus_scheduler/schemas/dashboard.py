from typing import List

from pydantic import BaseModel

from campus_scheduler.schemas.profile import ProfileInfo
from campus_scheduler.schemas.timetable import TimetableEntryInfo


class DashboardResponse(BaseModel):
    """Everything the dashboard loads on open."""

    profile: ProfileInfo
    timetable: List[TimetableEntryInfo]
