"""Timetable management module.

Handles the joined timetable listing the dashboard reads (entry plus course,
classroom and faculty name) and the admin/faculty write path.
"""

import logging
from typing import List, Optional

from sqlalchemy import case
from sqlalchemy.orm import joinedload

from campus_scheduler.config import TIMETABLE_DEFAULT_LIMIT, TIMETABLE_MAX_LIMIT
from campus_scheduler.core.context import RequestContext
from campus_scheduler.core.exceptions import RecordNotFoundError
from campus_scheduler.models import DayOfWeek, TimetableModel
from campus_scheduler.utils.record_manager import RecordManager

logger = logging.getLogger(__name__)

# Monday first, so listings read like a week
_WEEKDAY_ORDER = case(
    {day.value: index for index, day in enumerate(DayOfWeek)},
    value=TimetableModel.day_of_week,
)


class TimetableManager(RecordManager):
    """Manages timetable entries. Writes require an admin or faculty profile."""

    model = TimetableModel
    updatable_fields = (
        "course_id",
        "faculty_id",
        "room_id",
        "day_of_week",
        "start_time",
        "end_time",
        "semester",
        "academic_year",
    )

    def _joined(self, ctx: RequestContext):
        return self.visible(ctx).options(
            joinedload(TimetableModel.course),
            joinedload(TimetableModel.room),
            joinedload(TimetableModel.faculty),
        )

    def list_entries(
        self,
        ctx: RequestContext,
        limit: int = TIMETABLE_DEFAULT_LIMIT,
        day_of_week: Optional[DayOfWeek] = None,
        faculty_id: Optional[str] = None,
        room_id: Optional[str] = None,
        course_id: Optional[str] = None,
        semester: Optional[str] = None,
    ) -> List[TimetableModel]:
        """List timetable entries with their course, classroom and faculty loaded.

        Args:
            ctx: The acting identity.
            limit: Maximum number of entries (1 to TIMETABLE_MAX_LIMIT).
            day_of_week: Only entries on this day.
            faculty_id: Only entries taught by this profile.
            room_id: Only entries held in this classroom.
            course_id: Only entries of this course.
            semester: Only entries of this semester.

        Returns:
            Entries ordered by weekday, then start time.

        Raises:
            ValueError: If limit is out of range.
        """
        if limit < 1 or limit > TIMETABLE_MAX_LIMIT:
            raise ValueError(f"limit must be between 1 and {TIMETABLE_MAX_LIMIT}")

        query = self._joined(ctx)
        if day_of_week is not None:
            query = query.filter(TimetableModel.day_of_week == DayOfWeek(day_of_week).value)
        if faculty_id:
            query = query.filter(TimetableModel.faculty_id == faculty_id)
        if room_id:
            query = query.filter(TimetableModel.room_id == room_id)
        if course_id:
            query = query.filter(TimetableModel.course_id == course_id)
        if semester:
            query = query.filter(TimetableModel.semester == semester)
        return (
            query.order_by(_WEEKDAY_ORDER, TimetableModel.start_time)
            .limit(limit)
            .all()
        )

    def get_entry(self, ctx: RequestContext, entry_id: str) -> TimetableModel:
        entry = self._joined(ctx).filter(TimetableModel.id == entry_id).first()
        if entry is None:
            raise RecordNotFoundError(self.table, entry_id)
        return entry

    def create_entry(self, ctx: RequestContext, **fields) -> TimetableModel:
        if "day_of_week" in fields:
            fields["day_of_week"] = _day_value(fields["day_of_week"])
        return self.create(ctx, **fields)

    def update_entry(self, ctx: RequestContext, entry_id: str, **changes) -> TimetableModel:
        if "day_of_week" in changes:
            changes["day_of_week"] = _day_value(changes["day_of_week"])
        return self.update(ctx, entry_id, **changes)

    def delete_entry(self, ctx: RequestContext, entry_id: str) -> None:
        self.delete(ctx, entry_id)


def _day_value(day) -> str:
    # Unknown names pass through untouched so the CHECK constraint rejects them
    return day.value if isinstance(day, DayOfWeek) else day
