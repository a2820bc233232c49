"""Closed enumerations stored as text columns.

Each enum backs a CHECK constraint on its column, so the database rejects
values outside the set even when the API layer is bypassed.
"""

from enum import Enum


class UserRole(str, Enum):
    STUDENT = "student"
    FACULTY = "faculty"
    ADMIN = "admin"


class DayOfWeek(str, Enum):
    MONDAY = "Monday"
    TUESDAY = "Tuesday"
    WEDNESDAY = "Wednesday"
    THURSDAY = "Thursday"
    FRIDAY = "Friday"
    SATURDAY = "Saturday"
    SUNDAY = "Sunday"


class FeedbackStatus(str, Enum):
    PENDING = "pending"
    REVIEWED = "reviewed"
    RESOLVED = "resolved"


def sql_in_list(enum_cls) -> str:
    """Render an enum as the right-hand side of a SQL IN check."""
    return ", ".join(f"'{member.value}'" for member in enum_cls)
