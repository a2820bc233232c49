"""Database models. Importing this package registers every table on Base.metadata."""

from .base import Base
from .classroom import ClassroomModel
from .course import CourseModel
from .enums import DayOfWeek, FeedbackStatus, UserRole
from .feedback import FeedbackModel
from .identity import IdentityModel
from .profile import ProfileModel
from .timetable import TimetableModel

# Tables whose updated_at column is stamped by the on-before-persist trigger
TIMESTAMPED_MODELS = (
    ProfileModel,
    ClassroomModel,
    CourseModel,
    TimetableModel,
    FeedbackModel,
)

__all__ = [
    "Base",
    "ClassroomModel",
    "CourseModel",
    "DayOfWeek",
    "FeedbackModel",
    "FeedbackStatus",
    "IdentityModel",
    "ProfileModel",
    "TimetableModel",
    "TIMESTAMPED_MODELS",
    "UserRole",
]
