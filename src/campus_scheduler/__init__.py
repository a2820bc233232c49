"""Campus scheduler: profiles, classrooms, courses, timetable and feedback
behind row-level authorization policies."""

__version__ = "1.0.0"
