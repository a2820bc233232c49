"""Demo seed data: five classrooms and five courses.

Seeding writes directly through the session, like a migration, so it is not
subject to the row-level policies.
"""

import logging

from sqlalchemy.orm import Session

from campus_scheduler.models import ClassroomModel, CourseModel

logger = logging.getLogger(__name__)

SEED_CLASSROOMS = [
    {
        "room_name": "Room A101",
        "capacity": 50,
        "equipment": ["projector", "whiteboard", "air_conditioning"],
        "location": "Building A, Floor 1",
        "availability_status": True,
        "remarks": "Standard classroom with modern amenities",
    },
    {
        "room_name": "Room B201",
        "capacity": 30,
        "equipment": ["smart_board", "audio_system", "projector"],
        "location": "Building B, Floor 2",
        "availability_status": True,
        "remarks": "Small seminar room",
    },
    {
        "room_name": "Lab C301",
        "capacity": 25,
        "equipment": ["computers", "projector", "air_conditioning"],
        "location": "Building C, Floor 3",
        "availability_status": True,
        "remarks": "Computer lab",
    },
    {
        "room_name": "Auditorium D001",
        "capacity": 200,
        "equipment": ["sound_system", "projector", "stage", "microphones"],
        "location": "Building D, Ground Floor",
        "availability_status": True,
        "remarks": "Large auditorium for events",
    },
    {
        "room_name": "Room A102",
        "capacity": 40,
        "equipment": ["projector", "whiteboard"],
        "location": "Building A, Floor 1",
        "availability_status": False,
        "remarks": "Under maintenance",
    },
]

SEED_COURSES = [
    {
        "course_code": "CS101",
        "course_name": "Introduction to Computer Science",
        "department": "Computer Science",
        "credits": 3,
        "description": "Basic concepts of computer science and programming",
    },
    {
        "course_code": "MATH201",
        "course_name": "Calculus II",
        "department": "Mathematics",
        "credits": 4,
        "description": "Advanced calculus concepts and applications",
    },
    {
        "course_code": "ENG101",
        "course_name": "English Composition",
        "department": "English",
        "credits": 3,
        "description": "Academic writing and communication skills",
    },
    {
        "course_code": "PHYS201",
        "course_name": "Physics II",
        "department": "Physics",
        "credits": 4,
        "description": "Electricity, magnetism, and waves",
    },
    {
        "course_code": "BIO101",
        "course_name": "General Biology",
        "department": "Biology",
        "credits": 3,
        "description": "Introduction to biological concepts",
    },
]


def run(db: Session) -> bool:
    """Insert the demo rows unless classrooms already exist.

    Returns:
        True if rows were inserted, False if the database was already seeded.
    """
    # Only seed if empty
    if db.query(ClassroomModel).count() > 0:
        logger.info("Seed skipped: classrooms already present")
        return False

    db.add_all([ClassroomModel(**row) for row in SEED_CLASSROOMS])
    db.add_all([CourseModel(**row) for row in SEED_COURSES])
    db.commit()
    logger.info(
        "Seeded %d classrooms and %d courses", len(SEED_CLASSROOMS), len(SEED_COURSES)
    )
    return True
