from datetime import time

import pytest
from sqlalchemy.exc import IntegrityError

from campus_scheduler.models import (
    ClassroomModel,
    CourseModel,
    FeedbackModel,
    IdentityModel,
    ProfileModel,
    TimetableModel,
)


def _room(**overrides):
    values = {"room_name": "Room X1", "capacity": 20, "location": "Building X"}
    values.update(overrides)
    return ClassroomModel(**values)


def _course(**overrides):
    values = {"course_code": "CHEM101", "course_name": "Chemistry", "department": "Chemistry"}
    values.update(overrides)
    return CourseModel(**values)


def _entry(course, room, faculty_id, **overrides):
    values = {
        "course_id": course.id,
        "faculty_id": faculty_id,
        "room_id": room.id,
        "day_of_week": "Monday",
        "start_time": time(9, 0),
        "end_time": time(10, 30),
        "semester": "Fall",
        "academic_year": "2026-2027",
    }
    values.update(overrides)
    return TimetableModel(**values)


def _rejects(db, row):
    db.add(row)
    with pytest.raises(IntegrityError):
        db.commit()
    db.rollback()


@pytest.mark.parametrize("capacity", [0, -5])
def test_classroom_capacity_must_be_positive(db, capacity):
    _rejects(db, _room(capacity=capacity))


@pytest.mark.parametrize("credits", [0, -1])
def test_course_credits_must_be_positive(db, credits):
    _rejects(db, _course(credits=credits))


def test_course_credits_default_to_three(db):
    course = _course()
    db.add(course)
    db.commit()
    db.refresh(course)
    assert course.credits == 3


def test_classroom_name_and_course_code_are_unique(db):
    db.add_all([_room(), _course()])
    db.commit()
    _rejects(db, _room(location="Elsewhere"))
    _rejects(db, _course(course_name="Other"))


def test_timetable_rejects_end_before_start(db, faculty):
    room, course = _room(), _course()
    db.add_all([room, course])
    db.commit()
    _rejects(db, _entry(course, room, faculty.profile_id, start_time=time(9), end_time=time(8)))
    _rejects(db, _entry(course, room, faculty.profile_id, start_time=time(9), end_time=time(9)))


def test_timetable_rejects_unknown_day(db, faculty):
    room, course = _room(), _course()
    db.add_all([room, course])
    db.commit()
    _rejects(db, _entry(course, room, faculty.profile_id, day_of_week="Funday"))


def test_timetable_requires_existing_references(db, faculty):
    room, course = _room(), _course()
    db.add_all([room, course])
    db.commit()
    _rejects(db, _entry(course, room, "no-such-profile"))


def test_profile_role_is_a_closed_set(db, student):
    profile = db.get(ProfileModel, student.profile_id)
    profile.role = "dean"
    with pytest.raises(IntegrityError):
        db.commit()
    db.rollback()


def test_one_profile_per_identity(db, student):
    _rejects(db, ProfileModel(user_id=student.identity_id, name="Again", email=student.email))


def test_feedback_status_defaults_to_pending_and_is_closed(db, student):
    note = FeedbackModel(user_id=student.identity_id, title="Heating", message="Room is cold")
    db.add(note)
    db.commit()
    db.refresh(note)
    assert note.status == "pending"

    _rejects(db, FeedbackModel(user_id=student.identity_id, title="t", message="m", status="ignored"))
    _rejects(db, FeedbackModel(user_id=student.identity_id, title="t", message="m", status=None))


def test_deleting_course_room_or_faculty_cascades_to_timetable(db, faculty):
    rooms = [_room(room_name=f"Room {i}") for i in range(3)]
    courses = [_course(course_code=f"C{i}") for i in range(3)]
    db.add_all(rooms + courses)
    db.commit()
    entries = [_entry(courses[i], rooms[i], faculty.profile_id) for i in range(3)]
    db.add_all(entries)
    db.commit()
    first, second, third = [e.id for e in entries]

    db.delete(courses[0])
    db.commit()
    assert db.get(TimetableModel, first) is None

    db.delete(rooms[1])
    db.commit()
    assert db.get(TimetableModel, second) is None

    db.delete(db.get(ProfileModel, faculty.profile_id))
    db.commit()
    db.expire_all()
    assert db.query(TimetableModel).count() == 0
    assert third not in {e.id for e in db.query(TimetableModel).all()}


def test_deleting_identity_cascades_to_profile_and_feedback(db, student):
    db.add(FeedbackModel(user_id=student.identity_id, title="t", message="m"))
    db.commit()

    db.delete(db.get(IdentityModel, student.identity_id))
    db.commit()
    db.expire_all()

    assert db.query(ProfileModel).count() == 0
    assert db.query(FeedbackModel).count() == 0
