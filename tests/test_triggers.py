from datetime import datetime, time

import pytest
import pytz
from sqlalchemy.exc import IntegrityError

from campus_scheduler.core.exceptions import ConstraintViolationError
from campus_scheduler.models import (
    ClassroomModel,
    CourseModel,
    FeedbackModel,
    IdentityModel,
    ProfileModel,
    TimetableModel,
)
from campus_scheduler.utils.identity_manager import IdentityAlreadyExistsError, IdentityManager


def _profile_for(db, identity_id):
    return db.query(ProfileModel).filter(ProfileModel.user_id == identity_id).all()


def test_signup_with_name_creates_student_profile(db):
    identity = IdentityManager(db).create_identity(
        "lee@campus.edu", "secret-pass", {"name": "Dr. Lee"}
    )

    profiles = _profile_for(db, identity.id)
    assert len(profiles) == 1
    assert profiles[0].name == "Dr. Lee"
    assert profiles[0].email == "lee@campus.edu"
    assert profiles[0].role == "student"


def test_signup_without_name_falls_back_to_email(db):
    identity = IdentityManager(db).create_identity("anon@campus.edu", "secret-pass")

    (profile,) = _profile_for(db, identity.id)
    assert profile.name == "anon@campus.edu"


def test_signup_with_null_name_falls_back_to_email(db):
    identity = IdentityManager(db).create_identity(
        "null@campus.edu", "secret-pass", {"name": None, "department": "Physics"}
    )

    (profile,) = _profile_for(db, identity.id)
    assert profile.name == "null@campus.edu"


def test_duplicate_signup_creates_nothing(db):
    manager = IdentityManager(db)
    manager.create_identity("dup@campus.edu", "secret-pass")

    with pytest.raises(IdentityAlreadyExistsError):
        manager.create_identity("DUP@campus.edu", "other-pass")

    assert db.query(IdentityModel).count() == 1
    assert db.query(ProfileModel).count() == 1


def test_signup_rejected_by_other_constraint_rolls_back(db, monkeypatch):
    manager = IdentityManager(db)
    monkeypatch.setattr(manager, "hash_password", lambda password: None)

    with pytest.raises(ConstraintViolationError) as info:
        manager.create_identity("nohash@campus.edu", "secret-pass")

    assert info.value.kind == ConstraintViolationError.NOT_NULL
    assert db.query(IdentityModel).count() == 0
    assert db.query(ProfileModel).count() == 0


def _naive_utc_now():
    return datetime.now(pytz.utc).replace(tzinfo=None)


def _touch(db, row, field, value):
    db.refresh(row)
    created, previous = row.created_at, row.updated_at
    started = _naive_utc_now()
    setattr(row, field, value)
    db.commit()
    db.refresh(row)
    assert row.updated_at >= previous
    assert row.updated_at >= started
    assert row.created_at == created


def test_update_refreshes_updated_at_on_every_table(db, faculty):
    room = ClassroomModel(room_name="Room T1", capacity=10, location="Building T")
    course = CourseModel(course_code="T100", course_name="Testing", department="QA")
    db.add_all([room, course])
    db.commit()
    entry = TimetableModel(
        course_id=course.id,
        faculty_id=faculty.profile_id,
        room_id=room.id,
        day_of_week="Tuesday",
        start_time=time(13),
        end_time=time(14),
        semester="Spring",
        academic_year="2026-2027",
    )
    note = FeedbackModel(user_id=faculty.identity_id, title="Projector", message="Broken")
    db.add_all([entry, note])
    db.commit()

    _touch(db, db.get(ProfileModel, faculty.profile_id), "department", "Physics")
    _touch(db, room, "capacity", 12)
    _touch(db, course, "credits", 4)
    _touch(db, entry, "semester", "Summer")
    _touch(db, note, "message", "Still broken")


def test_failed_update_leaves_updated_at_alone(db):
    room = ClassroomModel(room_name="Room T2", capacity=10, location="Building T")
    db.add(room)
    db.commit()
    db.refresh(room)
    previous = room.updated_at

    room.capacity = 0
    with pytest.raises(IntegrityError):
        db.commit()
    db.rollback()

    db.refresh(room)
    assert room.capacity == 10
    assert room.updated_at == previous
