from datetime import time

import pytest

from campus_scheduler.core.context import RequestContext
from campus_scheduler.core.exceptions import (
    ConstraintViolationError,
    PolicyViolationError,
    RecordNotFoundError,
)
from campus_scheduler.core.policies import POLICIES, Command
from campus_scheduler.models import UserRole
from campus_scheduler.utils.classroom_manager import ClassroomManager
from campus_scheduler.utils.course_manager import CourseManager
from campus_scheduler.utils.feedback_manager import FeedbackManager
from campus_scheduler.utils.profile_manager import ProfileManager
from campus_scheduler.utils.timetable_manager import TimetableManager

ANON = RequestContext.anonymous()


@pytest.fixture
def room_and_course(seeded, admin):
    room = ClassroomManager(seeded).create_classroom(
        admin.ctx, room_name="Room P1", capacity=30, location="Building P"
    )
    course = CourseManager(seeded).create_course(
        admin.ctx, course_code="POL101", course_name="Policy", department="Law"
    )
    return room, course


def _entry_fields(room, course, faculty_id, **overrides):
    fields = {
        "course_id": course.id,
        "faculty_id": faculty_id,
        "room_id": room.id,
        "day_of_week": "Wednesday",
        "start_time": time(9),
        "end_time": time(10),
        "semester": "Fall",
        "academic_year": "2026-2027",
    }
    fields.update(overrides)
    return fields


def test_registry_lists_every_guarded_table():
    assert set(POLICIES.tables()) == {"profiles", "classrooms", "courses", "timetable", "feedback"}
    assert [p.name for p in POLICIES.policies_for("feedback", Command.SELECT)] == [
        "Users can view their own feedback",
        "Admins can view all feedback",
    ]
    assert POLICIES.policies_for("profiles", Command.DELETE) == []


def test_student_cannot_write_classrooms_or_courses_but_can_read(seeded, student):
    rooms = ClassroomManager(seeded)
    courses = CourseManager(seeded)
    room = rooms.list_classrooms(student.ctx)[0]
    course = courses.list_courses(student.ctx)[0]

    with pytest.raises(PolicyViolationError):
        rooms.create_classroom(student.ctx, room_name="Hack", capacity=1, location="x")
    with pytest.raises(PolicyViolationError):
        rooms.update_classroom(student.ctx, room.id, capacity=999)
    with pytest.raises(PolicyViolationError):
        rooms.delete_classroom(student.ctx, room.id)
    with pytest.raises(PolicyViolationError):
        courses.update_course(student.ctx, course.id, credits=10)
    with pytest.raises(PolicyViolationError):
        courses.delete_course(student.ctx, course.id)

    assert len(rooms.list_classrooms(student.ctx)) == 5
    assert rooms.get_classroom(student.ctx, room.id).capacity == room.capacity
    assert len(courses.list_courses(student.ctx)) == 5


def test_faculty_manages_timetable_but_not_rooms(seeded, room_and_course, faculty):
    room, course = room_and_course
    timetable = TimetableManager(seeded)

    entry = timetable.create_entry(faculty.ctx, **_entry_fields(room, course, faculty.profile_id))
    updated = timetable.update_entry(faculty.ctx, entry.id, end_time=time(11))
    assert updated.end_time == time(11)

    with pytest.raises(PolicyViolationError):
        ClassroomManager(seeded).update_classroom(faculty.ctx, room.id, capacity=31)

    timetable.delete_entry(faculty.ctx, entry.id)
    assert timetable.list_entries(faculty.ctx) == []


def test_student_cannot_write_timetable_but_can_read(seeded, room_and_course, faculty, student):
    room, course = room_and_course
    timetable = TimetableManager(seeded)
    entry = timetable.create_entry(faculty.ctx, **_entry_fields(room, course, faculty.profile_id))

    with pytest.raises(PolicyViolationError):
        timetable.create_entry(student.ctx, **_entry_fields(room, course, faculty.profile_id))
    with pytest.raises(PolicyViolationError):
        timetable.update_entry(student.ctx, entry.id, semester="Spring")
    with pytest.raises(PolicyViolationError):
        timetable.delete_entry(student.ctx, entry.id)

    listed = timetable.list_entries(student.ctx)
    assert [e.id for e in listed] == [entry.id]
    assert listed[0].course.course_code == "POL101"
    assert listed[0].room.room_name == "Room P1"
    assert listed[0].faculty.name == "Dr. Lee"


def test_anonymous_reads_public_tables_and_cannot_write(seeded):
    assert len(ClassroomManager(seeded).list_classrooms(ANON)) == 5
    assert len(CourseManager(seeded).list_courses(ANON)) == 5
    with pytest.raises(PolicyViolationError):
        CourseManager(seeded).create_course(
            ANON, course_code="X1", course_name="X", department="X"
        )
    with pytest.raises(PolicyViolationError):
        FeedbackManager(seeded).submit_feedback(ANON, "t", "m")


def test_check_constraint_surfaces_for_permitted_writer(seeded, room_and_course, admin):
    room, course = room_and_course
    timetable = TimetableManager(seeded)
    faculty_id = ProfileManager(seeded).get_own_profile(admin.ctx).id

    with pytest.raises(ConstraintViolationError) as info:
        timetable.create_entry(
            admin.ctx,
            **_entry_fields(room, course, faculty_id, start_time=time(9), end_time=time(8)),
        )
    assert info.value.kind == ConstraintViolationError.CHECK
    assert timetable.list_entries(admin.ctx) == []


def test_unique_constraint_surfaces_as_unique_kind(seeded, admin):
    with pytest.raises(ConstraintViolationError) as info:
        ClassroomManager(seeded).create_classroom(
            admin.ctx, room_name="Room A101", capacity=10, location="Dup"
        )
    assert info.value.kind == ConstraintViolationError.UNIQUE


def test_role_change_takes_effect_on_next_check(seeded, student):
    rooms = ClassroomManager(seeded)
    room = rooms.list_classrooms(student.ctx)[0]
    with pytest.raises(PolicyViolationError):
        rooms.update_classroom(student.ctx, room.id, remarks="Repainted")

    ProfileManager(seeded).assign_role(student.profile_id, UserRole.ADMIN)
    assert rooms.update_classroom(student.ctx, room.id, remarks="Repainted").remarks == "Repainted"

    ProfileManager(seeded).assign_role(student.profile_id, UserRole.STUDENT)
    with pytest.raises(PolicyViolationError):
        rooms.update_classroom(student.ctx, room.id, remarks="Again")


def test_profiles_are_public_but_only_owner_updates(db, student, faculty):
    profiles = ProfileManager(db)
    assert {p.id for p in profiles.list_profiles(ANON)} == {student.profile_id, faculty.profile_id}
    assert profiles.get_profile_by_owner(student.ctx, faculty.identity_id).name == "Dr. Lee"

    with pytest.raises(PolicyViolationError):
        profiles.update_profile(student.ctx, faculty.profile_id, name="Mallory")
    assert profiles.get_profile(ANON, faculty.profile_id).name == "Dr. Lee"

    updated = profiles.update_profile(student.ctx, student.profile_id, department="History")
    assert updated.department == "History"


def test_profile_update_cannot_touch_role(db, student):
    with pytest.raises(ValueError):
        ProfileManager(db).update_profile(student.ctx, student.profile_id, role="admin")
    assert ProfileManager(db).get_own_profile(student.ctx).role == "student"


def test_second_profile_for_identity_is_rejected(db, student):
    with pytest.raises(ConstraintViolationError) as info:
        ProfileManager(db).create_profile(
            student.ctx, user_id=student.identity_id, name="Twin", email=student.email
        )
    assert info.value.kind == ConstraintViolationError.UNIQUE


def test_profile_insert_for_someone_else_is_denied(db, student, faculty):
    with pytest.raises(PolicyViolationError):
        ProfileManager(db).create_profile(
            student.ctx, user_id=faculty.identity_id, name="Fake", email="fake@campus.edu"
        )


def test_profile_lookup_by_unknown_owner_is_not_found(db, student):
    with pytest.raises(RecordNotFoundError):
        ProfileManager(db).get_profile_by_owner(student.ctx, "missing-identity")


def test_feedback_visible_to_owner_and_admin_only(db, student, faculty, admin):
    feedback = FeedbackManager(db)
    note = feedback.submit_feedback(student.ctx, "Wi-Fi", "Lab C301 has no signal")

    assert [f.id for f in feedback.list_feedback(student.ctx)] == [note.id]
    assert feedback.list_feedback(faculty.ctx) == []
    assert [f.id for f in feedback.list_feedback(admin.ctx)] == [note.id]
    assert feedback.list_feedback(ANON) == []
    with pytest.raises(RecordNotFoundError):
        feedback.get_feedback(faculty.ctx, note.id)


def test_feedback_owner_edits_and_admin_reviews(db, student, faculty, admin):
    feedback = FeedbackManager(db)
    note = feedback.submit_feedback(student.ctx, "Wi-Fi", "No signal")

    edited = feedback.update_feedback(student.ctx, note.id, message="No signal after 5pm")
    assert edited.message == "No signal after 5pm"

    with pytest.raises(RecordNotFoundError):
        feedback.update_feedback(faculty.ctx, note.id, message="hijacked")

    reviewed = feedback.update_feedback(admin.ctx, note.id, status="reviewed")
    assert reviewed.status == "reviewed"
    assert [f.id for f in feedback.list_feedback(admin.ctx, status="reviewed")] == [note.id]


def test_feedback_cannot_be_reassigned_or_deleted(db, student, faculty):
    feedback = FeedbackManager(db)
    note = feedback.submit_feedback(student.ctx, "Noise", "Construction")

    with pytest.raises(ValueError):
        feedback.update_feedback(student.ctx, note.id, user_id=faculty.identity_id)
    with pytest.raises(PolicyViolationError):
        feedback.delete(student.ctx, note.id)


def test_owner_update_rechecked_against_new_row(db, student, faculty):
    profiles = ProfileManager(db)
    profiles.updatable_fields = None

    with pytest.raises(PolicyViolationError):
        profiles.update_profile(student.ctx, student.profile_id, user_id=faculty.identity_id)
    db.expire_all()
    assert profiles.get_own_profile(student.ctx).id == student.profile_id


def test_only_admin_changes_feedback_status(db, student, faculty, admin):
    feedback = FeedbackManager(db)
    note = feedback.submit_feedback(student.ctx, "Projector", "Bulb is out")

    with pytest.raises(PolicyViolationError):
        feedback.update_feedback(student.ctx, note.id, status="resolved")
    with pytest.raises(RecordNotFoundError):
        feedback.update_feedback(faculty.ctx, note.id, status="resolved")
    db.expire_all()
    assert feedback.get_feedback(student.ctx, note.id).status == "pending"

    assert feedback.update_feedback(admin.ctx, note.id, status="resolved").status == "resolved"
