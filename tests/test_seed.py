from campus_scheduler.models import ClassroomModel, CourseModel
from campus_scheduler.utils import seed


def test_seed_inserts_demo_rows_once(db):
    assert seed.run(db) is True
    assert db.query(ClassroomModel).count() == 5
    assert db.query(CourseModel).count() == 5

    assert seed.run(db) is False
    assert db.query(ClassroomModel).count() == 5


def test_seed_values(seeded):
    maintenance = seeded.query(ClassroomModel).filter_by(room_name="Room A102").one()
    assert maintenance.availability_status is False
    assert maintenance.equipment == ["projector", "whiteboard"]

    calculus = seeded.query(CourseModel).filter_by(course_code="MATH201").one()
    assert calculus.credits == 4
    assert calculus.department == "Mathematics"
