# /tests/test_class_service.py

import pytest
from sqlalchemy.exc import SQLAlchemyError

from school_admin.db.models.attendance_models import Attendance
from school_admin.db.models.class_student_models import Class, Student
from school_admin.models.attendance_model import AttendanceRecordIn
from school_admin.models.class_model import ClassCreate
from school_admin.services import class_service, student_service, attendance_service
from school_admin.services.errors import ConflictError, NotFoundError, TransactionError, ValidationError


@pytest.fixture
def populated_math_class(db_service, make_class, make_student):
    """Math-101 with two students, each with one attendance mark, plus an unrelated Physics class."""
    math = make_class("Math-101")
    physics = make_class("Physics-201")
    alice = make_student("Alice", "Math-101")
    bob = make_student("Bob", "Math-101")
    carol = make_student("Carol", "Physics-201")
    attendance_service.save_attendance(db=db_service, entries=[
        AttendanceRecordIn(studentId=alice.id, studentName="Alice", classId=math.id,
                           className="Math-101", date="2024-01-10", status="Present"),
        AttendanceRecordIn(studentId=bob.id, studentName="Bob", classId=math.id,
                           className="Math-101", date="2024-01-10", status="Absent"),
        AttendanceRecordIn(studentId=carol.id, studentName="Carol", classId=physics.id,
                           className="Physics-201", date="2024-01-10", status="Present"),
    ])
    return math, physics


def test_create_class_starts_with_zero_students(make_class):
    created = make_class("Math-101", teacher="A", description="Algebra")

    assert created.id.startswith("cls_")
    assert created.numberOfStudents == 0
    assert created.description == "Algebra"


def test_duplicate_class_name_is_a_conflict(db_service, db_session, make_class):
    make_class("Math-101")

    with pytest.raises(ConflictError) as excinfo:
        make_class("Math-101", teacher="B")

    assert excinfo.value.message == "Class with this name already exists"
    assert db_session.query(Class).count() == 1


def test_get_all_classes_newest_first(db_service, make_class):
    make_class("First")
    make_class("Second")
    make_class("Third")

    names = [c.name for c in class_service.get_all_classes(db=db_service)]
    assert names == ["Third", "Second", "First"]


def test_get_class_rejects_malformed_and_unknown_ids(db_service):
    with pytest.raises(ValidationError):
        class_service.get_class(db=db_service, class_id="12345")
    with pytest.raises(ValidationError):
        class_service.get_class(db=db_service, class_id="stu_0123456789ab")
    with pytest.raises(NotFoundError):
        class_service.get_class(db=db_service, class_id="cls_000000000000")


def test_rename_class_moves_its_students(db_service, make_class, make_student):
    """
    GIVEN: A class with one student.
    WHEN:  The class is renamed.
    THEN:  The student follows the new name and the counter still matches the roster.
    """
    math = make_class("Math-101")
    alice = make_student("Alice", "Math-101")

    renamed = class_service.update_class(
        db=db_service, class_id=math.id,
        class_update=ClassCreate(name="Math-102", teacher="B"),
    )

    assert renamed.name == "Math-102"
    assert renamed.teacher == "B"
    assert renamed.numberOfStudents == 1
    assert student_service.get_student(db=db_service, student_id=alice.id).className == "Math-102"
    print("\n✅ SUCCESS: test_rename_class_moves_its_students passed.")


def test_rename_to_taken_name_changes_nothing(db_service, make_class, make_student):
    math = make_class("Math-101")
    make_class("Physics-201")
    alice = make_student("Alice", "Math-101")

    with pytest.raises(ConflictError):
        class_service.update_class(
            db=db_service, class_id=math.id,
            class_update=ClassCreate(name="Physics-201", teacher="A"),
        )

    assert class_service.get_class(db=db_service, class_id=math.id).name == "Math-101"
    assert student_service.get_student(db=db_service, student_id=alice.id).className == "Math-101"


def test_update_unknown_class_raises_not_found(db_service):
    with pytest.raises(NotFoundError):
        class_service.update_class(
            db=db_service, class_id="cls_000000000000",
            class_update=ClassCreate(name="X", teacher="Y"),
        )


def test_update_without_description_keeps_it(db_service, make_class):
    """
    GIVEN: A class with a description.
    WHEN:  It is updated with a body that leaves `description` out, then with an explicit null.
    THEN:  The first update keeps the description; the second one clears it.
    """
    math = make_class("Math-101", description="Algebra")

    kept = class_service.update_class(
        db=db_service, class_id=math.id,
        class_update=ClassCreate(name="Math-101", teacher="B"),
    )
    assert kept.teacher == "B"
    assert kept.description == "Algebra"

    cleared = class_service.update_class(
        db=db_service, class_id=math.id,
        class_update=ClassCreate(name="Math-101", teacher="B", description=None),
    )
    assert cleared.description is None
    print("\n✅ SUCCESS: test_update_without_description_keeps_it passed.")


def test_unknown_class_lookup_is_logged(db_service, caplog):
    with caplog.at_level("INFO", logger="school_admin.services.class_service"):
        with pytest.raises(NotFoundError):
            class_service.get_class(db=db_service, class_id="cls_000000000000")
        with pytest.raises(ValidationError):
            class_service.get_class(db=db_service, class_id="bogus")

    messages = [r.getMessage() for r in caplog.records]
    assert "Class cls_000000000000 not found" in messages
    assert "Rejected malformed class id 'bogus'" in messages


def test_delete_class_cascades_to_students_and_attendance(db_service, db_session, populated_math_class):
    math, physics = populated_math_class

    class_service.delete_class(db=db_service, class_id=math.id)

    assert db_session.query(Class).filter(Class.id == math.id).count() == 0
    assert db_session.query(Student).filter(Student.className == "Math-101").count() == 0
    assert db_session.query(Attendance).filter(Attendance.classId == math.id).count() == 0
    # The other class is untouched.
    assert db_session.query(Student).filter(Student.className == "Physics-201").count() == 1
    assert db_session.query(Attendance).filter(Attendance.classId == physics.id).count() == 1


def test_failure_mid_cascade_deletes_nothing(mocker, db_service, db_session, populated_math_class):
    """
    GIVEN: A class with students and attendance.
    WHEN:  The final step of the cascade (removing the class row) fails.
    THEN:  The students and attendance removed earlier in the same transaction are restored.
    """
    math, _ = populated_math_class
    mocker.patch.object(db_service, "delete_class", side_effect=SQLAlchemyError("connection lost"))

    with pytest.raises(TransactionError):
        class_service.delete_class(db=db_service, class_id=math.id)

    assert db_session.query(Class).filter(Class.id == math.id).count() == 1
    assert db_session.query(Student).filter(Student.className == "Math-101").count() == 2
    assert db_session.query(Attendance).filter(Attendance.classId == math.id).count() == 2
    print("\n✅ SUCCESS: test_failure_mid_cascade_deletes_nothing passed.")


def test_delete_unknown_class_raises_not_found(db_service):
    with pytest.raises(NotFoundError):
        class_service.delete_class(db=db_service, class_id="cls_000000000000")
