# /school_admin/services/student_service.py

"""
This service module is the business logic layer for students, and the owner
of the class-counter invariant: `Class.numberOfStudents` must always equal the
number of students whose `className` is that class's name.

Each operation that changes a student's existence or class performs the
student write and the counter update(s) inside one `db.atomic` block. If any
step fails (missing class, duplicate email, database error), the whole block
is rolled back and no counter drift is observable.
"""

import logging
from typing import List, Optional

from ..models import student_model
from .database_service import DatabaseService
from .errors import NotFoundError, ValidationError
from .identifiers import new_id, is_valid_id, STUDENT_PREFIX

logger = logging.getLogger(__name__)

DUPLICATE_EMAIL_MESSAGE = "Student with this email already exists"

# Columns that may not be cleared through a partial update.
_NON_NULLABLE_FIELDS = ("name", "className", "status")


def _require_student(db: DatabaseService, student_id: str):
    if not is_valid_id(student_id, STUDENT_PREFIX):
        logger.info("Rejected malformed student id %r", student_id)
        raise ValidationError("Invalid Student ID")
    db_student = db.get_student_by_id(student_id)
    if db_student is None:
        logger.info("Student %s not found", student_id)
        raise NotFoundError("Student not found")
    return db_student


# --- Read Operations ---

def get_students(
    db: DatabaseService,
    class_name: Optional[str] = None,
    status: Optional[str] = None,
) -> List[student_model.Student]:
    """Returns students newest first, optionally filtered by class name and/or status."""
    students = db.get_students(class_name=class_name, status=status)
    return [student_model.Student.model_validate(s) for s in students]


def get_student(db: DatabaseService, student_id: str) -> student_model.Student:
    return student_model.Student.model_validate(_require_student(db, student_id))


# --- Write Operations ---

def create_student(db: DatabaseService, student_data: student_model.StudentCreate) -> student_model.Student:
    """
    Enrolls a student into an existing class and increments that class's
    counter in the same transaction.
    """
    record = student_data.model_dump()
    record["id"] = new_id(STUDENT_PREFIX)

    with db.atomic(
        "create_student",
        conflict_message=DUPLICATE_EMAIL_MESSAGE,
        student_id=record["id"],
        className=student_data.className,
    ):
        if db.get_class_by_name(student_data.className) is None:
            raise NotFoundError(f"Class '{student_data.className}' not found")

        new_student = db.add_student(record)
        db.adjust_student_count(student_data.className, +1)

    logger.info("Enrolled student %s into %s", new_student.id, student_data.className)
    return student_model.Student.model_validate(new_student)


def update_student(
    db: DatabaseService,
    student_id: str,
    student_update: student_model.StudentUpdate,
) -> student_model.Student:
    """
    Applies a partial update to a student.

    When `className` changes from A to B, B must exist; A's counter is
    decremented and B's incremented together with the student write. A
    missing B, a duplicate email or any other failure leaves the student and
    both counters exactly as they were.
    """
    update_data = student_update.model_dump(exclude_unset=True)
    for field in _NON_NULLABLE_FIELDS:
        if field in update_data and update_data[field] is None:
            del update_data[field]

    with db.atomic("update_student", conflict_message=DUPLICATE_EMAIL_MESSAGE, student_id=student_id):
        db_student = _require_student(db, student_id)

        new_class_name = update_data.get("className")
        old_class_name = db_student.className
        if new_class_name and new_class_name != old_class_name:
            if db.get_class_by_name(new_class_name) is None:
                raise NotFoundError(f"Class '{new_class_name}' not found")
            if old_class_name:
                db.adjust_student_count(old_class_name, -1)
            db.adjust_student_count(new_class_name, +1)
            logger.info("Moving student %s from %r to %r", student_id, old_class_name, new_class_name)

        db.update_student(db_student, update_data)

    return student_model.Student.model_validate(db_student)


def delete_student(db: DatabaseService, student_id: str) -> None:
    """
    Deletes a student, decrements its class's counter (when it has a class)
    and purges its attendance history, all in one transaction.
    """
    db_student = _require_student(db, student_id)
    class_name = db_student.className

    with db.atomic("delete_student", student_id=student_id, className=class_name):
        db.delete_student(db_student)
        if class_name:
            db.adjust_student_count(class_name, -1)
        attendance_removed = db.delete_attendance_by_student_id(student_id)

    logger.info("Deleted student %s and %d attendance record(s)", student_id, attendance_removed)
