# /school_admin/services/class_service.py

"""
This service module is the business logic layer for classes.

Every write goes through `DatabaseService.atomic`, so a class is never left
half-renamed or half-deleted: renaming a class moves its students' denormalized
`className` in the same transaction, and deleting a class removes its students
and attendance history in the same transaction as the class row itself.
"""

import logging
from typing import List

from ..models import class_model
from .database_service import DatabaseService
from .errors import NotFoundError, ValidationError
from .identifiers import new_id, is_valid_id, CLASS_PREFIX

logger = logging.getLogger(__name__)

DUPLICATE_NAME_MESSAGE = "Class with this name already exists"


def _require_class(db: DatabaseService, class_id: str):
    if not is_valid_id(class_id, CLASS_PREFIX):
        logger.info("Rejected malformed class id %r", class_id)
        raise ValidationError("Invalid Class ID")
    db_class = db.get_class_by_id(class_id)
    if db_class is None:
        logger.info("Class %s not found", class_id)
        raise NotFoundError("Class not found")
    return db_class


# --- Read Operations ---

def get_all_classes(db: DatabaseService) -> List[class_model.Class]:
    """Returns every class, newest first."""
    return [class_model.Class.model_validate(c) for c in db.get_all_classes()]


def get_class(db: DatabaseService, class_id: str) -> class_model.Class:
    return class_model.Class.model_validate(_require_class(db, class_id))


# --- Write Operations ---

def create_class(db: DatabaseService, class_data: class_model.ClassCreate) -> class_model.Class:
    """
    Creates a new, empty class. A duplicate name surfaces as a ConflictError
    from the unique index on `classes.name`.
    """
    record = class_data.model_dump()
    record["id"] = new_id(CLASS_PREFIX)
    record["numberOfStudents"] = 0

    with db.atomic("create_class", conflict_message=DUPLICATE_NAME_MESSAGE, name=class_data.name):
        new_class = db.add_class(record)

    logger.info("Created class %s (%s)", new_class.id, new_class.name)
    return class_model.Class.model_validate(new_class)


def update_class(db: DatabaseService, class_id: str, class_update: class_model.ClassCreate) -> class_model.Class:
    """
    Updates a class's name and teacher. `description` is only touched when
    the request carries it; an explicit null clears it.

    When the name changes, every student whose `className` pointed at the old
    name is moved to the new one in the same transaction, so the roster and
    `numberOfStudents` still agree afterwards.
    """
    with db.atomic("update_class", conflict_message=DUPLICATE_NAME_MESSAGE, class_id=class_id):
        db_class = _require_class(db, class_id)
        old_name = db_class.name
        update_data = class_update.model_dump(exclude_unset=True)

        if update_data["name"] != old_name:
            moved = db.rename_class_on_students(old_name, update_data["name"])
            logger.info("Renaming class %s from %r to %r moves %d student(s)", class_id, old_name, update_data["name"], moved)

        db.update_class(db_class, update_data)

    return class_model.Class.model_validate(db_class)


def delete_class(db: DatabaseService, class_id: str) -> None:
    """
    Deletes a class together with its students and its attendance history.

    The existence check happens before the transaction starts; the three
    deletions then commit together or not at all.
    """
    db_class = _require_class(db, class_id)
    class_name = db_class.name

    with db.atomic("delete_class", class_id=class_id, name=class_name):
        students_removed = db.delete_students_by_class_name(class_name)
        attendance_removed = db.delete_attendance_by_class_id(class_id)
        db.delete_class(db_class)

    logger.info(
        "Deleted class %s (%s) with %d student(s) and %d attendance record(s)",
        class_id, class_name, students_removed, attendance_removed,
    )
