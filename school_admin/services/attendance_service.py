# /school_admin/services/attendance_service.py

"""
Business logic for daily attendance.

A batch of marks is saved entry by entry. Each entry is an upsert keyed on
(studentId, classId, UTC day) and commits on its own, so a bad entry is
reported back without undoing the good ones. Re-submitting the same key
overwrites the earlier mark instead of adding a second one.
"""

import logging
from datetime import date
from typing import List, Optional

from ..models import attendance_model
from .database_service import DatabaseService
from .dates import to_utc_day
from .errors import ConflictError, ServiceError, ValidationError
from .identifiers import new_id, is_valid_id, ATTENDANCE_PREFIX, CLASS_PREFIX, STUDENT_PREFIX
from ..db.models.class_student_models import utcnow

logger = logging.getLogger(__name__)


def get_attendance(
    db: DatabaseService,
    class_id: Optional[str] = None,
    day: Optional[str] = None,
    status: Optional[str] = None,
) -> List[attendance_model.AttendanceRecord]:
    """
    Lists attendance records ordered by student name. `day` may be any ISO
    date or datetime; the whole UTC day it falls on is matched.
    """
    if class_id and not is_valid_id(class_id, CLASS_PREFIX):
        logger.info("Rejected attendance filter with malformed class id %r", class_id)
        raise ValidationError("Invalid class ID")

    target_day = None
    if day:
        try:
            target_day = to_utc_day(day)
        except ValueError:
            logger.info("Rejected attendance filter with unparseable date %r", day)
            raise ValidationError("Invalid date format")

    records = db.get_attendance(class_id=class_id, day=target_day, status=status)
    return [attendance_model.AttendanceRecord.model_validate(r) for r in records]


def _apply_upsert(db: DatabaseService, entry: attendance_model.AttendanceRecordIn, day: date):
    fields = {
        "studentName": entry.studentName,
        "className": entry.className,
        "status": entry.status,
        "createdAt": utcnow(),
    }
    existing = db.find_attendance(entry.studentId, entry.classId, day)
    if existing is not None:
        return db.update_attendance(existing, fields)
    return db.add_attendance({
        "id": new_id(ATTENDANCE_PREFIX),
        "studentId": entry.studentId,
        "classId": entry.classId,
        "date": day,
        **fields,
    })


def _upsert_one(db: DatabaseService, entry: attendance_model.AttendanceRecordIn, day: date):
    context = {"studentId": entry.studentId, "classId": entry.classId, "date": day.isoformat()}
    try:
        with db.atomic("save_attendance", **context):
            return _apply_upsert(db, entry, day)
    except ConflictError:
        # Another request inserted the same key between our lookup and our
        # insert; the second pass finds that row and overwrites it.
        logger.info("Attendance key taken concurrently, retrying as update (%s)", context)
        with db.atomic("save_attendance", **context):
            return _apply_upsert(db, entry, day)


def save_attendance(
    db: DatabaseService,
    entries: List[attendance_model.AttendanceRecordIn],
) -> attendance_model.AttendanceBatchResult:
    """
    Upserts every entry of a batch and reports what happened.

    Entries with malformed ids or that fail to persist are collected in
    `errors`; the remaining entries are still saved. The caller tells total
    success from partial success by whether `errors` is empty.
    """
    saved = []
    errors = []

    for entry in entries:
        if not is_valid_id(entry.studentId, STUDENT_PREFIX) or not is_valid_id(entry.classId, CLASS_PREFIX):
            message = f"Invalid id for studentId or classId in record for studentId: {entry.studentId}"
            logger.warning(message)
            errors.append(message)
            continue

        day = to_utc_day(entry.date)
        try:
            record = _upsert_one(db, entry, day)
            saved.append(attendance_model.AttendanceRecord.model_validate(record))
        except ServiceError as e:
            logger.warning("Failed to save attendance for student %s: %s", entry.studentName, e.message)
            errors.append(f"Failed to save attendance for student {entry.studentName}: {e.message}")

    if errors:
        logger.warning("Attendance batch partially saved: %d saved, %d failed", len(saved), len(errors))
        return attendance_model.AttendanceBatchResult(
            message="Some attendance records failed to save",
            savedRecordsCount=len(saved),
            records=saved,
            errors=errors,
        )

    logger.info("Attendance batch saved: %d record(s)", len(saved))
    return attendance_model.AttendanceBatchResult(
        message="Attendance records saved successfully",
        savedRecordsCount=len(saved),
        records=saved,
    )
