# /school_admin/routers/attendance_router.py

import logging
from fastapi import APIRouter, Depends, HTTPException, Query, Response, status
from typing import List, Optional

from ..models import attendance_model
from ..services import attendance_service
from ..services.database_service import DatabaseService, get_db_service
from ..services.errors import ServiceError
from .http_errors import to_http_exception

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("", response_model=List[attendance_model.AttendanceRecord], summary="Get Attendance Records")
def get_attendance(
    classId: Optional[str] = None,
    date: Optional[str] = None,
    status_filter: Optional[str] = Query(default=None, alias="status"),
    db: DatabaseService = Depends(get_db_service),
):
    """
    Lists attendance records, optionally for one class, one UTC day and/or
    one status (Present/Absent), ordered by student name.
    """
    try:
        return attendance_service.get_attendance(db=db, class_id=classId, day=date, status=status_filter)
    except ServiceError as e:
        raise to_http_exception(e, "Failed to fetch attendance records")
    except Exception:
        logger.exception("Failed to fetch attendance records")
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Failed to fetch attendance records")


@router.post(
    "",
    response_model=attendance_model.AttendanceBatchResult,
    status_code=status.HTTP_201_CREATED,
    summary="Save a Batch of Attendance Marks",
    responses={207: {"model": attendance_model.AttendanceBatchResult, "description": "Some records failed to save"}},
)
def save_attendance(
    batch: attendance_model.AttendanceBatch,
    response: Response,
    db: DatabaseService = Depends(get_db_service),
):
    """
    Upserts each record keyed on (studentId, classId, day). Answers 201 when
    every record was saved and 207 Multi-Status when some were not.
    """
    try:
        result = attendance_service.save_attendance(db=db, entries=batch.records)
    except Exception:
        logger.exception("Failed to save attendance records")
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Failed to save attendance records")

    if result.errors:
        response.status_code = status.HTTP_207_MULTI_STATUS
    return result
