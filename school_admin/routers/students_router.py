# /school_admin/routers/students_router.py

import logging
from fastapi import APIRouter, Depends, HTTPException, Query, status
from typing import List, Optional

from ..models import student_model
from ..services import student_service
from ..services.database_service import DatabaseService, get_db_service
from ..services.errors import ServiceError
from .http_errors import to_http_exception

logger = logging.getLogger(__name__)

router = APIRouter()

# --- STUDENT COLLECTION ENDPOINTS (/api/students) ---

@router.get("", response_model=List[student_model.Student], summary="Get Students")
def get_students(
    className: Optional[str] = None,
    status_filter: Optional[str] = Query(default=None, alias="status"),
    db: DatabaseService = Depends(get_db_service),
):
    try:
        return student_service.get_students(db=db, class_name=className, status=status_filter)
    except Exception:
        logger.exception("Failed to fetch students")
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Failed to fetch students")

@router.post("", response_model=student_model.Student, status_code=status.HTTP_201_CREATED, summary="Enroll a Student")
def create_student(student_create: student_model.StudentCreate, db: DatabaseService = Depends(get_db_service)):
    try:
        return student_service.create_student(db=db, student_data=student_create)
    except ServiceError as e:
        raise to_http_exception(e, "Failed to create student")
    except Exception:
        logger.exception("Failed to create student")
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Failed to create student")

# --- INDIVIDUAL STUDENT RESOURCE ENDPOINTS (/api/students/{student_id}) ---

@router.get("/{student_id}", response_model=student_model.Student, summary="Get a Single Student")
def get_student(student_id: str, db: DatabaseService = Depends(get_db_service)):
    try:
        return student_service.get_student(db=db, student_id=student_id)
    except ServiceError as e:
        raise to_http_exception(e, "Failed to fetch student")
    except Exception:
        logger.exception("Failed to fetch student with id: %s", student_id)
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Failed to fetch student")

@router.put("/{student_id}", response_model=student_model.Student, summary="Update a Student")
def update_student(student_id: str, student_update: student_model.StudentUpdate, db: DatabaseService = Depends(get_db_service)):
    try:
        return student_service.update_student(db=db, student_id=student_id, student_update=student_update)
    except ServiceError as e:
        raise to_http_exception(e, "Failed to update student")
    except Exception:
        logger.exception("Failed to update student with id: %s", student_id)
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Failed to update student")

@router.delete("/{student_id}", summary="Delete a Student and their Attendance")
def delete_student(student_id: str, db: DatabaseService = Depends(get_db_service)):
    try:
        student_service.delete_student(db=db, student_id=student_id)
    except ServiceError as e:
        raise to_http_exception(e, "Failed to delete student and associated data")
    except Exception:
        logger.exception("Failed to delete student with id: %s", student_id)
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Failed to delete student")
    return {"message": "Student and associated attendance records deleted successfully"}
