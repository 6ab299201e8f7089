# /school_admin/services/database_service.py

import logging
from contextlib import contextmanager
from datetime import date
from typing import List, Dict, Optional, Generator, Iterator, Set
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session
from fastapi import Depends

# --- Core Database Setup ---
from school_admin.db.database import get_db
from school_admin.db.models.class_student_models import Class, Student
from school_admin.db.models.attendance_models import Attendance

# --- Repository Imports ---
from .database_helpers.class_student_repository_sql import ClassStudentRepositorySQL
from .database_helpers.attendance_repository_sql import AttendanceRepositorySQL
from .errors import ServiceError, ConflictError, TransactionError

logger = logging.getLogger(__name__)


def _describe(context: Dict) -> str:
    return ", ".join(f"{key}={value}" for key, value in context.items()) or "-"


class DatabaseService:
    def __init__(self, db_session: Session):
        """
        Wraps one request-scoped SQLAlchemy session and the repositories that
        share it. Repository methods never commit; `atomic` decides when.
        """
        self.session = db_session
        self.class_student_repo = ClassStudentRepositorySQL(db_session)
        self.attendance_repo = AttendanceRepositorySQL(db_session)

    # --- TRANSACTION BOUNDARY ---
    @contextmanager
    def atomic(self, operation: str, conflict_message: Optional[str] = None, **context) -> Iterator["DatabaseService"]:
        """
        Runs the body of the `with` block as one all-or-nothing unit: commit
        when it finishes, roll back everything on any error.

        Errors leave as service errors: a unique index violation becomes a
        ConflictError (with `conflict_message` when given), any other database
        failure a TransactionError. ServiceErrors raised by the body itself
        (e.g. NotFoundError) are re-raised unchanged after the rollback.
        """
        try:
            yield self
            self.session.commit()
        except ServiceError as e:
            self.session.rollback()
            logger.info("%s aborted (%s): %s", operation, _describe(context), e.message)
            raise
        except IntegrityError as e:
            self.session.rollback()
            logger.warning("%s rejected by a unique index (%s): %s", operation, _describe(context), e.orig)
            raise ConflictError(conflict_message or f"{operation} conflicts with an existing record") from e
        except SQLAlchemyError as e:
            self.session.rollback()
            logger.error("%s failed and was rolled back (%s)", operation, _describe(context), exc_info=True)
            raise TransactionError(f"{operation} failed and was rolled back") from e
        except Exception:
            self.session.rollback()
            logger.exception("%s failed unexpectedly and was rolled back (%s)", operation, _describe(context))
            raise

    # --- CLASS & STUDENT METHODS (DELEGATED) ---
    def get_all_classes(self) -> List[Class]: return self.class_student_repo.get_all_classes()
    def get_class_by_id(self, class_id: str) -> Optional[Class]: return self.class_student_repo.get_class_by_id(class_id)
    def get_class_by_name(self, name: str) -> Optional[Class]: return self.class_student_repo.get_class_by_name(name)
    def count_classes(self) -> int: return self.class_student_repo.count_classes()
    def add_class(self, class_record: Dict) -> Class: return self.class_student_repo.add_class(class_record)
    def update_class(self, db_class: Class, class_update_data: Dict) -> Class: return self.class_student_repo.update_class(db_class, class_update_data)
    def delete_class(self, db_class: Class) -> None: self.class_student_repo.delete_class(db_class)
    def adjust_student_count(self, class_name: str, delta: int) -> int: return self.class_student_repo.adjust_student_count(class_name, delta)
    def get_students(self, class_name: Optional[str] = None, status: Optional[str] = None) -> List[Student]:
        return self.class_student_repo.get_students(class_name=class_name, status=status)
    def get_student_by_id(self, student_id: str) -> Optional[Student]: return self.class_student_repo.get_student_by_id(student_id)
    def count_students(self, status: Optional[str] = None) -> int: return self.class_student_repo.count_students(status=status)
    def add_student(self, student_record: Dict) -> Student: return self.class_student_repo.add_student(student_record)
    def update_student(self, db_student: Student, student_update_data: Dict) -> Student: return self.class_student_repo.update_student(db_student, student_update_data)
    def delete_student(self, db_student: Student) -> None: self.class_student_repo.delete_student(db_student)
    def rename_class_on_students(self, old_name: str, new_name: str) -> int: return self.class_student_repo.rename_class_on_students(old_name, new_name)
    def delete_students_by_class_name(self, class_name: str) -> int: return self.class_student_repo.delete_students_by_class_name(class_name)

    # --- ATTENDANCE METHODS (DELEGATED) ---
    def find_attendance(self, student_id: str, class_id: str, day: date) -> Optional[Attendance]:
        return self.attendance_repo.find_attendance(student_id, class_id, day)
    def add_attendance(self, record: Dict) -> Attendance: return self.attendance_repo.add_attendance(record)
    def update_attendance(self, db_record: Attendance, data: Dict) -> Attendance: return self.attendance_repo.update_attendance(db_record, data)
    def get_attendance(self, class_id: Optional[str] = None, day: Optional[date] = None, status: Optional[str] = None) -> List[Attendance]:
        return self.attendance_repo.get_attendance(class_id=class_id, day=day, status=status)
    def get_present_student_ids(self, day: date) -> Set[str]: return self.attendance_repo.get_present_student_ids(day)
    def delete_attendance_by_student_id(self, student_id: str) -> int: return self.attendance_repo.delete_attendance_by_student_id(student_id)
    def delete_attendance_by_class_id(self, class_id: str) -> int: return self.attendance_repo.delete_attendance_by_class_id(class_id)


# --- DEPENDENCY PROVIDER ---
def get_db_service(db: Session = Depends(get_db)) -> Generator[DatabaseService, None, None]:
    """
    FastAPI dependency that provides a DatabaseService bound to this
    request's session.
    """
    yield DatabaseService(db_session=db)
