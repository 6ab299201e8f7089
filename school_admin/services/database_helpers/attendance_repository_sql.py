# /school_admin/services/database_helpers/attendance_repository_sql.py

from datetime import date
from typing import List, Dict, Optional, Set
from sqlalchemy import delete
from sqlalchemy.orm import Session

from school_admin.db.models.attendance_models import Attendance


class AttendanceRepositorySQL:
    def __init__(self, db_session: Session):
        self.db = db_session

    def find_attendance(self, student_id: str, class_id: str, day: date) -> Optional[Attendance]:
        """Looks a record up by its unique (studentId, classId, date) key."""
        return (
            self.db.query(Attendance)
            .filter(
                Attendance.studentId == student_id,
                Attendance.classId == class_id,
                Attendance.date == day,
            )
            .first()
        )

    def add_attendance(self, record: Dict) -> Attendance:
        new_record = Attendance(**record)
        self.db.add(new_record)
        return new_record

    def update_attendance(self, db_record: Attendance, data: Dict) -> Attendance:
        for key, value in data.items():
            setattr(db_record, key, value)
        return db_record

    def get_attendance(
        self,
        class_id: Optional[str] = None,
        day: Optional[date] = None,
        status: Optional[str] = None,
    ) -> List[Attendance]:
        """Retrieves attendance records ordered by student name, with optional filters."""
        query = self.db.query(Attendance)
        if class_id:
            query = query.filter(Attendance.classId == class_id)
        if day:
            query = query.filter(Attendance.date == day)
        if status:
            query = query.filter(Attendance.status == status)
        return query.order_by(Attendance.studentName.asc()).all()

    def get_present_student_ids(self, day: date) -> Set[str]:
        rows = (
            self.db.query(Attendance.studentId)
            .filter(Attendance.date == day, Attendance.status == "Present")
            .distinct()
            .all()
        )
        return {row[0] for row in rows}

    def delete_attendance_by_student_id(self, student_id: str) -> int:
        result = self.db.execute(delete(Attendance).where(Attendance.studentId == student_id))
        return result.rowcount

    def delete_attendance_by_class_id(self, class_id: str) -> int:
        result = self.db.execute(delete(Attendance).where(Attendance.classId == class_id))
        return result.rowcount
