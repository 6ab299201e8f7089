# /school_admin/services/database_helpers/class_student_repository_sql.py

"""
This module contains all the raw SQLAlchemy queries for the Class and Student
tables.

None of these methods commit. They run inside whatever transaction the
calling service opened through `DatabaseService.atomic`, which is what lets a
student insert and the matching counter increment succeed or fail together.
"""

from typing import List, Dict, Optional
from sqlalchemy import update, delete, func
from sqlalchemy.orm import Session

from school_admin.db.models.class_student_models import Class, Student


class ClassStudentRepositorySQL:
    def __init__(self, db_session: Session):
        self.db = db_session

    # --- Class Methods ---

    def get_all_classes(self) -> List[Class]:
        """Retrieves every class, newest first."""
        return self.db.query(Class).order_by(Class.createdAt.desc()).all()

    def get_class_by_id(self, class_id: str) -> Optional[Class]:
        return self.db.query(Class).filter(Class.id == class_id).first()

    def get_class_by_name(self, name: str) -> Optional[Class]:
        return self.db.query(Class).filter(Class.name == name).first()

    def count_classes(self) -> int:
        return self.db.query(func.count(Class.id)).scalar()

    def add_class(self, record: Dict) -> Class:
        new_class = Class(**record)
        self.db.add(new_class)
        return new_class

    def update_class(self, db_class: Class, data: Dict) -> Class:
        for key, value in data.items():
            setattr(db_class, key, value)
        return db_class

    def delete_class(self, db_class: Class) -> None:
        self.db.delete(db_class)

    def adjust_student_count(self, class_name: str, delta: int) -> int:
        """
        Adds `delta` to the named class's counter in SQL
        (`numberOfStudents = numberOfStudents + delta`), not in Python.
        Returns the number of classes touched (0 or 1).
        """
        result = self.db.execute(
            update(Class)
            .where(Class.name == class_name)
            .values(numberOfStudents=Class.numberOfStudents + delta)
        )
        return result.rowcount

    # --- Student Methods ---

    def get_students(self, class_name: Optional[str] = None, status: Optional[str] = None) -> List[Student]:
        """Retrieves students, newest first, optionally filtered by class name and status."""
        query = self.db.query(Student)
        if class_name:
            query = query.filter(Student.className == class_name)
        if status:
            query = query.filter(Student.status == status)
        return query.order_by(Student.createdAt.desc()).all()

    def get_student_by_id(self, student_id: str) -> Optional[Student]:
        return self.db.query(Student).filter(Student.id == student_id).first()

    def count_students(self, status: Optional[str] = None) -> int:
        query = self.db.query(func.count(Student.id))
        if status:
            query = query.filter(Student.status == status)
        return query.scalar()

    def add_student(self, record: Dict) -> Student:
        new_student = Student(**record)
        self.db.add(new_student)
        return new_student

    def update_student(self, db_student: Student, data: Dict) -> Student:
        for key, value in data.items():
            setattr(db_student, key, value)
        return db_student

    def delete_student(self, db_student: Student) -> None:
        self.db.delete(db_student)

    def rename_class_on_students(self, old_name: str, new_name: str) -> int:
        """Moves every student of `old_name` over to `new_name`. Returns the number of students touched."""
        result = self.db.execute(
            update(Student)
            .where(Student.className == old_name)
            .values(className=new_name)
        )
        return result.rowcount

    def delete_students_by_class_name(self, class_name: str) -> int:
        result = self.db.execute(delete(Student).where(Student.className == class_name))
        return result.rowcount
