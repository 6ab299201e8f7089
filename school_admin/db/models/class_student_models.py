# /school_admin/db/models/class_student_models.py

"""
This module defines the SQLAlchemy ORM models for the `Class` and `Student`
entities.

A student points at its class by the class's *name* (`Student.className`),
not by id, and there is no foreign key between the two tables. Keeping
`Class.numberOfStudents` equal to the roster size is the job of the service
layer, which updates both rows inside one transaction.
"""

from datetime import datetime, timezone

from sqlalchemy import Column, String, Integer, DateTime

from ..base_class import Base


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Class(Base):
    """
    SQLAlchemy model representing a class taught by one teacher.
    """
    __tablename__ = "classes"

    id = Column(String, primary_key=True, index=True)
    # Unique index: two classes can never share a name.
    name = Column(String, unique=True, index=True, nullable=False)
    teacher = Column(String, nullable=False)
    # Derived counter, maintained transactionally by the student operations.
    numberOfStudents = Column(Integer, nullable=False, default=0)
    description = Column(String, nullable=True)

    createdAt = Column(DateTime(timezone=True), default=utcnow, nullable=False)
    updatedAt = Column(DateTime(timezone=True), default=utcnow, onupdate=utcnow, nullable=False)


class Student(Base):
    """
    SQLAlchemy model representing a single student enrolled in a class.
    """
    __tablename__ = "students"

    id = Column(String, primary_key=True, index=True)
    name = Column(String, index=True, nullable=False)
    className = Column(String, index=True, nullable=True)
    # Unique but nullable: any number of students may have no email.
    email = Column(String, unique=True, nullable=True)
    status = Column(String, nullable=False, default="Active")

    createdAt = Column(DateTime(timezone=True), default=utcnow, nullable=False)
    updatedAt = Column(DateTime(timezone=True), default=utcnow, onupdate=utcnow, nullable=False)
