# /school_admin/db/models/attendance_models.py

"""
This module defines the SQLAlchemy ORM model for a single attendance mark.
"""

from sqlalchemy import Column, String, Date, DateTime, UniqueConstraint, Index

from ..base_class import Base
from .class_student_models import utcnow


class Attendance(Base):
    """
    One student's attendance in one class on one calendar day (UTC).

    `studentName` and `className` are snapshots taken when the mark was
    saved; they are not kept in sync with later renames.
    """
    __tablename__ = "attendance"

    id = Column(String, primary_key=True, index=True)
    studentId = Column(String, nullable=False)
    studentName = Column(String, nullable=False)
    classId = Column(String, nullable=False)
    className = Column(String, nullable=False)
    date = Column(Date, nullable=False)
    status = Column(String, nullable=False)
    createdAt = Column(DateTime(timezone=True), default=utcnow, nullable=False)

    __table_args__ = (
        # At most one mark per student per class per day; this index is what
        # makes the attendance upsert idempotent.
        UniqueConstraint("studentId", "classId", "date", name="uq_attendance_student_class_day"),
        Index("ix_attendance_class_date", "classId", "date"),
    )
