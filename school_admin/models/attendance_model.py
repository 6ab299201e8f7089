# /school_admin/models/attendance_model.py

from datetime import date as Date, datetime
from typing import List, Literal
from pydantic import BaseModel, Field, ConfigDict, field_validator

from ..services.dates import to_utc_day, as_utc

AttendanceStatus = Literal["Present", "Absent"]


class AttendanceRecordIn(BaseModel):
    """
    One attendance mark as submitted by the attendance page. The ids are only
    checked for shape per entry by the service, so that one bad entry does
    not reject the whole batch.
    """
    studentId: str
    studentName: str
    classId: str
    className: str
    date: str = Field(..., description="Any ISO-8601 date or datetime; only the UTC day is kept.")
    status: AttendanceStatus

    @field_validator("date")
    @classmethod
    def date_must_parse(cls, value: str) -> str:
        try:
            to_utc_day(value)
        except ValueError:
            raise ValueError("Invalid date format")
        return value


class AttendanceBatch(BaseModel):
    """The request body of POST /api/attendance."""
    records: List[AttendanceRecordIn]


class AttendanceRecord(BaseModel):
    """An attendance record as stored in the database and returned by the API."""
    model_config = ConfigDict(from_attributes=True)

    id: str
    studentId: str
    studentName: str
    classId: str
    className: str
    date: Date
    status: AttendanceStatus
    createdAt: datetime

    @field_validator("createdAt")
    @classmethod
    def created_at_in_utc(cls, value: datetime) -> datetime:
        return as_utc(value)


class AttendanceBatchResult(BaseModel):
    """
    The outcome of a batch upsert. `errors` is empty when every entry was
    saved; otherwise the router answers 207 instead of 201.
    """
    message: str
    savedRecordsCount: int
    records: List[AttendanceRecord] = Field(default_factory=list)
    errors: List[str] = Field(default_factory=list)
