# /school_admin/models/student_model.py

# --- Core Imports ---
from datetime import datetime
from typing import Optional, Literal
from pydantic import BaseModel, Field, ConfigDict, EmailStr, field_validator

from ..services.dates import as_utc

StudentStatus = Literal["Active", "Inactive"]

# --- Model Definitions ---

class StudentCreate(BaseModel):
    """The model used for enrolling a new student into an existing class."""
    name: str = Field(..., min_length=1, description="The full name of the student.")
    className: str = Field(..., min_length=1, description="The name of the class the student joins.")
    email: Optional[EmailStr] = Field(default=None, description="Optional, unique contact email.")
    status: StudentStatus = Field(default="Active")

    @field_validator("email", mode="before")
    @classmethod
    def blank_email_to_none(cls, value):
        # The forms submit "" when the email box is left empty; store that as no email.
        if isinstance(value, str) and not value.strip():
            return None
        return value

class StudentUpdate(BaseModel):
    """
    The model for updating a student. All fields are optional to allow for
    partial updates; a new `className` moves the student to another class.
    """
    name: Optional[str] = Field(default=None, min_length=1)
    className: Optional[str] = Field(default=None, min_length=1)
    email: Optional[EmailStr] = Field(default=None)
    status: Optional[StudentStatus] = Field(default=None)

    @field_validator("email", mode="before")
    @classmethod
    def blank_email_to_none(cls, value):
        # The forms submit "" when the email box is left empty; store that as no email.
        if isinstance(value, str) and not value.strip():
            return None
        return value

class Student(BaseModel):
    """
    The full representation of a Student resource, as it is stored in the
    database and returned by the API.
    """
    model_config = ConfigDict(from_attributes=True)

    id: str = Field(..., description="The unique, server-generated identifier for the student.")
    name: str
    className: Optional[str] = None
    email: Optional[str] = None
    status: StudentStatus
    createdAt: datetime
    updatedAt: datetime

    @field_validator("createdAt", "updatedAt")
    @classmethod
    def timestamps_in_utc(cls, value: datetime) -> datetime:
        return as_utc(value)
