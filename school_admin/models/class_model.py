# /school_admin/models/class_model.py

# --- Core Imports ---
from datetime import datetime
from typing import Optional
from pydantic import BaseModel, Field, ConfigDict, field_validator

from ..services.dates import as_utc

# --- Model Definitions ---

class ClassBase(BaseModel):
    """
    The base model for a Class. Contains the fields a user may set directly.
    """
    name: str = Field(..., min_length=1, description="The unique name of the class.")
    teacher: str = Field(..., min_length=1, description="The name of the teacher running the class.")
    description: Optional[str] = Field(default=None, description="An optional free-text description.")

class ClassCreate(ClassBase):
    """The model used for creating a class, and for the full update of one."""
    pass

class Class(ClassBase):
    """
    The full representation of a Class resource, as it is stored in the
    database and returned by the API.
    """
    model_config = ConfigDict(from_attributes=True)

    id: str = Field(..., description="The unique, server-generated identifier for the class.")
    numberOfStudents: int = Field(
        default=0,
        description="How many students currently have this class as their className."
    )
    createdAt: datetime
    updatedAt: datetime

    @field_validator("createdAt", "updatedAt")
    @classmethod
    def timestamps_in_utc(cls, value: datetime) -> datetime:
        return as_utc(value)
