# /school_admin/models/dashboard_model.py

# --- Core Imports ---
from datetime import datetime
from typing import List, Literal
from pydantic import BaseModel, Field, field_validator

from ..services.dates import as_utc

# --- Model Definitions ---

class RecentActivityItem(BaseModel):
    """A single line in the home page's "Recent Activity" card."""
    id: str
    type: Literal["student", "class"]
    action: str
    detail: str
    createdAt: datetime

    @field_validator("createdAt")
    @classmethod
    def created_at_in_utc(cls, value: datetime) -> datetime:
        return as_utc(value)


class DashboardSummary(BaseModel):
    """
    Defines the data contract for the response of the dashboard summary
    endpoint. It populates the home page's stat cards and activity list.
    """

    totalStudents: int = Field(
        ...,
        description="The number of students whose status is Active. Inactive students are not counted.",
        examples=[112]
    )

    totalClasses: int = Field(
        ...,
        description="The total number of classes.",
        examples=[4]
    )

    presentStudents: int = Field(
        ...,
        description="Distinct students marked Present today (UTC).",
        examples=[97]
    )

    attendancePercentage: int = Field(
        ...,
        description="presentStudents as a rounded percentage of totalStudents; 0 when there are no active students.",
        examples=[87]
    )

    recentActivity: List[RecentActivityItem] = Field(
        default_factory=list,
        description="The five most recent enrolments and class creations, newest first."
    )
