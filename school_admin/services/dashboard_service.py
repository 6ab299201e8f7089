# /school_admin/services/dashboard_service.py

import logging

from ..models.dashboard_model import DashboardSummary, RecentActivityItem
from .database_service import DatabaseService
from .dates import utc_today

logger = logging.getLogger(__name__)

RECENT_ACTIVITY_LIMIT = 5


def get_summary_data(db: DatabaseService) -> DashboardSummary:
    """
    Calculates the home page statistics.

    `totalStudents` counts students whose status is Active. It is NOT the sum
    of the classes' `numberOfStudents` counters, which include inactive
    students, so the two numbers can legitimately differ.

    Args:
        db: An instance of the DatabaseService, provided by dependency injection.

    Returns:
        A DashboardSummary Pydantic object containing the calculated counts.
    """
    try:
        total_students = db.count_students(status="Active")
        total_classes = db.count_classes()
        present_students = len(db.get_present_student_ids(utc_today()))

        attendance_percentage = round(present_students / total_students * 100) if total_students > 0 else 0

        # Both lists come back newest first, so the newest few of each are enough.
        student_items = [
            RecentActivityItem(
                id=s.id,
                type="student",
                action="New student enrolled",
                detail=f"{s.name} - {s.className}",
                createdAt=s.createdAt,
            )
            for s in db.get_students()[:RECENT_ACTIVITY_LIMIT]
        ]
        class_items = [
            RecentActivityItem(
                id=c.id,
                type="class",
                action="New class created",
                detail=c.name,
                createdAt=c.createdAt,
            )
            for c in db.get_all_classes()[:RECENT_ACTIVITY_LIMIT]
        ]
        recent_activity = sorted(student_items + class_items, key=lambda item: item.createdAt, reverse=True)

        return DashboardSummary(
            totalStudents=total_students,
            totalClasses=total_classes,
            presentStudents=present_students,
            attendancePercentage=attendance_percentage,
            recentActivity=recent_activity[:RECENT_ACTIVITY_LIMIT],
        )
    except Exception:
        logger.exception("Failed to calculate dashboard summary data")
        # Re-raise so the router answers with a 500.
        raise
