# /school_admin/routers/dashboard_router.py

# --- Core FastAPI Imports ---
import logging
from fastapi import APIRouter, Depends, HTTPException, status

# --- Service and Model Imports ---
from ..services import dashboard_service
from ..services.database_service import DatabaseService, get_db_service
from ..models.dashboard_model import DashboardSummary

logger = logging.getLogger(__name__)

router = APIRouter()

# --- Endpoint Definition ---
@router.get(
    "/summary",
    response_model=DashboardSummary,
    summary="Get Dashboard Summary",
    description="Retrieves the statistics and recent activity shown on the home page."
)
def get_dashboard_summary(db: DatabaseService = Depends(get_db_service)):
    """
    Thin router layer: delegate to the service, turn failures into a 500.
    """
    try:
        return dashboard_service.get_summary_data(db=db)
    except Exception:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to load dashboard data"
        )
