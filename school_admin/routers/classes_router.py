# /school_admin/routers/classes_router.py

import logging
from fastapi import APIRouter, Depends, HTTPException, status
from typing import List

from ..models import class_model
from ..services import class_service
from ..services.database_service import DatabaseService, get_db_service
from ..services.errors import ServiceError
from .http_errors import to_http_exception

logger = logging.getLogger(__name__)

router = APIRouter()

# --- CLASS COLLECTION ENDPOINTS (/api/classes) ---

@router.get("", response_model=List[class_model.Class], summary="Get All Classes")
def get_all_classes(db: DatabaseService = Depends(get_db_service)):
    try:
        return class_service.get_all_classes(db=db)
    except Exception:
        logger.exception("Failed to fetch classes")
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Failed to fetch classes")

@router.post("", response_model=class_model.Class, status_code=status.HTTP_201_CREATED, summary="Create a New Class")
def create_new_class(class_create: class_model.ClassCreate, db: DatabaseService = Depends(get_db_service)):
    try:
        return class_service.create_class(db=db, class_data=class_create)
    except ServiceError as e:
        raise to_http_exception(e, "Failed to create class")
    except Exception:
        logger.exception("Failed to create class")
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Failed to create class")

# --- INDIVIDUAL CLASS RESOURCE ENDPOINTS (/api/classes/{class_id}) ---

@router.get("/{class_id}", response_model=class_model.Class, summary="Get a Single Class")
def get_class_by_id(class_id: str, db: DatabaseService = Depends(get_db_service)):
    try:
        return class_service.get_class(db=db, class_id=class_id)
    except ServiceError as e:
        raise to_http_exception(e, "Failed to fetch class")
    except Exception:
        logger.exception("Failed to fetch class with id: %s", class_id)
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Failed to fetch class")

@router.put("/{class_id}", response_model=class_model.Class, summary="Update a Class")
def update_class_details(class_id: str, class_update: class_model.ClassCreate, db: DatabaseService = Depends(get_db_service)):
    try:
        return class_service.update_class(db=db, class_id=class_id, class_update=class_update)
    except ServiceError as e:
        raise to_http_exception(e, "Failed to update class")
    except Exception:
        logger.exception("Failed to update class with id: %s", class_id)
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Failed to update class")

@router.delete("/{class_id}", summary="Delete a Class with its Students and Attendance")
def delete_class(class_id: str, db: DatabaseService = Depends(get_db_service)):
    try:
        class_service.delete_class(db=db, class_id=class_id)
    except ServiceError as e:
        raise to_http_exception(e, "Failed to delete class and associated data")
    except Exception:
        logger.exception("Failed to delete class with id: %s", class_id)
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Failed to delete class")
    return {"message": "Class and associated data deleted successfully"}
