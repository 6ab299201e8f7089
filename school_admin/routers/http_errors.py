# /school_admin/routers/http_errors.py

from fastapi import HTTPException, status

from ..services.errors import ServiceError, ValidationError, NotFoundError, ConflictError

_STATUS_BY_ERROR = (
    (ValidationError, status.HTTP_400_BAD_REQUEST),
    (NotFoundError, status.HTTP_404_NOT_FOUND),
    (ConflictError, status.HTTP_409_CONFLICT),
)


def to_http_exception(error: ServiceError, fallback_detail: str) -> HTTPException:
    """
    Maps a service error to the HTTPException the router should raise.
    Anything without a specific mapping (TransactionError included) is a 500
    carrying `fallback_detail`, so internal messages never reach the client.
    """
    for error_type, status_code in _STATUS_BY_ERROR:
        if isinstance(error, error_type):
            return HTTPException(status_code=status_code, detail=error.message)
    return HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=fallback_detail)
