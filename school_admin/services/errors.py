# /school_admin/services/errors.py

"""
Exceptions raised by the service layer. Routers translate each one into a
distinct HTTP status:

    ValidationError  -> 400
    NotFoundError    -> 404
    ConflictError    -> 409
    TransactionError -> 500
"""


class ServiceError(Exception):
    """Base class for every error the service layer raises on purpose."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(ServiceError):
    """Input that passed the request schema but is still unusable (e.g. a malformed id)."""


class NotFoundError(ServiceError):
    """A referenced class or student does not exist."""


class ConflictError(ServiceError):
    """A unique index rejected the write (class name, student email, attendance day)."""


class TransactionError(ServiceError):
    """A step inside an atomic operation failed; everything it did was rolled back."""
