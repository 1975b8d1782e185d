"""
Error taxonomy shared by services and routers.

Every error carries a machine-readable ``code`` and the HTTP status it maps to;
``main.py`` turns them into ``{"error": code, "detail": message}`` responses.
"""
from fastapi import status


class TaskManagerError(Exception):
    """Base class for errors recovered at the request boundary."""

    code = "ERROR"
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ResourceNotFoundError(TaskManagerError):
    """Lookup by id or natural key found nothing."""

    code = "NOT_FOUND"
    status_code = status.HTTP_404_NOT_FOUND


class InvalidRequestError(TaskManagerError):
    """Missing or unresolvable reference, or null for a required field."""

    code = "VALIDATION"
    status_code = status.HTTP_400_BAD_REQUEST


class ResourceConflictError(TaskManagerError):
    """The database rejected a write on a unique or foreign key constraint."""

    code = "CONFLICT"
    status_code = status.HTTP_409_CONFLICT


class ForbiddenError(TaskManagerError):
    code = "FORBIDDEN"
    status_code = status.HTTP_403_FORBIDDEN
