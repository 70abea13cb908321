# learnhub/core/errors.py
"""
Error kinds raised by services and guards.

Each kind maps to one HTTP status; the handlers registered in
``learnhub.main`` render them as ``{"error": kind, "detail": message}``.
"""
from fastapi import status


class ServiceError(Exception):
    error = "ServiceError"
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_detail = "Internal server error"

    def __init__(self, detail: str | None = None):
        self.detail = detail or self.default_detail
        super().__init__(self.detail)


class InvalidInput(ServiceError):
    error = "InvalidInput"
    status_code = status.HTTP_400_BAD_REQUEST
    default_detail = "Invalid input"


class Unauthenticated(ServiceError):
    error = "Unauthenticated"
    status_code = status.HTTP_401_UNAUTHORIZED
    default_detail = "Unauthorized access"


class Forbidden(ServiceError):
    error = "Forbidden"
    status_code = status.HTTP_403_FORBIDDEN
    default_detail = "Forbidden access"


class NotFound(ServiceError):
    error = "NotFound"
    status_code = status.HTTP_404_NOT_FOUND
    default_detail = "Not found"


class Conflict(ServiceError):
    error = "Conflict"
    status_code = status.HTTP_409_CONFLICT
    default_detail = "Already exists"


class StoreFailure(ServiceError):
    error = "StoreFailure"
    default_detail = "Database operation failed"


class UpstreamFailure(ServiceError):
    error = "UpstreamFailure"
    default_detail = "Payment processor unavailable"
