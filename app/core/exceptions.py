# app/core/exceptions.py
"""
Application exception hierarchy.

Every exception carries the HTTP status it maps to, so the handlers in
``app.core.exception_handler`` can translate them without a lookup table.
"""
from typing import Optional

from fastapi import status


class AppException(Exception):
    """Base class for all errors raised by services and repositories."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    error: str = "Application Error"
    default_detail: str = "An application error occurred."

    def __init__(
        self, detail: Optional[str] = None, *, resource_type: Optional[str] = None
    ):
        self.detail = detail or self.default_detail
        self.resource_type = resource_type
        super().__init__(self.detail)


class ResourceNotFound(AppException):
    status_code = status.HTTP_404_NOT_FOUND
    error = "Not Found"
    default_detail = "The requested resource was not found."


class BadRequestException(AppException):
    status_code = status.HTTP_400_BAD_REQUEST
    error = "Bad Request"
    default_detail = "The request could not be processed."


class InternalServerError(AppException):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    error = "Internal Server Error"
    default_detail = "An unexpected error occurred."
