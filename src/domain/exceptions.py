"""
Domain exceptions for the messaging timeline.

This module defines domain-level exceptions that represent business rule violations.
These exceptions are independent of infrastructure concerns.
"""

from typing import Any


class TimelineException(Exception):
    """
    Base exception for all messaging timeline errors.

    All custom exceptions should inherit from this class to allow
    for consistent error handling and logging.

    Attributes:
        message: Human-readable error description
        error_code: Machine-readable error code for API responses
        details: Additional error context
    """

    def __init__(
        self,
        message: str,
        error_code: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to dictionary for API responses."""
        return {
            "error": self.error_code,
            "message": self.message,
            "details": self.details,
        }


class ValidationException(TimelineException):
    """Raised when input validation fails."""

    def __init__(self, message: str, field: str | None = None):
        details = {"field": field} if field else {}
        super().__init__(message, "VALIDATION_ERROR", details)


class ConflictException(TimelineException):
    """Raised when a resource collides with one that already exists."""

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        super().__init__(message, "CONFLICT", details)


class MessageAlreadyExistsException(ConflictException):
    """Raised when posting a message whose id is already taken."""

    def __init__(self, message_id: Any):
        super().__init__("Message already exists", {"message_id": str(message_id)})


class ResourceNotFoundException(TimelineException):
    """Raised when a requested resource is not found."""

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        super().__init__(message, "RESOURCE_NOT_FOUND", details)


class MessageNotFoundException(ResourceNotFoundException):
    """Raised when the message to act on does not exist."""

    def __init__(self, message_id: Any):
        super().__init__("Message not found", {"message_id": str(message_id)})
