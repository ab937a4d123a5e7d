"""
Domain layer - Enterprise Business Rules.

This is the innermost layer containing business entities, value objects,
and domain exceptions. It has no dependencies on other layers.
"""

from src.domain.entities import Message, MessageSnapshot
from src.domain.exceptions import (ConflictException,
                                   MessageAlreadyExistsException,
                                   MessageNotFoundException,
                                   ResourceNotFoundException,
                                   TimelineException, ValidationException)
from src.domain.value_objects import MessageText

__all__ = [
    # Entities
    "Message",
    "MessageSnapshot",
    # Value Objects
    "MessageText",
    # Exceptions
    "TimelineException",
    "ValidationException",
    "ConflictException",
    "MessageAlreadyExistsException",
    "ResourceNotFoundException",
    "MessageNotFoundException",
]
