"""
Application layer - Application Business Rules.

This layer contains application-specific business rules, including:
- Interfaces (ports) for infrastructure dependencies
- Data transfer objects crossing the use case boundary
- Use cases that orchestrate domain logic
"""

from src.application.dto import (EditMessageRequest, GetTimelineRequest,
                                 PostMessageRequest, TimelineMessage)
from src.application.interfaces import IDateProvider, IMessageRepository
from src.application.use_cases import (EditMessageHandler, PostMessageHandler,
                                       ViewTimelineHandler)

__all__ = [
    # Interfaces
    "IMessageRepository",
    "IDateProvider",
    # DTOs
    "PostMessageRequest",
    "EditMessageRequest",
    "GetTimelineRequest",
    "TimelineMessage",
    # Use Cases
    "PostMessageHandler",
    "EditMessageHandler",
    "ViewTimelineHandler",
]
