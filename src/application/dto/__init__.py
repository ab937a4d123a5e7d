"""Application data transfer objects."""

from src.application.dto.messages import (EditMessageRequest,
                                          GetTimelineRequest,
                                          PostMessageRequest, TimelineMessage)

__all__ = [
    "PostMessageRequest",
    "EditMessageRequest",
    "GetTimelineRequest",
    "TimelineMessage",
]
