"""Application use cases."""

from src.application.use_cases.messages.edit_message import EditMessageHandler
from src.application.use_cases.messages.post_message import PostMessageHandler
from src.application.use_cases.messages.view_timeline import (
    ViewTimelineHandler, format_published_ago)

__all__ = [
    "PostMessageHandler",
    "EditMessageHandler",
    "ViewTimelineHandler",
    "format_published_ago",
]
