"""Domain value objects."""

from src.domain.value_objects.message_text import MessageText

__all__ = [
    "MessageText",
]
