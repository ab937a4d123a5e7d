"""Domain entities."""

from src.domain.entities.message import Message, MessageSnapshot

__all__ = [
    "Message",
    "MessageSnapshot",
]
