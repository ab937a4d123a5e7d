"""
Repository interfaces (ports) for the application layer.

These protocols define the persistence contracts consumed by use cases.
Following Dependency Inversion Principle (DIP).
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol
from uuid import UUID

if TYPE_CHECKING:
    from src.domain.entities.message import Message


class IMessageRepository(Protocol):
    """
    Protocol for message repository (DIP)

    Pure storage contract: no method validates message content.
    Implementations hand out copies, so mutating a returned message never
    changes stored state until it is saved again.
    """

    async def save(self, message: Message) -> Message:
        """Insert or replace a message by id and return the stored copy"""
        ...

    async def find_all_by_author(self, author: str) -> list[Message]:
        """Get all messages whose author matches exactly (order unspecified)"""
        ...

    async def find_by_id(self, message_id: UUID) -> Message | None:
        """Get message by ID"""
        ...

    async def exists_by_id(self, message_id: UUID) -> bool:
        """Check whether a message with this ID is stored"""
        ...
