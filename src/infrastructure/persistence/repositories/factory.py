"""Message repository factory for store selection."""

from __future__ import annotations

from functools import lru_cache
from typing import TYPE_CHECKING

from src.infrastructure.persistence.repositories.in_memory_message_repo import \
    InMemoryMessageRepository
from src.infrastructure.persistence.repositories.message_repo import MessageRepository

if TYPE_CHECKING:
    from sqlalchemy.ext.asyncio import AsyncSession

    from src.application.interfaces.repositories import IMessageRepository
    from src.infrastructure.config.settings import Settings


@lru_cache
def get_shared_memory_repository() -> InMemoryMessageRepository:
    """Process-wide in-memory store, so messages survive across requests"""
    return InMemoryMessageRepository()


class MessageRepositoryFactory:
    """Factory for creating message repository instances based on configuration."""

    @staticmethod
    def create_message_repository(
        settings: "Settings", session: "AsyncSession | None" = None
    ) -> "IMessageRepository":
        """
        Create message repository based on settings.

        Args:
            settings: Application settings with message store configuration
            session: Open database session, required for the database store

        Returns:
            IMessageRepository: Configured message repository

        Raises:
            ValueError: If unknown store or missing session
        """
        store = settings.message_store

        if store == "memory":
            return get_shared_memory_repository()

        elif store == "database":
            if session is None:
                raise ValueError("A database session is required for the database store")
            return MessageRepository(session)

        else:
            raise ValueError(
                f"Unknown message store: {store}. " f"Supported: 'memory', 'database'"
            )
