""" Repository module for the persistence layer. """

from src.infrastructure.persistence.repositories.base import BaseRepository
from src.infrastructure.persistence.repositories.factory import (
    MessageRepositoryFactory, get_shared_memory_repository)
from src.infrastructure.persistence.repositories.in_memory_message_repo import \
    InMemoryMessageRepository
from src.infrastructure.persistence.repositories.message_repo import MessageRepository

__all__ = [
    "BaseRepository",
    "InMemoryMessageRepository",
    "MessageRepository",
    "MessageRepositoryFactory",
    "get_shared_memory_repository",
]
