from __future__ import annotations

from collections.abc import Iterable
from uuid import UUID

from src.domain.entities.message import Message


class InMemoryMessageRepository:
    """
    Dict-backed implementation of IMessageRepository.

    Stores and returns copies rebuilt from snapshots, so callers never share
    references with the stored state. A later save with the same id silently
    overwrites the previous one.
    """

    def __init__(self, messages: Iterable[Message] | None = None):
        self._messages_by_id: dict[UUID, Message] = {}
        if messages:
            self.set_messages(messages)

    @staticmethod
    def _copy(message: Message) -> Message:
        return Message.from_snapshot(message.snapshot())

    async def save(self, message: Message) -> Message:
        stored = self._copy(message)
        self._messages_by_id[stored.id] = stored
        return self._copy(stored)

    async def find_all_by_author(self, author: str) -> list[Message]:
        return [
            self._copy(message)
            for message in self._messages_by_id.values()
            if message.is_authored_by(author)
        ]

    async def find_by_id(self, message_id: UUID) -> Message | None:
        message = self._messages_by_id.get(message_id)
        return self._copy(message) if message else None

    async def exists_by_id(self, message_id: UUID) -> bool:
        return message_id in self._messages_by_id

    # Seeding and inspection helpers
    def messages(self) -> list[Message]:
        return [self._copy(message) for message in self._messages_by_id.values()]

    def set_messages(self, messages: Iterable[Message]) -> None:
        """Replace all stored messages"""
        self._messages_by_id = {message.id: self._copy(message) for message in messages}
