from __future__ import annotations

from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from src.domain.entities.message import Message, MessageSnapshot
from src.infrastructure.persistence.models.message import MessageModel
from src.infrastructure.persistence.repositories.base import BaseRepository
from src.shared.telemetry.logging import get_logger

logger = get_logger(__name__)


class MessageRepository(BaseRepository[MessageModel]):
    """
    SQLAlchemy implementation of IMessageRepository.

    Rows are mapped through MessageSnapshot, so every call returns fresh
    domain entities and stored text is re-validated on load.
    """

    def __init__(self, db: AsyncSession):
        super().__init__(db, MessageModel)

    @staticmethod
    def _to_model(message: Message) -> MessageModel:
        snapshot = message.snapshot()
        return MessageModel(
            id=snapshot.id,
            author=snapshot.author,
            text=snapshot.text,
            published_date=snapshot.published_date,
        )

    @staticmethod
    def _to_entity(row: MessageModel) -> Message:
        return Message.from_snapshot(
            MessageSnapshot(
                id=row.id,
                author=row.author,
                text=row.text,
                published_date=row.published_date,
            )
        )

    async def save(self, message: Message) -> Message:
        row = await self.upsert(self._to_model(message))
        return self._to_entity(row)

    async def find_all_by_author(self, author: str) -> list[Message]:
        """Get all messages of an author (case-sensitive match)"""
        result = await self.db.execute(select(MessageModel).where(MessageModel.author == author))
        return [self._to_entity(row) for row in result.scalars().all()]

    async def find_by_id(self, message_id: UUID) -> Message | None:
        row = await self.get_by_id(message_id)
        return self._to_entity(row) if row else None

    async def exists_by_id(self, message_id: UUID) -> bool:
        return await self.exists(message_id)

    async def _on_after_save(self, obj: MessageModel) -> None:
        logger.debug("Stored message %s", obj.id)
