"""
Post message use case.

Publishes a new message with a caller-supplied id, stamped with the current time.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from src.domain.entities.message import Message
from src.domain.exceptions import MessageAlreadyExistsException
from src.shared.telemetry.logging import get_logger

if TYPE_CHECKING:
    from src.application.dto.messages import PostMessageRequest
    from src.application.interfaces.repositories import IMessageRepository
    from src.application.interfaces.services import IDateProvider

logger = get_logger(__name__)


class PostMessageHandler:
    """Post message handler following DIP - depends on abstractions, not concretions"""

    def __init__(
        self,
        message_repo: "IMessageRepository",
        date_provider: "IDateProvider",
    ) -> None:
        self.message_repo = message_repo
        self.date_provider = date_provider

    async def handle(self, request: "PostMessageRequest") -> None:
        """
        Post a new message.

        Args:
            request: Message id, author and text

        Raises:
            MessageAlreadyExistsException: If a message with this id is already stored
            ValidationException: If the text is blank or too long
        """
        # 1. Reject duplicate ids before looking at the text
        if await self.message_repo.exists_by_id(request.id):
            raise MessageAlreadyExistsException(request.id)

        # 2. Build the entity (validates text)
        message = Message.create(
            id=request.id,
            author=request.author,
            text=request.text,
            published_date=self.date_provider.now(),
        )

        # 3. Persist
        await self.message_repo.save(message)

        logger.info("Message %s posted by %s", message.id, message.author)
