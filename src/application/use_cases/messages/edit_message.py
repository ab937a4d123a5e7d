"""
Edit message use case.

Replaces the text of an existing message. Author and published date are untouched.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from src.domain.exceptions import MessageNotFoundException
from src.shared.telemetry.logging import get_logger

if TYPE_CHECKING:
    from src.application.dto.messages import EditMessageRequest
    from src.application.interfaces.repositories import IMessageRepository

logger = get_logger(__name__)


class EditMessageHandler:
    """Edit message handler following DIP - depends on abstractions, not concretions"""

    def __init__(self, message_repo: "IMessageRepository") -> None:
        self.message_repo = message_repo

    async def handle(self, request: "EditMessageRequest") -> None:
        """
        Edit the text of a message.

        Raises:
            MessageNotFoundException: If no message has this id
            ValidationException: If the new text is blank or too long
        """
        message = await self.message_repo.find_by_id(request.message_id)
        if message is None:
            raise MessageNotFoundException(request.message_id)

        message.edit_text(request.text)

        await self.message_repo.save(message)

        logger.info("Message %s edited", message.id)
