"""
View timeline use case.

Lists an author's messages, most recent first, with a relative publication label.
"""

from __future__ import annotations

from datetime import datetime, timedelta
from typing import TYPE_CHECKING

from src.application.dto.messages import TimelineMessage
from src.shared.telemetry.logging import get_logger
from src.shared.utils.datetime import ensure_utc

if TYPE_CHECKING:
    from src.application.dto.messages import GetTimelineRequest
    from src.application.interfaces.repositories import IMessageRepository
    from src.application.interfaces.services import IDateProvider
    from src.domain.entities.message import Message

logger = get_logger(__name__)


def format_published_ago(published_date: datetime, now: datetime) -> str:
    """
    Render the whole minutes elapsed since publication.

    Partial minutes are dropped toward zero, so a date slightly ahead of
    `now` still reads "0 minute ago". Plural only above one minute.
    """
    # Some stores (SQLite) hand back naive datetimes
    if (published_date.tzinfo is None) != (now.tzinfo is None):
        published_date, now = ensure_utc(published_date), ensure_utc(now)

    minutes = int((now - published_date) / timedelta(minutes=1))
    unit = "minutes" if minutes > 1 else "minute"
    return f"{minutes} {unit} ago"


class ViewTimelineHandler:
    """Timeline handler following DIP - depends on abstractions, not concretions"""

    def __init__(
        self,
        message_repo: "IMessageRepository",
        date_provider: "IDateProvider",
    ) -> None:
        self.message_repo = message_repo
        self.date_provider = date_provider

    async def handle(self, request: "GetTimelineRequest") -> list[TimelineMessage]:
        """
        Get the timeline of an author.

        Returns:
            Timeline entries ordered by published date descending; empty when the
            author has not posted anything
        """
        messages = await self.message_repo.find_all_by_author(request.author)
        logger.debug("Found %d message(s) for author %s", len(messages), request.author)

        # sorted() is stable: equal dates keep repository order
        ordered = sorted(messages, key=lambda message: message.published_date, reverse=True)

        now = self.date_provider.now()
        return [self._to_timeline_message(message, now) for message in ordered]

    @staticmethod
    def _to_timeline_message(message: "Message", now: datetime) -> TimelineMessage:
        return TimelineMessage(
            id=message.id,
            author=message.author,
            text=message.text,
            relative_time_label=format_published_ago(message.published_date, now),
        )
