"""
Message domain entity.

This represents the business concept of a posted message, independent of
how it's stored in the database.
"""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from src.domain.value_objects.message_text import MessageText


@dataclass(frozen=True)
class MessageSnapshot:
    """Immutable plain-data view of a Message, used to cross persistence and API boundaries."""

    id: UUID
    author: str
    text: str
    published_date: datetime


class Message:
    """
    Domain entity for Message (SRP - business logic separate from persistence)

    Identity, author and published date are fixed at creation. The text can only
    change through edit_text(), which validates it like construction does.
    Two messages are equal when their ids are equal.
    """

    def __init__(self, id: UUID, author: str, text: str, published_date: datetime):
        self._id = id
        self._author = author
        self._published_date = published_date
        self._text = MessageText(text)

    @classmethod
    def create(cls, id: UUID, author: str, text: str, published_date: datetime) -> "Message":
        """Create a new message; raises ValidationException on invalid text."""
        return cls(id, author, text, published_date)

    @classmethod
    def from_snapshot(cls, snapshot: MessageSnapshot) -> "Message":
        """Rebuild a message from stored data, re-running text validation."""
        return cls(snapshot.id, snapshot.author, snapshot.text, snapshot.published_date)

    @property
    def id(self) -> UUID:
        return self._id

    @property
    def author(self) -> str:
        return self._author

    @property
    def text(self) -> str:
        return self._text.value

    @property
    def published_date(self) -> datetime:
        return self._published_date

    def edit_text(self, text: str) -> None:
        """
        Replace the message text.
        The current text is kept if the new one is invalid.
        """
        self._text = MessageText(text)

    def snapshot(self) -> MessageSnapshot:
        return MessageSnapshot(
            id=self._id,
            author=self._author,
            text=self._text.value,
            published_date=self._published_date,
        )

    def is_authored_by(self, author: str) -> bool:
        """Case-sensitive author match."""
        return self._author == author

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, Message):
            return NotImplemented
        return self._id == other._id

    def __hash__(self) -> int:
        return hash(self._id)

    def __repr__(self) -> str:
        return (
            f"Message(id={self._id}, author={self._author!r}, "
            f"text={self._text.value!r}, published_date={self._published_date!r})"
        )
