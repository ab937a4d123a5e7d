"""Use case input and output data for messaging."""

from dataclasses import dataclass
from uuid import UUID


@dataclass(frozen=True)
class PostMessageRequest:
    id: UUID
    author: str
    text: str


@dataclass(frozen=True)
class EditMessageRequest:
    message_id: UUID
    text: str


@dataclass(frozen=True)
class GetTimelineRequest:
    author: str


@dataclass(frozen=True)
class TimelineMessage:
    """One timeline entry, with the publication time rendered relative to now."""

    id: UUID
    author: str
    text: str
    relative_time_label: str
