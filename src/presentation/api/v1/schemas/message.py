from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

# Text rules (blank, length) are enforced by the domain, not here


class MessagePost(BaseModel):
    """Schema for posting a message"""

    id: UUID = Field(..., description="Client-generated message id")
    author: str = Field(..., description="Author name")
    text: str = Field(..., description="Message text")


class MessageEdit(BaseModel):
    """Schema for editing a message's text"""

    id: UUID = Field(..., description="Id of the message to edit")
    text: str = Field(..., description="New message text")


class TimelineMessageResponse(BaseModel):
    """Schema for one timeline entry"""

    id: UUID
    author: str
    text: str
    relative_time_label: str = Field(..., description='Relative publication time, e.g. "2 minutes ago"')

    model_config = ConfigDict(from_attributes=True)
