"""Chat-related Pydantic schemas."""

from datetime import datetime

from pydantic import Field

from refmatch.schemas.base import CamelModel


class ChatMessageIn(CamelModel):
    """Incoming message for a match thread."""
    sender_id: str = Field(min_length=1)
    text: str = Field(min_length=1, max_length=1000)


class ChatMessageOut(CamelModel):
    id: str
    match_id: str
    sender_id: str
    text: str
    created_at: datetime


class ChatHistory(CamelModel):
    items: list[ChatMessageOut]
