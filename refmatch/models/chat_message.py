"""Chat message model - append-only messages within a match thread."""

from datetime import datetime

from sqlalchemy import String, Integer, DateTime, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column

from refmatch.db.database import Base
from refmatch.models.common import new_id, utcnow


class ChatMessage(Base):
    __tablename__ = "messages"

    # seq gives insertion order for timestamp ties
    seq: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    id: Mapped[str] = mapped_column(String(36), unique=True, default=new_id)
    match_id: Mapped[str] = mapped_column(ForeignKey("matches.id"), index=True)
    sender_id: Mapped[str] = mapped_column(String(36))
    text: Mapped[str] = mapped_column(String(1000))

    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=utcnow)
