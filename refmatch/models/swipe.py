"""Swipe model - append-only like/pass ledger."""

from datetime import datetime

from sqlalchemy import String, Integer, DateTime, ForeignKey, Index
from sqlalchemy.orm import Mapped, mapped_column

from refmatch.db.database import Base
from refmatch.models.common import utcnow

SWIPE_DIRECTIONS = ("like", "pass")


class Swipe(Base):
    __tablename__ = "swipes"
    __table_args__ = (
        Index("ix_swipes_from_to", "from_user_id", "to_user_id"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    from_user_id: Mapped[str] = mapped_column(ForeignKey("profiles.id"))
    to_user_id: Mapped[str] = mapped_column(ForeignKey("profiles.id"))
    direction: Mapped[str] = mapped_column(String(10))  # "like" or "pass"

    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=utcnow)
