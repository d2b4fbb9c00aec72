"""Friendship model - undirected accepted relation between two profiles."""

from datetime import datetime

from sqlalchemy import String, DateTime, ForeignKey, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from refmatch.db.database import Base
from refmatch.models.common import new_id, utcnow


class Friendship(Base):
    __tablename__ = "friendships"
    __table_args__ = (
        UniqueConstraint("pair_low", "pair_high", name="uq_friendships_pair"),
    )

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=new_id)
    requester_id: Mapped[str] = mapped_column(ForeignKey("profiles.id"), index=True)
    addressee_id: Mapped[str] = mapped_column(ForeignKey("profiles.id"), index=True)
    status: Mapped[str] = mapped_column(String(20), default="accepted")

    # Canonical pair key, independent of who asked whom
    pair_low: Mapped[str] = mapped_column(String(36))
    pair_high: Mapped[str] = mapped_column(String(36))

    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=utcnow)
