"""Match model - one row per unordered user pair."""

from datetime import datetime

from sqlalchemy import String, DateTime, ForeignKey, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from refmatch.db.database import Base
from refmatch.models.common import new_id, utcnow


class Match(Base):
    __tablename__ = "matches"
    __table_args__ = (
        # user1_id <= user2_id always holds, so this is the pair uniqueness rule
        UniqueConstraint("user1_id", "user2_id", name="uq_matches_pair"),
    )

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=new_id)
    user1_id: Mapped[str] = mapped_column(ForeignKey("profiles.id"), index=True)
    user2_id: Mapped[str] = mapped_column(ForeignKey("profiles.id"), index=True)

    source: Mapped[str] = mapped_column(String(10), default="swipe")  # "swipe" or "push"
    matchmaker_id: Mapped[str | None] = mapped_column(String(36), nullable=True)

    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=utcnow)
