"""Match and swipe Pydantic schemas."""

from datetime import datetime
from typing import Literal

from pydantic import Field

from refmatch.schemas.base import CamelModel
from refmatch.schemas.profile import PublicProfile


class SwipeRequest(CamelModel):
    from_user_id: str = Field(min_length=1)
    to_user_id: str = Field(min_length=1)
    direction: Literal["like", "pass"]


class MatchOut(CamelModel):
    id: str
    users: list[str]  # canonical order: users[0] <= users[1]
    source: str
    matchmaker_id: str | None = None
    created_at: datetime

    @classmethod
    def from_record(cls, match) -> "MatchOut":
        return cls(
            id=match.id,
            users=[match.user1_id, match.user2_id],
            source=match.source,
            matchmaker_id=match.matchmaker_id,
            created_at=match.created_at,
        )


class SwipeResponse(CamelModel):
    match: MatchOut | None


class MatchItem(CamelModel):
    id: str
    created_at: datetime
    source: str
    matchmaker_id: str | None = None
    other_user: PublicProfile


class MatchList(CamelModel):
    items: list[MatchItem]
