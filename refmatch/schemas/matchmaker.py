"""Matchmaker push/pull Pydantic schemas."""

from datetime import datetime

from pydantic import Field

from refmatch.schemas.base import CamelModel
from refmatch.schemas.match import MatchOut
from refmatch.schemas.profile import PublicProfile


class PushRequest(CamelModel):
    matchmaker_id: str = Field(min_length=1)
    person1_id: str = Field(min_length=1)
    person2_id: str = Field(min_length=1)


class PushResponse(CamelModel):
    match: MatchOut


class PullRequestIn(CamelModel):
    requester_id: str = Field(min_length=1)
    matchmaker_id: str = Field(min_length=1)


class PullRequestOut(CamelModel):
    id: str
    requester_id: str
    matchmaker_id: str
    status: str
    created_at: datetime


class PullResponse(CamelModel):
    pull_request: PullRequestOut


class PullRequestItem(PullRequestOut):
    requester: PublicProfile


class PullRequestList(CamelModel):
    items: list[PullRequestItem]
