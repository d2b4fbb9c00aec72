"""Friend-graph Pydantic schemas."""

from datetime import datetime

from pydantic import Field

from refmatch.schemas.base import CamelModel


class AddFriendRequest(CamelModel):
    user_id: str = Field(min_length=1)
    friend_id: str = Field(min_length=1)


class FriendshipOut(CamelModel):
    id: str
    requester_id: str
    addressee_id: str
    status: str
    created_at: datetime


class AddFriendResponse(CamelModel):
    friendship: FriendshipOut
