"""Friend endpoints - add a friend, list friends."""

from fastapi import APIRouter, Depends

from refmatch.core.errors import NotFoundError
from refmatch.db.store import Store, get_store
from refmatch.schemas.friend import AddFriendRequest, AddFriendResponse, FriendshipOut
from refmatch.schemas.profile import ProfileList, PublicProfile
from refmatch.services.friend_service import friend_service

router = APIRouter()


@router.post("/add", response_model=AddFriendResponse, status_code=201)
async def add_friend(data: AddFriendRequest, store: Store = Depends(get_store)):
    try:
        friendship = await friend_service.add_friend(store, data.user_id, data.friend_id)
    except NotFoundError as exc:
        # This endpoint reports unknown ids as a bad request
        raise NotFoundError(exc.message, status_code=400) from exc
    return AddFriendResponse(friendship=FriendshipOut.model_validate(friendship))


@router.get("/{user_id}", response_model=ProfileList)
async def list_friends(user_id: str, store: Store = Depends(get_store)):
    friends = await friend_service.list_friends(store, user_id)
    return ProfileList(items=[PublicProfile.model_validate(p) for p in friends])
