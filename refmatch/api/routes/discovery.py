"""Discovery endpoint - candidate profiles a user has not swiped on yet."""

from fastapi import APIRouter, Depends

from refmatch.db.store import Store, get_store
from refmatch.schemas.profile import ProfileList, PublicProfile
from refmatch.services.discovery_service import discovery_service

router = APIRouter()


@router.get("/{user_id}", response_model=ProfileList)
async def discover(user_id: str, store: Store = Depends(get_store)):
    candidates = await discovery_service.discover(store, user_id)
    return ProfileList(items=[PublicProfile.model_validate(p) for p in candidates])
