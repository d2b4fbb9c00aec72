"""Profile endpoints - read and update public profiles."""

from fastapi import APIRouter, Depends

from refmatch.db.store import Store, get_store
from refmatch.schemas.profile import ProfileUpdate, PublicProfile
from refmatch.services.profile_service import profile_service

router = APIRouter()


@router.get("/{user_id}", response_model=PublicProfile)
async def get_profile(user_id: str, store: Store = Depends(get_store)):
    profile = await profile_service.get_or_404(store, user_id)
    return PublicProfile.model_validate(profile)


@router.put("/{user_id}", response_model=PublicProfile)
async def update_profile(user_id: str, data: ProfileUpdate, store: Store = Depends(get_store)):
    """Update only the provided fields."""
    update_data = data.model_dump(exclude_unset=True)
    profile = await profile_service.update(store, user_id, update_data)
    return PublicProfile.model_validate(profile)
