"""Profile service - lookups and partial updates of public profile fields."""

from refmatch.core.errors import NotFoundError
from refmatch.db.store import Store

UPDATABLE_FIELDS = {"name", "relationship_status", "photo", "bio", "age"}


class ProfileService:
    @staticmethod
    async def get_or_404(store: Store, user_id: str):
        profile = await store.get_profile(user_id)
        if profile is None:
            raise NotFoundError("User not found")
        return profile

    @staticmethod
    async def require_all(store: Store, *user_ids: str) -> list:
        """Resolve every id or raise NotFoundError("User not found")."""
        profiles = []
        for user_id in user_ids:
            profiles.append(await ProfileService.get_or_404(store, user_id))
        return profiles

    @staticmethod
    async def update(store: Store, user_id: str, fields: dict):
        """Apply only the provided, non-null updatable fields."""
        patch = {
            k: v for k, v in fields.items() if k in UPDATABLE_FIELDS and v is not None
        }
        profile = await store.update_profile(user_id, patch)
        if profile is None:
            raise NotFoundError("User not found")
        return profile


profile_service = ProfileService()
