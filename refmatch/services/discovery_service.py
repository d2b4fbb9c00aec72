"""Discovery service - unseen single profiles for a user.

No ranking: candidates come back in whatever order the store returns them.
"""

from refmatch.db.store import Store
from refmatch.services.profile_service import profile_service


class DiscoveryService:
    @staticmethod
    async def discover(store: Store, user_id: str) -> list:
        await profile_service.get_or_404(store, user_id)

        # Swiped in either direction (like or pass)
        swiped_ids = await store.swiped_user_ids(user_id)
        return [
            p for p in await store.list_profiles(relationship_status="single")
            if p.id != user_id and p.id not in swiped_ids
        ]


discovery_service = DiscoveryService()
