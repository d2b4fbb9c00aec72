"""Friend service - the undirected friend graph."""

from refmatch.core.errors import ConflictError, ValidationError
from refmatch.core.logger import logger
from refmatch.db.store import Store
from refmatch.services.profile_service import profile_service


class FriendService:
    @staticmethod
    async def add_friend(store: Store, user_id: str, friend_id: str):
        """Create an accepted friendship; one per unordered pair."""
        await profile_service.require_all(store, user_id, friend_id)

        if user_id == friend_id:
            raise ValidationError("Cannot add yourself as a friend")

        if await store.find_friendship(user_id, friend_id) is not None:
            raise ConflictError("Already friends", status_code=400)

        friendship = await store.insert_friendship(user_id, friend_id)
        logger.info("Friendship {} created between {} and {}", friendship.id, user_id, friend_id)
        return friendship

    @staticmethod
    async def list_friends(store: Store, user_id: str) -> list:
        """Profiles connected to user_id through an accepted friendship."""
        friends = []
        for friendship in await store.list_friendships_for(user_id):
            if friendship.requester_id == user_id:
                other_id = friendship.addressee_id
            else:
                other_id = friendship.requester_id
            other = await store.get_profile(other_id)
            if other is not None:
                friends.append(other)
        return friends


friend_service = FriendService()
