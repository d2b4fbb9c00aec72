"""Match service - swipes, mutual-like detection and canonical match identity."""

from refmatch.core.errors import ValidationError
from refmatch.core.logger import logger
from refmatch.core.pairs import canonical_pair
from refmatch.db.store import Store
from refmatch.services.profile_service import profile_service


class MatchService:
    @staticmethod
    async def get_or_create_match(
        store: Store,
        first_id: str,
        second_id: str,
        source: str,
        matchmaker_id: str | None = None,
    ):
        """Return the single match for the unordered pair, creating it if needed.

        Creating a match also opens its (empty) chat thread. The unique index on
        the canonical pair backs up the read-before-insert here.
        """
        user1_id, user2_id = canonical_pair(first_id, second_id)
        existing = await store.find_match(user1_id, user2_id)
        if existing is not None:
            return existing

        match = await store.insert_match(user1_id, user2_id, source, matchmaker_id)
        logger.info("Match {} formed for {}/{} via {}", match.id, user1_id, user2_id, source)
        return match

    @staticmethod
    async def record_swipe(store: Store, from_user_id: str, to_user_id: str, direction: str):
        """Record a swipe and return the resulting match, or None.

        The swipe is stored even when no match results.
        """
        await profile_service.require_all(store, from_user_id, to_user_id)

        if from_user_id == to_user_id:
            raise ValidationError("Cannot swipe on yourself")

        await store.insert_swipe(from_user_id, to_user_id, direction)

        if direction == "pass":
            return None

        reverse_like = await store.find_swipe(to_user_id, from_user_id, direction="like")
        if reverse_like is None:
            return None

        return await MatchService.get_or_create_match(store, from_user_id, to_user_id, "swipe")

    @staticmethod
    async def list_matches(store: Store, user_id: str) -> list[tuple]:
        """Matches involving user_id, newest first, paired with the other profile."""
        results = []
        for match in await store.list_matches_for(user_id):
            other_id = match.user2_id if match.user1_id == user_id else match.user1_id
            other = await store.get_profile(other_id)
            if other is None:
                continue
            results.append((match, other))
        return results


match_service = MatchService()
