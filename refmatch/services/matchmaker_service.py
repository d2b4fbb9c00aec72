"""Matchmaker service - push (vouch for a pair) and pull (ask a friend for help)."""

from refmatch.core.errors import ValidationError
from refmatch.core.logger import logger
from refmatch.db.store import Store
from refmatch.services.match_service import match_service
from refmatch.services.profile_service import profile_service


class MatchmakerService:
    @staticmethod
    async def push(store: Store, matchmaker_id: str, person1_id: str, person2_id: str):
        """Create (or return) the match between two people on a matchmaker's word.

        No swipes are required. The matchmaker is recorded on a newly created
        match but is not required to be friends with either person.
        """
        await profile_service.require_all(store, person1_id, person2_id)

        if person1_id == person2_id:
            raise ValidationError("Cannot match a person with themselves")

        match = await match_service.get_or_create_match(
            store, person1_id, person2_id, "push", matchmaker_id=matchmaker_id
        )
        logger.info("Push by {} for {}/{} -> match {}", matchmaker_id, person1_id, person2_id, match.id)
        return match

    @staticmethod
    async def pull(store: Store, requester_id: str, matchmaker_id: str):
        """Record an advisory request; nothing is resolved automatically."""
        await profile_service.require_all(store, requester_id, matchmaker_id)

        pull_request = await store.insert_pull_request(requester_id, matchmaker_id)
        logger.info("Pull request {} from {} to {}", pull_request.id, requester_id, matchmaker_id)
        return pull_request

    @staticmethod
    async def list_pull_requests(store: Store, matchmaker_id: str) -> list[tuple]:
        """Pull requests addressed to a matchmaker, oldest first, with requester profiles."""
        await profile_service.get_or_404(store, matchmaker_id)

        results = []
        for pull_request in await store.list_pull_requests_for(matchmaker_id):
            requester = await store.get_profile(pull_request.requester_id)
            if requester is not None:
                results.append((pull_request, requester))
        return results


matchmaker_service = MatchmakerService()
