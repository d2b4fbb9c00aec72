"""SQLAlchemy-backed store, one AsyncSession per request."""

import asyncio
import functools

from sqlalchemy import select, or_, and_
from sqlalchemy.exc import IntegrityError, InterfaceError, OperationalError
from sqlalchemy.ext.asyncio import AsyncSession

from refmatch.config import settings
from refmatch.core.errors import ConflictError, TransientStoreError
from refmatch.core.logger import logger
from refmatch.core.pairs import canonical_pair
from refmatch.db.store import Store
from refmatch.models import ChatMessage, Friendship, Match, Profile, PullRequest, Swipe


def _guarded(func):
    """Bound a store call by the configured timeout and map driver failures."""

    @functools.wraps(func)
    async def wrapper(self, *args, **kwargs):
        try:
            return await asyncio.wait_for(
                func(self, *args, **kwargs), timeout=settings.STORE_TIMEOUT_SECONDS
            )
        except (asyncio.TimeoutError, OperationalError, InterfaceError, OSError) as exc:
            logger.warning("Store call {} failed: {!r}", func.__name__, exc)
            raise TransientStoreError("Store unavailable, please retry") from exc

    return wrapper


class SqlStore(Store):
    def __init__(self, db: AsyncSession):
        self.db = db

    # --- Profiles ---

    @_guarded
    async def get_profile(self, user_id: str) -> Profile | None:
        result = await self.db.execute(select(Profile).where(Profile.id == user_id))
        return result.scalar_one_or_none()

    @_guarded
    async def get_profile_by_email(self, email: str) -> Profile | None:
        result = await self.db.execute(select(Profile).where(Profile.email == email.lower()))
        return result.scalar_one_or_none()

    @_guarded
    async def insert_profile(
        self, email: str, password_hash: str, name: str, relationship_status: str
    ) -> Profile:
        profile = Profile(
            email=email.lower(),
            password_hash=password_hash,
            name=name,
            relationship_status=relationship_status,
        )
        try:
            async with self.db.begin_nested():
                self.db.add(profile)
        except IntegrityError as exc:
            raise ConflictError("Email already exists") from exc
        return profile

    @_guarded
    async def update_profile(self, user_id: str, fields: dict) -> Profile | None:
        result = await self.db.execute(select(Profile).where(Profile.id == user_id))
        profile = result.scalar_one_or_none()
        if profile is None:
            return None
        for field, value in fields.items():
            setattr(profile, field, value)
        await self.db.flush()
        return profile

    @_guarded
    async def list_profiles(self, relationship_status: str | None = None) -> list[Profile]:
        query = select(Profile)
        if relationship_status is not None:
            query = query.where(Profile.relationship_status == relationship_status)
        result = await self.db.execute(query)
        return list(result.scalars().all())

    # --- Swipes ---

    @_guarded
    async def insert_swipe(self, from_user_id: str, to_user_id: str, direction: str) -> Swipe:
        swipe = Swipe(from_user_id=from_user_id, to_user_id=to_user_id, direction=direction)
        self.db.add(swipe)
        await self.db.flush()
        return swipe

    @_guarded
    async def find_swipe(
        self, from_user_id: str, to_user_id: str, direction: str | None = None
    ) -> Swipe | None:
        query = select(Swipe).where(
            Swipe.from_user_id == from_user_id, Swipe.to_user_id == to_user_id
        )
        if direction is not None:
            query = query.where(Swipe.direction == direction)
        result = await self.db.execute(query.limit(1))
        return result.scalar_one_or_none()

    @_guarded
    async def swiped_user_ids(self, from_user_id: str) -> set[str]:
        result = await self.db.execute(
            select(Swipe.to_user_id).where(Swipe.from_user_id == from_user_id)
        )
        return set(result.scalars().all())

    # --- Matches ---

    async def _find_match(self, user1_id: str, user2_id: str) -> Match | None:
        result = await self.db.execute(
            select(Match).where(Match.user1_id == user1_id, Match.user2_id == user2_id)
        )
        return result.scalar_one_or_none()

    @_guarded
    async def get_match(self, match_id: str) -> Match | None:
        result = await self.db.execute(select(Match).where(Match.id == match_id))
        return result.scalar_one_or_none()

    @_guarded
    async def find_match(self, user1_id: str, user2_id: str) -> Match | None:
        return await self._find_match(user1_id, user2_id)

    @_guarded
    async def insert_match(
        self,
        user1_id: str,
        user2_id: str,
        source: str,
        matchmaker_id: str | None = None,
    ) -> Match:
        match = Match(
            user1_id=user1_id, user2_id=user2_id, source=source, matchmaker_id=matchmaker_id
        )
        try:
            async with self.db.begin_nested():
                self.db.add(match)
        except IntegrityError:
            # Lost the race on uq_matches_pair: the winner's row is the match
            existing = await self._find_match(user1_id, user2_id)
            if existing is None:
                raise
            logger.info("Match for {}/{} already created concurrently", user1_id, user2_id)
            return existing
        return match

    @_guarded
    async def list_matches_for(self, user_id: str) -> list[Match]:
        result = await self.db.execute(
            select(Match)
            .where(or_(Match.user1_id == user_id, Match.user2_id == user_id))
            .order_by(Match.created_at.desc())
        )
        return list(result.scalars().all())

    # --- Friendships ---

    @_guarded
    async def find_friendship(self, user_id: str, other_id: str) -> Friendship | None:
        result = await self.db.execute(
            select(Friendship).where(
                or_(
                    and_(Friendship.requester_id == user_id, Friendship.addressee_id == other_id),
                    and_(Friendship.requester_id == other_id, Friendship.addressee_id == user_id),
                )
            ).limit(1)
        )
        return result.scalar_one_or_none()

    @_guarded
    async def insert_friendship(self, requester_id: str, addressee_id: str) -> Friendship:
        low, high = canonical_pair(requester_id, addressee_id)
        friendship = Friendship(
            requester_id=requester_id,
            addressee_id=addressee_id,
            status="accepted",
            pair_low=low,
            pair_high=high,
        )
        try:
            async with self.db.begin_nested():
                self.db.add(friendship)
        except IntegrityError as exc:
            raise ConflictError("Already friends", status_code=400) from exc
        return friendship

    @_guarded
    async def list_friendships_for(self, user_id: str) -> list[Friendship]:
        result = await self.db.execute(
            select(Friendship)
            .where(
                or_(Friendship.requester_id == user_id, Friendship.addressee_id == user_id),
                Friendship.status == "accepted",
            )
            .order_by(Friendship.created_at)
        )
        return list(result.scalars().all())

    # --- Pull requests ---

    @_guarded
    async def insert_pull_request(self, requester_id: str, matchmaker_id: str) -> PullRequest:
        pull_request = PullRequest(
            requester_id=requester_id, matchmaker_id=matchmaker_id, status="pending"
        )
        self.db.add(pull_request)
        await self.db.flush()
        return pull_request

    @_guarded
    async def list_pull_requests_for(self, matchmaker_id: str) -> list[PullRequest]:
        result = await self.db.execute(
            select(PullRequest)
            .where(PullRequest.matchmaker_id == matchmaker_id)
            .order_by(PullRequest.created_at)
        )
        return list(result.scalars().all())

    # --- Chat ---

    @_guarded
    async def thread_exists(self, match_id: str) -> bool:
        # A thread exists exactly when its match row does
        result = await self.db.execute(select(Match.id).where(Match.id == match_id))
        return result.scalar_one_or_none() is not None

    @_guarded
    async def insert_message(self, match_id: str, sender_id: str, text: str) -> ChatMessage:
        message = ChatMessage(match_id=match_id, sender_id=sender_id, text=text)
        self.db.add(message)
        await self.db.flush()
        return message

    @_guarded
    async def list_messages(self, match_id: str) -> list[ChatMessage]:
        result = await self.db.execute(
            select(ChatMessage)
            .where(ChatMessage.match_id == match_id)
            .order_by(ChatMessage.created_at, ChatMessage.seq)
        )
        return list(result.scalars().all())
