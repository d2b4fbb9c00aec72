"""File-backed store for local demos.

The whole state lives in one JSON document that is rewritten on every
mutation. Single process only: two writers will overwrite each other.
File writes are synchronous and block the event loop while they run.

Mutations are applied to a copy of the state. The copy replaces the live
state only after it has been written, so a failed write changes nothing.
"""

import json
from collections.abc import Callable
from datetime import datetime
from pathlib import Path
from typing import TypeVar

from pydantic import BaseModel, Field, ValidationError as PydanticValidationError

from refmatch.core.errors import ConflictError, TransientStoreError
from refmatch.core.logger import logger
from refmatch.core.pairs import canonical_pair
from refmatch.db.store import Store
from refmatch.models.common import new_id, utcnow

T = TypeVar("T")


def _append(items: list[T], item: T) -> T:
    items.append(item)
    return item


class ProfileDoc(BaseModel):
    id: str = Field(default_factory=new_id)
    email: str
    password_hash: str
    name: str = ""
    relationship_status: str = "single"
    photo: str | None = None
    bio: str | None = None
    age: int | None = None
    created_at: datetime = Field(default_factory=utcnow)


class SwipeDoc(BaseModel):
    id: int
    from_user_id: str
    to_user_id: str
    direction: str
    created_at: datetime = Field(default_factory=utcnow)


class MatchDoc(BaseModel):
    id: str = Field(default_factory=new_id)
    user1_id: str
    user2_id: str
    source: str = "swipe"
    matchmaker_id: str | None = None
    created_at: datetime = Field(default_factory=utcnow)


class FriendshipDoc(BaseModel):
    id: str = Field(default_factory=new_id)
    requester_id: str
    addressee_id: str
    status: str = "accepted"
    pair_low: str
    pair_high: str
    created_at: datetime = Field(default_factory=utcnow)


class PullRequestDoc(BaseModel):
    id: str = Field(default_factory=new_id)
    requester_id: str
    matchmaker_id: str
    status: str = "pending"
    created_at: datetime = Field(default_factory=utcnow)


class MessageDoc(BaseModel):
    seq: int
    id: str = Field(default_factory=new_id)
    match_id: str
    sender_id: str
    text: str
    created_at: datetime = Field(default_factory=utcnow)


class DbState(BaseModel):
    profiles: list[ProfileDoc] = []
    swipes: list[SwipeDoc] = []
    matches: list[MatchDoc] = []
    friendships: list[FriendshipDoc] = []
    pull_requests: list[PullRequestDoc] = []
    messages_by_match: dict[str, list[MessageDoc]] = {}


class JsonFileStore(Store):
    def __init__(self, path: str | Path, seed_profiles: list[dict] | None = None):
        self.path = Path(path)
        self._seed_profiles = seed_profiles or []
        self.state = self._load()

    # --- Persistence ---

    def _seed_state(self) -> DbState:
        return DbState(profiles=[ProfileDoc(**p) for p in self._seed_profiles])

    def _load(self) -> DbState:
        if not self.path.exists():
            state = self._seed_state()
            self._write(state)
            return state

        try:
            raw = json.loads(self.path.read_text(encoding="utf-8"))
            return DbState.model_validate(raw)
        except (json.JSONDecodeError, PydanticValidationError, UnicodeDecodeError) as exc:
            logger.warning("Store file {} is invalid ({}), resetting to seed", self.path, exc)
            state = self._seed_state()
            self._write(state)
            return state

    def _write(self, state: DbState) -> None:
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            tmp_path = self.path.with_suffix(self.path.suffix + ".tmp")
            tmp_path.write_text(state.model_dump_json(indent=2), encoding="utf-8")
            tmp_path.replace(self.path)
        except OSError as exc:
            logger.error("Could not write store file {}: {}", self.path, exc)
            raise TransientStoreError("Store unavailable, please retry") from exc

    def _commit(self, change: Callable[[DbState], T]) -> T:
        """Apply ``change`` to a copy of the state, persist it, then swap it in."""
        draft = self.state.model_copy(deep=True)
        result = change(draft)
        self._write(draft)
        self.state = draft
        return result

    # --- Profiles ---

    async def get_profile(self, user_id: str) -> ProfileDoc | None:
        return next((p for p in self.state.profiles if p.id == user_id), None)

    async def get_profile_by_email(self, email: str) -> ProfileDoc | None:
        email = email.lower()
        return next((p for p in self.state.profiles if p.email.lower() == email), None)

    async def insert_profile(
        self, email: str, password_hash: str, name: str, relationship_status: str
    ) -> ProfileDoc:
        if await self.get_profile_by_email(email) is not None:
            raise ConflictError("Email already exists")
        profile = ProfileDoc(
            email=email.lower(),
            password_hash=password_hash,
            name=name,
            relationship_status=relationship_status,
        )
        return self._commit(lambda state: _append(state.profiles, profile))

    async def update_profile(self, user_id: str, fields: dict) -> ProfileDoc | None:
        if await self.get_profile(user_id) is None:
            return None

        def change(state: DbState) -> ProfileDoc:
            profile = next(p for p in state.profiles if p.id == user_id)
            for field, value in fields.items():
                setattr(profile, field, value)
            return profile

        return self._commit(change)

    async def list_profiles(self, relationship_status: str | None = None) -> list[ProfileDoc]:
        return [
            p for p in self.state.profiles
            if relationship_status is None or p.relationship_status == relationship_status
        ]

    # --- Swipes ---

    async def insert_swipe(self, from_user_id: str, to_user_id: str, direction: str) -> SwipeDoc:
        swipe = SwipeDoc(
            id=len(self.state.swipes) + 1,
            from_user_id=from_user_id,
            to_user_id=to_user_id,
            direction=direction,
        )
        return self._commit(lambda state: _append(state.swipes, swipe))

    async def find_swipe(
        self, from_user_id: str, to_user_id: str, direction: str | None = None
    ) -> SwipeDoc | None:
        for swipe in self.state.swipes:
            if swipe.from_user_id != from_user_id or swipe.to_user_id != to_user_id:
                continue
            if direction is None or swipe.direction == direction:
                return swipe
        return None

    async def swiped_user_ids(self, from_user_id: str) -> set[str]:
        return {s.to_user_id for s in self.state.swipes if s.from_user_id == from_user_id}

    # --- Matches ---

    async def get_match(self, match_id: str) -> MatchDoc | None:
        return next((m for m in self.state.matches if m.id == match_id), None)

    async def find_match(self, user1_id: str, user2_id: str) -> MatchDoc | None:
        return next(
            (m for m in self.state.matches if m.user1_id == user1_id and m.user2_id == user2_id),
            None,
        )

    async def insert_match(
        self,
        user1_id: str,
        user2_id: str,
        source: str,
        matchmaker_id: str | None = None,
    ) -> MatchDoc:
        existing = await self.find_match(user1_id, user2_id)
        if existing is not None:
            return existing
        match = MatchDoc(
            user1_id=user1_id, user2_id=user2_id, source=source, matchmaker_id=matchmaker_id
        )

        def change(state: DbState) -> MatchDoc:
            state.messages_by_match.setdefault(match.id, [])
            return _append(state.matches, match)

        return self._commit(change)

    async def list_matches_for(self, user_id: str) -> list[MatchDoc]:
        matches = [m for m in self.state.matches if user_id in (m.user1_id, m.user2_id)]
        return sorted(matches, key=lambda m: m.created_at, reverse=True)

    # --- Friendships ---

    async def find_friendship(self, user_id: str, other_id: str) -> FriendshipDoc | None:
        low, high = canonical_pair(user_id, other_id)
        return next(
            (f for f in self.state.friendships if f.pair_low == low and f.pair_high == high),
            None,
        )

    async def insert_friendship(self, requester_id: str, addressee_id: str) -> FriendshipDoc:
        if await self.find_friendship(requester_id, addressee_id) is not None:
            raise ConflictError("Already friends", status_code=400)
        low, high = canonical_pair(requester_id, addressee_id)
        friendship = FriendshipDoc(
            requester_id=requester_id, addressee_id=addressee_id, pair_low=low, pair_high=high
        )
        return self._commit(lambda state: _append(state.friendships, friendship))

    async def list_friendships_for(self, user_id: str) -> list[FriendshipDoc]:
        return [
            f for f in self.state.friendships
            if f.status == "accepted" and user_id in (f.requester_id, f.addressee_id)
        ]

    # --- Pull requests ---

    async def insert_pull_request(self, requester_id: str, matchmaker_id: str) -> PullRequestDoc:
        pull_request = PullRequestDoc(requester_id=requester_id, matchmaker_id=matchmaker_id)
        return self._commit(lambda state: _append(state.pull_requests, pull_request))

    async def list_pull_requests_for(self, matchmaker_id: str) -> list[PullRequestDoc]:
        return [p for p in self.state.pull_requests if p.matchmaker_id == matchmaker_id]

    # --- Chat ---

    async def thread_exists(self, match_id: str) -> bool:
        return match_id in self.state.messages_by_match

    async def insert_message(self, match_id: str, sender_id: str, text: str) -> MessageDoc:
        thread = self.state.messages_by_match[match_id]
        message = MessageDoc(
            seq=len(thread) + 1, match_id=match_id, sender_id=sender_id, text=text
        )
        return self._commit(lambda state: _append(state.messages_by_match[match_id], message))

    async def list_messages(self, match_id: str) -> list[MessageDoc]:
        thread = self.state.messages_by_match.get(match_id, [])
        return sorted(thread, key=lambda m: (m.created_at, m.seq))
