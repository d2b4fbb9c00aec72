"""Store interface injected into every service.

Records returned by a store expose the same attribute names as the ORM models
in ``refmatch.models`` (``id``, ``user1_id``, ``relationship_status`` ...), so
services and response schemas work with either backend.
"""

from abc import ABC, abstractmethod
from typing import Any

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from refmatch.db.database import get_db


class Store(ABC):
    # --- Profiles ---
    @abstractmethod
    async def get_profile(self, user_id: str) -> Any | None: ...

    @abstractmethod
    async def get_profile_by_email(self, email: str) -> Any | None: ...

    @abstractmethod
    async def insert_profile(
        self, email: str, password_hash: str, name: str, relationship_status: str
    ) -> Any:
        """Insert a profile. Raises ConflictError if the email is taken."""

    @abstractmethod
    async def update_profile(self, user_id: str, fields: dict) -> Any | None: ...

    @abstractmethod
    async def list_profiles(self, relationship_status: str | None = None) -> list: ...

    # --- Swipes ---
    @abstractmethod
    async def insert_swipe(self, from_user_id: str, to_user_id: str, direction: str) -> Any: ...

    @abstractmethod
    async def find_swipe(
        self, from_user_id: str, to_user_id: str, direction: str | None = None
    ) -> Any | None: ...

    @abstractmethod
    async def swiped_user_ids(self, from_user_id: str) -> set[str]: ...

    # --- Matches ---
    @abstractmethod
    async def get_match(self, match_id: str) -> Any | None: ...

    @abstractmethod
    async def find_match(self, user1_id: str, user2_id: str) -> Any | None:
        """Look up a match by canonical pair (user1_id <= user2_id)."""

    @abstractmethod
    async def insert_match(
        self,
        user1_id: str,
        user2_id: str,
        source: str,
        matchmaker_id: str | None = None,
    ) -> Any:
        """Insert a match for a canonical pair and open its empty chat thread.

        If the pair already has a match (e.g. a concurrent insert won the race),
        the existing match is returned instead.
        """

    @abstractmethod
    async def list_matches_for(self, user_id: str) -> list: ...

    # --- Friendships ---
    @abstractmethod
    async def find_friendship(self, user_id: str, other_id: str) -> Any | None: ...

    @abstractmethod
    async def insert_friendship(self, requester_id: str, addressee_id: str) -> Any:
        """Insert an accepted friendship. Raises ConflictError for a duplicate pair."""

    @abstractmethod
    async def list_friendships_for(self, user_id: str) -> list: ...

    # --- Pull requests ---
    @abstractmethod
    async def insert_pull_request(self, requester_id: str, matchmaker_id: str) -> Any: ...

    @abstractmethod
    async def list_pull_requests_for(self, matchmaker_id: str) -> list: ...

    # --- Chat ---
    @abstractmethod
    async def thread_exists(self, match_id: str) -> bool: ...

    @abstractmethod
    async def insert_message(self, match_id: str, sender_id: str, text: str) -> Any: ...

    @abstractmethod
    async def list_messages(self, match_id: str) -> list:
        """Messages of a thread, oldest first, insertion order on ties."""


async def get_store(request: Request, db: AsyncSession = Depends(get_db)) -> Store:
    """FastAPI dependency that returns the configured store for this request."""
    json_store = getattr(request.app.state, "json_store", None)
    if json_store is not None:
        return json_store

    from refmatch.db.sql_store import SqlStore

    return SqlStore(db)
