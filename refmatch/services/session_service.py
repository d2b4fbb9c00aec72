"""Session service - issues and resolves bearer tokens.

In "identity" mode the token is the user's own id and nothing is stored.
In "session" mode tokens are random values kept in Redis with a TTL.
"""

import secrets

import redis.asyncio as aioredis
from redis.exceptions import RedisError

from refmatch.config import settings
from refmatch.core.errors import TransientStoreError
from refmatch.core.logger import logger


class SessionService:
    def __init__(self, redis: aioredis.Redis | None, mode: str | None = None):
        self.redis = redis
        self.mode = mode or settings.TOKEN_MODE

    def _session_key(self, token: str) -> str:
        return f"session:{token}"

    async def issue(self, user_id: str) -> str:
        """Create a token for a freshly registered or logged-in user."""
        if self.mode != "session":
            return user_id

        token = secrets.token_urlsafe(32)
        try:
            await self.redis.set(self._session_key(token), user_id, ex=settings.SESSION_TTL)
        except RedisError as exc:
            logger.warning("Could not store session token: {!r}", exc)
            raise TransientStoreError("Session store unavailable, please retry") from exc
        return token

    async def resolve(self, token: str) -> str | None:
        """Return the user id behind a token, or None if unknown/expired."""
        if self.mode != "session":
            return token

        try:
            return await self.redis.get(self._session_key(token))
        except RedisError as exc:
            logger.warning("Could not read session token: {!r}", exc)
            raise TransientStoreError("Session store unavailable, please retry") from exc

    async def revoke(self, token: str) -> None:
        if self.mode != "session":
            return
        try:
            await self.redis.delete(self._session_key(token))
        except RedisError as exc:
            raise TransientStoreError("Session store unavailable, please retry") from exc
