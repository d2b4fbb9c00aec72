"""Shared FastAPI dependencies."""

import redis.asyncio as aioredis
from fastapi import Depends, Header

from refmatch.core.errors import UnauthorizedError
from refmatch.db.redis import get_redis
from refmatch.db.store import Store, get_store
from refmatch.services.session_service import SessionService


async def get_session_service(redis: aioredis.Redis = Depends(get_redis)) -> SessionService:
    return SessionService(redis)


def bearer_token(authorization: str | None = Header(default=None)) -> str:
    """Extract the token from an ``Authorization: Bearer <token>`` header."""
    if not authorization:
        raise UnauthorizedError("Missing bearer token")
    scheme, _, token = authorization.partition(" ")
    if scheme.lower() != "bearer" or not token.strip():
        raise UnauthorizedError("Missing bearer token")
    return token.strip()


async def get_current_user(
    token: str = Depends(bearer_token),
    sessions: SessionService = Depends(get_session_service),
    store: Store = Depends(get_store),
):
    user_id = await sessions.resolve(token)
    profile = await store.get_profile(user_id) if user_id else None
    if profile is None:
        raise UnauthorizedError("Invalid token")
    return profile
