"""Swipe endpoint - record like/pass and report a resulting match."""

from fastapi import APIRouter, Depends

from refmatch.db.store import Store, get_store
from refmatch.schemas.match import MatchOut, SwipeRequest, SwipeResponse
from refmatch.services.match_service import match_service

router = APIRouter()


@router.post("", response_model=SwipeResponse)
async def swipe(data: SwipeRequest, store: Store = Depends(get_store)):
    match = await match_service.record_swipe(
        store, data.from_user_id, data.to_user_id, data.direction
    )
    return SwipeResponse(match=MatchOut.from_record(match) if match else None)
