"""Match endpoints - list a user's matches with the other participant."""

from fastapi import APIRouter, Depends

from refmatch.db.store import Store, get_store
from refmatch.schemas.match import MatchItem, MatchList
from refmatch.schemas.profile import PublicProfile
from refmatch.services.match_service import match_service

router = APIRouter()


@router.get("/{user_id}", response_model=MatchList)
async def list_matches(user_id: str, store: Store = Depends(get_store)):
    pairs = await match_service.list_matches(store, user_id)
    return MatchList(
        items=[
            MatchItem(
                id=match.id,
                created_at=match.created_at,
                source=match.source,
                matchmaker_id=match.matchmaker_id,
                other_user=PublicProfile.model_validate(other),
            )
            for match, other in pairs
        ]
    )
