"""Matchmaker endpoints - push a match, pull a matchmaker, list pull requests."""

from fastapi import APIRouter, Depends

from refmatch.core.errors import NotFoundError
from refmatch.db.store import Store, get_store
from refmatch.schemas.match import MatchOut
from refmatch.schemas.matchmaker import (
    PullRequestIn,
    PullRequestItem,
    PullRequestList,
    PullRequestOut,
    PullResponse,
    PushRequest,
    PushResponse,
)
from refmatch.schemas.profile import PublicProfile
from refmatch.services.matchmaker_service import matchmaker_service

router = APIRouter()


@router.post("/push", response_model=PushResponse, status_code=201)
async def push(data: PushRequest, store: Store = Depends(get_store)):
    """Create the match between two people directly, no swipes needed."""
    try:
        match = await matchmaker_service.push(
            store, data.matchmaker_id, data.person1_id, data.person2_id
        )
    except NotFoundError as exc:
        raise NotFoundError(exc.message, status_code=400) from exc
    return PushResponse(match=MatchOut.from_record(match))


@router.post("/pull", response_model=PullResponse, status_code=201)
async def pull(data: PullRequestIn, store: Store = Depends(get_store)):
    """Ask a friend to matchmake. Creates an advisory pending request only."""
    try:
        pull_request = await matchmaker_service.pull(store, data.requester_id, data.matchmaker_id)
    except NotFoundError as exc:
        raise NotFoundError(exc.message, status_code=400) from exc
    return PullResponse(pull_request=PullRequestOut.model_validate(pull_request))


@router.get("/pull/{matchmaker_id}", response_model=PullRequestList)
async def list_pull_requests(matchmaker_id: str, store: Store = Depends(get_store)):
    pairs = await matchmaker_service.list_pull_requests(store, matchmaker_id)
    return PullRequestList(
        items=[
            PullRequestItem(
                id=pull_request.id,
                requester_id=pull_request.requester_id,
                matchmaker_id=pull_request.matchmaker_id,
                status=pull_request.status,
                created_at=pull_request.created_at,
                requester=PublicProfile.model_validate(requester),
            )
            for pull_request, requester in pairs
        ]
    )
