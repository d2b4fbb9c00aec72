"""Chat endpoints - list and post messages in a match thread."""

from fastapi import APIRouter, Depends

from refmatch.db.store import Store, get_store
from refmatch.schemas.chat import ChatHistory, ChatMessageIn, ChatMessageOut
from refmatch.services.chat_service import chat_service

router = APIRouter()


@router.get("/{match_id}/messages", response_model=ChatHistory)
async def list_messages(match_id: str, store: Store = Depends(get_store)):
    """Messages in chronological order."""
    messages = await chat_service.list_messages(store, match_id)
    return ChatHistory(items=[ChatMessageOut.model_validate(m) for m in messages])


@router.post("/{match_id}/messages", response_model=ChatMessageOut, status_code=201)
async def post_message(match_id: str, data: ChatMessageIn, store: Store = Depends(get_store)):
    message = await chat_service.post_message(store, match_id, data.sender_id, data.text)
    return ChatMessageOut.model_validate(message)
