"""Chat service - ordered message threads scoped to a match."""

from refmatch.core.errors import NotFoundError
from refmatch.db.store import Store


class ChatService:
    @staticmethod
    async def post_message(store: Store, match_id: str, sender_id: str, text: str):
        """Append a message to an existing thread.

        The sender is not checked against the match participants.
        """
        if not await store.thread_exists(match_id):
            raise NotFoundError("Match not found")
        return await store.insert_message(match_id, sender_id, text)

    @staticmethod
    async def list_messages(store: Store, match_id: str) -> list:
        if not await store.thread_exists(match_id):
            raise NotFoundError("Match not found")
        return await store.list_messages(match_id)


chat_service = ChatService()
