from typing import List
from uuid import UUID

from helpdesk.models import ChatMessage
from helpdesk.services.store import ConversationStore

ROLES = ("user", "assistant")


def store_conversation_turn(store: ConversationStore, chat_room_id: UUID, text: str, role: str) -> ChatMessage:
    """Append one turn to the chat room log. Raises ChatRoomNotFoundError for unknown rooms."""
    if role not in ROLES:
        raise ValueError(f"Unknown role: {role}")
    return store.append_message(chat_room_id, text, role)


def get_conversation_log(store: ConversationStore, chat_room_id: UUID) -> List[ChatMessage]:
    """Chat room log in insertion order."""
    return store.list_messages(chat_room_id)
