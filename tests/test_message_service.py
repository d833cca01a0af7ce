from uuid import uuid4

import pytest

from helpdesk.services.message_service import get_conversation_log, store_conversation_turn
from helpdesk.services.store import ChatRoomNotFoundError


class TestStoreConversationTurn:
    def test_log_keeps_call_order_role_and_text(self, store, existing_customer):
        chat_room_id = existing_customer.chat_room.id
        turns = [("user", "Hi"), ("assistant", "Hello! (complete)"), ("user", "  spaced  "), ("assistant", "")]

        for role, text in turns:
            store_conversation_turn(store, chat_room_id, text, role)

        assert [(m.role, m.message) for m in get_conversation_log(store, chat_room_id)] == turns

    def test_unknown_room_raises(self, store):
        with pytest.raises(ChatRoomNotFoundError):
            store_conversation_turn(store, uuid4(), "hi", "user")

    def test_unknown_role_raises(self, store, existing_customer):
        with pytest.raises(ValueError):
            store_conversation_turn(store, existing_customer.chat_room.id, "hi", "system")
