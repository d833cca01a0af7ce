import pytest

from helpdesk.services.state_machine import (
    ChatRoomState,
    InvalidTransitionError,
    can_transition,
    escalate,
    release,
    state_of,
    transition,
)


class TestValidTransitions:
    def test_bot_to_live(self):
        assert transition(ChatRoomState.BOT, ChatRoomState.LIVE) == ChatRoomState.LIVE

    def test_live_to_bot(self):
        assert transition(ChatRoomState.LIVE, ChatRoomState.BOT) == ChatRoomState.BOT


class TestInvalidTransitions:
    def test_same_state(self):
        with pytest.raises(InvalidTransitionError):
            transition(ChatRoomState.LIVE, ChatRoomState.LIVE)

    def test_error_message(self):
        with pytest.raises(InvalidTransitionError, match="bot -> bot"):
            transition(ChatRoomState.BOT, ChatRoomState.BOT)


class TestHelperFunctions:
    def test_escalate(self):
        assert escalate(ChatRoomState.BOT) == ChatRoomState.LIVE

    def test_escalate_live_room_fails(self):
        with pytest.raises(InvalidTransitionError):
            escalate(ChatRoomState.LIVE)

    def test_release(self):
        assert release(ChatRoomState.LIVE) == ChatRoomState.BOT

    def test_release_bot_room_fails(self):
        with pytest.raises(InvalidTransitionError):
            release(ChatRoomState.BOT)

    def test_state_of(self):
        assert state_of(True) == ChatRoomState.LIVE
        assert state_of(False) == ChatRoomState.BOT


class TestCanTransition:
    def test_valid_returns_true(self):
        assert can_transition(ChatRoomState.BOT, ChatRoomState.LIVE) is True

    def test_invalid_returns_false(self):
        assert can_transition(ChatRoomState.BOT, ChatRoomState.BOT) is False
