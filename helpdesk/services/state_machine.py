from enum import Enum


class ChatRoomState(str, Enum):
    BOT = "bot"
    LIVE = "live"


VALID_TRANSITIONS = {
    ChatRoomState.BOT: [ChatRoomState.LIVE],
    ChatRoomState.LIVE: [ChatRoomState.BOT],
}


class InvalidTransitionError(Exception):
    def __init__(self, from_state: ChatRoomState, to_state: ChatRoomState):
        self.from_state = from_state
        self.to_state = to_state
        super().__init__(f"Invalid transition: {from_state.value} -> {to_state.value}")


def state_of(live: bool) -> ChatRoomState:
    return ChatRoomState.LIVE if live else ChatRoomState.BOT


def can_transition(from_state: ChatRoomState, to_state: ChatRoomState) -> bool:
    """Check if transition is valid."""
    allowed = VALID_TRANSITIONS.get(from_state, [])
    return to_state in allowed


def transition(from_state: ChatRoomState, to_state: ChatRoomState) -> ChatRoomState:
    """Perform state transition. Raises InvalidTransitionError if not allowed."""
    if not can_transition(from_state, to_state):
        raise InvalidTransitionError(from_state, to_state)
    return to_state


def escalate(current_state: ChatRoomState) -> ChatRoomState:
    """Hand the chat room over to a human agent."""
    return transition(current_state, ChatRoomState.LIVE)


def release(current_state: ChatRoomState) -> ChatRoomState:
    """Agent hands the chat room back to the bot."""
    return transition(current_state, ChatRoomState.BOT)
