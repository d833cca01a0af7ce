from helpdesk.services.chatbot_service import get_chatbot_config, set_live_state
from helpdesk.services.conversation_router import ConversationRouter
from helpdesk.services.message_service import get_conversation_log, store_conversation_turn
from helpdesk.services.outcome import RoutePath, RouterOutcome
from helpdesk.services.result import Result
from helpdesk.services.state_machine import (
    ChatRoomState,
    InvalidTransitionError,
    can_transition,
    escalate,
    release,
    transition,
)
from helpdesk.services.store import ChatRoomNotFoundError, ConversationStore, SqlConversationStore
