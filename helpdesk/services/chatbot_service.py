from typing import Optional, Tuple
from uuid import UUID

from helpdesk.logging_config import get_logger
from helpdesk.models import ChatRoom
from helpdesk.schemas.chatbot import ChatbotConfig, WidgetTheme
from helpdesk.services.state_machine import ChatRoomState, escalate, release, state_of
from helpdesk.services.store import ChatRoomNotFoundError, ConversationStore

logger = get_logger("chatbot_service")


def get_chatbot_config(store: ConversationStore, domain_id: UUID) -> Optional[ChatbotConfig]:
    """Read-only projection used to render the widget. None for unknown domains."""
    domain = store.get_domain(domain_id)
    if not domain:
        return None

    bot = domain.chat_bot
    theme = None
    if bot:
        theme = WidgetTheme(
            welcome_message=bot.welcome_message,
            icon=bot.icon,
            text_color=bot.text_color,
            background=bot.background,
        )

    return ChatbotConfig(
        helpdesk_enabled=bool(bot and bot.helpdesk),
        domain_name=domain.name,
        widget_theme=theme,
    )


def set_live_state(store: ConversationStore, chat_room_id: UUID, live: bool) -> Tuple[ChatRoom, str, str]:
    """
    Agent takes over a chat room or hands it back to the bot.

    Handing back ends the live session, so `mailed` is cleared and the next
    escalation alerts the owner again.
    """
    chat_room = store.get_chat_room(chat_room_id)
    if not chat_room:
        raise ChatRoomNotFoundError(chat_room_id)

    old_state = state_of(chat_room.live)
    new_state = escalate(old_state) if live else release(old_state)

    store.set_live(chat_room_id, new_state == ChatRoomState.LIVE)
    if new_state == ChatRoomState.BOT:
        store.reset_mailed(chat_room_id)

    logger.info(
        "Chat room live state changed",
        extra={"context": {"chat_room_id": str(chat_room_id), "from": old_state.value, "to": new_state.value}},
    )
    return chat_room, old_state.value, new_state.value
