from helpdesk.schemas.chat import (
    BotResponse,
    ChatMessageOut,
    ChatTurn,
    LiveStateRequest,
    LiveStateResponse,
    ProcessMessageRequest,
    ProcessMessageResponse,
    StoreTurnRequest,
)
from helpdesk.schemas.chatbot import ChatbotConfig, WidgetTheme

__all__ = [
    "ChatTurn",
    "BotResponse",
    "ProcessMessageRequest",
    "ProcessMessageResponse",
    "StoreTurnRequest",
    "ChatMessageOut",
    "LiveStateRequest",
    "LiveStateResponse",
    "ChatbotConfig",
    "WidgetTheme",
]
