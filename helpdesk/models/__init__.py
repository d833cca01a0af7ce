from helpdesk.models.chat_bot import ChatBot
from helpdesk.models.chat_message import ChatMessage
from helpdesk.models.chat_room import ChatRoom
from helpdesk.models.customer import Customer
from helpdesk.models.customer_response import CustomerResponse
from helpdesk.models.domain import Domain
from helpdesk.models.filter_question import FilterQuestion
from helpdesk.models.user import User

__all__ = [
    "User",
    "Domain",
    "ChatBot",
    "FilterQuestion",
    "Customer",
    "CustomerResponse",
    "ChatRoom",
    "ChatMessage",
]
