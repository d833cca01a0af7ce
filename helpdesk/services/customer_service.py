from dataclasses import dataclass
from typing import Optional
from uuid import UUID

from helpdesk.logging_config import get_logger
from helpdesk.models import ChatRoom, Customer
from helpdesk.services.store import ConversationStore
from helpdesk.services.text_extraction import extract_emails

logger = get_logger("customer_service")

WELCOME_TEMPLATE = "Welcome aboard {name}! I'm glad to connect with you. How can I assist you today?"


@dataclass
class CustomerResolution:
    email: Optional[str] = None
    customer: Optional[Customer] = None
    chat_room: Optional[ChatRoom] = None
    is_new: bool = False

    @property
    def found_email(self) -> bool:
        return self.email is not None


def welcome_message(email: str) -> str:
    return WELCOME_TEMPLATE.format(name=email.split("@")[0])


def resolve_customer(store: ConversationStore, domain_id: UUID, message: str) -> CustomerResolution:
    """Find or create the customer keyed by the first email in the message."""
    emails = extract_emails(message)
    if not emails:
        return CustomerResolution()

    email = emails[0]
    customer = store.find_customer(domain_id, email)
    if customer:
        return CustomerResolution(email=email, customer=customer, chat_room=customer.chat_room)

    questions = store.get_domain_questions(domain_id)
    customer = store.create_customer(domain_id, email, questions)
    logger.info(f"New customer for domain {domain_id}")
    return CustomerResolution(email=email, customer=customer, chat_room=customer.chat_room, is_new=True)
