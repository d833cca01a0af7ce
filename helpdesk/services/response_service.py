from typing import Sequence

from helpdesk.logging_config import get_logger
from helpdesk.models import ChatRoom, Customer
from helpdesk.schemas.chat import ChatTurn
from helpdesk.services.message_service import store_conversation_turn
from helpdesk.services.outcome import RoutePath, RouterOutcome
from helpdesk.services.prompt_service import COMPLETION_MARKER, ESCALATION_MARKER
from helpdesk.services.state_machine import escalate, state_of
from helpdesk.services.store import ConversationStore
from helpdesk.services.text_extraction import extract_urls

logger = get_logger("response_service")

LINK_TEMPLATE = "Great! You can follow the link to proceed: {link}"


def classify_reply(reply_text: str, escalation_marker: str = ESCALATION_MARKER) -> RoutePath:
    """Pick the path for a model reply. Escalation wins over links."""
    if escalation_marker in reply_text:
        return RoutePath.ESCALATION
    if extract_urls(reply_text):
        return RoutePath.LINK
    return RoutePath.REPLY


def record_completed_answer(
    store: ConversationStore,
    customer: Customer,
    history: Sequence[ChatTurn],
    message: str,
    completion_marker: str = COMPLETION_MARKER,
) -> bool:
    """
    Store `message` as the answer to the customer's first open question.

    Triggered by the marker in the last turn of the caller's history, i.e.
    the assistant question the visitor is now answering.
    """
    if not history or completion_marker not in history[-1].content:
        return False

    question = store.first_unanswered_question(customer.id)
    if not question:
        return False

    store.record_answer(question.id, message)
    logger.info(f"Question answered for customer {customer.id}")
    return True


def _handle_escalation(
    store: ConversationStore, reply_text: str, chat_room: ChatRoom, escalation_marker: str
) -> RouterOutcome:
    escalate(state_of(chat_room.live))
    store.set_live(chat_room.id, True)
    logger.info("Chat room escalated to live agent", extra={"context": {"chat_room_id": str(chat_room.id)}})
    return RouterOutcome(path=RoutePath.ESCALATION, content=reply_text.replace(escalation_marker, "").strip())


def _handle_link(reply_text: str) -> RouterOutcome:
    link = extract_urls(reply_text)[0]
    return RouterOutcome(path=RoutePath.LINK, content=LINK_TEMPLATE.format(link=link), link=link)


def _handle_reply(reply_text: str) -> RouterOutcome:
    return RouterOutcome(path=RoutePath.REPLY, content=reply_text)


def interpret_reply(
    store: ConversationStore,
    reply_text: str,
    chat_room: ChatRoom,
    customer: Customer,
    history: Sequence[ChatTurn],
    message: str,
    *,
    escalation_marker: str = ESCALATION_MARKER,
    completion_marker: str = COMPLETION_MARKER,
) -> RouterOutcome:
    """Map a model reply on the qualification path to side effects and the outgoing response."""
    path = classify_reply(reply_text, escalation_marker)

    if path == RoutePath.ESCALATION:
        outcome = _handle_escalation(store, reply_text, chat_room, escalation_marker)
    else:
        record_completed_answer(store, customer, history, message, completion_marker)
        if path == RoutePath.LINK:
            outcome = _handle_link(reply_text)
        else:
            outcome = _handle_reply(reply_text)

    store_conversation_turn(store, chat_room.id, outcome.content, "assistant")
    outcome.chat_room_id = chat_room.id
    return outcome
