from dataclasses import dataclass
from typing import Optional
from uuid import UUID

from helpdesk.logging_config import get_logger
from helpdesk.models import ChatRoom, Domain
from helpdesk.services.identity_service import IdentityProvider
from helpdesk.services.mailer_service import Notifier
from helpdesk.services.message_service import store_conversation_turn
from helpdesk.services.store import ConversationStore

logger = get_logger("handoff_service")


@dataclass
class HandoffResult:
    handled: bool
    chat_room_id: Optional[UUID] = None
    notified: bool = False


def check_handoff(
    store: ConversationStore,
    identity: IdentityProvider,
    notifier: Notifier,
    domain: Domain,
    chat_room: ChatRoom,
    message: str,
    author: str = "user",
) -> HandoffResult:
    """
    Short-circuit the bot when a human agent owns the chat room.

    The inbound message is logged and the domain owner is alerted once per
    live session; `mailed` guards against repeat alerts.
    """
    if not chat_room.live:
        return HandoffResult(handled=False)

    store_conversation_turn(store, chat_room.id, message, author)

    notified = False
    if not chat_room.mailed:
        address = identity.get_contact_email(domain.owner_id)
        notified = notifier.notify(address)
        store.mark_mailed(chat_room.id)
        logger.info(
            "Live chat owner notified",
            extra={"context": {"chat_room_id": str(chat_room.id), "domain_id": str(domain.id)}},
        )

    return HandoffResult(handled=True, chat_room_id=chat_room.id, notified=notified)
