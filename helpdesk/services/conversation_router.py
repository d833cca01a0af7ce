from typing import Sequence
from uuid import UUID

from sqlalchemy.exc import SQLAlchemyError

from helpdesk.logging_config import get_logger
from helpdesk.models import Domain
from helpdesk.schemas.chat import ChatTurn
from helpdesk.services import result as codes
from helpdesk.services.customer_service import CustomerResolution, resolve_customer, welcome_message
from helpdesk.services.handoff_service import check_handoff
from helpdesk.services.identity_service import IdentityLookupError, IdentityProvider
from helpdesk.services.llm import LLMError, LLMProvider
from helpdesk.services.mailer_service import Notifier
from helpdesk.services.message_service import store_conversation_turn
from helpdesk.services.outcome import RoutePath, RouterOutcome
from helpdesk.services.prompt_service import (
    build_email_collection_prompt,
    build_model_input,
    build_qualification_prompt,
)
from helpdesk.services.response_service import interpret_reply
from helpdesk.services.result import Result
from helpdesk.services.store import ChatRoomNotFoundError, ConversationStore

logger = get_logger("conversation_router")


class EmptyModelResponseError(Exception):
    pass


_ERROR_CODES = (
    (LLMError, codes.AI_ERROR),
    (IdentityLookupError, codes.IDENTITY_ERROR),
    (ChatRoomNotFoundError, codes.CHAT_ROOM_NOT_FOUND),
    (SQLAlchemyError, codes.DB_ERROR),
    (EmptyModelResponseError, codes.EMPTY_RESPONSE),
)


def error_code_for(exc: Exception) -> str:
    for exc_type, code in _ERROR_CODES:
        if isinstance(exc, exc_type):
            return code
    return codes.UNKNOWN


class ConversationRouter:
    """
    Route one visitor message to exactly one conversation path.

    Paths, in the order they are tried:
    - email_collection: no email in the message, the model works towards getting one
    - new_customer: first email seen for this domain, canned welcome, no model call
    - live_handoff: a human agent owns the chat room, no model call
    - escalation / link / reply: qualification prompt answered by the model
    """

    def __init__(
        self,
        store: ConversationStore,
        llm: LLMProvider,
        identity: IdentityProvider,
        notifier: Notifier,
        model: str,
        portal_base_url: str,
    ):
        self.store = store
        self.llm = llm
        self.identity = identity
        self.notifier = notifier
        self.model = model
        self.portal_base_url = portal_base_url

    def process_message(
        self,
        domain_id: UUID,
        history: Sequence[ChatTurn],
        message: str,
        author: str = "user",
    ) -> Result[RouterOutcome]:
        try:
            domain = self.store.get_domain(domain_id)
            if not domain:
                return Result.failure(f"Domain {domain_id} not found", codes.DOMAIN_NOT_FOUND)

            outcome = self._route(domain, history, message, author)
            logger.info(
                "Message routed",
                extra={"context": {"domain_id": str(domain_id), "path": outcome.path.value}},
            )
            return Result.success(outcome)

        except Exception as e:
            code = error_code_for(e)
            logger.error(
                f"Message processing failed: {e}",
                exc_info=True,
                extra={"context": {"domain_id": str(domain_id), "error_code": code}},
            )
            return Result.failure(str(e), code)

    def _route(self, domain: Domain, history: Sequence[ChatTurn], message: str, author: str) -> RouterOutcome:
        resolution = resolve_customer(self.store, domain.id, message)

        if not resolution.found_email:
            return self._handle_email_collection(domain, history, message)

        if resolution.is_new:
            return self._handle_new_customer(resolution)

        handoff = check_handoff(
            self.store, self.identity, self.notifier, domain, resolution.chat_room, message, author
        )
        if handoff.handled:
            return RouterOutcome(
                path=RoutePath.LIVE_HANDOFF,
                chat_room_id=handoff.chat_room_id,
                notified=handoff.notified,
            )

        return self._handle_qualification(domain, resolution, history, message, author)

    def _generate(self, prompt: str, history: Sequence[ChatTurn], message: str) -> str:
        response = self.llm.generate(build_model_input(prompt, history, message), model=self.model)
        if not response.content:
            raise EmptyModelResponseError("Model returned an empty response")
        return response.content

    def _handle_email_collection(self, domain: Domain, history: Sequence[ChatTurn], message: str) -> RouterOutcome:
        logger.debug("No customer email provided")
        prompt = build_email_collection_prompt(domain.name, history)
        return RouterOutcome(path=RoutePath.EMAIL_COLLECTION, content=self._generate(prompt, history, message))

    def _handle_new_customer(self, resolution: CustomerResolution) -> RouterOutcome:
        return RouterOutcome(
            path=RoutePath.NEW_CUSTOMER,
            content=welcome_message(resolution.email),
            chat_room_id=resolution.chat_room.id,
        )

    def _handle_qualification(
        self,
        domain: Domain,
        resolution: CustomerResolution,
        history: Sequence[ChatTurn],
        message: str,
        author: str,
    ) -> RouterOutcome:
        customer = resolution.customer
        chat_room = resolution.chat_room

        store_conversation_turn(self.store, chat_room.id, message, author)

        questions = [q.question for q in self.store.unanswered_questions(customer.id)]
        prompt = build_qualification_prompt(
            domain.name, domain.id, customer.id, questions, history, self.portal_base_url
        )
        reply_text = self._generate(prompt, history, message)

        return interpret_reply(self.store, reply_text, chat_room, customer, history, message)
