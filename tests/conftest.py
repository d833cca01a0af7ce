from datetime import datetime, timezone
from types import SimpleNamespace
from unittest.mock import Mock
from uuid import uuid4

import pytest

from helpdesk.services.conversation_router import ConversationRouter
from helpdesk.services.identity_service import IdentityProvider
from helpdesk.services.llm import LLMProvider, LLMResponse
from helpdesk.services.mailer_service import Notifier
from helpdesk.services.store import ChatRoomNotFoundError, ConversationStore

PORTAL_URL = "https://portal.test/portal"
OWNER_EMAIL = "owner@acme.test"


class InMemoryStore(ConversationStore):
    """ConversationStore fake keeping records in dicts."""

    def __init__(self):
        self.domains = {}
        self.domain_questions = {}
        self.customers = []
        self.chat_rooms = {}
        self.questions = {}
        self.messages = []

    def add_domain(self, name, questions=(), owner_id="user_owner", chat_bot=None):
        domain = SimpleNamespace(id=uuid4(), name=name, owner_id=owner_id, chat_bot=chat_bot)
        self.domains[domain.id] = domain
        self.domain_questions[domain.id] = list(questions)
        return domain

    def get_domain(self, domain_id):
        return self.domains.get(domain_id)

    def get_domain_questions(self, domain_id):
        return sorted(self.domain_questions.get(domain_id, []))

    def find_customer(self, domain_id, email):
        for customer in self.customers:
            if customer.domain_id == domain_id and customer.email.startswith(email):
                return customer
        return None

    def create_customer(self, domain_id, email, questions):
        customer = SimpleNamespace(id=uuid4(), domain_id=domain_id, email=email, questions=[], chat_room=None)
        for text in questions:
            question = SimpleNamespace(id=uuid4(), customer_id=customer.id, question=text, answered=None)
            customer.questions.append(question)
            self.questions[question.id] = question
        chat_room = SimpleNamespace(id=uuid4(), customer_id=customer.id, live=False, mailed=False)
        customer.chat_room = chat_room
        self.chat_rooms[chat_room.id] = chat_room
        self.customers.append(customer)
        return customer

    def get_chat_room(self, chat_room_id):
        return self.chat_rooms.get(chat_room_id)

    def _require_chat_room(self, chat_room_id):
        chat_room = self.chat_rooms.get(chat_room_id)
        if not chat_room:
            raise ChatRoomNotFoundError(chat_room_id)
        return chat_room

    def append_message(self, chat_room_id, text, role):
        self._require_chat_room(chat_room_id)
        message = SimpleNamespace(
            id=uuid4(),
            chat_room_id=chat_room_id,
            role=role,
            message=text,
            created_at=datetime.now(timezone.utc),
        )
        self.messages.append(message)
        return message

    def list_messages(self, chat_room_id):
        self._require_chat_room(chat_room_id)
        return [m for m in self.messages if m.chat_room_id == chat_room_id]

    def set_live(self, chat_room_id, live):
        self._require_chat_room(chat_room_id).live = live

    def mark_mailed(self, chat_room_id):
        self._require_chat_room(chat_room_id).mailed = True

    def reset_mailed(self, chat_room_id):
        self._require_chat_room(chat_room_id).mailed = False

    def unanswered_questions(self, customer_id):
        open_questions = [
            q for q in self.questions.values() if q.customer_id == customer_id and q.answered is None
        ]
        return sorted(open_questions, key=lambda q: q.question)

    def record_answer(self, question_id, answer):
        question = self.questions.get(question_id)
        if question and question.answered is None:
            question.answered = answer


class FakeLLM(LLMProvider):
    def __init__(self, reply="Sure, happy to help."):
        self.reply = reply
        self.error = None
        self.calls = []

    def generate(self, segments, model=None):
        self.calls.append({"segments": list(segments), "model": model})
        if self.error:
            raise self.error
        return LLMResponse(content=self.reply, model=model or "fake")


class FakeIdentity(IdentityProvider):
    def __init__(self, address=OWNER_EMAIL):
        self.address = address
        self.error = None
        self.calls = []

    def get_contact_email(self, owner_id):
        self.calls.append(owner_id)
        if self.error:
            raise self.error
        return self.address


class FakeNotifier(Notifier):
    def __init__(self):
        self.sent = []

    def notify(self, address):
        self.sent.append(address)
        return True


@pytest.fixture
def db_session():
    """Mock database session."""
    return Mock()


@pytest.fixture
def store():
    return InMemoryStore()


@pytest.fixture
def domain(store):
    return store.add_domain("Acme", questions=["What is your budget?", "Are you a business?"])


@pytest.fixture
def llm():
    return FakeLLM()


@pytest.fixture
def identity():
    return FakeIdentity()


@pytest.fixture
def notifier():
    return FakeNotifier()


@pytest.fixture
def router(store, llm, identity, notifier):
    return ConversationRouter(
        store=store,
        llm=llm,
        identity=identity,
        notifier=notifier,
        model="gemini-test",
        portal_base_url=PORTAL_URL,
    )


@pytest.fixture
def existing_customer(store, domain):
    """Customer that already went through the welcome turn."""
    return store.create_customer(domain.id, "bob@example.com", store.get_domain_questions(domain.id))
