from abc import ABC, abstractmethod
from datetime import datetime, timezone
from typing import List, Optional
from uuid import UUID

from sqlalchemy.orm import Session, joinedload

from helpdesk.logging_config import get_logger
from helpdesk.models import ChatMessage, ChatRoom, Customer, CustomerResponse, Domain, FilterQuestion

logger = get_logger("store")


class ChatRoomNotFoundError(Exception):
    def __init__(self, chat_room_id):
        self.chat_room_id = chat_room_id
        super().__init__(f"Chat room {chat_room_id} not found")


class ConversationStore(ABC):
    """Persistence operations the conversation router depends on."""

    @abstractmethod
    def get_domain(self, domain_id: UUID) -> Optional[Domain]:
        pass

    @abstractmethod
    def get_domain_questions(self, domain_id: UUID) -> List[str]:
        pass

    @abstractmethod
    def find_customer(self, domain_id: UUID, email: str) -> Optional[Customer]:
        pass

    @abstractmethod
    def create_customer(self, domain_id: UUID, email: str, questions: List[str]) -> Customer:
        """Create customer, its unanswered question copies and an empty chat room as one unit."""
        pass

    @abstractmethod
    def get_chat_room(self, chat_room_id: UUID) -> Optional[ChatRoom]:
        pass

    @abstractmethod
    def append_message(self, chat_room_id: UUID, text: str, role: str) -> ChatMessage:
        pass

    @abstractmethod
    def list_messages(self, chat_room_id: UUID) -> List[ChatMessage]:
        pass

    @abstractmethod
    def set_live(self, chat_room_id: UUID, live: bool) -> None:
        pass

    @abstractmethod
    def mark_mailed(self, chat_room_id: UUID) -> None:
        pass

    @abstractmethod
    def reset_mailed(self, chat_room_id: UUID) -> None:
        pass

    @abstractmethod
    def unanswered_questions(self, customer_id: UUID) -> List[CustomerResponse]:
        """Unanswered questions ordered by question text ascending."""
        pass

    @abstractmethod
    def record_answer(self, question_id: UUID, answer: str) -> None:
        pass

    def first_unanswered_question(self, customer_id: UUID) -> Optional[CustomerResponse]:
        questions = self.unanswered_questions(customer_id)
        return questions[0] if questions else None


class SqlConversationStore(ConversationStore):
    """ConversationStore backed by a SQLAlchemy session. Writes flush, callers commit."""

    def __init__(self, db: Session):
        self.db = db

    def get_domain(self, domain_id: UUID) -> Optional[Domain]:
        return (
            self.db.query(Domain)
            .options(joinedload(Domain.user), joinedload(Domain.chat_bot))
            .filter(Domain.id == domain_id)
            .first()
        )

    def get_domain_questions(self, domain_id: UUID) -> List[str]:
        rows = (
            self.db.query(FilterQuestion)
            .filter(FilterQuestion.domain_id == domain_id)
            .order_by(FilterQuestion.question.asc())
            .all()
        )
        return [row.question for row in rows]

    def find_customer(self, domain_id: UUID, email: str) -> Optional[Customer]:
        return (
            self.db.query(Customer)
            .options(joinedload(Customer.chat_room))
            .filter(Customer.domain_id == domain_id, Customer.email.startswith(email, autoescape=True))
            .first()
        )

    def create_customer(self, domain_id: UUID, email: str, questions: List[str]) -> Customer:
        now = datetime.now(timezone.utc)
        customer = Customer(domain_id=domain_id, email=email, created_at=now)
        customer.questions = [CustomerResponse(question=question) for question in questions]
        customer.chat_room = ChatRoom(live=False, mailed=False, created_at=now, updated_at=now)
        self.db.add(customer)
        self.db.flush()

        logger.info(
            "Customer created",
            extra={"context": {"domain_id": str(domain_id), "customer_id": str(customer.id), "questions": len(questions)}},
        )
        return customer

    def get_chat_room(self, chat_room_id: UUID) -> Optional[ChatRoom]:
        return self.db.query(ChatRoom).filter(ChatRoom.id == chat_room_id).first()

    def _require_chat_room(self, chat_room_id: UUID) -> ChatRoom:
        chat_room = self.get_chat_room(chat_room_id)
        if not chat_room:
            raise ChatRoomNotFoundError(chat_room_id)
        return chat_room

    def append_message(self, chat_room_id: UUID, text: str, role: str) -> ChatMessage:
        chat_room = self._require_chat_room(chat_room_id)
        message = ChatMessage(
            chat_room_id=chat_room.id,
            role=role,
            message=text,
            created_at=datetime.now(timezone.utc),
        )
        self.db.add(message)
        self.db.flush()
        return message

    def list_messages(self, chat_room_id: UUID) -> List[ChatMessage]:
        self._require_chat_room(chat_room_id)
        return (
            self.db.query(ChatMessage)
            .filter(ChatMessage.chat_room_id == chat_room_id)
            .order_by(ChatMessage.created_at.asc())
            .all()
        )

    def set_live(self, chat_room_id: UUID, live: bool) -> None:
        chat_room = self._require_chat_room(chat_room_id)
        chat_room.live = live
        chat_room.updated_at = datetime.now(timezone.utc)
        self.db.flush()

    def mark_mailed(self, chat_room_id: UUID) -> None:
        chat_room = self._require_chat_room(chat_room_id)
        chat_room.mailed = True
        chat_room.updated_at = datetime.now(timezone.utc)
        self.db.flush()

    def reset_mailed(self, chat_room_id: UUID) -> None:
        chat_room = self._require_chat_room(chat_room_id)
        chat_room.mailed = False
        chat_room.updated_at = datetime.now(timezone.utc)
        self.db.flush()

    def unanswered_questions(self, customer_id: UUID) -> List[CustomerResponse]:
        return (
            self.db.query(CustomerResponse)
            .filter(CustomerResponse.customer_id == customer_id, CustomerResponse.answered.is_(None))
            .order_by(CustomerResponse.question.asc())
            .all()
        )

    def record_answer(self, question_id: UUID, answer: str) -> None:
        question = self.db.query(CustomerResponse).filter(CustomerResponse.id == question_id).first()
        if not question or question.answered is not None:
            return
        question.answered = answer
        self.db.flush()
