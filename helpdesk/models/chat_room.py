import uuid

from sqlalchemy import Boolean, Column, ForeignKey
from sqlalchemy.dialects.postgresql import TIMESTAMP, UUID
from sqlalchemy.orm import relationship

from helpdesk.database import Base


class ChatRoom(Base):
    __tablename__ = "chat_rooms"

    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    customer_id = Column(UUID(as_uuid=True), ForeignKey("customers.id"), nullable=False, unique=True)
    live = Column(Boolean, nullable=False, default=False)  # human agent engaged
    mailed = Column(Boolean, nullable=False, default=False)  # owner notified for current live session
    created_at = Column(TIMESTAMP(timezone=True), nullable=False)
    updated_at = Column(TIMESTAMP(timezone=True))

    customer = relationship("Customer", back_populates="chat_room")
    messages = relationship("ChatMessage", back_populates="chat_room", order_by="ChatMessage.created_at")
