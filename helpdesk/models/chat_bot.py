import uuid

from sqlalchemy import Boolean, Column, ForeignKey, Text
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import relationship

from helpdesk.database import Base


class ChatBot(Base):
    __tablename__ = "chat_bots"

    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    domain_id = Column(UUID(as_uuid=True), ForeignKey("domains.id"), nullable=False, unique=True)
    welcome_message = Column(Text)
    icon = Column(Text)
    text_color = Column(Text)
    background = Column(Text)
    helpdesk = Column(Boolean, nullable=False, default=False)

    domain = relationship("Domain", back_populates="chat_bot")
