import uuid

from sqlalchemy import Column, ForeignKey, Text
from sqlalchemy.dialects.postgresql import TIMESTAMP, UUID
from sqlalchemy.orm import relationship

from helpdesk.database import Base


class Domain(Base):
    __tablename__ = "domains"

    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    name = Column(Text, nullable=False)
    user_id = Column(UUID(as_uuid=True), ForeignKey("users.id"))
    created_at = Column(TIMESTAMP(timezone=True))

    user = relationship("User", back_populates="domains")
    chat_bot = relationship("ChatBot", back_populates="domain", uselist=False)
    filter_questions = relationship(
        "FilterQuestion", back_populates="domain", order_by="FilterQuestion.question"
    )
    customers = relationship("Customer", back_populates="domain")

    @property
    def owner_id(self):
        """Identity-service id of the domain owner, used for live chat notifications."""
        return self.user.clerk_id if self.user else None
