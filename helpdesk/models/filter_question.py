import uuid

from sqlalchemy import Column, ForeignKey, Text
from sqlalchemy.dialects.postgresql import TIMESTAMP, UUID
from sqlalchemy.orm import relationship

from helpdesk.database import Base


class FilterQuestion(Base):
    __tablename__ = "filter_questions"

    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    domain_id = Column(UUID(as_uuid=True), ForeignKey("domains.id"), nullable=False)
    question = Column(Text, nullable=False)
    created_at = Column(TIMESTAMP(timezone=True))

    domain = relationship("Domain", back_populates="filter_questions")
