import uuid

from sqlalchemy import Column, ForeignKey, Text
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import relationship

from helpdesk.database import Base


class CustomerResponse(Base):
    __tablename__ = "customer_responses"

    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    customer_id = Column(UUID(as_uuid=True), ForeignKey("customers.id"), nullable=False)
    question = Column(Text, nullable=False)
    answered = Column(Text)  # null until the customer answers

    customer = relationship("Customer", back_populates="questions")
