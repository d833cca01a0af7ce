import uuid

from sqlalchemy import Column, ForeignKey, Text, UniqueConstraint
from sqlalchemy.dialects.postgresql import TIMESTAMP, UUID
from sqlalchemy.orm import relationship

from helpdesk.database import Base


class Customer(Base):
    __tablename__ = "customers"
    __table_args__ = (UniqueConstraint("domain_id", "email", name="uq_customers_domain_email"),)

    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    domain_id = Column(UUID(as_uuid=True), ForeignKey("domains.id"), nullable=False)
    email = Column(Text, nullable=False)
    created_at = Column(TIMESTAMP(timezone=True), nullable=False)

    domain = relationship("Domain", back_populates="customers")
    questions = relationship("CustomerResponse", back_populates="customer", order_by="CustomerResponse.question")
    chat_room = relationship("ChatRoom", back_populates="customer", uselist=False)
