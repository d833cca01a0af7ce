import uuid

from sqlalchemy import Column, Text
from sqlalchemy.dialects.postgresql import TIMESTAMP, UUID
from sqlalchemy.orm import relationship

from helpdesk.database import Base


class User(Base):
    __tablename__ = "users"

    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    clerk_id = Column(Text, nullable=False, unique=True)  # identity-service user id
    full_name = Column(Text)
    created_at = Column(TIMESTAMP(timezone=True))

    domains = relationship("Domain", back_populates="user")
