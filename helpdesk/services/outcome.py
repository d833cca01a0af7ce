from dataclasses import dataclass
from enum import Enum
from typing import Optional
from uuid import UUID


class RoutePath(str, Enum):
    EMAIL_COLLECTION = "email_collection"
    NEW_CUSTOMER = "new_customer"
    LIVE_HANDOFF = "live_handoff"
    ESCALATION = "escalation"
    LINK = "link"
    REPLY = "reply"


@dataclass
class RouterOutcome:
    """Result of routing one visitor message. `path` tags which fields are meaningful."""

    path: RoutePath
    content: Optional[str] = None
    link: Optional[str] = None
    chat_room_id: Optional[UUID] = None
    notified: bool = False
    role: str = "assistant"

    @property
    def live(self) -> bool:
        return self.path == RoutePath.LIVE_HANDOFF

    def to_payload(self) -> dict:
        if self.live:
            return {"live": True, "chat_room_id": self.chat_room_id}

        response = {"role": self.role, "content": self.content}
        if self.link:
            response["link"] = self.link
        return {"response": response}
