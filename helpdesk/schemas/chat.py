from datetime import datetime
from typing import List, Literal, Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

Role = Literal["user", "assistant"]


class ChatTurn(BaseModel):
    role: Role
    content: str


class ProcessMessageRequest(BaseModel):
    history: List[ChatTurn] = Field(default_factory=list)
    message: str
    author: Literal["user"] = "user"


class BotResponse(BaseModel):
    role: Role = "assistant"
    content: str
    link: Optional[str] = None


class ProcessMessageResponse(BaseModel):
    response: Optional[BotResponse] = None
    live: Optional[bool] = None
    chat_room_id: Optional[UUID] = None


class StoreTurnRequest(BaseModel):
    message: str
    role: Role


class ChatMessageOut(BaseModel):
    id: UUID
    role: Role
    message: str
    created_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)


class LiveStateRequest(BaseModel):
    live: bool


class LiveStateResponse(BaseModel):
    chat_room_id: UUID
    old_state: str
    new_state: str
    mailed: bool
