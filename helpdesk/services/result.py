from dataclasses import dataclass
from typing import Generic, Optional, TypeVar

T = TypeVar("T")

# Error codes surfaced by the conversation router
DOMAIN_NOT_FOUND = "domain_not_found"
CHAT_ROOM_NOT_FOUND = "chat_room_not_found"
AI_ERROR = "ai_error"
IDENTITY_ERROR = "identity_error"
DB_ERROR = "db_error"
EMPTY_RESPONSE = "empty_response"
UNKNOWN = "unknown"


@dataclass
class Result(Generic[T]):
    ok: bool
    value: Optional[T] = None
    error: Optional[str] = None
    error_code: Optional[str] = None

    @staticmethod
    def success(value: T) -> "Result[T]":
        return Result(ok=True, value=value)

    @staticmethod
    def failure(error: str, code: str = UNKNOWN) -> "Result[T]":
        return Result(ok=False, error=error, error_code=code)

    def unwrap_or(self, default: T) -> T:
        return self.value if self.ok else default
