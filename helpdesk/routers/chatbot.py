from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from helpdesk.database import get_db
from helpdesk.dependencies import get_conversation_router, get_store
from helpdesk.schemas.chat import ProcessMessageRequest, ProcessMessageResponse
from helpdesk.schemas.chatbot import ChatbotConfig
from helpdesk.services import result as codes
from helpdesk.services.chatbot_service import get_chatbot_config
from helpdesk.services.conversation_router import ConversationRouter
from helpdesk.services.store import ConversationStore

router = APIRouter(prefix="/chatbot", tags=["chatbot"])

# External-service failures map to 502, anything unexpected to 500
ERROR_STATUS = {
    codes.DOMAIN_NOT_FOUND: 404,
    codes.CHAT_ROOM_NOT_FOUND: 404,
    codes.AI_ERROR: 502,
    codes.IDENTITY_ERROR: 502,
    codes.EMPTY_RESPONSE: 502,
    codes.DB_ERROR: 503,
}


@router.get("/{domain_id}", response_model=ChatbotConfig)
def chatbot_config(domain_id: UUID, store: ConversationStore = Depends(get_store)):
    """Widget configuration for a domain."""
    config = get_chatbot_config(store, domain_id)
    if not config:
        raise HTTPException(status_code=404, detail="Domain not found")
    return config


@router.post("/{domain_id}/messages", response_model=ProcessMessageResponse, response_model_exclude_none=True)
def process_message(
    domain_id: UUID,
    request: ProcessMessageRequest,
    db: Session = Depends(get_db),
    conversation_router: ConversationRouter = Depends(get_conversation_router),
):
    """Handle a visitor message from the widget."""
    result = conversation_router.process_message(domain_id, request.history, request.message, request.author)

    if not result.ok:
        db.rollback()
        raise HTTPException(
            status_code=ERROR_STATUS.get(result.error_code, 500),
            detail={"error_code": result.error_code, "error": result.error},
        )

    db.commit()
    return result.value.to_payload()
