from typing import List
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from helpdesk.database import get_db
from helpdesk.dependencies import get_store
from helpdesk.schemas.chat import ChatMessageOut, LiveStateRequest, LiveStateResponse, StoreTurnRequest
from helpdesk.services.chatbot_service import set_live_state
from helpdesk.services.message_service import get_conversation_log, store_conversation_turn
from helpdesk.services.state_machine import InvalidTransitionError
from helpdesk.services.store import ChatRoomNotFoundError, ConversationStore

router = APIRouter(prefix="/chat-rooms", tags=["chat-rooms"])


@router.post("/{chat_room_id}/messages", response_model=ChatMessageOut, status_code=201)
def store_turn(
    chat_room_id: UUID,
    request: StoreTurnRequest,
    db: Session = Depends(get_db),
    store: ConversationStore = Depends(get_store),
):
    """Append a turn to the chat room log (agent replies, client-side echoes)."""
    try:
        message = store_conversation_turn(store, chat_room_id, request.message, request.role)
    except ChatRoomNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))

    db.commit()
    return message


@router.get("/{chat_room_id}/messages", response_model=List[ChatMessageOut])
def list_turns(chat_room_id: UUID, store: ConversationStore = Depends(get_store)):
    try:
        return get_conversation_log(store, chat_room_id)
    except ChatRoomNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.post("/{chat_room_id}/live", response_model=LiveStateResponse)
def toggle_live(
    chat_room_id: UUID,
    request: LiveStateRequest,
    db: Session = Depends(get_db),
    store: ConversationStore = Depends(get_store),
):
    """Agent takes over (`live: true`) or hands the chat back to the bot (`live: false`)."""
    try:
        chat_room, old_state, new_state = set_live_state(store, chat_room_id, request.live)
    except ChatRoomNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except InvalidTransitionError as e:
        raise HTTPException(status_code=409, detail=str(e))

    db.commit()
    return LiveStateResponse(
        chat_room_id=chat_room_id,
        old_state=old_state,
        new_state=new_state,
        mailed=bool(chat_room.mailed),
    )
