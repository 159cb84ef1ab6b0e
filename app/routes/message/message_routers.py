from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.core.database import get_db
from app.models.message_db.message_crud import create_message, get_messages_between_users, \
    get_conversations_by_user_id, mark_message_as_read, summarize_conversations
from app.schemas.messages.message_base import MessageCreate, MessageOut, MessageWithSender, ConversationSummary


message_router = APIRouter(prefix="/messages", tags=["Messages"])
conversation_router = APIRouter(prefix="/conversations", tags=["Messages"])


@message_router.post("", response_model=MessageOut)
def send_message(payload: MessageCreate, db: Session = Depends(get_db)):
    return create_message(db, payload)


@message_router.get("/{user_id_1}/{user_id_2}", response_model=List[MessageWithSender])
def list_messages_between(user_id_1: int, user_id_2: int, db: Session = Depends(get_db)):
    return get_messages_between_users(db, user_id_1, user_id_2)


@message_router.put("/{message_id}/read")
def mark_read(message_id: int, db: Session = Depends(get_db)):
    mark_message_as_read(db, message_id)
    return {"success": True}


@conversation_router.get("/{user_id}", response_model=List[MessageWithSender])
def list_conversations(user_id: int, db: Session = Depends(get_db)):
    return get_conversations_by_user_id(db, user_id)


@conversation_router.get("/{user_id}/summary", response_model=List[ConversationSummary])
def list_conversation_summaries(user_id: int, db: Session = Depends(get_db)):
    messages = get_conversations_by_user_id(db, user_id)
    return summarize_conversations(messages, user_id)
