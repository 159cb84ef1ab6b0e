from pydantic import BaseModel, Field
from datetime import datetime

from app.schemas.users.user_base import UserOut
from app.services.message_types import MessageType


class MessageCreate(BaseModel):
    sender_id: int
    receiver_id: int
    content: str = Field(min_length=1)
    message_type: MessageType = MessageType.text


class MessageOut(BaseModel):
    id: int
    sender_id: int
    receiver_id: int
    content: str
    message_type: MessageType
    is_read: bool
    sent_at: datetime

    class Config:
        from_attributes = True


class MessageWithSender(MessageOut):
    sender: UserOut


class ConversationSummary(BaseModel):
    user_id: int
    last_message: MessageWithSender
    unread_count: int
