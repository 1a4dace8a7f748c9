"""
Request and response schemas for the HTTP API.
"""

from datetime import datetime
from typing import List, Optional
from pydantic import BaseModel

from ..core.enums import PresenceStatus
from ..core.models import Conversation, Message
from ..utils.date import format_time_ago


class ConversationSummary(BaseModel):
    id: str
    patient_id: str
    patient_name: str
    patient_email: str
    last_message: str
    last_message_time: datetime
    last_message_ago: str
    unread_count: int
    status: PresenceStatus

    @classmethod
    def from_conversation(cls, conversation: Conversation) -> "ConversationSummary":
        return cls(
            id=conversation.id,
            patient_id=conversation.patient_id,
            patient_name=conversation.patient_name,
            patient_email=conversation.patient_email,
            last_message=conversation.last_message,
            last_message_time=conversation.last_message_time,
            last_message_ago=format_time_ago(conversation.last_message_time),
            unread_count=conversation.unread_count,
            status=conversation.status,
        )


class ConversationListResponse(BaseModel):
    conversations: List[ConversationSummary]
    total: int


class ConversationDetailResponse(BaseModel):
    conversation: ConversationSummary
    messages: List[Message]


class SendMessageRequest(BaseModel):
    content: str


class SendMessageResponse(BaseModel):
    success: bool
    sent_message: Message


class IdentityRequest(BaseModel):
    id: Optional[str] = None
    name: Optional[str] = None
