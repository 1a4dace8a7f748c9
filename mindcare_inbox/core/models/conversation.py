"""
Conversation and message models.
"""

from datetime import datetime
from typing import List, Tuple
from pydantic import BaseModel, ConfigDict, Field

from ..enums import MessageType, PresenceStatus


class Message(BaseModel):
    """Individual message inside a conversation."""

    model_config = ConfigDict(extra="forbid")

    id: str
    sender_id: str
    sender_name: str
    content: str
    type: MessageType = MessageType.TEXT
    timestamp: datetime
    read: bool = True


class Conversation(BaseModel):
    """Per-patient thread shown to a provider."""

    model_config = ConfigDict(extra="forbid")

    id: str
    patient_id: str
    patient_name: str
    patient_email: str
    last_message: str
    last_message_time: datetime
    unread_count: int = Field(default=0, ge=0)
    status: PresenceStatus = PresenceStatus.OFFLINE
    messages: List[Message] = Field(default_factory=list)

    def with_messages(self, messages: List[Message]) -> "Conversation":
        """Return a copy holding ``messages``, with the last-message fields mirrored."""
        if not messages:
            return self.model_copy(update={"messages": []})
        last = messages[-1]
        return self.model_copy(
            update={
                "messages": list(messages),
                "last_message": last.content,
                "last_message_time": last.timestamp,
            }
        )

    def append_message(self, message: Message) -> "Conversation":
        """Return a copy with ``message`` appended."""
        return self.with_messages([*self.messages, message])

    def content_key(self) -> Tuple:
        """Everything that matters for change detection, minus timestamps."""
        return (
            self.patient_id,
            self.patient_name,
            self.patient_email,
            self.last_message,
            self.unread_count,
            self.status,
            tuple(
                (m.id, m.sender_id, m.sender_name, m.content, m.type, m.read)
                for m in self.messages
            ),
        )
