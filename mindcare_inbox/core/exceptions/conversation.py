"""
Conversation-related exceptions.
"""

from .base import MindCareError


class ConversationError(MindCareError):
    """Base exception for conversation query and compose errors."""
    pass


class ConversationNotFoundError(ConversationError):
    """Exception raised when no conversation has the requested id."""

    def __init__(self, conversation_id: str):
        super().__init__(f"Conversation not found: {conversation_id}")
        self.conversation_id = conversation_id


class InvalidMessageError(ConversationError):
    """Exception raised when outbound message text is empty."""
    pass
