"""
Read-only queries over the live conversation list.
"""

from typing import List

from ...core.models import Conversation
from .sync import SyncEngine


class ConversationQuery:
    """Search and lookup against the sync engine's current snapshot."""

    def __init__(self, engine: SyncEngine):
        self.engine = engine

    def all(self) -> List[Conversation]:
        return list(self.engine.snapshot)

    def search(self, term: str = "") -> List[Conversation]:
        """
        Filter conversations by patient name or last message text.

        Matching is a case-insensitive substring test. A blank term returns
        every conversation in collection order.
        """
        snapshot = self.engine.snapshot
        if not term or not term.strip():
            return list(snapshot)
        needle = term.lower()
        return [
            c for c in snapshot
            if needle in c.patient_name.lower() or needle in c.last_message.lower()
        ]

    def get(self, conversation_id: str) -> Conversation:
        """Return the conversation or raise ConversationNotFoundError."""
        return self.engine.get(conversation_id)
