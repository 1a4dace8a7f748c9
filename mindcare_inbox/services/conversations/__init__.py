"""
Conversation derivation, sync, query and compose.
"""

from .presence import presence
from .deriver import ConversationDeriver, last_message_for_status, select_latest_booking
from .sync import SyncEngine, SyncResult
from .query import ConversationQuery
from .composer import MessageComposer

__all__ = [
    "presence",
    "ConversationDeriver",
    "last_message_for_status",
    "select_latest_booking",
    "SyncEngine",
    "SyncResult",
    "ConversationQuery",
    "MessageComposer",
]
