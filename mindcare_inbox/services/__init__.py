"""
Service layer for the MindCare Inbox system.
"""

from .store import RecordStore, InMemoryRecordStore, JsonFileRecordStore
from .identity import IdentityService
from .conversations import (
    ConversationDeriver,
    SyncEngine,
    ConversationQuery,
    MessageComposer,
)

__all__ = [
    "RecordStore",
    "InMemoryRecordStore",
    "JsonFileRecordStore",
    "IdentityService",
    "ConversationDeriver",
    "SyncEngine",
    "ConversationQuery",
    "MessageComposer",
]
