"""
Core data models for the MindCare Inbox system.
"""

from .booking import BookingRecord
from .user import UserRecord, ProviderIdentity
from .conversation import Message, Conversation

__all__ = [
    "BookingRecord",
    "UserRecord",
    "ProviderIdentity",
    "Message",
    "Conversation",
]
