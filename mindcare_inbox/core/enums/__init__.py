"""
Enums for the MindCare Inbox system.
"""

from .booking import BookingStatus
from .conversation import PresenceStatus, MessageType, EngineState

__all__ = [
    "BookingStatus",
    "PresenceStatus",
    "MessageType",
    "EngineState",
]
