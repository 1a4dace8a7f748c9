"""
Conversation-related enums.
"""

from enum import Enum


class PresenceStatus(str, Enum):
    """Presence shown next to a conversation."""

    ONLINE = "online"
    AWAY = "away"
    OFFLINE = "offline"


class MessageType(str, Enum):
    """Content kind of a message. Only TEXT is produced today."""

    TEXT = "text"
    IMAGE = "image"
    FILE = "file"


class EngineState(str, Enum):
    """Lifecycle state of the sync engine."""

    IDLE = "idle"
    REFRESHING = "refreshing"
    STOPPED = "stopped"
