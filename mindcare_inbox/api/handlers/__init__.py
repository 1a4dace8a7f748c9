"""
HTTP route handlers.
"""

from .health import HealthHandler
from .conversations import ConversationsHandler
from .sync import SyncHandler

__all__ = [
    "HealthHandler",
    "ConversationsHandler",
    "SyncHandler",
]
