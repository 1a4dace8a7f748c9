"""
Custom exceptions for the MindCare Inbox system.
"""

from .base import MindCareError
from .store import StoreError, StoreUnavailableError, MalformedDataError
from .conversation import ConversationError, ConversationNotFoundError, InvalidMessageError

__all__ = [
    "MindCareError",
    "StoreError",
    "StoreUnavailableError",
    "MalformedDataError",
    "ConversationError",
    "ConversationNotFoundError",
    "InvalidMessageError",
]
