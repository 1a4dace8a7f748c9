"""
Configuration management for the MindCare Inbox system.
"""

from .settings import Settings, get_settings
from .sync import SyncConfig

__all__ = [
    "Settings",
    "get_settings",
    "SyncConfig",
]
