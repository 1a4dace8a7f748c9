"""
Utility modules for the MindCare Inbox system.
"""

from .logging import get_logger
from .date import now_in_tz, localize, format_time_ago

__all__ = [
    "get_logger",
    "now_in_tz",
    "localize",
    "format_time_ago",
]
