"""
Record store module.
"""

from .base import ChangeNotifier, RecordStore, parse_bookings, parse_users
from .memory import InMemoryRecordStore
from .json_file import JsonFileRecordStore

__all__ = [
    "ChangeNotifier",
    "RecordStore",
    "parse_bookings",
    "parse_users",
    "InMemoryRecordStore",
    "JsonFileRecordStore",
]
