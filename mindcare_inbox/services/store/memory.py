"""
In-memory record store.
"""

import itertools
from typing import Any, Dict, List, Optional, Union

from ...core.models import BookingRecord, UserRecord
from .base import RecordStore


class InMemoryRecordStore(RecordStore):
    """Dict-backed store; every mutation notifies subscribers."""

    def __init__(
        self,
        bookings: Optional[List[Union[BookingRecord, Dict[str, Any]]]] = None,
        users: Optional[List[Union[UserRecord, Dict[str, Any]]]] = None,
    ):
        super().__init__()
        self._bookings: Dict[str, BookingRecord] = {}
        self._users: Dict[str, UserRecord] = {}
        # Keys for id-less bookings; never reused after a removal
        self._next_key = itertools.count(1)
        for booking in bookings or []:
            self._store_booking(booking)
        for user in users or []:
            self._store_user(user)

    def _store_booking(self, booking: Union[BookingRecord, Dict[str, Any]]) -> BookingRecord:
        if not isinstance(booking, BookingRecord):
            booking = BookingRecord.model_validate(booking)
        key = booking.id or f"booking_{next(self._next_key)}"
        self._bookings[key] = booking
        return booking

    def _store_user(self, user: Union[UserRecord, Dict[str, Any]]) -> UserRecord:
        if not isinstance(user, UserRecord):
            user = UserRecord.model_validate(user)
        self._users[user.id] = user
        return user

    async def read_bookings(self) -> List[BookingRecord]:
        return list(self._bookings.values())

    async def read_users(self) -> List[UserRecord]:
        return list(self._users.values())

    def put_booking(self, booking: Union[BookingRecord, Dict[str, Any]]) -> BookingRecord:
        """Insert or replace a booking and notify subscribers."""
        stored = self._store_booking(booking)
        self.notify()
        return stored

    def remove_booking(self, booking_id: str) -> None:
        """Remove a booking by id and notify subscribers."""
        if self._bookings.pop(booking_id, None) is not None:
            self.notify()

    def put_user(self, user: Union[UserRecord, Dict[str, Any]]) -> UserRecord:
        """Insert or replace a user and notify subscribers."""
        stored = self._store_user(user)
        self.notify()
        return stored
