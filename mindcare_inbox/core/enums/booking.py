"""
Booking-related enums.
"""

from enum import Enum


class BookingStatus(str, Enum):
    """Booking status as written by the booking flow."""

    PENDING_CONFIRMATION = "pending_confirmation"
    CONFIRMED = "confirmed"
    COMPLETED = "completed"
    OTHER = "other"

    @classmethod
    def _missing_(cls, value):
        # cancelled, rescheduled, etc. all collapse to OTHER
        return cls.OTHER
