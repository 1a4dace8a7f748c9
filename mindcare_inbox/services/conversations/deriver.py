"""
Conversation derivation from booking and user records.
"""

from datetime import datetime, timedelta
from typing import Dict, List, Optional, Sequence, Tuple

from ...core.enums import BookingStatus
from ...core.models import BookingRecord, Conversation, Message, ProviderIdentity, UserRecord
from ...utils.date import localize, now_in_tz
from .presence import presence

DEFAULT_LAST_MESSAGE: Tuple[str, int] = ("Looking forward to our session.", 0)

LAST_MESSAGES: Dict[BookingStatus, Tuple[str, int]] = {
    BookingStatus.COMPLETED: ("Thank you for the session today. I feel much better.", 0),
    BookingStatus.PENDING_CONFIRMATION: ("I just booked an appointment. Can you confirm the time?", 1),
    BookingStatus.CONFIRMED: ("See you at our scheduled appointment.", 0),
}


def last_message_for_status(status: BookingStatus) -> Tuple[str, int]:
    """Canned closing text and unread count for a booking status."""
    return LAST_MESSAGES.get(status, DEFAULT_LAST_MESSAGE)


def select_latest_booking(bookings: Sequence[BookingRecord], tz_name: str = "UTC") -> BookingRecord:
    """Latest booking by reference time; on ties the earliest in ``bookings`` wins."""
    # sorted() is stable with reverse=True, so equal keys keep their input order
    ordered = sorted(bookings, key=lambda b: localize(b.reference_time, tz_name), reverse=True)
    return ordered[0]


class ConversationDeriver:
    """Builds the provider's conversation list from a record snapshot."""

    def __init__(self, placeholder_email: str = "patient@example.com", timezone: str = "UTC"):
        self.placeholder_email = placeholder_email
        self.timezone = timezone

    def derive(
        self,
        bookings: Sequence[BookingRecord],
        users: Sequence[UserRecord],
        identity: ProviderIdentity,
        now: Optional[datetime] = None,
    ) -> List[Conversation]:
        """
        Derive one conversation per patient who has a booking with ``identity``.

        The result depends only on the arguments. Patients appear in the order
        of their first matching booking.

        Args:
            bookings: Current booking records
            users: Current registered users, used to backfill emails
            identity: Provider whose inbox is derived
            now: Reference "now"; defaults to the current time

        Returns:
            List of Conversation objects
        """
        now = localize(now, self.timezone) if now else now_in_tz(self.timezone)

        groups: Dict[str, List[BookingRecord]] = {}
        for booking in bookings:
            if identity.matches(booking):
                groups.setdefault(booking.patient_id, []).append(booking)

        emails: Dict[str, str] = {}
        for user in users:
            if user.email:
                emails.setdefault(user.id, user.email)

        return [
            self._build_conversation(patient_id, group, emails, identity, now)
            for patient_id, group in groups.items()
        ]

    def _build_conversation(
        self,
        patient_id: str,
        group: List[BookingRecord],
        emails: Dict[str, str],
        identity: ProviderIdentity,
        now: datetime,
    ) -> Conversation:
        first = group[0]
        latest = select_latest_booking(group, self.timezone)
        last_message, unread_count = last_message_for_status(latest.status)
        status = presence(localize(latest.reference_time, self.timezone), now)
        messages = self._seed_messages(patient_id, first.patient_name, identity, last_message, unread_count, now)

        return Conversation(
            id=patient_id,
            patient_id=patient_id,
            patient_name=first.patient_name,
            patient_email=first.patient_email or emails.get(patient_id) or self.placeholder_email,
            last_message=last_message,
            last_message_time=messages[-1].timestamp,
            unread_count=unread_count,
            status=status,
            messages=messages,
        )

    @staticmethod
    def _seed_messages(
        patient_id: str,
        patient_name: str,
        identity: ProviderIdentity,
        last_message: str,
        unread_count: int,
        now: datetime,
    ) -> List[Message]:
        return [
            Message(
                id=f"m_{patient_id}_1",
                sender_id=patient_id,
                sender_name=patient_name,
                content=f"Hi {identity.display_name}, I wanted to follow up on our session.",
                timestamp=now - timedelta(hours=4),
                read=True,
            ),
            Message(
                id=f"m_{patient_id}_2",
                sender_id=identity.sender_id,
                sender_name=identity.display_name,
                content=f"Hello {patient_name}! I'm glad you reached out. How are you feeling today?",
                timestamp=now - timedelta(hours=3),
                read=True,
            ),
            Message(
                id=f"m_{patient_id}_3",
                sender_id=patient_id,
                sender_name=patient_name,
                content=last_message,
                timestamp=now - timedelta(hours=2),
                read=unread_count == 0,
            ),
        ]
