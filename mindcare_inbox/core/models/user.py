"""
User-related data models.
"""

from typing import Optional
from pydantic import BaseModel, ConfigDict

from .booking import BookingRecord


class UserRecord(BaseModel):
    """Registered user as kept by the record store."""

    model_config = ConfigDict(extra="ignore")

    id: str
    email: Optional[str] = None
    name: Optional[str] = None
    role: Optional[str] = None


class ProviderIdentity(BaseModel):
    """The provider whose inbox is being derived."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    id: Optional[str] = None
    name: Optional[str] = None

    @property
    def sender_id(self) -> str:
        return self.id or "therapist"

    @property
    def display_name(self) -> str:
        return self.name or "Therapist"

    def matches(self, booking: BookingRecord) -> bool:
        """
        Check whether a booking names this provider.

        Either the provider id or the provider name is enough. Two providers
        sharing a display name will see each other's patients.
        """
        if self.name and booking.therapist_name == self.name:
            return True
        return bool(self.id) and booking.therapist_id == self.id
