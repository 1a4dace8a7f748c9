"""
Booking-related data models.
"""

from datetime import datetime
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from ..enums import BookingStatus


class BookingRecord(BaseModel):
    """Appointment between a patient and a provider, as kept by the record store."""

    # Stored bookings carry many more keys (time, notes, sessionType...)
    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    id: Optional[str] = None
    patient_id: str = Field(alias="patientId")
    patient_name: str = Field(default="", alias="patientName")
    patient_email: Optional[str] = Field(default=None, alias="patientEmail")
    therapist_id: Optional[str] = Field(default=None, alias="therapistId")
    therapist_name: Optional[str] = Field(default=None, alias="therapistName")
    status: BookingStatus = BookingStatus.OTHER
    created_at: Optional[datetime] = Field(default=None, alias="createdAt")
    date: Optional[datetime] = None

    @field_validator("created_at", "date", mode="before")
    @classmethod
    def _blank_timestamp_is_missing(cls, value):
        if isinstance(value, str) and not value.strip():
            return None
        return value

    @model_validator(mode="after")
    def _require_timestamp(self) -> "BookingRecord":
        if self.created_at is None and self.date is None:
            raise ValueError("booking needs createdAt or date")
        return self

    @property
    def reference_time(self) -> datetime:
        """Creation time when present, else the appointment date."""
        return self.created_at or self.date
