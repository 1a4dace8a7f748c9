"""
Pytest configuration and fixtures.
"""

import asyncio
from datetime import datetime, timedelta

import pytest
import pytz

from mindcare_inbox.config import SyncConfig
from mindcare_inbox.core.models import BookingRecord, ProviderIdentity
from mindcare_inbox.services.conversations import (
    ConversationDeriver,
    ConversationQuery,
    MessageComposer,
    SyncEngine,
)
from mindcare_inbox.services.identity import IdentityService
from mindcare_inbox.services.store import InMemoryRecordStore

NOW = datetime(2025, 1, 15, 12, 0, tzinfo=pytz.utc)


def make_booking(patient_id="p1", hours_ago=1, status="confirmed", **overrides) -> dict:
    """Raw booking dict in the shape the booking flow stores."""
    booking = {
        "id": f"b_{patient_id}_{hours_ago}",
        "patientId": patient_id,
        "patientName": f"Patient {patient_id.upper()}",
        "therapistId": "t1",
        "therapistName": "Dr. A",
        "status": status,
        "createdAt": (NOW - timedelta(hours=hours_ago)).isoformat(),
    }
    booking.update(overrides)
    return booking


@pytest.fixture
def now():
    return NOW


@pytest.fixture
def clock():
    """Mutable clock; move it with ``clock.advance(timedelta)``."""

    class Clock:
        def __init__(self):
            self.current = NOW

        def __call__(self):
            return self.current

        def advance(self, delta: timedelta) -> None:
            self.current = self.current + delta

    return Clock()


@pytest.fixture
def identity():
    return ProviderIdentity(id="t1", name="Dr. A")


@pytest.fixture
def identity_service(identity):
    return IdentityService(identity)


@pytest.fixture
def deriver():
    return ConversationDeriver()


@pytest.fixture
def sample_bookings():
    """Three patients with Dr. A plus one booking for another provider."""
    return [
        BookingRecord.model_validate(make_booking("p1", 1, "confirmed")),
        BookingRecord.model_validate(make_booking("p2", 30, "pending_confirmation")),
        BookingRecord.model_validate(make_booking("p3", 5, "completed", patientName="Sara Haddad")),
        BookingRecord.model_validate(
            make_booking("p4", 1, "confirmed", therapistId="t2", therapistName="Dr. B")
        ),
    ]


@pytest.fixture
def store(sample_bookings):
    return InMemoryRecordStore(bookings=sample_bookings)


@pytest.fixture
def sync_config():
    return SyncConfig(interval_seconds=3600)


@pytest.fixture
def engine(store, identity_service, sync_config, clock):
    return SyncEngine(store, identity_service, config=sync_config, clock=clock)


@pytest.fixture
def query(engine):
    return ConversationQuery(engine)


@pytest.fixture
def composer(engine, identity_service, clock):
    return MessageComposer(engine, identity_service, clock=clock)


@pytest.fixture
def eventually():
    """Poll an async condition until it holds or the timeout expires."""

    async def _wait(predicate, timeout: float = 1.0) -> None:
        loop = asyncio.get_running_loop()
        deadline = loop.time() + timeout
        while not predicate():
            if loop.time() > deadline:
                raise AssertionError("condition not met in time")
            await asyncio.sleep(0.01)

    return _wait
