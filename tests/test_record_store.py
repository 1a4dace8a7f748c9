"""
Tests for record stores.
"""

import json

import pytest

from conftest import make_booking
from mindcare_inbox.core.enums import BookingStatus
from mindcare_inbox.core.exceptions import MalformedDataError, StoreUnavailableError
from mindcare_inbox.services.store import (
    InMemoryRecordStore,
    JsonFileRecordStore,
    parse_bookings,
    parse_users,
)


class TestParsing:
    """Raw record validation."""

    def test_parse_camel_case_booking(self):
        booking = parse_bookings([make_booking("p1", patientEmail="a@b.c")])[0]
        assert booking.patient_id == "p1"
        assert booking.patient_email == "a@b.c"
        assert booking.therapist_id == "t1"
        assert booking.status == BookingStatus.CONFIRMED

    def test_extra_keys_ignored(self):
        booking = parse_bookings([make_booking("p1", sessionType="video", notes="x")])[0]
        assert booking.patient_id == "p1"

    def test_missing_patient_id(self):
        raw = make_booking("p1")
        del raw["patientId"]
        with pytest.raises(MalformedDataError):
            parse_bookings([raw])

    def test_missing_timestamps(self):
        raw = make_booking("p1")
        del raw["createdAt"]
        with pytest.raises(MalformedDataError):
            parse_bookings([raw])

    def test_unparsable_timestamp(self):
        with pytest.raises(MalformedDataError):
            parse_bookings([make_booking("p1", createdAt="next tuesday-ish")])

    def test_not_a_list(self):
        with pytest.raises(MalformedDataError):
            parse_users({"id": "u1"})

    def test_parse_users(self):
        users = parse_users([{"id": "u1", "email": "u1@example.org", "role": "patient", "phone": "1"}])
        assert users[0].email == "u1@example.org"


class TestInMemoryRecordStore:
    """Dict-backed store."""

    @pytest.mark.asyncio
    async def test_reads(self, store):
        assert len(await store.read_bookings()) == 4
        assert await store.read_users() == []

    def test_mutations_notify(self):
        store = InMemoryRecordStore()
        calls = []
        store.subscribe(lambda: calls.append("changed"))

        store.put_booking(make_booking("p1"))
        store.put_user({"id": "p1", "email": "p1@example.org"})
        store.remove_booking("b_p1_1")
        store.remove_booking("does-not-exist")

        assert calls == ["changed", "changed", "changed"]

    @pytest.mark.asyncio
    async def test_bookings_without_id_survive_removals(self):
        store = InMemoryRecordStore(bookings=[make_booking("a", id="a"), make_booking("b", id="b")])
        x = make_booking("x")
        del x["id"]
        y = make_booking("y")
        del y["id"]

        store.put_booking(x)
        store.remove_booking("a")
        store.put_booking(y)

        patients = sorted(b.patient_id for b in await store.read_bookings())
        assert patients == ["b", "x", "y"]

    def test_unsubscribe(self):
        store = InMemoryRecordStore()
        calls = []
        callback = lambda: calls.append(1)  # noqa: E731
        store.subscribe(callback)
        store.unsubscribe(callback)
        store.unsubscribe(callback)

        store.put_booking(make_booking("p1"))

        assert calls == []
        assert store.subscriber_count == 0

    def test_failing_subscriber_does_not_block_others(self):
        store = InMemoryRecordStore()
        calls = []

        def broken():
            raise RuntimeError("boom")

        store.subscribe(broken)
        store.subscribe(lambda: calls.append(1))
        store.put_booking(make_booking("p1"))

        assert calls == [1]


class TestJsonFileRecordStore:
    """File-backed store."""

    @pytest.mark.asyncio
    async def test_missing_files_read_empty(self, tmp_path):
        store = JsonFileRecordStore(tmp_path / "b.json", tmp_path / "u.json")
        assert await store.read_bookings() == []
        assert await store.read_users() == []

    @pytest.mark.asyncio
    async def test_reads_records(self, tmp_path):
        (tmp_path / "b.json").write_text(json.dumps([make_booking("p1"), make_booking("p2")]))
        (tmp_path / "u.json").write_text(json.dumps([{"id": "p1", "email": "p1@example.org"}]))
        store = JsonFileRecordStore(tmp_path / "b.json", tmp_path / "u.json")

        bookings = await store.read_bookings()
        users = await store.read_users()

        assert [b.patient_id for b in bookings] == ["p1", "p2"]
        assert users[0].email == "p1@example.org"

    @pytest.mark.asyncio
    async def test_invalid_json(self, tmp_path):
        (tmp_path / "b.json").write_text("{oops")
        store = JsonFileRecordStore(tmp_path / "b.json", tmp_path / "u.json")
        with pytest.raises(MalformedDataError):
            await store.read_bookings()

    @pytest.mark.asyncio
    async def test_unreadable_path(self, tmp_path):
        # A directory exists but cannot be read as a file
        (tmp_path / "b.json").mkdir()
        store = JsonFileRecordStore(tmp_path / "b.json", tmp_path / "u.json")
        with pytest.raises(StoreUnavailableError):
            await store.read_bookings()

    @pytest.mark.asyncio
    async def test_write_round_trip_notifies(self, tmp_path):
        store = JsonFileRecordStore(tmp_path / "data" / "b.json", tmp_path / "data" / "u.json")
        calls = []
        store.subscribe(lambda: calls.append(1))

        await store.write_bookings(parse_bookings([make_booking("p1", patientEmail="p1@example.org")]))

        saved = json.loads((tmp_path / "data" / "b.json").read_text())
        assert saved[0]["patientId"] == "p1"
        assert saved[0]["patientEmail"] == "p1@example.org"
        assert calls == [1]
        assert (await store.read_bookings())[0].patient_email == "p1@example.org"
