"""
JSON file record store.
"""

import asyncio
import json
from pathlib import Path
from typing import Any, List, Union

from ...core.models import BookingRecord, UserRecord
from ...core.exceptions import StoreUnavailableError, MalformedDataError
from .base import RecordStore, parse_bookings, parse_users


class JsonFileRecordStore(RecordStore):
    """
    Reads bookings and users from two JSON array files.

    The files hold the same camelCase records the booking flow writes. A
    missing file reads as an empty collection.
    """

    def __init__(self, bookings_path: Union[str, Path], users_path: Union[str, Path]):
        super().__init__()
        self.bookings_path = Path(bookings_path)
        self.users_path = Path(users_path)
        self._lock = asyncio.Lock()

    @staticmethod
    def _load(path: Path) -> Any:
        if not path.exists():
            return []
        try:
            text = path.read_text(encoding="utf-8")
        except OSError as e:
            raise StoreUnavailableError(f"cannot read {path}: {e}") from e
        if not text.strip():
            return []
        try:
            return json.loads(text)
        except json.JSONDecodeError as e:
            raise MalformedDataError(f"{path} is not valid JSON: {e}") from e

    @staticmethod
    def _dump(path: Path, records: List[Any]) -> None:
        payload = [
            r.model_dump(mode="json", by_alias=True, exclude_none=True)
            if hasattr(r, "model_dump") else r
            for r in records
        ]
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(json.dumps(payload, ensure_ascii=False, indent=2), encoding="utf-8")
        except OSError as e:
            raise StoreUnavailableError(f"cannot write {path}: {e}") from e

    async def read_bookings(self) -> List[BookingRecord]:
        async with self._lock:
            raw = await asyncio.to_thread(self._load, self.bookings_path)
        return parse_bookings(raw)

    async def read_users(self) -> List[UserRecord]:
        async with self._lock:
            raw = await asyncio.to_thread(self._load, self.users_path)
        return parse_users(raw)

    async def write_bookings(self, bookings: List[Any]) -> None:
        """Replace the bookings file and notify subscribers."""
        async with self._lock:
            await asyncio.to_thread(self._dump, self.bookings_path, bookings)
        self.notify()

    async def write_users(self, users: List[Any]) -> None:
        """Replace the users file and notify subscribers."""
        async with self._lock:
            await asyncio.to_thread(self._dump, self.users_path, users)
        self.notify()
