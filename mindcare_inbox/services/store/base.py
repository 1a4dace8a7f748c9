"""
Record store interface and change notification.
"""

from abc import ABC, abstractmethod
from typing import Any, Callable, Iterable, List
from pydantic import ValidationError

from ...core.models import BookingRecord, UserRecord
from ...core.exceptions import MalformedDataError
from ...utils.logging import get_logger

logger = get_logger("store")

ChangeCallback = Callable[[], None]


class ChangeNotifier:
    """Subscribe/unsubscribe registry for change callbacks."""

    def __init__(self):
        self._callbacks: List[ChangeCallback] = []

    def subscribe(self, callback: ChangeCallback) -> None:
        if callback not in self._callbacks:
            self._callbacks.append(callback)

    def unsubscribe(self, callback: ChangeCallback) -> None:
        try:
            self._callbacks.remove(callback)
        except ValueError:
            pass

    @property
    def subscriber_count(self) -> int:
        return len(self._callbacks)

    def notify(self) -> None:
        """Invoke every subscriber; a failing subscriber does not stop the others."""
        for callback in list(self._callbacks):
            try:
                callback()
            except Exception:
                logger.exception("change callback %r failed", callback)


class RecordStore(ChangeNotifier, ABC):
    """
    Source of booking and user records.

    Implementations raise StoreUnavailableError when the backing storage
    cannot be read and MalformedDataError when a record does not validate.
    Subscribers are notified whenever either collection changes.
    """

    @abstractmethod
    async def read_bookings(self) -> List[BookingRecord]:
        ...

    @abstractmethod
    async def read_users(self) -> List[UserRecord]:
        ...


def _parse(model, raw: Any, kind: str) -> list:
    if not isinstance(raw, list):
        raise MalformedDataError(f"{kind}: expected a list, got {type(raw).__name__}")
    records = []
    for index, item in enumerate(raw):
        if isinstance(item, model):
            records.append(item)
            continue
        try:
            records.append(model.model_validate(item))
        except ValidationError as e:
            raise MalformedDataError(f"{kind}[{index}]: {e.errors()[0]['msg']}") from e
    return records


def parse_bookings(raw: Iterable[Any]) -> List[BookingRecord]:
    """Validate raw booking dicts into BookingRecord models."""
    return _parse(BookingRecord, raw, "bookings")


def parse_users(raw: Iterable[Any]) -> List[UserRecord]:
    """Validate raw user dicts into UserRecord models."""
    return _parse(UserRecord, raw, "users")
