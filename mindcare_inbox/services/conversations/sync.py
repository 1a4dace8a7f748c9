"""
Sync engine keeping the derived conversation list live.
"""

import asyncio
from datetime import datetime
from typing import Callable, Dict, List, Optional, Sequence, Tuple
from pydantic import BaseModel, Field

from ...config import SyncConfig
from ...core.enums import EngineState
from ...core.exceptions import ConversationNotFoundError, StoreError
from ...core.models import Conversation, Message
from ...utils.date import now_in_tz
from ...utils.logging import get_logger
from ..identity import IdentityService
from ..store.base import ChangeNotifier, RecordStore
from .deriver import ConversationDeriver

logger = get_logger("sync")


class SyncResult(BaseModel):
    """Outcome of one sync tick."""

    trigger: str
    ok: bool = True
    added: List[str] = Field(default_factory=list)
    updated: List[str] = Field(default_factory=list)
    removed: List[str] = Field(default_factory=list)
    error: Optional[str] = None

    @property
    def changed(self) -> bool:
        return bool(self.added or self.updated or self.removed)


class SyncEngine:
    """
    Owns the live conversation list and its refresh lifecycle.

    Refreshes run one at a time. The timer, store notifications and identity
    changes only raise a pending flag; a single worker task drains it, so any
    number of triggers during a refresh collapse into one follow-up refresh.
    Readers always get an immutable, fully merged snapshot.
    """

    def __init__(
        self,
        store: RecordStore,
        identity: IdentityService,
        config: Optional[SyncConfig] = None,
        deriver: Optional[ConversationDeriver] = None,
        clock: Optional[Callable[[], datetime]] = None,
    ):
        self.store = store
        self.identity = identity
        self.config = config or SyncConfig()
        self.deriver = deriver or ConversationDeriver(
            placeholder_email=self.config.placeholder_email,
            timezone=self.config.timezone,
        )
        self._clock = clock or (lambda: now_in_tz(self.config.timezone))

        # Consumers subscribe here to hear about meaningful changes
        self.changes = ChangeNotifier()

        self._state = EngineState.IDLE
        self._snapshot: Tuple[Conversation, ...] = ()
        # Messages sent through the composer, re-applied on every merge
        self._outbox: Dict[str, List[Message]] = {}

        self._refresh_lock = asyncio.Lock()
        self._pending = asyncio.Event()
        self._pending_trigger = "manual"
        self._loop: Optional[asyncio.AbstractEventLoop] = None
        self._worker_task: Optional[asyncio.Task] = None
        self._timer_task: Optional[asyncio.Task] = None
        self._subscribed = False

    # Read side

    @property
    def state(self) -> EngineState:
        return self._state

    @property
    def snapshot(self) -> Tuple[Conversation, ...]:
        return self._snapshot

    @property
    def refresh_pending(self) -> bool:
        return self._pending.is_set()

    def get(self, conversation_id: str) -> Conversation:
        for conversation in self._snapshot:
            if conversation.id == conversation_id:
                return conversation
        raise ConversationNotFoundError(conversation_id)

    # Lifecycle

    async def start(self) -> None:
        """Subscribe to triggers, run the first refresh and start the timer."""
        if self._state is EngineState.STOPPED:
            raise RuntimeError("sync engine has been stopped")
        if self._worker_task is not None:
            return

        self._loop = asyncio.get_running_loop()
        self.store.subscribe(self._on_store_changed)
        self.identity.subscribe(self._on_identity_changed)
        self._subscribed = True
        try:
            self._worker_task = asyncio.create_task(self._worker(), name="mindcare-sync-worker")
            self._timer_task = asyncio.create_task(self._timer(), name="mindcare-sync-timer")
            await self.refresh("startup")
        except BaseException:
            await self.stop()
            raise
        logger.info(f"sync: started (interval={self.config.interval_seconds}s)")

    async def stop(self) -> None:
        """Cancel the timer and worker and drop every subscription."""
        if self._state is EngineState.STOPPED:
            return
        self._state = EngineState.STOPPED
        self._unsubscribe()

        tasks = [t for t in (self._timer_task, self._worker_task) if t is not None]
        for task in tasks:
            task.cancel()
        await asyncio.gather(*tasks, return_exceptions=True)
        self._timer_task = None
        self._worker_task = None
        self._pending.clear()
        logger.info("sync: stopped")

    async def __aenter__(self) -> "SyncEngine":
        await self.start()
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.stop()

    def _unsubscribe(self) -> None:
        if not self._subscribed:
            return
        self.store.unsubscribe(self._on_store_changed)
        self.identity.unsubscribe(self._on_identity_changed)
        self._subscribed = False

    # Triggers

    def request_refresh(self, trigger: str = "manual") -> None:
        """Ask for a refresh; never blocks and coalesces with any pending request."""
        if self._state is EngineState.STOPPED:
            return
        self._pending_trigger = trigger
        self._pending.set()

    def _schedule(self, trigger: str) -> None:
        loop = self._loop
        if loop is None or loop.is_closed():
            return
        try:
            running = asyncio.get_running_loop()
        except RuntimeError:
            running = None
        if running is loop:
            self.request_refresh(trigger)
        else:
            loop.call_soon_threadsafe(self.request_refresh, trigger)

    def _on_store_changed(self) -> None:
        self._schedule("store")

    def _on_identity_changed(self) -> None:
        # Outbound messages belong to the previous provider
        self._outbox.clear()
        self._schedule("identity")

    async def _timer(self) -> None:
        while True:
            await asyncio.sleep(self.config.interval_seconds)
            self.request_refresh("timer")

    async def _worker(self) -> None:
        while True:
            await self._pending.wait()
            self._pending.clear()
            trigger = self._pending_trigger
            try:
                await self.refresh(trigger)
            except Exception:
                logger.exception(f"sync: refresh crashed ({trigger})")

    # Refresh

    async def refresh(self, trigger: str = "manual") -> SyncResult:
        """
        Run one sync tick now.

        Store failures are absorbed: the previous snapshot stays in place and
        the returned result carries the error.
        """
        async with self._refresh_lock:
            if self._state is EngineState.STOPPED:
                return SyncResult(trigger=trigger, ok=False, error="sync engine stopped")
            self._state = EngineState.REFRESHING
            try:
                return await self._refresh_locked(trigger)
            finally:
                if self._state is EngineState.REFRESHING:
                    self._state = EngineState.IDLE

    async def _refresh_locked(self, trigger: str) -> SyncResult:
        logger.debug(f"sync: refresh ({trigger})")
        try:
            bookings = await self.store.read_bookings()
            users = await self.store.read_users()
        except StoreError as e:
            logger.warning(f"sync: refresh abandoned ({trigger}), keeping previous state: {e}")
            return SyncResult(trigger=trigger, ok=False, error=str(e))

        if self._state is EngineState.STOPPED:
            return SyncResult(trigger=trigger, ok=False, error="sync engine stopped")

        derived = self.deriver.derive(bookings, users, self.identity.current, now=self._clock())
        result = self._merge(derived, trigger)
        if result.changed:
            logger.info(
                f"sync: {trigger} added={len(result.added)} "
                f"updated={len(result.updated)} removed={len(result.removed)}"
            )
            self.changes.notify()
        return result

    def _merge(self, derived: Sequence[Conversation], trigger: str) -> SyncResult:
        fresh: Dict[str, Conversation] = {}
        for conversation in derived:
            outbox = self._outbox.get(conversation.id)
            if outbox:
                # Seeds are regenerated relative to now, so restore time order
                messages = sorted([*conversation.messages, *outbox], key=lambda m: m.timestamp)
                conversation = conversation.with_messages(messages)
            fresh[conversation.id] = conversation

        result = SyncResult(trigger=trigger)
        merged: List[Conversation] = []
        previous_ids = set()
        for current in self._snapshot:
            previous_ids.add(current.id)
            candidate = fresh.get(current.id)
            if candidate is None:
                result.removed.append(current.id)
            elif candidate.content_key() == current.content_key():
                # Only seed timestamps moved; keep the object consumers already hold
                merged.append(current)
            else:
                merged.append(candidate)
                result.updated.append(current.id)

        for conversation_id, conversation in fresh.items():
            if conversation_id not in previous_ids:
                merged.append(conversation)
                result.added.append(conversation_id)

        for conversation_id in result.removed:
            self._outbox.pop(conversation_id, None)

        self._snapshot = tuple(merged)
        return result

    # Writes from the composer

    def append_message(self, conversation_id: str, message: Message) -> Conversation:
        """Append a locally composed message and publish the new snapshot."""
        current = self.get(conversation_id)
        updated = current.append_message(message)
        self._outbox.setdefault(conversation_id, []).append(message)
        self._snapshot = tuple(
            updated if c.id == conversation_id else c for c in self._snapshot
        )
        self.changes.notify()
        return updated
