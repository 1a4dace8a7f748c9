"""
Store-change and identity handlers.
"""

from fastapi import APIRouter, status

from ...core.models import ProviderIdentity
from ...services.identity import IdentityService
from ...services.store import RecordStore
from ..schemas import IdentityRequest


class SyncHandler:
    """Lets the surrounding application signal record and identity changes."""

    def __init__(self, store: RecordStore, identity: IdentityService):
        self.store = store
        self.identity = identity
        self.router = APIRouter()
        self._setup_routes()

    def _setup_routes(self):

        @self.router.post("/sync/notify", status_code=status.HTTP_202_ACCEPTED)
        async def notify_store_changed():
            """Signal that bookings or users changed outside this service."""
            self.store.notify()
            return {"status": "accepted"}

        @self.router.put("/identity")
        async def set_identity(request: IdentityRequest):
            changed = self.identity.set_identity(
                ProviderIdentity(id=request.id, name=request.name)
            )
            return {"changed": changed, "identity": self.identity.current}
