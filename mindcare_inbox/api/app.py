"""
FastAPI application factory and configuration.
"""

from contextlib import asynccontextmanager
from typing import Optional
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from ..config import Settings, SyncConfig, get_settings
from ..core.models import ProviderIdentity
from ..services.conversations import ConversationQuery, MessageComposer, SyncEngine
from ..services.identity import IdentityService
from ..services.store import JsonFileRecordStore, RecordStore
from .handlers import ConversationsHandler, HealthHandler, SyncHandler


def create_app(
    settings: Optional[Settings] = None,
    store: Optional[RecordStore] = None,
    identity: Optional[IdentityService] = None,
) -> FastAPI:
    """Create and configure FastAPI application."""
    settings = settings or get_settings()
    store = store or JsonFileRecordStore(settings.bookings_path, settings.users_path)
    identity = identity or IdentityService(
        ProviderIdentity(id=settings.provider_id, name=settings.provider_name)
    )
    engine = SyncEngine(store, identity, config=SyncConfig.from_settings(settings))
    query = ConversationQuery(engine)
    composer = MessageComposer(engine, identity)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        await engine.start()
        try:
            yield
        finally:
            await engine.stop()

    app = FastAPI(
        title=settings.app_name,
        description="Provider inbox derived from appointment records",
        version=settings.app_version,
        debug=settings.debug,
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.state.engine = engine
    app.state.store = store
    app.state.identity = identity

    health_handler = HealthHandler(settings, engine)
    conversations_handler = ConversationsHandler(query, composer)
    sync_handler = SyncHandler(store, identity)

    app.include_router(health_handler.router, prefix="/health", tags=["health"])
    app.include_router(conversations_handler.router, prefix="/conversations", tags=["conversations"])
    app.include_router(sync_handler.router, tags=["sync"])

    return app
