"""
Health check handler.
"""

from datetime import datetime
from fastapi import APIRouter, Response, status
from pydantic import BaseModel

from ...config import Settings
from ...core.enums import EngineState
from ...services.conversations import SyncEngine


class HealthResponse(BaseModel):
    """Health check response model."""
    status: str
    timestamp: str
    version: str
    uptime: float
    sync_state: EngineState
    conversations: int


class HealthHandler:
    """Handler for health check endpoints."""

    def __init__(self, settings: Settings, engine: SyncEngine):
        self.settings = settings
        self.engine = engine
        self.start_time = datetime.now()
        self.router = APIRouter()
        self._setup_routes()

    def _setup_routes(self):
        """Setup health check routes."""

        @self.router.get("/", response_model=HealthResponse)
        async def health_check():
            """Basic health check endpoint."""
            uptime = (datetime.now() - self.start_time).total_seconds()
            return HealthResponse(
                status="healthy",
                timestamp=datetime.now().isoformat(),
                version=self.settings.app_version,
                uptime=uptime,
                sync_state=self.engine.state,
                conversations=len(self.engine.snapshot),
            )

        @self.router.get("/ready")
        async def readiness_check(response: Response):
            """Ready once the sync engine is running."""
            if self.engine.state is EngineState.STOPPED:
                response.status_code = status.HTTP_503_SERVICE_UNAVAILABLE
                return {"status": "stopped"}
            return {"status": "ready"}

        @self.router.get("/live")
        async def liveness_check():
            """Liveness check for container orchestration."""
            return {"status": "alive"}
