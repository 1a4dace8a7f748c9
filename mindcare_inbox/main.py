"""
ASGI application and server runner for MindCare Inbox.
"""

from typing import Optional

import uvicorn

from .api.app import create_app
from .config import Settings, get_settings

app = create_app()


def run(settings: Optional[Settings] = None) -> None:
    """Serve ``app`` with uvicorn using the configured bind address."""
    settings = settings or get_settings()
    uvicorn.run(
        "mindcare_inbox.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    run()
