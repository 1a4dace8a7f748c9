"""
Logger factory.
"""

import logging

from ..config import get_settings

_ROOT = "mindcare"
_configured = False


def _configure() -> None:
    global _configured
    root = logging.getLogger(_ROOT)
    if not root.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(
            logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s")
        )
        root.addHandler(handler)
    root.setLevel(get_settings().log_level.upper())
    _configured = True


def get_logger(name: str) -> logging.Logger:
    """Return a logger under the ``mindcare`` namespace."""
    if not _configured:
        _configure()
    if not name.startswith(_ROOT):
        name = f"{_ROOT}.{name}"
    return logging.getLogger(name)
