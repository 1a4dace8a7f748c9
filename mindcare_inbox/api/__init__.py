"""
API layer for the MindCare Inbox system.
"""

from .app import create_app

__all__ = ["create_app"]
