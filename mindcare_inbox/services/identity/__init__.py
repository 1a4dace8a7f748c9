"""
Identity service module.
"""

from .service import IdentityService

__all__ = ["IdentityService"]
