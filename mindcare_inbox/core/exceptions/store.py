"""
Record store exceptions.
"""

from .base import MindCareError


class StoreError(MindCareError):
    """Base exception for record store failures."""
    pass


class StoreUnavailableError(StoreError):
    """Exception raised when the record store cannot be read."""
    pass


class MalformedDataError(StoreError):
    """Exception raised when a stored record fails to parse or validate."""
    pass
