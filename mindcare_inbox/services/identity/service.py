"""
Identity service for the signed-in provider.
"""

from typing import Optional

from ...core.models import ProviderIdentity
from ..store.base import ChangeNotifier


class IdentityService(ChangeNotifier):
    """Holds the current provider identity and announces changes."""

    def __init__(self, identity: Optional[ProviderIdentity] = None):
        super().__init__()
        self._identity = identity or ProviderIdentity()

    @property
    def current(self) -> ProviderIdentity:
        return self._identity

    def set_identity(self, identity: ProviderIdentity) -> bool:
        """
        Switch to ``identity``.

        Returns:
            True if the identity changed and subscribers were notified
        """
        if identity == self._identity:
            return False
        self._identity = identity
        self.notify()
        return True
