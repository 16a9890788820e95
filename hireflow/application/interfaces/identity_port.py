"""
Identity Port - Abstract interface for resolving bearer credentials.
"""

from abc import ABC, abstractmethod
from typing import Optional

from hireflow.domain.value_objects import AuthenticatedUser


class IdentityPort(ABC):
    """Turns a bearer credential into the caller's identity."""

    @abstractmethod
    def resolve(self, bearer_token: str) -> Optional[AuthenticatedUser]:
        """Return the user for ``bearer_token`` or None if it is invalid."""
        pass
