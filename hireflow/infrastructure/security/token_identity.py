"""
Token Identity Provider - Bearer tokens carrying {id, role, email}.

Tokens are Fernet-encrypted JSON, so they are tamper-proof and carry
their own issue time for expiry checks.
"""

import json
import logging
from typing import Optional

from hireflow.application.interfaces import IdentityPort
from hireflow.domain.entities import User
from hireflow.domain.value_objects import AuthenticatedUser
from .crypto import CryptoService


logger = logging.getLogger(__name__)


class TokenIdentityProvider(IdentityPort):
    """Issues and resolves bearer tokens."""

    def __init__(self, crypto: CryptoService, max_age: int = 0) -> None:
        """
        Args:
            crypto: Initialized crypto service.
            max_age: Token lifetime in seconds; 0 disables expiry.
        """
        self.crypto = crypto
        self.max_age = max_age

    def issue(self, user: User | AuthenticatedUser) -> str:
        """Issue a bearer token for ``user``."""
        identity = AuthenticatedUser(id=user.id, role=user.role, email=user.email)
        return self.crypto.encrypt(json.dumps(identity.to_dict()))

    def resolve(self, bearer_token: str) -> Optional[AuthenticatedUser]:
        """Return the identity in ``bearer_token`` or None if invalid/expired."""
        token = bearer_token.removeprefix("Bearer ").strip()
        if not token:
            return None

        payload = self.crypto.try_decrypt(token, ttl=self.max_age or None)
        if payload is None:
            logger.info("Rejected bearer token (invalid or expired)")
            return None

        try:
            return AuthenticatedUser.from_dict(json.loads(payload))
        except (ValueError, KeyError) as e:
            logger.warning(f"Malformed token payload: {e}")
            return None
