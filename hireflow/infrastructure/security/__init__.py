# Security Package
from .crypto import CryptoService
from .token_identity import TokenIdentityProvider

__all__ = ["CryptoService", "TokenIdentityProvider"]
