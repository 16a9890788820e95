"""
Crypto Service - Symmetric encryption using Fernet.

Backs the bearer tokens issued to recruiters and job seekers. The key is
stored locally in a separate file.
"""

from pathlib import Path
from typing import Optional

from cryptography.fernet import Fernet, InvalidToken


class CryptoService:
    """
    Cryptographic service for token encryption.

    Uses Fernet symmetric encryption from the cryptography library.
    """

    def __init__(self, key_path: Path) -> None:
        """
        Initialize the crypto service.

        Args:
            key_path: Path to store/load the encryption key.
        """
        self.key_path = key_path
        self._fernet: Optional[Fernet] = None

    def initialize(self) -> None:
        """Initialize or load the encryption key."""
        if self.key_path.exists():
            key = self.key_path.read_bytes()
        else:
            key = Fernet.generate_key()
            self.key_path.parent.mkdir(parents=True, exist_ok=True)
            self.key_path.write_bytes(key)
            # Restrict file permissions (Unix only)
            try:
                self.key_path.chmod(0o600)
            except OSError:
                pass  # Windows doesn't support chmod

        self._fernet = Fernet(key)

    @property
    def fernet(self) -> Fernet:
        """Get the Fernet instance."""
        if not self._fernet:
            raise RuntimeError("CryptoService not initialized. Call initialize() first.")
        return self._fernet

    def encrypt(self, data: str) -> str:
        """
        Encrypt a string.

        Args:
            data: Plain text to encrypt.

        Returns:
            Base64-encoded encrypted string.
        """
        encrypted = self.fernet.encrypt(data.encode("utf-8"))
        return encrypted.decode("utf-8")

    def decrypt(self, encrypted_data: str, ttl: Optional[int] = None) -> str:
        """
        Decrypt a string.

        Args:
            encrypted_data: Base64-encoded encrypted string.
            ttl: Maximum token age in seconds (None = no limit).

        Returns:
            Decrypted plain text.

        Raises:
            InvalidToken: If decryption fails (wrong key, corrupted or expired).
        """
        decrypted = self.fernet.decrypt(encrypted_data.encode("utf-8"), ttl=ttl)
        return decrypted.decode("utf-8")

    def try_decrypt(self, encrypted_data: str, ttl: Optional[int] = None) -> Optional[str]:
        """
        Try to decrypt a string, returning None on failure.

        Args:
            encrypted_data: Base64-encoded encrypted string.
            ttl: Maximum token age in seconds (None = no limit).

        Returns:
            Decrypted plain text or None if decryption fails.
        """
        try:
            return self.decrypt(encrypted_data, ttl=ttl)
        except (InvalidToken, UnicodeError):
            return None
