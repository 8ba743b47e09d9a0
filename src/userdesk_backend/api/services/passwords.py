"""Password hashing and verification."""

from __future__ import annotations

import base64
import binascii
import hashlib
import hmac
import secrets

from userdesk_backend.settings import BackendSettings, get_settings

SALT_BYTES = 16


class PasswordHasher:
    """Hashes passwords with salted PBKDF2-HMAC-SHA256."""

    def __init__(
        self,
        *,
        iterations: int | None = None,
        settings: BackendSettings | None = None,
    ) -> None:
        config = settings or get_settings()
        self._iterations = iterations or config.password_hash_iterations

    def _digest(self, password: str, salt: bytes) -> bytes:
        return hashlib.pbkdf2_hmac(
            "sha256", password.encode("utf-8"), salt, self._iterations
        )

    def hash_password(self, password: str) -> str:
        """Return ``"<salt>:<digest>"`` with both parts base64 encoded."""

        salt = secrets.token_bytes(SALT_BYTES)
        digest = self._digest(password, salt)
        return f"{base64.b64encode(salt).decode()}:{base64.b64encode(digest).decode()}"

    def password_matched(self, password: str, password_hash: str) -> bool:
        """Check ``password`` against a hash produced by :meth:`hash_password`."""

        try:
            salt_b64, hash_b64 = password_hash.split(":", 1)
            salt = base64.b64decode(salt_b64.encode(), validate=True)
            expected = base64.b64decode(hash_b64.encode(), validate=True)
        except (ValueError, binascii.Error):
            return False
        return hmac.compare_digest(self._digest(password, salt), expected)
