import hashlib
import uuid
from datetime import datetime, timezone
from typing import Any

from credpolicy.core.errors import APIKeyError, CredentialError
from credpolicy.core.logging import get_logger
from credpolicy.domain.services.validation import check_length, contains_only_charset
from credpolicy.infrastructure.auth.token_codec import KEY_CHARSET, TokenCodec
from credpolicy.infrastructure.auth.token_types import TokenPayload, TokenType

logger = get_logger(__name__)

MIN_KEY_LENGTH = 64
MAX_KEY_LENGTH = 4096


class APIKeyService:
    """Service for issuing and verifying signed API keys."""

    def __init__(self, secret: str | None = None) -> None:
        """Initialize the service.

        Args:
            secret: Signing secret. Defaults to ``settings.api_key_secret``.
        """
        self._secret = secret

    @property
    def secret(self) -> str:
        if self._secret:
            return self._secret
        from credpolicy.core.config import get_settings

        return get_settings().api_key_secret

    @staticmethod
    def hash_key(key: str) -> str:
        """Compute SHA-256 hash of a key.

        Args:
            key: Plaintext API key.

        Returns:
            SHA-256 hex digest.
        """
        return hashlib.sha256(key.encode()).hexdigest()

    def create_api_key(
        self,
        subject: str,
        name: str = "",
        permissions: list[str] | None = None,
        expires_at: datetime | None = None,
        token_type: TokenType = TokenType.API_KEY,
    ) -> tuple[str, str]:
        """Create a new signed API key.

        Args:
            subject: Identifier of the key owner.
            name: Human-readable name for the key.
            permissions: List of permissions.
            expires_at: Optional expiration timestamp.
            token_type: Key type, which selects the key prefix.

        Returns:
            tuple: (plaintext_key, key_hash). Only the hash should be stored.
        """
        token_id = str(uuid.uuid4())
        payload = TokenPayload(
            type=token_type,
            subject=subject,
            name=name,
            permissions=permissions or [],
            issued_at=int(datetime.now(timezone.utc).timestamp()),
            expires_at=int(expires_at.timestamp()) if expires_at else None,
            token_id=token_id,
        )

        plaintext_key = TokenCodec.encode(payload, self.secret)
        logger.info("API Key created", key_id=token_id, subject=subject, name=name)
        return plaintext_key, self.hash_key(plaintext_key)

    def verify_api_key(self, key: str, now: datetime | None = None) -> TokenPayload:
        """Verify a key's structure, signature and expiry.

        Raises:
            APIKeyError: If the key is malformed, tampered with or expired.
        """
        try:
            check_length(key, MIN_KEY_LENGTH, MAX_KEY_LENGTH)
            contains_only_charset(key, KEY_CHARSET)
        except CredentialError as e:
            raise APIKeyError(f"malformed key ({e.code})") from e

        payload = TokenCodec.decode(key, self.secret)

        now = now or datetime.now(timezone.utc)
        if payload.expires_at is not None and payload.expires_at <= int(now.timestamp()):
            raise APIKeyError("key has expired")
        return payload

    @staticmethod
    def mask_key(key: str) -> str:
        """Mask an API key for display.

        Format: cp_ak.eyJ2...SIGN

        Args:
            key: The full plaintext key or hash.

        Returns:
            Masked key string.
        """
        parts = key.split(".")
        if len(parts) == 3:
            prefix, payload, signature = parts
            return f"{prefix}.{payload[:4]}...{signature[-4:]}"

        if len(key) > 12:
            return f"{key[:6]}...{key[-4:]}"
        return "****"

    def describe(self, key: str) -> dict[str, Any]:
        """Verify a key and return a display-safe summary of it."""
        payload = self.verify_api_key(key)
        return {
            "key": self.mask_key(key),
            "token_id": payload.token_id,
            "subject": payload.subject,
            "name": payload.name,
            "permissions": list(payload.permissions),
            "expires_at": payload.expires_at,
        }


# Global service instance
api_key_service = APIKeyService()
