"""Token codec for signed API keys.

Implements a compact key format: <prefix>.<payload>.<signature>
Uses HMAC-SHA256 for integrity and authenticity.
"""

import base64
import binascii
import hmac
import json
from hashlib import sha256

from pydantic import ValidationError as PydanticValidationError

from credpolicy.core.errors import APIKeyError
from credpolicy.infrastructure.auth.token_types import TokenPayload, TokenType

# Characters that can appear in an encoded key
KEY_CHARSET = (
    "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789-_."
)


class TokenCodec:
    """Encode and decode signed keys with prefix-based signing."""

    PREFIX_MAP = {
        TokenType.API_KEY: "cp_ak",
        TokenType.PERSONAL_TOKEN: "cp_pt",
    }

    REVERSE_PREFIX_MAP = {v: k for k, v in PREFIX_MAP.items()}

    @staticmethod
    def _base64url_encode(data: bytes) -> str:
        """Encode bytes to a base64url string without padding."""
        return base64.urlsafe_b64encode(data).rstrip(b"=").decode("ascii")

    @staticmethod
    def _base64url_decode(data: str) -> bytes:
        """Decode a base64url string, adding padding if necessary."""
        padding = "=" * (-len(data) % 4)
        return base64.urlsafe_b64decode(data + padding)

    @staticmethod
    def _sign(prefix: str, encoded_payload: str, secret: str) -> bytes:
        signing_input = f"{prefix}.{encoded_payload}".encode("utf-8")
        return hmac.new(secret.encode("utf-8"), signing_input, sha256).digest()

    @classmethod
    def encode(cls, payload: TokenPayload, secret: str) -> str:
        """Encode a TokenPayload into a key string."""
        prefix = cls.PREFIX_MAP[payload.type]

        payload_json = payload.model_dump_json()
        encoded_payload = cls._base64url_encode(payload_json.encode("utf-8"))
        signature = cls._sign(prefix, encoded_payload, secret)

        return f"{prefix}.{encoded_payload}.{cls._base64url_encode(signature)}"

    @classmethod
    def decode(cls, token: str, secret: str) -> TokenPayload:
        """Decode a key string back into a TokenPayload.

        Verifies the HMAC-SHA256 signature using constant-time comparison.

        Raises:
            APIKeyError: If the key is malformed, tampered with or of an unknown type.
        """
        parts = token.split(".")
        if len(parts) != 3:
            raise APIKeyError("invalid key format: must have 3 parts")

        prefix, encoded_payload, encoded_signature = parts

        expected_signature = cls._sign(prefix, encoded_payload, secret)
        try:
            actual_signature = cls._base64url_decode(encoded_signature)
        except (binascii.Error, ValueError) as e:
            raise APIKeyError("invalid signature encoding") from e

        if not hmac.compare_digest(actual_signature, expected_signature):
            raise APIKeyError("invalid key signature")

        token_type = cls.REVERSE_PREFIX_MAP.get(prefix)
        if token_type is None:
            raise APIKeyError(f"unknown key prefix: {prefix}")

        try:
            payload_json = cls._base64url_decode(encoded_payload).decode("utf-8")
            payload = TokenPayload(**json.loads(payload_json))
        except (binascii.Error, TypeError, ValueError, PydanticValidationError) as e:
            raise APIKeyError("invalid key payload") from e

        if payload.type != token_type:
            raise APIKeyError("key type mismatch in payload")

        return payload
