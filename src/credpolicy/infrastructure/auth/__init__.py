"""Authentication infrastructure components.

This module provides password hashing, JWT issuance and API key
services.
"""

from credpolicy.infrastructure.auth.api_key_service import APIKeyService, api_key_service
from credpolicy.infrastructure.auth.jwt_keys import JwtAlgorithm, JwtKey
from credpolicy.infrastructure.auth.jwt_service import (
    JwtBuilder,
    builder_from_settings,
    generate_default,
    generate_multiple,
)
from credpolicy.infrastructure.auth.password_hasher import (
    Argon2PasswordHasher,
    BcryptPasswordHasher,
    PasswordHasher,
    get_password_hasher,
    hash_password,
    needs_rehash,
    verify_password,
)

__all__ = [
    "APIKeyService",
    "Argon2PasswordHasher",
    "BcryptPasswordHasher",
    "JwtAlgorithm",
    "JwtBuilder",
    "JwtKey",
    "PasswordHasher",
    "api_key_service",
    "builder_from_settings",
    "generate_default",
    "generate_multiple",
    "get_password_hasher",
    "hash_password",
    "needs_rehash",
    "verify_password",
]
