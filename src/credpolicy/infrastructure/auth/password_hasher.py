"""Password hashing collaborators.

Provides Argon2id hashing (the default, recommended by OWASP) and bcrypt
hashing. Hashers only ever receive candidates that already passed a policy;
they never decide acceptance themselves.

Library failures are wrapped in the credpolicy error taxonomy: bcrypt
failures as ``BcryptError``, Argon2 failures as ``CryptoError``. A plain
mismatch is not an error and returns False.
"""

import hashlib
from typing import Any, Protocol

import bcrypt
from argon2 import PasswordHasher as Argon2Hasher
from argon2.exceptions import HashingError, InvalidHashError, VerificationError, VerifyMismatchError

from credpolicy.core.errors import BcryptError, CryptoError


class PasswordHasher(Protocol):
    """Interface shared by all hashing collaborators."""

    def hash(self, password: str) -> str: ...

    def verify(self, password: str, hashed: str) -> bool: ...

    def needs_rehash(self, hashed: str) -> bool: ...


class Argon2PasswordHasher:
    """Argon2id password hasher."""

    scheme = "argon2"

    def __init__(self, **params: Any) -> None:
        """Initialize the hasher.

        Args:
            **params: Optional argon2 ``PasswordHasher`` parameters
                (``time_cost``, ``memory_cost``, ...). Secure defaults otherwise.
        """
        self._hasher = Argon2Hasher(**params)

    def hash(self, password: str) -> str:
        """Hash a password using Argon2id.

        Example:
            >>> Argon2PasswordHasher().hash("SecureP@ss123!").startswith("$argon2id$")
            True
        """
        try:
            return self._hasher.hash(password)
        except HashingError as e:
            raise CryptoError(f"argon2 hashing failed: {e}") from e

    def verify(self, password: str, hashed: str) -> bool:
        """Verify a password against an Argon2 hash.

        Returns:
            True if the password matches, False otherwise.

        Raises:
            CryptoError: If ``hashed`` is not a valid Argon2 hash.
        """
        try:
            return self._hasher.verify(hashed, password)
        except VerifyMismatchError:
            return False
        except (InvalidHashError, VerificationError) as e:
            raise CryptoError(f"argon2 verification failed: {e}") from e

    def needs_rehash(self, hashed: str) -> bool:
        """Check if a hash was made with outdated parameters."""
        try:
            return self._hasher.check_needs_rehash(hashed)
        except InvalidHashError as e:
            raise CryptoError(f"invalid argon2 hash: {e}") from e


class BcryptPasswordHasher:
    """bcrypt password hasher.

    Passwords are pre-hashed with SHA-256 before bcrypt, since bcrypt only
    looks at the first 72 bytes of its input.
    """

    scheme = "bcrypt"

    def __init__(self, rounds: int = 12) -> None:
        self.rounds = rounds

    @staticmethod
    def _prehash(password: str) -> bytes:
        return hashlib.sha256(password.encode("utf-8")).hexdigest().encode("ascii")

    def hash(self, password: str) -> str:
        """Hash a password with bcrypt at the configured cost factor.

        Raises:
            BcryptError: If bcrypt rejects the cost factor or input.
        """
        try:
            salt = bcrypt.gensalt(rounds=self.rounds)
            return bcrypt.hashpw(self._prehash(password), salt).decode("ascii")
        except ValueError as e:
            raise BcryptError(str(e)) from e

    def verify(self, password: str, hashed: str) -> bool:
        """Verify a password against a bcrypt hash.

        Raises:
            BcryptError: If ``hashed`` is not a valid bcrypt hash.
        """
        try:
            return bcrypt.checkpw(self._prehash(password), hashed.encode("ascii"))
        except (ValueError, UnicodeEncodeError) as e:
            raise BcryptError(str(e)) from e

    def needs_rehash(self, hashed: str) -> bool:
        """Check if a hash was made with a different cost factor."""
        parts = hashed.split("$")
        if len(parts) != 4 or not parts[2].isdigit():
            raise BcryptError("Invalid salt")
        return int(parts[2]) != self.rounds


def get_password_hasher(settings: Any | None = None) -> PasswordHasher:
    """Build the hasher selected by ``settings.hash_scheme``."""
    if settings is None:
        from credpolicy.core.config import get_settings

        settings = get_settings()

    if settings.hash_scheme == "bcrypt":
        return BcryptPasswordHasher(rounds=settings.bcrypt_rounds)
    return Argon2PasswordHasher()


# Default hasher instance
_default_hasher = Argon2PasswordHasher()


def hash_password(password: str) -> str:
    """Hash a password with the default Argon2id hasher."""
    return _default_hasher.hash(password)


def verify_password(password: str, hashed: str) -> bool:
    """Verify a password against a hash made by ``hash_password``."""
    return _default_hasher.verify(password, hashed)


def needs_rehash(hashed: str) -> bool:
    """Check if a default hash needs to be rehashed."""
    return _default_hasher.needs_rehash(hashed)
