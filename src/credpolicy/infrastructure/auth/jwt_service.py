"""JWT token issuance and verification.

Tokens are only issued for credentials that already passed a policy; this
module never inspects credentials itself. PyJWT failures are wrapped as
``JWTError`` so callers branch on the credpolicy taxonomy only.
"""

import copy
import uuid
from datetime import datetime, timedelta, timezone
from typing import Any

import jwt

from credpolicy.core.errors import CryptoError, JWTError, TokenExpiredError, ValidationError
from credpolicy.core.logging import get_logger
from credpolicy.domain.services.validation import check_range
from credpolicy.infrastructure.auth.jwt_keys import JwtAlgorithm, JwtKey

logger = get_logger(__name__)

DEFAULT_EXPIRES_IN = 3600
DEFAULT_ISSUER = "credpolicy"
MIN_BATCH = 1
MAX_BATCH = 10

RESERVED_CLAIMS = frozenset({"sub", "iss", "iat", "exp", "jti", "roles", "scope"})


class JwtBuilder:
    """Builder for signing one or more JWTs.

    Setters return the builder so calls can be chained:

        tokens = (
            JwtBuilder()
            .algorithm(JwtAlgorithm.HS512)
            .subject("user-42")
            .expires_in(900)
            .count(3)
            .generate()
        )

    If no key is set, a key is generated on first use and kept, so the same
    builder can verify the tokens it issued.
    """

    def __init__(self) -> None:
        self._count = 1
        self._algorithm = JwtAlgorithm.HS256
        self._expires_in = DEFAULT_EXPIRES_IN
        self._subject: str | None = None
        self._issuer: str | None = None
        self._roles: list[str] | None = None
        self._scope: str | None = None
        self._key: JwtKey | None = None
        self._extra_claims: dict[str, Any] = {}

    def count(self, count: int) -> "JwtBuilder":
        """Set how many tokens ``generate`` returns (1 to 10).

        Raises:
            RangeViolationError: If ``count`` is out of range.
        """
        check_range(count, MIN_BATCH, MAX_BATCH, "count")
        self._count = count
        return self

    def algorithm(self, algorithm: JwtAlgorithm | str) -> "JwtBuilder":
        self._algorithm = JwtAlgorithm(algorithm)
        return self

    def expires_in(self, seconds: int) -> "JwtBuilder":
        """Set token lifetime in seconds.

        Raises:
            ValidationError: If ``seconds`` is not positive.
        """
        if seconds <= 0:
            raise ValidationError("expires_in must be positive", field="expires_in", actual=seconds)
        self._expires_in = seconds
        return self

    def subject(self, subject: str) -> "JwtBuilder":
        self._subject = subject
        return self

    def issuer(self, issuer: str) -> "JwtBuilder":
        self._issuer = issuer
        return self

    def include_roles(self, roles: list[str]) -> "JwtBuilder":
        self._roles = list(roles)
        return self

    def include_scope(self, scope: str) -> "JwtBuilder":
        self._scope = scope
        return self

    def key(self, key: JwtKey) -> "JwtBuilder":
        self._key = key
        return self

    def add_claim(self, name: str, value: Any) -> "JwtBuilder":
        """Add a custom claim.

        Raises:
            ValidationError: If ``name`` is a claim managed by the builder.
        """
        if name in RESERVED_CLAIMS:
            raise ValidationError(f"claim '{name}' is reserved", field="claim")
        self._extra_claims[name] = value
        return self

    def ensure_key(self) -> "JwtBuilder":
        """Generate and keep a key for the current algorithm if none is set."""
        if self._key is None:
            self._key = JwtKey.generate(self._algorithm)
        return self

    def copy(self) -> "JwtBuilder":
        """Return an independent builder with the same settings and key.

        Setters on the copy never affect this builder, so a configured
        builder can be shared and copied once per issuance.
        """
        clone = copy.copy(self)
        clone._roles = list(self._roles) if self._roles is not None else None
        clone._extra_claims = dict(self._extra_claims)
        return clone

    def _resolve_key(self) -> JwtKey:
        self.ensure_key()
        if not self._key.supports(self._algorithm):
            raise CryptoError(f"key type does not match algorithm {self._algorithm.value}")
        return self._key

    def _claims(self) -> dict[str, Any]:
        now = datetime.now(timezone.utc)
        claims: dict[str, Any] = {
            "sub": self._subject or str(uuid.uuid4()),
            "iss": self._issuer or DEFAULT_ISSUER,
            "iat": now,
            "exp": now + timedelta(seconds=self._expires_in),
            "jti": str(uuid.uuid4()),
        }
        if self._roles is not None:
            claims["roles"] = self._roles
        if self._scope is not None:
            claims["scope"] = self._scope
        claims.update(self._extra_claims)
        return claims

    def generate(self) -> list[str]:
        """Sign ``count`` tokens, each with its own ``jti``.

        Raises:
            CryptoError: If the key does not fit the algorithm.
            JWTError: If PyJWT fails to encode a token.
        """
        signing_key = self._resolve_key().signing_key()
        tokens = []
        for _ in range(self._count):
            try:
                tokens.append(
                    jwt.encode(self._claims(), signing_key, algorithm=self._algorithm.value)
                )
            except (jwt.PyJWTError, TypeError, ValueError) as e:
                raise JWTError(f"Failed to encode JWT: {e}") from e

        logger.info(
            "JWT issued",
            count=len(tokens),
            algorithm=self._algorithm.value,
            subject=self._subject,
        )
        return tokens

    def verify(self, token: str) -> dict[str, Any]:
        """Verify a token's signature and expiry.

        The issuer is only checked when one was set with ``issuer()``.

        Returns:
            The decoded claims.

        Raises:
            TokenExpiredError: If the token has expired.
            JWTError: If no key is set or verification fails.
        """
        if self._key is None:
            raise JWTError("No key provided for verification")

        try:
            return jwt.decode(
                token,
                self._key.verification_key(),
                algorithms=[self._algorithm.value],
                issuer=self._issuer,
                options={"require": ["exp", "iat", "sub", "jti"]},
            )
        except jwt.ExpiredSignatureError as e:
            raise TokenExpiredError("Token has expired") from e
        except jwt.PyJWTError as e:
            raise JWTError(f"Verification failed: {e}") from e


def generate_default() -> str:
    """Issue a single HS256 token with a freshly generated key."""
    return JwtBuilder().generate()[0]


def generate_multiple(count: int) -> list[str]:
    """Issue ``count`` HS256 tokens sharing one freshly generated key."""
    return JwtBuilder().count(count).generate()


def builder_from_settings(settings: Any | None = None) -> JwtBuilder:
    """Build a ``JwtBuilder`` configured from settings.

    HMAC algorithms use ``settings.jwt_secret_key``; RSA algorithms get a
    freshly generated key.
    """
    if settings is None:
        from credpolicy.core.config import get_settings

        settings = get_settings()

    algorithm = JwtAlgorithm(settings.jwt_algorithm)
    builder = (
        JwtBuilder()
        .algorithm(algorithm)
        .issuer(settings.jwt_issuer)
        .expires_in(settings.jwt_expires_in_seconds)
    )
    if algorithm.is_hmac:
        builder.key(JwtKey.from_hmac_secret(settings.jwt_secret_key, algorithm))
    return builder
