"""JWT signing algorithms and keys.

Supports HMAC (HS256/384/512) and RSA (RS256/384/512) keys. HMAC secrets
must be at least as long as the algorithm's digest; RSA keys are generated
at the algorithm's recommended modulus size.
"""

import secrets
from dataclasses import dataclass
from enum import Enum

from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import rsa

from credpolicy.core.errors import CryptoError, InternalError

RSA_PUBLIC_EXPONENT = 65537


class JwtAlgorithm(str, Enum):
    """Supported JWT signing algorithms."""

    HS256 = "HS256"
    HS384 = "HS384"
    HS512 = "HS512"
    RS256 = "RS256"
    RS384 = "RS384"
    RS512 = "RS512"

    @property
    def is_hmac(self) -> bool:
        return self.value.startswith("HS")

    @property
    def is_rsa(self) -> bool:
        return self.value.startswith("RS")

    @property
    def min_key_bits(self) -> int:
        """Minimum key size in bits for this algorithm."""
        return _MIN_KEY_BITS[self]


_MIN_KEY_BITS = {
    JwtAlgorithm.HS256: 256,
    JwtAlgorithm.HS384: 384,
    JwtAlgorithm.HS512: 512,
    JwtAlgorithm.RS256: 2048,
    JwtAlgorithm.RS384: 3072,
    JwtAlgorithm.RS512: 4096,
}


@dataclass(frozen=True)
class JwtKey:
    """Key material for signing and verifying JWTs.

    Exactly one of ``hmac_secret`` or ``rsa_private`` is set.
    """

    hmac_secret: bytes | None = None
    rsa_private: rsa.RSAPrivateKey | None = None

    @property
    def is_hmac(self) -> bool:
        return self.hmac_secret is not None

    @classmethod
    def generate(cls, algorithm: JwtAlgorithm) -> "JwtKey":
        """Generate a fresh key suitable for ``algorithm``.

        Raises:
            CryptoError: If RSA key generation fails.
        """
        bits = algorithm.min_key_bits
        if algorithm.is_hmac:
            return cls(hmac_secret=secrets.token_bytes(bits // 8))
        if algorithm.is_rsa:
            try:
                private = rsa.generate_private_key(
                    public_exponent=RSA_PUBLIC_EXPONENT,
                    key_size=bits,
                )
            except ValueError as e:
                raise CryptoError(f"RSA key generation failed: {e}") from e
            return cls(rsa_private=private)
        raise InternalError(f"unsupported algorithm: {algorithm}")

    @classmethod
    def from_hmac_secret(cls, secret: bytes | str, algorithm: JwtAlgorithm = JwtAlgorithm.HS256) -> "JwtKey":
        """Wrap an existing HMAC secret.

        Raises:
            CryptoError: If the secret is shorter than the algorithm requires.
        """
        if isinstance(secret, str):
            secret = secret.encode("utf-8")
        if len(secret) * 8 < algorithm.min_key_bits:
            raise CryptoError(
                f"HMAC secret for {algorithm.value} must be at least "
                f"{algorithm.min_key_bits} bits, got {len(secret) * 8}"
            )
        return cls(hmac_secret=secret)

    @classmethod
    def from_rsa_private(cls, private: rsa.RSAPrivateKey) -> "JwtKey":
        """Wrap an existing RSA private key."""
        return cls(rsa_private=private)

    def supports(self, algorithm: JwtAlgorithm) -> bool:
        """Check whether this key can be used with ``algorithm``."""
        return algorithm.is_hmac if self.is_hmac else algorithm.is_rsa

    def signing_key(self) -> bytes:
        """Key material passed to ``jwt.encode``.

        Raises:
            CryptoError: If the RSA key cannot be serialized.
        """
        if self.hmac_secret is not None:
            return self.hmac_secret
        if self.rsa_private is None:
            raise InternalError("JwtKey has no key material")
        try:
            return self.rsa_private.private_bytes(
                encoding=serialization.Encoding.PEM,
                format=serialization.PrivateFormat.PKCS8,
                encryption_algorithm=serialization.NoEncryption(),
            )
        except ValueError as e:
            raise CryptoError(f"Failed to encode RSA private key: {e}") from e

    def verification_key(self) -> bytes:
        """Key material passed to ``jwt.decode``."""
        if self.hmac_secret is not None:
            return self.hmac_secret
        if self.rsa_private is None:
            raise InternalError("JwtKey has no key material")
        try:
            return self.rsa_private.public_key().public_bytes(
                encoding=serialization.Encoding.PEM,
                format=serialization.PublicFormat.SubjectPublicKeyInfo,
            )
        except ValueError as e:
            raise CryptoError(f"Failed to encode RSA public key: {e}") from e
