"""Error taxonomy shared by every credpolicy policy and collaborator.

Every failure raised by the library is a ``CredentialError`` carrying one
``ErrorKind``. Errors expose structured ``details`` so callers can build their
own messages without re-inspecting the candidate. No error ever includes the
candidate secret itself.
"""

from enum import Enum
from typing import Any


class ErrorKind(str, Enum):
    """Closed set of failure kinds."""

    CRYPTO = "crypto"
    ENTROPY = "entropy"
    VALIDATION = "validation"
    INVALID_LENGTH = "invalid_length"
    INVALID_CHARSET = "invalid_charset"
    PASSWORD = "password"
    BCRYPT = "bcrypt"
    PIN_FORMAT = "pin_format"
    JWT = "jwt"
    API_KEY = "api_key"
    INTERNAL = "internal"


class Category(str, Enum):
    """Character categories a password policy can require.

    Declaration order is the order in which categories are checked.
    """

    UPPERCASE = "uppercase"
    LOWERCASE = "lowercase"
    DIGIT = "digit"
    SPECIAL = "special"


class CredentialError(Exception):
    """Base exception for all credpolicy errors.

    Attributes:
        kind: The error kind.
        code: Machine-readable error code.
        message: Human-readable error message.
        details: Structured data describing the failure.
    """

    kind: ErrorKind = ErrorKind.INTERNAL
    code: str = "credential_error"

    def __init__(self, message: str, **details: Any) -> None:
        self.message = message
        self.details = details
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        """Serialize the error for API responses and CLI output."""
        return {
            "kind": self.kind.value,
            "code": self.code,
            "message": self.message,
            "details": dict(self.details),
        }


class CryptoError(CredentialError):
    """Raised when a cryptographic operation fails."""

    kind = ErrorKind.CRYPTO
    code = "crypto_error"

    def __init__(self, reason: str) -> None:
        super().__init__(f"Crypto error: {reason}")


class EntropyError(CredentialError):
    """Raised when a candidate's estimated entropy is below the threshold."""

    kind = ErrorKind.ENTROPY
    code = "low_entropy"

    def __init__(self, measured: float, required: float) -> None:
        self.measured = measured
        self.required = required
        super().__init__(
            f"Insufficient entropy: estimated {measured:.1f} bits, "
            f"at least {required:.1f} bits required",
            measured=measured,
            required=required,
        )


class ValidationError(CredentialError):
    """Raised for generic validation failures."""

    kind = ErrorKind.VALIDATION
    code = "validation_error"

    def __init__(self, reason: str, **details: Any) -> None:
        super().__init__(f"Validation error: {reason}", **details)


class MissingCategoryError(ValidationError):
    """Raised when a required character category is absent."""

    def __init__(self, category: Category) -> None:
        self.category = category
        self.code = f"missing_{category.value}"
        label = "digit" if category is Category.DIGIT else f"{category.value} character"
        super().__init__(f"missing {label}", category=category.value)


class RangeViolationError(ValidationError):
    """Raised when a numeric value falls outside its allowed range."""

    code = "out_of_range"

    def __init__(self, field: str, min_value: int, max_value: int, actual: int) -> None:
        self.field = field
        self.min = min_value
        self.max = max_value
        self.actual = actual
        super().__init__(
            f"{field} must be between {min_value} and {max_value}, got {actual}",
            field=field,
            min=min_value,
            max=max_value,
            actual=actual,
        )


class InvalidLengthError(CredentialError):
    """Raised when a candidate's length is outside the allowed bounds."""

    kind = ErrorKind.INVALID_LENGTH
    code = "invalid_length"

    def __init__(self, min_length: int, max_length: int, actual: int) -> None:
        self.min = min_length
        self.max = max_length
        self.actual = actual
        super().__init__(
            f"Invalid length: expected between {min_length} and {max_length}, got {actual}",
            min=min_length,
            max=max_length,
            actual=actual,
        )

    @property
    def too_short(self) -> bool:
        return self.actual < self.min


class InvalidCharsetError(CredentialError):
    """Raised when a value contains characters outside the allowed charset."""

    kind = ErrorKind.INVALID_CHARSET
    code = "invalid_charset"

    def __init__(self, charset: str) -> None:
        self.charset = charset
        super().__init__(f"Invalid character set: {charset}", charset=charset)


class PasswordError(CredentialError):
    """Raised when a password operation fails, e.g. a hash mismatch."""

    kind = ErrorKind.PASSWORD
    code = "password_error"

    def __init__(self, reason: str) -> None:
        super().__init__(f"Password error: {reason}")


class BcryptError(CredentialError):
    """Wraps a failure raised by the bcrypt library."""

    kind = ErrorKind.BCRYPT
    code = "bcrypt_error"

    def __init__(self, reason: str) -> None:
        super().__init__(f"Bcrypt error: {reason}")


class PinFormatError(CredentialError):
    """Raised when a PIN is not exactly ``length`` ASCII digits."""

    kind = ErrorKind.PIN_FORMAT
    code = "pin_format"

    def __init__(self, length: int, message: str | None = None, **details: Any) -> None:
        self.length = length
        super().__init__(
            message or f"PIN must be numeric and of length {length}",
            length=length,
            **details,
        )


class WeakPinError(PinFormatError):
    """Raised when a well-formed PIN follows a guessable pattern."""

    code = "pin_weak_pattern"

    def __init__(self, length: int, pattern: str) -> None:
        self.pattern = pattern
        super().__init__(
            length,
            f"PIN must not be a {pattern} digit sequence",
            pattern=pattern,
        )


class JWTError(CredentialError):
    """Raised when JWT issuance or verification fails."""

    kind = ErrorKind.JWT
    code = "jwt_error"

    def __init__(self, reason: str) -> None:
        super().__init__(f"JWT error: {reason}")


class TokenExpiredError(JWTError):
    """Raised when a JWT has expired."""

    code = "jwt_expired"


class APIKeyError(CredentialError):
    """Raised when an API key is malformed, tampered with or expired."""

    kind = ErrorKind.API_KEY
    code = "api_key_error"

    def __init__(self, reason: str) -> None:
        super().__init__(f"API key error: {reason}")


class InternalError(CredentialError):
    """Raised when an internal invariant is broken."""

    kind = ErrorKind.INTERNAL
    code = "internal_error"

    def __init__(self, msg: str) -> None:
        self.msg = msg
        super().__init__(f"Internal error: {msg}", msg=msg)
