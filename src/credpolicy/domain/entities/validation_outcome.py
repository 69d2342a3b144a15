"""Validation outcome value object."""

from dataclasses import dataclass
from typing import Any

from credpolicy.core.errors import CredentialError, ErrorKind


@dataclass(frozen=True)
class ValidationOutcome:
    """Result of running a candidate through a policy.

    Exactly one of two shapes:
    - accepted, optionally carrying ``strength_bits`` (passphrases only)
    - rejected, carrying the single ``error`` that stopped the pipeline

    Attributes:
        accepted: Whether the candidate satisfied the policy.
        error: The first violation found, or None when accepted.
        strength_bits: Estimated entropy in bits, when the policy computes it.
    """

    accepted: bool
    error: CredentialError | None = None
    strength_bits: float | None = None

    @classmethod
    def accept(cls, strength_bits: float | None = None) -> "ValidationOutcome":
        return cls(accepted=True, strength_bits=strength_bits)

    @classmethod
    def reject(cls, error: CredentialError) -> "ValidationOutcome":
        return cls(accepted=False, error=error)

    @property
    def kind(self) -> ErrorKind | None:
        """Kind of the rejection, or None when accepted."""
        return self.error.kind if self.error is not None else None

    def raise_for_error(self) -> None:
        """Raise the carried error if the candidate was rejected."""
        if self.error is not None:
            raise self.error

    def to_dict(self) -> dict[str, Any]:
        """Serialize the outcome without any reference to the candidate."""
        data: dict[str, Any] = {"accepted": self.accepted}
        if self.strength_bits is not None:
            data["strength_bits"] = round(self.strength_bits, 2)
        if self.error is not None:
            data["error"] = self.error.to_dict()
        return data
